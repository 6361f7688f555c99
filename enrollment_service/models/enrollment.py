from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from enrollment_service.db.base_class import Base


class Enrollment(Base):
    """
    A user's registration record. Exactly one per user.

    The user itself lives in the identity service, so user_id is a plain
    unique column rather than a foreign key.
    """

    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, unique=True, index=True)

    name = Column(String(255), nullable=False)
    cpf = Column(String(11), nullable=False)
    birthday = Column(DateTime(timezone=True), nullable=False)
    phone = Column(String(20), nullable=False)

    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # At most one address, guaranteed by the unique enrollment_id on addresses
    address = relationship(
        "Address",
        back_populates="enrollment",
        uselist=False,
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Enrollment {self.id} user={self.user_id}>"

# enrollment_service/crud/crud_enrollment.py
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from .base import CRUDBase
from enrollment_service.models.enrollment import Enrollment
from enrollment_service.schemas.enrollment import EnrollmentCreate, EnrollmentUpdate

logger = logging.getLogger(__name__)


class CRUDEnrollment(CRUDBase[Enrollment, EnrollmentCreate, EnrollmentUpdate]):
    def get_by_user_id(self, db: Session, *, user_id: int) -> Optional[Enrollment]:
        return db.query(self.model).filter(self.model.user_id == user_id).first()

    def find_with_address_by_user_id(
        self, db: Session, *, user_id: int
    ) -> Optional[Enrollment]:
        """
        Fetches the user's enrollment with its address eager-loaded.
        """
        return (
            db.query(self.model)
            .options(joinedload(self.model.address))
            .filter(self.model.user_id == user_id)
            .first()
        )

    def upsert(
        self,
        db: Session,
        *,
        user_id: int,
        obj_in: EnrollmentCreate,
        obj_update: EnrollmentUpdate,
    ) -> Enrollment:
        """
        Create the user's enrollment from obj_in, or apply obj_update to the
        existing one.
        """
        existing = self.get_by_user_id(db, user_id=user_id)
        if existing:
            return self.update(db, db_obj=existing, obj_in=obj_update)

        try:
            return self.create(db, obj_in=obj_in)
        except IntegrityError:
            # Another request created it first; last write wins
            db.rollback()
            logger.debug(f"Concurrent enrollment create for user={user_id}, updating")
            existing = self.get_by_user_id(db, user_id=user_id)
            if existing is None:
                raise
            return self.update(db, db_obj=existing, obj_in=obj_update)


enrollment = CRUDEnrollment(Enrollment)

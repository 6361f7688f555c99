# enrollment_service/crud/crud_address.py
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .base import CRUDBase
from enrollment_service.models.address import Address
from enrollment_service.schemas.address import AddressCreate, AddressUpdate

logger = logging.getLogger(__name__)


class CRUDAddress(CRUDBase[Address, AddressCreate, AddressUpdate]):
    def get_by_enrollment_id(
        self, db: Session, *, enrollment_id: int
    ) -> Optional[Address]:
        return (
            db.query(self.model)
            .filter(self.model.enrollment_id == enrollment_id)
            .first()
        )

    def upsert(
        self,
        db: Session,
        *,
        enrollment_id: int,
        obj_in: AddressCreate,
        obj_update: AddressUpdate,
    ) -> Address:
        """
        Create or update the single address of an enrollment.
        """
        existing = self.get_by_enrollment_id(db, enrollment_id=enrollment_id)
        if existing:
            return self.update(db, db_obj=existing, obj_in=obj_update)

        create_data = obj_in.model_dump()
        create_data["enrollment_id"] = enrollment_id
        try:
            return self.create(db, obj_in=create_data)
        except IntegrityError:
            db.rollback()
            logger.debug(
                f"Concurrent address create for enrollment={enrollment_id}, updating"
            )
            existing = self.get_by_enrollment_id(db, enrollment_id=enrollment_id)
            if existing is None:
                raise
            return self.update(db, db_obj=existing, obj_in=obj_update)


address = CRUDAddress(Address)

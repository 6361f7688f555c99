# enrollment_service/services/enrollment_service.py
"""
Business logic for enrollments and their postal addresses.
"""

import logging

from sqlalchemy.orm import Session

from enrollment_service import crud
from enrollment_service.core.exceptions import InvalidDataError, NotFoundError
from enrollment_service.crud.crud_address import CRUDAddress
from enrollment_service.crud.crud_enrollment import CRUDEnrollment
from enrollment_service.models.enrollment import Enrollment
from enrollment_service.schemas.address import (
    AddressCreate,
    AddressResult,
    AddressUpdate,
    CepAddress,
)
from enrollment_service.schemas.enrollment import (
    EnrollmentCreate,
    EnrollmentResult,
    EnrollmentUpdate,
    EnrollmentWithAddressCreate,
)
from enrollment_service.services.postal_lookup import PostalLookupClient
from enrollment_service.utils.validators import parses_as_integer

logger = logging.getLogger(__name__)

CEP_LENGTH = 8


class EnrollmentService:
    """
    Resolves and stores a user's enrollment together with its address.

    Collaborators are injected so each request gets its own session while
    the postal client is shared across the process.
    """

    def __init__(
        self,
        db: Session,
        postal_client: PostalLookupClient,
        enrollment_repo: CRUDEnrollment = crud.enrollment,
        address_repo: CRUDAddress = crud.address,
    ):
        self.db = db
        self.postal_client = postal_client
        self.enrollment_repo = enrollment_repo
        self.address_repo = address_repo

    def get_address_from_cep(self, cep: str) -> CepAddress:
        """
        Look up a CEP and return the street-level fields of its address.

        Args:
            cep: 8-character postal code

        Returns:
            Reduced address (logradouro, complemento, bairro, cidade, uf)

        Raises:
            InvalidDataError: If the CEP is not 8 characters or not numeric
            NotFoundError: If the postal service does not know the CEP
        """
        # Only the numeric prefix is checked, so "1234567x" still passes.
        if len(cep) != CEP_LENGTH or not parses_as_integer(cep):
            raise InvalidDataError(["Unprocessable Entity"])

        data = self.postal_client.lookup(cep)
        if data is None:
            logger.warning(f"CEP {cep} not found by postal service")
            raise NotFoundError()

        return CepAddress(
            logradouro=data.get("logradouro", ""),
            complemento=data.get("complemento", ""),
            bairro=data.get("bairro", ""),
            cidade=data.get("localidade", ""),
            uf=data.get("uf", ""),
        )

    def get_one_with_address_by_user_id(self, user_id: int) -> EnrollmentResult:
        """
        Raises:
            NotFoundError: If the user has no enrollment
        """
        enrollment = self.enrollment_repo.find_with_address_by_user_id(
            self.db, user_id=user_id
        )
        if not enrollment:
            raise NotFoundError()

        return _to_enrollment_result(enrollment)

    def create_or_update_enrollment_with_address(
        self, params: EnrollmentWithAddressCreate
    ) -> None:
        """
        Validate the address CEP upstream, then upsert the enrollment and
        its address, in that order.

        Raises:
            NotFoundError: If the postal service rejects the CEP. Nothing is
                written in that case.
        """
        enrollment_data = params.model_dump(exclude={"address"}, exclude_unset=True)
        enrollment_in = EnrollmentCreate(**enrollment_data)
        enrollment_update = EnrollmentUpdate(
            **{k: v for k, v in enrollment_data.items() if k != "user_id"}
        )
        address_data = _address_for_upsert(params.address)

        if self.postal_client.lookup(address_data["cep"]) is None:
            logger.warning(
                f"Rejected enrollment for user {params.user_id}: "
                f"CEP {address_data['cep']} not found"
            )
            raise NotFoundError()

        new_enrollment = self.enrollment_repo.upsert(
            self.db,
            user_id=params.user_id,
            obj_in=enrollment_in,
            obj_update=enrollment_update,
        )

        self.address_repo.upsert(
            self.db,
            enrollment_id=new_enrollment.id,
            obj_in=AddressCreate(**address_data),
            obj_update=AddressUpdate(**address_data),
        )

        logger.info(
            f"Upserted enrollment {new_enrollment.id} with address for user {params.user_id}"
        )


def _address_for_upsert(address: AddressCreate) -> dict:
    """Omitted fields stay out, so an update leaves their stored values alone."""
    return address.model_dump(exclude_unset=True)


def _to_enrollment_result(enrollment: Enrollment) -> EnrollmentResult:
    fields = {
        "id": enrollment.id,
        "name": enrollment.name,
        "cpf": enrollment.cpf,
        "birthday": enrollment.birthday,
        "phone": enrollment.phone,
    }
    if enrollment.address is not None:
        fields["address"] = AddressResult.model_validate(enrollment.address)
    return EnrollmentResult(**fields)

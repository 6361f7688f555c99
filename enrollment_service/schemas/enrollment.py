# enrollment_service/schemas/enrollment.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from enrollment_service.schemas.address import AddressCreate, AddressResult
from enrollment_service.utils.validators import is_valid_cpf, only_digits

PHONE_REGEX = r"^\(\d{2}\) \d{4,5}-\d{4}$"


class EnrollmentBase(BaseModel):
    name: str = Field(..., min_length=3, json_schema_extra={"example": "Maria Silva"})
    cpf: str = Field(..., json_schema_extra={"example": "529.982.247-25"})
    birthday: datetime
    phone: str = Field(
        ..., pattern=PHONE_REGEX, json_schema_extra={"example": "(11) 98765-4321"}
    )

    @field_validator("cpf")
    @classmethod
    def validate_cpf(cls, value: str) -> str:
        if not is_valid_cpf(value):
            raise ValueError("Invalid CPF")
        # Persist digits only
        return only_digits(value)


class EnrollmentCreate(EnrollmentBase):
    user_id: int


class EnrollmentUpdate(EnrollmentBase):
    pass


class EnrollmentWithAddressBody(EnrollmentBase):
    """Request body of POST /enrollments. The user comes from the token."""

    address: AddressCreate


class EnrollmentWithAddressCreate(EnrollmentWithAddressBody):
    user_id: int


class EnrollmentResult(BaseModel):
    """
    Enrollment as exposed to clients. user_id and timestamps are omitted;
    address is only set when the enrollment has one.
    """

    id: int
    name: str
    cpf: str
    birthday: datetime
    phone: str
    address: Optional[AddressResult] = None

    model_config = {"from_attributes": True}

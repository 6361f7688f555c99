from .address import AddressCreate, AddressResult, AddressUpdate, CepAddress
from .enrollment import (
    EnrollmentCreate,
    EnrollmentResult,
    EnrollmentUpdate,
    EnrollmentWithAddressBody,
    EnrollmentWithAddressCreate,
)
from .token import TokenPayload

# enrollment_service/api/v1/endpoints/enrollments.py
"""
Enrollment endpoints.

The authenticated user reads and submits their own enrollment. The CEP
endpoint is public and lets the frontend prefill the address form.
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from enrollment_service.api import deps
from enrollment_service.core.exceptions import NotFoundError
from enrollment_service.schemas.address import CepAddress
from enrollment_service.schemas.enrollment import (
    EnrollmentResult,
    EnrollmentWithAddressBody,
    EnrollmentWithAddressCreate,
)
from enrollment_service.schemas.token import TokenPayload
from enrollment_service.services.enrollment_service import EnrollmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/enrollments", tags=["Enrollments"])


@router.get(
    "",
    response_model=EnrollmentResult,
    response_model_exclude_unset=True,
    summary="Get the current user's enrollment with its address",
)
def get_my_enrollment(
    current_user: TokenPayload = Depends(deps.get_current_user),
    service: EnrollmentService = Depends(deps.get_enrollment_service),
):
    return service.get_one_with_address_by_user_id(current_user.user_id)


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    summary="Create or update the current user's enrollment and address",
)
def upsert_my_enrollment(
    body: EnrollmentWithAddressBody,
    current_user: TokenPayload = Depends(deps.get_current_user),
    service: EnrollmentService = Depends(deps.get_enrollment_service),
) -> Response:
    params = EnrollmentWithAddressCreate(
        **body.model_dump(exclude_unset=True), user_id=current_user.user_id
    )
    service.create_or_update_enrollment_with_address(params)
    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/cep",
    response_model=CepAddress,
    summary="Resolve a CEP to its address",
    responses={204: {"description": "CEP not found"}},
)
def get_address_from_cep(
    cep: str = Query(..., description="8-digit postal code"),
    service: EnrollmentService = Depends(deps.get_enrollment_service),
):
    try:
        return service.get_address_from_cep(cep)
    except NotFoundError:
        # The form falls back to manual entry
        return Response(status_code=status.HTTP_204_NO_CONTENT)

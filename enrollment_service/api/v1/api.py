# enrollment_service/api/v1/api.py

from fastapi import APIRouter
from enrollment_service.api.v1.endpoints import enrollments

api_router = APIRouter()

api_router.include_router(enrollments.router)

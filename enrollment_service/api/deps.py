# enrollment_service/api/deps.py
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from enrollment_service.core.config import settings
from enrollment_service.db.session import get_db
from enrollment_service.schemas.token import TokenPayload
from enrollment_service.services.enrollment_service import EnrollmentService
from enrollment_service.services.postal_lookup import (
    PostalLookupClient,
    get_postal_client,
)

# The `tokenUrl` is only used by the OpenAPI docs; tokens are issued by the
# identity service.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token")


def get_current_user(token: str = Depends(oauth2_scheme)) -> TokenPayload:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=["HS256"])
        token_data = TokenPayload(**payload)
    except (JWTError, ValueError):
        # Catches any error from jose or Pydantic validation
        raise credentials_exception

    return token_data


def get_enrollment_service(
    db: Session = Depends(get_db),
    postal_client: PostalLookupClient = Depends(get_postal_client),
) -> EnrollmentService:
    return EnrollmentService(db=db, postal_client=postal_client)

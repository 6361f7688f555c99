# enrollment_service/crud/__init__.py

from .crud_address import address
from .crud_enrollment import enrollment

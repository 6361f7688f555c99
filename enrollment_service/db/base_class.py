# enrollment_service/db/base_class.py

from sqlalchemy.orm import declarative_base

# Single declarative base shared by every model in the service.
Base = declarative_base()

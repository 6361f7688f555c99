# enrollment_service/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from enrollment_service.core.config import settings

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        # Always release the connection, even when the request failed.
        db.close()

# enrollment_service/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from enrollment_service.api.v1.api import api_router
from enrollment_service.core.config import settings
from enrollment_service.middleware import register_exception_handlers
from enrollment_service.services.postal_lookup import close_postal_client

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Enrollment service starting up...")
    yield
    close_postal_client()
    logger.info("Enrollment service shutting down...")


app = FastAPI(
    title="Enrollment Microservice",
    version="1.0.0",
    description="""
        **Enrollment Service**

        Stores each user's enrollment together with its postal address.

        * **Enrollment**: one record per user, created or updated in a single call
        * **Address**: validated against ViaCEP before it is stored
        * **CEP lookup**: resolves a postal code to street, neighborhood, city and state

        Enrollment endpoints require JWT authentication via the
        `Authorization: Bearer <token>` header.
        """,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
def health_check():
    return {"status": "healthy"}

"""Liveness and readiness endpoints."""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from dependencies import get_settings_dep
from settings import Settings

SERVICE_NAME = "zen-social-api"

router = APIRouter()


@router.get("/")
def root():
    return {"message": "Zen Social API", "status": "running"}


@router.get("/health")
def health_check():
    return {"status": "healthy", "service": SERVICE_NAME}


@router.get("/health/detailed")
def detailed_health_check(request: Request, settings: Settings = Depends(get_settings_dep)):
    """Health check including the database connection."""
    health_status = {
        "status": "healthy",
        "service": SERVICE_NAME,
        "checks": {}
    }
    database_type = make_url(settings.sqlalchemy_url).get_backend_name()

    try:
        request.app.state.database.ping()
        health_status["checks"]["database"] = {"status": "healthy", "type": database_type}
    except SQLAlchemyError as e:
        health_status["checks"]["database"] = {"status": "unhealthy", "type": database_type, "error": str(e)}
        health_status["status"] = "unhealthy"

    return health_status

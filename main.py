from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging

logger = logging.getLogger(__name__)

# Local imports
from database import Database
from errors import register_exception_handlers
from routes import auth, profile, messages, communities, topics, health
from services import AuthService, PasswordHasher, TokenService
from settings import Settings, get_settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application with its services.

    The database (connection pool), token service and auth service live on
    ``app.state`` and are handed to routes through dependencies.
    """
    settings = settings or get_settings()
    database = database or Database(settings.sqlalchemy_url, pool_pre_ping=True)
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Create tables if they don't exist
        database.create_all()
        logger.info("Zen Social API ready")

        yield

        database.dispose()

    app = FastAPI(
        title="Zen Social API",
        version="1.0.0",
        lifespan=lifespan
    )

    token_service = TokenService(
        secret_key=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_hours=settings.access_token_expire_hours,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.token_service = token_service
    app.state.auth_service = AuthService(PasswordHasher(), token_service)

    # CORS configuration
    origins = settings.origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=3600
    )

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(profile.router, prefix="/api/profile", tags=["profile"])
    app.include_router(messages.router, prefix="/api/messages", tags=["messages"])
    app.include_router(communities.router, prefix="/api/communities", tags=["communities"])
    app.include_router(topics.router, prefix="/api/topics", tags=["topics"])

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)

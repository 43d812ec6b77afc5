from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from core.exceptions import (
    AppException,
    DomainError,
    app_exception_handler,
    domain_exception_handler,
    global_exception_handler,
    validation_exception_handler,
)
from db.db_operation import build_mongo_store
from db.memory_store import build_memory_store
from db.repository import Store
from routes import auth, gift_card_routes, reservation_routes, restaurant_routes, review_routes
from scripts.seed_data import seed
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("main")

def cors_options(origins: list[str], allow_credentials: bool) -> dict:
    if allow_credentials and "*" in origins:
        logger.warning("CORS credentials disabled: not allowed together with wildcard origins")
        allow_credentials = False
    return {
        "allow_origins": origins,
        "allow_credentials": allow_credentials,
        "allow_methods": ["*"],
        "allow_headers": ["*"],
    }

async def build_store() -> Store:
    if settings.STORAGE_BACKEND == "mongo":
        return await build_mongo_store()
    if settings.STORAGE_BACKEND != "memory":
        raise RuntimeError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")
    return build_memory_store()

def create_app(store: Store | None = None) -> FastAPI:
    """
    Build the API. Tests pass their own store; otherwise one is built and
    seeded at startup from settings.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_store = app.state.store is None
        if owns_store:
            app.state.store = await build_store()
            await seed(app.state.store)
        logger.info(f"{settings.PROJECT_NAME} started with {settings.STORAGE_BACKEND} storage")
        yield
        if owns_store:
            await app.state.store.close()

    app = FastAPI(title=settings.PROJECT_NAME, version="1.0.0", lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        **cors_options(settings.CORS_ORIGINS, settings.CORS_ALLOW_CREDENTIALS),
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(DomainError, domain_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    @app.get("/")
    async def health_check():
        logger.info("Health check is successful")
        return {
            "status": "ok",
            "app": settings.PROJECT_NAME,
            "message": "FastAPI is running"
        }

    app.include_router(auth.router, prefix=settings.API_PREFIX)
    app.include_router(restaurant_routes.router, prefix=settings.API_PREFIX)
    app.include_router(review_routes.router, prefix=settings.API_PREFIX)
    app.include_router(reservation_routes.router, prefix=settings.API_PREFIX)
    app.include_router(gift_card_routes.router, prefix=settings.API_PREFIX)
    return app

app = create_app()

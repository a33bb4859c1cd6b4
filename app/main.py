"""
Key Catalog Admin - JSON API and server-rendered admin pages
"""
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles
from prometheus_fastapi_instrumentator import Instrumentator
import sentry_sdk

from app.api.v1 import api_router
from app.core.config import settings
from app.core.database import mongo_manager
from app.core.logging import setup_logging, log
from app.core.exceptions import (
    BaseAPIException,
    handle_api_exception,
    handle_unexpected_exception,
    handle_validation_exception,
)
from app.middleware import (
    RequestIDMiddleware,
    TimingMiddleware,
    SecurityHeadersMiddleware
)
from app.web.pages import router as pages_router


STATIC_DIR = Path(__file__).parent / "web" / "static"

OPENAPI_TAGS = [
    {"name": "health", "description": "Liveness and readiness probes"},
    {"name": "brands", "description": "Vehicle brands"},
    {"name": "models", "description": "Models of a brand"},
    {"name": "variants", "description": "Variants of a model with key and programming data"},
    {"name": "uploads", "description": "Presigned image uploads to S3"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    log.info("Starting Key Catalog Admin", version=settings.VERSION, env=settings.ENVIRONMENT)

    if settings.SENTRY_DSN:
        sentry_sdk.init(dsn=settings.SENTRY_DSN, environment=settings.ENVIRONMENT, traces_sample_rate=0.1)
        log.info("Sentry initialized")

    # Fails startup after the retries are exhausted
    await mongo_manager.init()

    yield

    log.info("Shutting down Key Catalog Admin")
    mongo_manager.close()


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, handle_api_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)


def register_middleware(app: FastAPI) -> None:
    """Last added runs first: request id, timing, security headers, gzip, CORS"""
    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID", "X-Process-Time"]
        )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)


def create_application() -> FastAPI:
    docs_prefix = settings.API_V1_STR if settings.DEBUG else None

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        openapi_url=f"{docs_prefix}/openapi.json" if docs_prefix else None,
        docs_url=f"{docs_prefix}/docs" if docs_prefix else None,
        redoc_url=None,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
        swagger_ui_parameters={"displayRequestDuration": True, "filter": True},
    )

    register_exception_handlers(app)
    register_middleware(app)

    app.include_router(api_router, prefix=settings.API_V1_STR)
    app.include_router(pages_router, include_in_schema=False)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    if settings.ENVIRONMENT != "development":
        Instrumentator().instrument(app).expose(app, endpoint="/metrics")

    @app.get(settings.API_V1_STR, tags=["health"])
    async def api_info() -> Dict[str, Any]:
        """Service name, version and where the docs live"""
        return {
            "name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "docs": f"{docs_prefix}/docs" if docs_prefix else None,
        }

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        workers=1 if settings.DEBUG else settings.WORKERS,
        log_config=None,
        access_log=False,
        server_header=False,
    )

# 📄 File: snaptheplant/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts SnapThePlant, connects all the different parts
# together, and makes sure everything is ready to handle requests from the web app.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: middleware stack, exception handlers,
# router registration under /api, and a lifespan that starts and stops the service
# container (storage, sessions, trial sweep scheduler).
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - snaptheplant.shared.config.settings
# - snaptheplant.shared.core.container
# - snaptheplant.api (middleware, routers)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup (factory mode)
# - Docker container entry point
# - tests (create_application with injected container)

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from snaptheplant.api.middleware.error_handling import (
    ErrorHandlingMiddleware,
    register_exception_handlers,
)
from snaptheplant.api.middleware.logging import RequestLoggingMiddleware
from snaptheplant.api.v1.health import health_router
from snaptheplant.api.v1.router import api_router
from snaptheplant.shared.config.settings import Settings, get_settings
from snaptheplant.shared.core.container import ServiceContainer, build_container
from snaptheplant.shared.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Starts the service container (storage, account seeding, trial sweep) and
    shuts it down when the server stops.
    """
    settings: Settings = app.state.settings
    container: ServiceContainer = app.state.container

    logger.info(f"🌱 {settings.APP_NAME} starting up ({settings.ENVIRONMENT})...")

    try:
        await container.startup()
        logger.info(
            f"✅ Plant identification {'enabled' if container.identification.is_configured else 'disabled'}"
        )
        logger.info(f"✅ Payments {'enabled' if container.payments.is_configured else 'disabled'}")
        if container.trial_sweep_scheduler is not None:
            logger.info(
                f"✅ Trial sweep scheduled every {settings.TRIAL_SWEEP_INTERVAL_SECONDS:.0f}s"
            )
        logger.info(f"✅ {settings.APP_NAME} startup complete")

        yield

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise

    finally:
        logger.info(f"🔄 {settings.APP_NAME} shutting down...")
        try:
            await container.shutdown()
            logger.info(f"✅ {settings.APP_NAME} shutdown complete")
        except Exception as e:
            logger.error(f"❌ Shutdown error: {e}")


def _install_middleware(app: FastAPI, settings: Settings) -> None:
    # Starlette wraps in reverse order of registration: GZip is outermost
    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(ErrorHandlingMiddleware, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)


def _install_routes(app: FastAPI, settings: Settings) -> None:
    app.include_router(health_router, tags=["Health Check"])
    app.include_router(api_router, prefix=API_PREFIX)

    service_info = {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "description": settings.APP_DESCRIPTION,
        "docs_url": "/docs" if settings.DEBUG else None,
        "health_check": "/health",
        "api_base": API_PREFIX,
    }

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return service_info

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Build the SnapThePlant ASGI app.

    ``settings`` defaults to the environment and ``container`` is wired from
    them when omitted; tests pass both so collaborators can be faked.
    """
    settings = settings or get_settings()
    setup_logging(log_level=settings.LOG_LEVEL, log_format=settings.LOG_FORMAT, log_file=settings.LOG_FILE)

    docs_enabled = settings.DEBUG
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    app.state.settings = settings
    app.state.container = container or build_container(settings)

    _install_middleware(app, settings)
    register_exception_handlers(app)
    _install_routes(app, settings)
    return app


def main():
    """Development entry point (``snaptheplant`` console script)."""
    settings = get_settings()
    uvicorn.run(
        "snaptheplant.main:create_application",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()

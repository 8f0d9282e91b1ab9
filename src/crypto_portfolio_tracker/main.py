import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from apscheduler.schedulers.base import BaseScheduler
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from httpx import HTTPError

from crypto_portfolio_tracker.commons.exceptions import NotAuthenticatedError
from crypto_portfolio_tracker.commons.utils import format_exception
from crypto_portfolio_tracker.config.configuration_properties import ConfigurationProperties
from crypto_portfolio_tracker.config.dependencies import get_application_container
from crypto_portfolio_tracker.infrastructure.services.session_context import SessionContext
from crypto_portfolio_tracker.infrastructure.tasks.polling_task_manager import PollingTaskManager
from crypto_portfolio_tracker.interfaces.controllers.api_keys_controller import router as api_keys_router
from crypto_portfolio_tracker.interfaces.controllers.auth_controller import router as auth_router
from crypto_portfolio_tracker.interfaces.controllers.dashboard_controller import router as dashboard_router
from crypto_portfolio_tracker.interfaces.controllers.health_controller import router as health_router
from crypto_portfolio_tracker.interfaces.controllers.portfolio_controller import router as portfolio_router

logging.basicConfig(level=logging.INFO, stream=sys.stdout, format="%(asctime)s - %(levelname)s - %(message)s")

logger = logging.getLogger(__name__)

app: FastAPI | None = None


@asynccontextmanager
async def _lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None]:
    application_container = get_application_container()
    configuration_properties: ConfigurationProperties = application_container.configuration_properties()
    tasks_container = application_container.infrastructure_container().tasks_container()
    scheduler: BaseScheduler = tasks_container.scheduler()
    polling_task_manager: PollingTaskManager = tasks_container.polling_task_manager()

    # Restore the persisted session, if any
    session_context: SessionContext = (
        application_container.infrastructure_container().services_container().session_context()
    )
    fastapi_app.state.session_context = session_context.initialize()
    if configuration_properties.background_tasks_enabled and not scheduler.running:
        scheduler.start()
    logger.info("Application startup complete.")
    # Yield control back to the FastAPI apps
    yield
    # Cleanup on shutdown
    await polling_task_manager.stop_all()
    if scheduler.running:
        scheduler.shutdown()
    logger.info("Application shutdown complete.")


async def _not_authenticated_exception_handler(_: Request, e: NotAuthenticatedError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(e)})


async def _backend_exception_handler(_: Request, e: Exception) -> JSONResponse:
    logger.error(f"Portfolio tracker backend request failed: {str(e)}", exc_info=e)
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": format_exception(e)})


def _boostrap_app() -> None:
    global app
    # Create FastAPI app with lifespan context manager
    application_container = get_application_container()
    configuration_properties: ConfigurationProperties = application_container.configuration_properties()
    version = application_container.application_version()
    app = FastAPI(
        title="Crypto Portfolio Tracker API",
        description="Dashboards and valuation views over the crypto portfolio tracker backend",
        version=version,
        license_info={"name": "MIT License", "url": "https://opensource.org/license/mit/"},
        lifespan=_lifespan,
    )
    if configuration_properties.cors_enabled:  # pragma: no cover
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["*"],
        )
    app.add_exception_handler(NotAuthenticatedError, _not_authenticated_exception_handler)
    app.add_exception_handler(ValueError, _backend_exception_handler)
    app.add_exception_handler(HTTPError, _backend_exception_handler)
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(portfolio_router)
    app.include_router(api_keys_router)


def main() -> FastAPI:
    if app is None:
        _boostrap_app()
    return app


# Initialize the FastAPI app
app = main()

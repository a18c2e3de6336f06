"""FastAPI entrypoint for the Fitness Frog backend."""

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from .api.routers import entries, health
from .config import load_settings
from .infra.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Instantiate the FastAPI app and register routers."""

    settings = load_settings()
    configure_logging(settings.logging)
    application = FastAPI(title="Fitness Frog", version="0.1.0")
    for router in (health.router, entries.router):
        application.include_router(router)

    @application.get("/", include_in_schema=False)
    def root() -> RedirectResponse:
        return RedirectResponse(url=entries.router.prefix, status_code=302)

    logger.info("app_created", extra={"environment": settings.environment})
    return application


app = create_app()

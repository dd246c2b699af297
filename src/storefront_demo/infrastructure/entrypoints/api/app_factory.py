from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront_demo.infrastructure.configuration.main_settings import Settings
from storefront_demo.infrastructure.entrypoints.api.catalog_router import (
    router as catalog_router,
)
from storefront_demo.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from storefront_demo.infrastructure.entrypoints.api.price_comparison_router import (
    router as price_comparison_router,
)
from storefront_demo.infrastructure.entrypoints.api.store_router import (
    router as store_router,
)
from storefront_demo.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from storefront_demo.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from storefront_demo.infrastructure.resolution.container import build_container

logger = get_logger(__name__)


def create_app(settings: Settings) -> FastAPI:
    configure_logging(settings.log_level)
    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        env=settings.env,
        # Presence only; the key is validated when a comparison is requested.
        llm_key_present=bool(settings.gemini_api_key),
        llm_model=settings.gemini_model,
    )

    app = FastAPI(title=settings.app_name)
    app.state.container = build_container(settings)
    app.add_middleware(CorrelationMiddleware)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error", context_endpoint=str(request.url.path), errors=exc.errors())
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"error": "Invalid request", "detail": exc.errors()},
        )

    app.include_router(health_router)
    app.include_router(catalog_router, prefix="/api")
    app.include_router(store_router, prefix="/api")
    app.include_router(price_comparison_router, prefix="/api")

    return app

# 📄 File: plantscan/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the plant scanner, connects it to the identification,
# care and encyclopedia services, and makes sure everything is ready before the first photo arrives.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: lifespan wiring of the external API clients,
# the one-shot geolocation probe and the ScanController; router registration; and the
# application-level exception handler for PlantScanException.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - plantscan.shared.config.settings
# - plantscan.shared.infrastructure.external_apis.api_client
# - plantscan.modules.plant_identification (clients, controller, routers)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - `plantscan` console script
# - tests (create_application with test settings)

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncGenerator, Dict, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from plantscan.api.middleware.logging import RequestLoggingMiddleware
from plantscan.api.v1.router import api_v1_router
from plantscan.modules.plant_identification.application import EnrichmentService, ScanController
from plantscan.modules.plant_identification.infrastructure.external import (
    GeolocationProbe,
    PerenualClient,
    PlantIdClient,
    WikipediaClient,
)
from plantscan.modules.plant_identification.infrastructure.preview_store import PreviewStore
from plantscan.modules.plant_identification.presentation.web import page_router
from plantscan.shared.config.settings import Settings, get_settings
from plantscan.shared.core.exceptions import PlantScanException, exception_to_dict
from plantscan.shared.infrastructure.external_apis.api_client import create_api_client
from plantscan.shared.utils.logging import get_logger, log_shutdown_event, log_startup_event, setup_logging

logger = get_logger(__name__)

PREVIEW_URL_PREFIX = "/api/v1/scan/preview"


async def probe_geolocation(settings: Settings):
    """Run the startup geolocation probe once; None when unavailable."""
    probe_client = None
    if settings.GEO_PROBE_ENABLED and settings.GEO_PROBE_URL:
        probe_client = create_api_client(
            api_name="geolocation",
            base_url=settings.GEO_PROBE_URL,
            timeout=settings.GEO_PROBE_TIMEOUT,
        )

    probe = GeolocationProbe(
        api_client=probe_client,
        latitude=settings.GEO_LATITUDE,
        longitude=settings.GEO_LONGITUDE,
        timeout=settings.GEO_PROBE_TIMEOUT,
    )
    try:
        return await probe.probe()
    finally:
        if probe_client is not None:
            await probe_client.close()


def build_scan_services(settings: Settings) -> Dict[str, object]:
    """
    Construct the external clients, the preview store and the scan controller.

    Nothing here touches the network; sessions open on first use.
    """
    plant_id_api = create_api_client(
        api_name="plant_id",
        base_url=settings.PLANT_ID_API_URL,
        api_key=settings.PLANT_ID_API_KEY,
        api_key_header="Api-Key",
        timeout=settings.EXTERNAL_API_TIMEOUT,
    )
    perenual_api = create_api_client(
        api_name="perenual",
        base_url=settings.PERENUAL_API_URL,
        timeout=settings.EXTERNAL_API_TIMEOUT,
    )
    wikipedia = WikipediaClient(settings.WIKIPEDIA_URL_TEMPLATE, timeout=settings.EXTERNAL_API_TIMEOUT)

    preview_store = PreviewStore(url_prefix=PREVIEW_URL_PREFIX)
    controller = ScanController(
        plant_id=PlantIdClient(plant_id_api, details=settings.PLANT_ID_DETAILS),
        enrichment=EnrichmentService(
            perenual=PerenualClient(perenual_api, api_key=settings.PERENUAL_API_KEY),
            wikipedia=wikipedia,
        ),
        preview_store=preview_store,
        settings=settings,
        locale=settings.DEFAULT_LOCALE,
    )

    return {
        "controller": controller,
        "preview_store": preview_store,
        "api_clients": {
            "plant_id": plant_id_api,
            "perenual": perenual_api,
            "wikipedia": wikipedia,
        },
    }


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup builds the scan services and runs the geolocation probe;
    shutdown releases the preview handle and closes every HTTP session.
    """
    settings: Settings = app.state.settings
    setup_logging(log_level=settings.LOG_LEVEL, log_format=settings.LOG_FORMAT)
    log_startup_event(settings.APP_NAME, settings.APP_VERSION, extra={
        "environment": settings.ENVIRONMENT,
        "credentials_configured": settings.has_credentials,
        "default_locale": settings.DEFAULT_LOCALE,
    })

    services = build_scan_services(settings)
    controller: ScanController = services["controller"]
    controller.set_geo(await probe_geolocation(settings))
    logger.info("Geolocation probe finished", extra={"available": controller.geo is not None})

    app.state.scan_controller = controller
    app.state.preview_store = services["preview_store"]
    app.state.api_clients = services["api_clients"]

    try:
        yield
    finally:
        app.state.scan_controller.close()
        for name, client in app.state.api_clients.items():
            try:
                await client.close()
            except Exception as e:
                logger.error(f"Failed to close {name} client: {e}")
        log_shutdown_event(settings.APP_NAME)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function.

    Args:
        settings: Settings to use instead of the cached environment settings

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    app.state.settings = settings

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    app.add_middleware(RequestLoggingMiddleware)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")
    app.include_router(page_router)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(PlantScanException)
    async def plant_scan_exception_handler(
        request: Request,
        exc: PlantScanException
    ) -> JSONResponse:
        """Handle custom scanner exceptions."""
        logger.info(
            "Request rejected",
            extra={"path": request.url.path, "error_code": exc.error_code, "status_code": exc.status_code}
        )
        content = exception_to_dict(exc)
        content["error"]["timestamp"] = datetime.utcnow().isoformat()
        content["error"]["request_id"] = getattr(request.state, "request_id", None)
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(500)
    async def internal_server_error_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """Handle 500 Internal Server Error."""
        logger.error(f"Internal server error: {exc}", exc_info=True)

        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_SERVER_ERROR",
                    "message": "An internal server error occurred",
                    "details": {"error_type": type(exc).__name__} if settings.DEBUG else {},
                }
            },
        )

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Run the application in development.

    Used by ``python -m plantscan.main`` and the console script.
    """
    settings = get_settings()
    uvicorn.run(
        "plantscan.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()

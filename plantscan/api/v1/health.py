# 📄 File: plantscan/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Lets monitoring tools ask "is the scanner up?" and, in more detail, whether its
# service keys are set and how the outside services have been answering.
# 🧪 Purpose (Technical Summary):
# Liveness and detailed health endpoints. The detailed view reports credential
# presence, geolocation availability and per-service APIClient statistics.
# 🔗 Dependencies:
# FastAPI, plantscan.shared.config.settings
# 🔄 Connected Modules / Calls From:
# plantscan.api.v1.router, monitoring systems, load balancers

from datetime import datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from plantscan.shared.config.settings import Settings, get_settings

health_router = APIRouter()

_app_start_time = datetime.now()


def _app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Liveness check for load balancers and monitoring")
async def health_check(request: Request) -> JSONResponse:
    settings = _app_settings(request)
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "service": "plantscan",
            "version": settings.APP_VERSION,
        }
    )


@health_router.get("/health/detailed",
                   summary="Detailed Health Check",
                   description="Credentials, geolocation and external API statistics")
async def detailed_health_check(request: Request) -> JSONResponse:
    """
    Detailed health view.

    Missing credentials degrade the status but never fail it: they are
    reported to the user at identification time.
    """
    settings = _app_settings(request)
    clients = getattr(request.app.state, "api_clients", {})
    controller = getattr(request.app.state, "scan_controller", None)

    components = {
        "credentials": {
            "plant_id": bool(settings.PLANT_ID_API_KEY),
            "perenual": bool(settings.PERENUAL_API_KEY),
        },
        "geolocation": {
            "available": controller is not None and controller.geo is not None,
        },
        "external_apis": {name: client.get_stats() for name, client in clients.items()},
    }

    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy" if settings.has_credentials else "degraded",
            "timestamp": datetime.now().isoformat(),
            "uptime_seconds": round((datetime.now() - _app_start_time).total_seconds(), 2),
            "environment": settings.ENVIRONMENT,
            "version": settings.APP_VERSION,
            "components": components,
        }
    )

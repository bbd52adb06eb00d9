# 📄 File: plantscan/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# Directs every version 1 request to the right place: scan requests to the scanner,
# health checks to the health endpoints.
# 🧪 Purpose (Technical Summary):
# API v1 router aggregation combining the health router and the plant identification
# module router under their prefixes.
# 🔗 Dependencies:
# FastAPI, plantscan.api.v1.health, plantscan.modules.plant_identification.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# plantscan.main.py

from fastapi import APIRouter

from plantscan.modules.plant_identification.presentation.api.v1 import scan_router

from . import API_TAGS, ROUTE_PREFIXES, get_api_info
from .health import health_router

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=[API_TAGS["health"]])

api_v1_router.include_router(
    scan_router,
    prefix=ROUTE_PREFIXES["scan"],
    tags=[API_TAGS["scan"]],
)


@api_v1_router.get("/",
                   summary="API v1 Information",
                   tags=["API Info"])
async def api_v1_info() -> dict:
    return get_api_info()

# 📄 File: plantscan/modules/plant_identification/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands every scan endpoint the one shared scan screen so they all work on the same photo and results.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency resolving the application-owned ScanController from app.state.
# 🔗 Dependencies:
# FastAPI, scan_controller
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.scan, presentation.web.page

from fastapi import Request

from plantscan.modules.plant_identification.application.scan_controller import ScanController


def get_scan_controller(request: Request) -> ScanController:
    """Return the controller created in the application lifespan."""
    return request.app.state.scan_controller

# 📄 File: plantscan/modules/plant_identification/presentation/api/v1/scan.py
# 🧭 Purpose (Layman Explanation):
# The buttons of the scan screen, as web addresses: upload a photo, identify it,
# pick another match, start over, switch language, and look at the photo preview.
#
# 🧪 Purpose (Technical Summary):
# FastAPI scan endpoints driving the ScanController. Every state-changing endpoint
# returns the rendered ScanView snapshot. Identification failures are UI state
# (HTTP 200 with an error panel); bad input raises PlantScanException subclasses
# that the application exception handler turns into JSON errors.
#
# 🔗 Dependencies:
# - FastAPI router, UploadFile, Response
# - plantscan.modules.plant_identification.application (controller, ScanView)
# - plantscan.modules.plant_identification.presentation.api.schemas
#
# 🔄 Connected Modules / Calls From:
# - plantscan.api.v1.router (mounted under /scan)
# - the HTML page and any API client

"""
Scan API Endpoints

Endpoints:
- GET /scan: Current view snapshot
- POST /scan/image: Capture an image (multipart field ``file``)
- GET /scan/preview/{token}: Bytes behind a preview handle
- POST /scan/identify: Identify the captured image
- POST /scan/suggestions/{index}/select: Show the care guide for another suggestion
- POST /scan/reset: Pick another image
- PUT /scan/locale: Switch the display language
"""

from fastapi import APIRouter, Depends, File, Request, Response, UploadFile

from plantscan.modules.plant_identification.application.dto import ScanView
from plantscan.modules.plant_identification.application.scan_controller import ScanController
from plantscan.modules.plant_identification.presentation.api.schemas import LocaleRequest
from plantscan.modules.plant_identification.presentation.dependencies import get_scan_controller
from plantscan.shared.utils.logging import get_logger

logger = get_logger(__name__)

scan_router = APIRouter()


@scan_router.get(
    "",
    response_model=ScanView,
    summary="Get scan view",
    description="Current localized snapshot of the scan screen",
)
async def get_scan_view(controller: ScanController = Depends(get_scan_controller)) -> ScanView:
    return controller.render()


@scan_router.post(
    "/image",
    response_model=ScanView,
    summary="Capture image",
    description="Upload a plant photo; replaces any previously captured image",
    responses={
        400: {"description": "Empty or unsupported image"},
        413: {"description": "Image too large"},
    }
)
async def capture_image(
    file: UploadFile = File(..., description="Plant photo (JPEG, PNG, WebP or GIF)"),
    controller: ScanController = Depends(get_scan_controller),
) -> ScanView:
    """
    Capture a new image.

    The previous preview handle is released and a new one is created.
    Existing suggestions stay visible until the next identification.
    """
    data = await file.read()
    controller.capture(data, filename=file.filename, content_type=file.content_type)
    return controller.render()


@scan_router.get(
    "/preview/{token}",
    summary="Get image preview",
    responses={404: {"description": "Preview handle revoked or unknown"}},
)
async def get_preview(token: str, request: Request) -> Response:
    image = request.app.state.preview_store.get(token)
    return Response(
        content=image.data,
        media_type=image.content_type,
        headers={"Cache-Control": "no-store"},
    )


@scan_router.post(
    "/identify",
    response_model=ScanView,
    summary="Identify plant",
    description="Identify the captured image; the best match is enriched automatically",
)
async def identify_plant(controller: ScanController = Depends(get_scan_controller)) -> ScanView:
    """
    Run identification and enrichment.

    Missing credentials, a missing image and service failures do not
    produce an HTTP error: the returned snapshot carries the error panel.
    """
    await controller.identify()
    return controller.render()


@scan_router.post(
    "/suggestions/{index}/select",
    response_model=ScanView,
    summary="Select suggestion",
    responses={404: {"description": "No suggestion at this index"}},
)
async def select_suggestion(
    index: int,
    controller: ScanController = Depends(get_scan_controller),
) -> ScanView:
    await controller.select_suggestion(index)
    return controller.render()


@scan_router.post(
    "/reset",
    response_model=ScanView,
    summary="Pick another image",
)
async def reset_scan(controller: ScanController = Depends(get_scan_controller)) -> ScanView:
    controller.reset()
    return controller.render()


@scan_router.put(
    "/locale",
    response_model=ScanView,
    summary="Set display language",
    responses={422: {"description": "Unsupported locale"}},
)
async def set_locale(
    body: LocaleRequest,
    controller: ScanController = Depends(get_scan_controller),
) -> ScanView:
    controller.set_locale(body.lang)
    return controller.render()

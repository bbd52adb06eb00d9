# 📄 File: plantscan/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the scanner: what was asked for, how long it
# took and how it ended, tagged with an id so all log lines of one request can be found.
# 🧪 Purpose (Technical Summary):
# Request logging middleware with X-Request-ID correlation (propagated through the
# request_id context variable into every structured log line) and request timing.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, uuid, plantscan.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# plantscan.main.py (middleware registration)

import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from plantscan.shared.utils.logging import get_logger, request_id_var

from . import should_exclude_path

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
SLOW_REQUEST_THRESHOLD = 2.0  # seconds


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and echoes the request id back."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"{request.method} {request.url.path} failed",
                extra={
                    "event_type": "http_error",
                    "method": request.method,
                    "path": request.url.path,
                    "error_type": type(e).__name__,
                    "processing_time_ms": round((time.time() - start_time) * 1000, 2),
                },
                exc_info=True,
            )
            raise
        finally:
            request_id_var.reset(token)

        processing_time = time.time() - start_time
        response.headers[REQUEST_ID_HEADER] = request_id

        if not should_exclude_path("logging", request.url.path):
            extra = {
                "event_type": "http_response",
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "processing_time_ms": round(processing_time * 1000, 2),
            }
            if processing_time > SLOW_REQUEST_THRESHOLD:
                logger.warning(f"Slow request {request.method} {request.url.path}", extra=extra)
            else:
                logger.info(f"{request.method} {request.url.path} - {response.status_code}", extra=extra)

        return response

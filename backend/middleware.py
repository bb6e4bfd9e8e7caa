"""
HTTP middleware: per-request access logging and baseline security headers.
"""

import logging
import time

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger("wellness.access")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


async def security_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


async def log_requests(request: Request, call_next):
    """
    Log one line per request. Unhandled errors are turned into the JSON 500
    here so they still pass back through the outer middleware.
    """
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Unhandled exception during %s %s", request.method, request.url.path)
        response = JSONResponse(status_code=500, content={"error": "Internal server error"})
    elapsed_ms = (time.time() - start_time) * 1000
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method, request.url.path, response.status_code, elapsed_ms,
    )
    return response

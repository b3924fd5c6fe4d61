import time
import hmac
import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .config import settings
from .exceptions import create_error_response

logger = logging.getLogger(__name__)

CSRF_PROTECTED_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

# status used by the dashboard's backend for an expired or missing CSRF token
CSRF_MISMATCH_STATUS = 419


class CSRFMiddleware(BaseHTTPMiddleware):
    """Reject state-changing requests whose token header does not match the page token"""

    def __init__(self, app: ASGIApp, token: str = None, header: str = None):
        super().__init__(app)
        self.token = token if token is not None else settings.CSRF_TOKEN
        self.header = header or settings.CSRF_HEADER

    async def dispatch(self, request: Request, call_next):
        if request.method in CSRF_PROTECTED_METHODS:
            supplied = request.headers.get(self.header, "")
            if not hmac.compare_digest(supplied.encode(), self.token.encode()):
                client_host = request.client.host if request.client else "unknown"
                logger.warning(f"CSRF token mismatch: {request.method} {request.url.path} from {client_host}")
                return JSONResponse(
                    status_code=CSRF_MISMATCH_STATUS,
                    content=create_error_response("CSRF token mismatch.")
                )
        return await call_next(request)




class NoStoreMiddleware(BaseHTTPMiddleware):
    """Mark JSON API responses as uncacheable so a list refresh always reaches the server"""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if response.headers.get("content-type", "").startswith("application/json"):
            response.headers["Cache-Control"] = "no-store"
        return response


class RequestLogMiddleware(BaseHTTPMiddleware):
    """One log line per request; mutations at INFO, reads at DEBUG.

    Anything that escapes a route is logged with its request line and answered
    with the standard error envelope.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        line = f"{request.method} {request.url.path}"
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled error on {line}: {e}", exc_info=True)
            message = f"Internal server error: {e}" if settings.DEBUG else "Internal server error"
            return JSONResponse(status_code=500, content=create_error_response(message))

        duration = time.time() - start_time
        level = logging.INFO if request.method in CSRF_PROTECTED_METHODS else logging.DEBUG
        logger.log(level, f"{line} -> {response.status_code} in {duration:.3f}s")
        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        return response

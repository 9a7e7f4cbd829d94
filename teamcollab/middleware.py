import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("teamcollab.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    def __init__(self, app, *, exclude_paths=None):
        super().__init__(app)
        self._exclude = set(exclude_paths or ())

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if path in self._exclude:
            return await call_next(request)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000.0
            logger.exception("%s %s failed after %.2fms", request.method, path, duration_ms)
            raise

        duration_ms = (time.perf_counter() - start) * 1000.0
        logger.info("%s %s %s %.2fms", request.method, path, response.status_code, duration_ms)
        return response

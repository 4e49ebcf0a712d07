"""Request logging middleware."""

import json
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

log = logging.getLogger("clinic.request")


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        t0 = time.perf_counter()
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        response: Response = await call_next(request)

        dt_ms = int((time.perf_counter() - t0) * 1000)
        response.headers["X-Request-ID"] = rid
        payload = {
            "rid": rid,
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": dt_ms,
            "client_ip": request.client.host if request.client else "unknown",
        }
        log.info(json.dumps(payload, ensure_ascii=False))
        return response

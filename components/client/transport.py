"""httpx transport retrying transient failures with linear backoff."""

import logging
import time
from typing import Callable, Optional

import httpx

logger = logging.getLogger(__name__)

RETRYABLE_ERRORS = (httpx.TimeoutException, httpx.ConnectError, httpx.RemoteProtocolError)


class RetryTransport(httpx.BaseTransport):
    """Retry timeouts, dropped connections and 5xx answers.

    Attempt ``n`` (1-based) of a retry waits ``backoff * n`` seconds, so the
    defaults give at most three requests spaced 1.5s then 3s apart.
    """

    def __init__(
        self,
        transport: Optional[httpx.BaseTransport] = None,
        max_retries: int = 2,
        backoff: float = 1.5,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.transport = transport or httpx.HTTPTransport()
        self.max_retries = max_retries
        self.backoff = backoff
        self.sleep = sleep

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            try:
                response = self.transport.handle_request(request)
            except RETRYABLE_ERRORS as exc:
                if attempt >= self.max_retries:
                    raise
                reason = type(exc).__name__
            else:
                if response.status_code < 500 or attempt >= self.max_retries:
                    return response
                reason = f"HTTP {response.status_code}"
                response.close()

            attempt += 1
            wait = self.backoff * attempt
            logger.warning(
                "Retrying %s %s after %s (attempt %d/%d, waiting %.1fs)",
                request.method, request.url, reason, attempt, self.max_retries, wait,
            )
            self.sleep(wait)

    def close(self) -> None:
        self.transport.close()

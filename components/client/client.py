"""HTTP client for the clinic finance API, as used by dashboards and scripts."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from components.client.guard import InFlightGuard
from components.client.transport import RetryTransport
from components.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """Failed API call, carrying the server message when there is one."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ClinicClient:
    """Thin wrapper over the REST surface with retrying transport."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or get_settings()
        self.guard = InFlightGuard()
        self._http = httpx.Client(
            base_url=base_url or settings.API_BASE_URL,
            timeout=settings.CLIENT_TIMEOUT,
            transport=RetryTransport(
                transport,
                max_retries=settings.CLIENT_MAX_RETRIES,
                backoff=settings.CLIENT_BACKOFF_SECONDS,
            ),
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ClinicClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise ClientError(f"Cannot reach the API: {exc}") from exc

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("detail", response.text) if isinstance(body, dict) else response.text
            raise ClientError(str(message), status_code=response.status_code)
        if response.headers.get("content-type", "").startswith("application/json"):
            return response.json()
        return response.content

    # Transactions

    def list_transactions(self) -> List[Dict]:
        return self._request("GET", "/transactions")

    def get_transaction(self, transaction_id: int) -> Dict:
        return self._request("GET", f"/transactions/{transaction_id}")

    def create_transaction(self, category: str, amount: float, description: Optional[str] = None) -> Dict:
        payload = {"category": category, "amount": amount, "description": description}
        return self._request("POST", "/transactions", json=payload)

    def update_transaction(self, transaction_id: int, category: str, amount: float,
                           description: Optional[str] = None) -> Dict:
        payload = {"category": category, "amount": amount, "description": description}
        return self._request("PUT", f"/transactions/{transaction_id}", json=payload)

    def delete_transaction(self, transaction_id: int) -> Dict:
        return self._request("DELETE", f"/transactions/{transaction_id}")

    # Activities

    def list_activities(self) -> List[Dict]:
        return self._request("GET", "/activites")

    def create_activity(self, title: str, start: str, end: str, description: Optional[str] = None) -> Dict:
        payload = {"title": title, "start": start, "end": end, "description": description}
        return self._request("POST", "/activites", json=payload)

    def delete_activity(self, activity_id: int) -> Dict:
        return self._request("DELETE", f"/activites/{activity_id}")

    # Users and admins

    def list_pending_users(self) -> List[Dict]:
        return self._request("GET", "/users/pending")

    def approve_user(self, user_id: int) -> bool:
        """Approve a user; False when skipped or already processed elsewhere."""
        return self._settle_user_action("PUT", f"/users/{user_id}/approve", user_id)

    def delete_user(self, user_id: int) -> bool:
        """Reject or delete a user; False when skipped or already processed elsewhere."""
        return self._settle_user_action("DELETE", f"/users/{user_id}", user_id)

    def _settle_user_action(self, method: str, path: str, user_id: int) -> bool:
        with self.guard.hold(("user", user_id)) as acquired:
            if not acquired:
                logger.info("Ignoring repeated action on user %s while one is in flight", user_id)
                return False
            try:
                self._request(method, path)
            except ClientError as exc:
                if exc.status_code == 404:
                    logger.info("User %s was already processed", user_id)
                    return False
                raise
            return True

    def list_admins(self) -> List[Dict]:
        return self._request("GET", "/admins")

    def create_admin(self, email: str, password: str) -> Dict:
        return self._request("POST", "/admins", json={"email": email, "password": password})

    def delete_admin(self, admin_id: int) -> Dict:
        return self._request("DELETE", f"/admins/{admin_id}")

    # Reports

    def summary(self, year="all", month="all") -> Dict:
        return self._request("GET", "/reports/summary", params={"year": year, "month": month})

    def daily(self, year="all", month="all") -> List[Dict]:
        return self._request("GET", "/reports/daily", params={"year": year, "month": month})

    def timeframe(self, timeframe: str = "weekly") -> Dict:
        return self._request("GET", "/reports/timeframe", params={"timeframe": timeframe})

    def activity_report(self, status: str = "all", year="all", month="all") -> Dict:
        params = {"status": status, "year": year, "month": month}
        return self._request("GET", "/reports/activities", params=params)

    def export_pdf(self, year="all", month="all") -> bytes:
        return self._request("GET", "/reports/export.pdf", params={"year": year, "month": month})

import json

import httpx
import pytest

from components.client.client import ClientError, ClinicClient
from components.client.guard import InFlightGuard
from components.client.transport import RetryTransport
from components.core.config import Settings


class Recorder:
    """Mock handler replaying a scripted sequence of outcomes."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        if callable(outcome):
            return outcome(request)
        # Fresh copy so a response closed by a retry is never handed out twice
        return httpx.Response(outcome.status_code, headers=outcome.headers, content=outcome.content)


def _send(transport, method="GET", url="http://api.test/transactions"):
    with httpx.Client(transport=transport) as http:
        return http.request(method, url)


def _retry(handler, waits, max_retries=2):
    return RetryTransport(httpx.MockTransport(handler), max_retries=max_retries, backoff=1.5, sleep=waits.append)


def test_retry_transport_retries_server_errors_with_linear_backoff():
    handler = Recorder(httpx.Response(503), httpx.Response(502), httpx.Response(200, json=[]))
    waits = []

    response = _send(_retry(handler, waits))

    assert response.status_code == 200
    assert len(handler.requests) == 3
    assert waits == [1.5, 3.0]


def test_retry_transport_gives_up_after_max_retries():
    handler = Recorder(httpx.Response(500))
    waits = []

    response = _send(_retry(handler, waits))

    assert response.status_code == 500
    assert len(handler.requests) == 3
    assert waits == [1.5, 3.0]


def test_retry_transport_retries_connection_errors():
    handler = Recorder(httpx.ConnectError("refused"), httpx.Response(200, json={"ok": True}))
    waits = []

    response = _send(_retry(handler, waits))

    assert response.json() == {"ok": True}
    assert waits == [1.5]


def test_retry_transport_reraises_after_last_timeout():
    handler = Recorder(httpx.ReadTimeout("slow"))
    waits = []

    with pytest.raises(httpx.ReadTimeout):
        _send(_retry(handler, waits, max_retries=1))

    assert len(handler.requests) == 2
    assert waits == [1.5]


def test_retry_transport_does_not_retry_client_errors():
    handler = Recorder(httpx.Response(404, json={"detail": "User not found"}))
    waits = []

    response = _send(_retry(handler, waits))

    assert response.status_code == 404
    assert len(handler.requests) == 1
    assert waits == []


def test_guard_ignores_repeats_while_in_flight():
    guard = InFlightGuard()

    with guard.hold(5) as first:
        assert first is True
        assert guard.is_in_flight(5)
        with guard.hold(5) as repeat:
            assert repeat is False
        with guard.hold(6) as other:
            assert other is True
        assert guard.is_in_flight(5)

    assert not guard.is_in_flight(5)
    with guard.hold(5) as again:
        assert again is True


def test_guard_releases_on_error():
    guard = InFlightGuard()

    with pytest.raises(RuntimeError):
        with guard.hold("x"):
            raise RuntimeError("boom")

    assert not guard.is_in_flight("x")


def _client(handler):
    settings = Settings(CLIENT_BACKOFF_SECONDS=0, CLIENT_MAX_RETRIES=2, API_BASE_URL="http://api.test")
    return ClinicClient(transport=httpx.MockTransport(handler), settings=settings)


def test_client_returns_json_and_sends_payload():
    created = {"id": 1, "category": "revenu", "amount": 10.0, "description": None, "date": "2024-01-01T00:00:00"}
    handler = Recorder(httpx.Response(201, json=created))

    with _client(handler) as client:
        result = client.create_transaction("revenu", 10)

    assert result == created
    request = handler.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/transactions"
    assert json.loads(request.content) == {"category": "revenu", "amount": 10, "description": None}


def test_client_raises_with_server_message():
    handler = Recorder(httpx.Response(400, json={"detail": "Amount must be non-zero"}))

    with _client(handler) as client:
        with pytest.raises(ClientError) as info:
            client.create_transaction("revenu", 0)

    assert info.value.status_code == 400
    assert info.value.message == "Amount must be non-zero"


def test_client_wraps_unreachable_api():
    handler = Recorder(httpx.ConnectError("refused"))

    with _client(handler) as client:
        with pytest.raises(ClientError) as info:
            client.list_transactions()

    assert info.value.status_code is None
    assert len(handler.requests) == 3


def test_client_export_pdf_returns_bytes():
    handler = Recorder(httpx.Response(200, content=b"%PDF-1.4 ...", headers={"content-type": "application/pdf"}))

    with _client(handler) as client:
        assert client.export_pdf(2024, 3).startswith(b"%PDF")

    assert handler.requests[0].url.params["month"] == "3"


def test_approve_user_already_processed_returns_false():
    handler = Recorder(httpx.Response(404, json={"detail": "User not found"}))

    with _client(handler) as client:
        assert client.approve_user(3) is False


def test_approve_user_success():
    handler = Recorder(httpx.Response(200, json={"message": "User approved"}))

    with _client(handler) as client:
        assert client.approve_user(3) is True

    assert handler.requests[0].method == "PUT"
    assert handler.requests[0].url.path == "/users/3/approve"


def test_user_action_ignored_while_same_user_in_flight():
    repeats = []

    def reenter(request):
        repeats.append(client.delete_user(3))
        repeats.append(client.approve_user(4))
        return httpx.Response(200, json={"message": "User approved"})

    handler = Recorder(reenter, httpx.Response(200, json={"message": "User approved"}))
    client = _client(handler)
    try:
        assert client.approve_user(3) is True
    finally:
        client.close()

    assert repeats == [False, True]
    assert [r.url.path for r in handler.requests] == ["/users/3/approve", "/users/4/approve"]


def test_server_errors_still_raise():
    handler = Recorder(httpx.Response(500, json={"detail": "database down"}))

    with _client(handler) as client:
        with pytest.raises(ClientError) as info:
            client.delete_user(9)

    assert info.value.status_code == 500
    assert len(handler.requests) == 3

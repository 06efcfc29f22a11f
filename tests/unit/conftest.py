"""
Shared fixtures: a stubbed HTTP transport and a configured client
"""

import json
from http import HTTPStatus
from typing import Any, Callable, Dict, List, Optional, Union
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from smartbill import SmartBillClient, SmartBillConfig


def build_response(
    status: int = 200,
    json_body: Optional[Any] = None,
    content: Optional[bytes] = None,
    reason: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    request: Optional[requests.PreparedRequest] = None,
) -> requests.Response:
    """Fabricate a requests.Response"""
    response = requests.Response()
    response.status_code = status
    response.reason = reason if reason is not None else HTTPStatus(status).phrase
    if content is None:
        content = json.dumps(json_body).encode("utf-8") if json_body is not None else b""
    response._content = content
    response.encoding = "utf-8"
    response.headers.update(headers or {"Content-Type": "application/json"})
    if request is not None:
        response.request = request
        response.url = request.url
    return response


class StubTransport:
    """Records prepared requests and answers them from a queue"""

    def __init__(self) -> None:
        self.requests: List[requests.PreparedRequest] = []
        self.timeouts: List[Optional[float]] = []
        self._queue: List[Union[Dict[str, Any], Exception]] = []

    def reply(self, status: int = 200, json_body: Optional[Any] = None, **kwargs: Any) -> None:
        self._queue.append(dict(status=status, json_body=json_body, **kwargs))

    def fail_with(self, error: Exception) -> None:
        self._queue.append(error)

    def send(self, prepared: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        self.requests.append(prepared)
        self.timeouts.append(kwargs.get("timeout"))

        planned = self._queue.pop(0) if self._queue else {"json_body": {}}
        if isinstance(planned, Exception):
            raise planned
        return build_response(request=prepared, **planned)

    @property
    def last(self) -> requests.PreparedRequest:
        return self.requests[-1]

    def last_path(self) -> str:
        return urlsplit(self.last.url).path

    def last_query(self) -> Dict[str, str]:
        parsed = parse_qs(urlsplit(self.last.url).query, keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items()}

    def last_json(self) -> Any:
        return json.loads(self.last.body)


@pytest.fixture
def transport(monkeypatch) -> StubTransport:
    stub = StubTransport()

    def fake_send(session, prepared, **kwargs):
        return stub.send(prepared, **kwargs)

    monkeypatch.setattr(requests.Session, "send", fake_send)
    return stub


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    return build_response


@pytest.fixture
def config() -> SmartBillConfig:
    return SmartBillConfig(username="office@example.ro", token="secret-token")


@pytest.fixture
def client(config: SmartBillConfig, transport: StubTransport) -> SmartBillClient:
    with SmartBillClient(config) as smartbill:
        yield smartbill

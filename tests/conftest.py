"""Shared pytest fixtures for the bot manager client tests."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Any

import pytest
import requests

from ak_api.security.botmanager import BotManager

HOST = 'akab-test.luna.akamaiapis.net'
BASE_URL = f'https://{HOST}/appsec/v1'


class TrackedResponse(requests.Response):
    """Response that records whether the caller released it."""

    def __init__(self) -> None:
        super().__init__()
        self.released = False

    def close(self) -> None:
        self.released = True


def make_response(status: int, body: Any = '', url: str = '') -> TrackedResponse:
    resp = TrackedResponse()
    resp.status_code = status
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    resp._content = body.encode('utf-8') if isinstance(body, str) else body
    resp._content_consumed = True
    resp.encoding = 'utf-8'
    resp.url = url
    return resp


@dataclass
class Call:
    method: str
    url: str
    kwargs: dict = field(default_factory=dict)


class FakeSession:
    """Stands in for the signed requests session, replaying queued responses."""

    def __init__(self) -> None:
        self.calls: list[Call] = []
        self.queued: list[tuple[int, Any]] = []
        self.responses: list[TrackedResponse] = []
        self.error: Exception | None = None

    def queue(self, status: int, body: Any = '') -> None:
        self.queued.append((status, body))

    def request(self, method: str, url: str, **kwargs) -> TrackedResponse:
        self.calls.append(Call(method, url, kwargs))
        if self.error is not None:
            raise self.error
        status, body = self.queued.pop(0) if self.queued else (200, '{}')
        resp = make_response(status, body, url)
        self.responses.append(resp)
        return resp


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(fake_session: FakeSession) -> BotManager:
    """BotManager wired to the fake session, no .edgerc needed."""
    return BotManager(host=HOST, session=fake_session, logger=logging.getLogger('test'))


INTERNAL_ERROR = {
    'type': 'internal_error',
    'title': 'Internal Server Error',
    'detail': 'Error fetching data',
    'status': 500,
}

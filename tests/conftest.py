"""Pytest configuration and shared fixtures."""

import json
from typing import Any, Callable, List

import httpx
import pytest
from dotenv import load_dotenv

from libvndb.client import VndbClient
from libvndb.querydsl import Atom, FilterList

# Load environment variables
load_dotenv()

TEST_BASE_URL = "https://api.test/kana"


@pytest.fixture(scope="session")
def nested_filter_json():
    """Filter from the API documentation mixing and/or and a nested release filter."""
    return [
        "and",
        ["or", ["lang", "=", "en"], ["lang", "=", "de"], ["lang", "=", "fr"]],
        ["olang", "!=", "ja"],
        [
            "release",
            "=",
            [
                "and",
                ["released", ">=", "2020-01-01"],
                ["producer", "=", ["id", "=", "p30"]],
            ],
        ],
    ]


@pytest.fixture(scope="session")
def nested_filter_token():
    """Hand-built token tree equal to `nested_filter_json`."""

    def triple(a, op, b):
        return FilterList((Atom(a), Atom(op), b if isinstance(b, FilterList) else Atom(b)))

    return FilterList(
        (
            Atom("and"),
            FilterList(
                (
                    Atom("or"),
                    triple("lang", "=", "en"),
                    triple("lang", "=", "de"),
                    triple("lang", "=", "fr"),
                )
            ),
            triple("olang", "!=", "ja"),
            triple(
                "release",
                "=",
                FilterList(
                    (
                        Atom("and"),
                        triple("released", ">=", "2020-01-01"),
                        triple("producer", "=", triple("id", "=", "p30")),
                    )
                ),
            ),
        )
    )


class RecordingTransport:
    """Mock transport that records every request and replies through a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def make_client():
    """Factory returning `(client, transport)` wired to a mock handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], token: Any = None):
        transport = RecordingTransport(handler)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
        client = VndbClient(token=token, base_url=TEST_BASE_URL, http_client=http_client)
        return client, transport

    return _make


def json_reply(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler


@pytest.fixture
def reply():
    """Factory for handlers answering every request with the same JSON body."""
    return json_reply

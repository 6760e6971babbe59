"""
Module: conftest.py
Description: Shared pytest fixtures for MNS client tests.

Provides settings and clients wired to an httpx.MockTransport so no
test touches the network. Canned documents live in tests/samples.py.
"""

from typing import Callable, List

import httpx
import pytest

from mns_client.client import MNSClient
from mns_client.config.settings import Settings

from tests.samples import ACCESS_KEY_ID, ACCESS_KEY_SECRET, TEST_URL


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def test_settings():
    """Settings that don't depend on environment variables or .env files."""
    return Settings(
        _env_file=None,
        endpoint=TEST_URL,
        access_key_id=ACCESS_KEY_ID,
        access_key_secret=ACCESS_KEY_SECRET
    )


@pytest.fixture
def make_client():
    """
    Build clients whose sync and async paths share one RecordingTransport.

    Usage: client, transport = make_client(lambda request: httpx.Response(204))
    """
    clients = []

    def _make(handler, **kwargs):
        transport = RecordingTransport(handler)
        client = MNSClient(
            TEST_URL,
            ACCESS_KEY_ID,
            ACCESS_KEY_SECRET,
            transport=transport,
            async_transport=transport,
            **kwargs
        )
        clients.append(client)
        return client, transport

    yield _make

    for client in clients:
        client.close()

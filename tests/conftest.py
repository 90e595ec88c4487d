import asyncio

import httpx
import pytest

from drop0x0.backends import BackendSelection
from drop0x0.handler import DropHandler
from drop0x0.uploader import Uploader


class FakeClipboard:
    def __init__(self, text="before"):
        self.text = text
        self.writes = []

    def copy(self, text):
        self.writes.append(text)
        self.text = text


@pytest.fixture
def mock_client():
    clients = []

    def make(responder):
        client = httpx.AsyncClient(transport=httpx.MockTransport(responder))
        clients.append(client)
        return client

    yield make

    for client in clients:
        asyncio.run(client.aclose())


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def prefs_path(tmp_path):
    return str(tmp_path / "prefs.json")


@pytest.fixture
def make_handler(mock_client, clipboard, prefs_path):
    def make(responder, anonymize=False):
        return DropHandler(
            uploader=Uploader(client=mock_client(responder)),
            backends=BackendSelection(prefs_path),
            clipboard=clipboard,
            anonymize=anonymize,
            echo=lambda *a, **kw: None,
        )
    return make

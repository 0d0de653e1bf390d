import os
import tempfile
from pathlib import Path
from typing import Any

import pytest

# keep the config out of the user's data dir, must be set before tubeinfo is imported
_CFG_DIR = Path(tempfile.mkdtemp(prefix="tubeinfo-tests-"))
os.environ["TUBEINFO_CONFIG"] = str(_CFG_DIR / "config.yaml")

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from tubeinfo.api.api import create_app  # noqa: E402
from tubeinfo.config import Config  # noqa: E402
from tubeinfo.services.base_service import BaseService  # noqa: E402


class FakeClient(BaseService):
    """Records calls so tests can check what reached the collaborator."""

    def __init__(
        self,
        data: Any = None,
        init_error: Exception | None = None,
        lookup_error: Exception | None = None,
        close_error: Exception | None = None,
    ):
        self.data = data
        self.init_error = init_error
        self.lookup_error = lookup_error
        self.close_error = close_error
        self.calls: list[tuple] = []
        self.closed = False

    @property
    def service_name(self):
        return "Fake"

    async def init(self):
        self.calls.append(("init",))
        if self.init_error:
            raise self.init_error
        return self

    async def get_channel_details(self, channel_id: str):
        self.calls.append(("get_channel_details", channel_id))
        if self.lookup_error:
            raise self.lookup_error
        return self.data

    def close(self):
        self.closed = True
        if self.close_error:
            raise self.close_error


class FakeClientFactory:
    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.created: list[FakeClient] = []

    def __call__(self) -> FakeClient:
        client = FakeClient(**self.kwargs)
        self.created.append(client)
        return client


@pytest.fixture
def app() -> FastAPI:
    return create_app(Config())


@pytest.fixture
def make_client(app: FastAPI):
    """Installs a fake client factory on the app and returns a test client for it."""

    def _make(**kwargs) -> tuple[TestClient, FakeClientFactory]:
        factory = FakeClientFactory(**kwargs)
        app.state.client_factory = factory
        return TestClient(app), factory

    return _make

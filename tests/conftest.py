from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = BASE_DIR / "src"

sys.path.insert(0, str(SRC_DIR))

from post_now_client.config import ClientSettings  # noqa: E402
from post_now_client.http_client import HttpClient  # noqa: E402
from post_now_client.registry import ApiClientRegistry, reset_api_client  # noqa: E402
from post_now_client.storage import MemoryStorage  # noqa: E402

API_BASE_URL = "https://api.example.com/api"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    for key in list(os.environ):
        if key.startswith("POST_NOW_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("POST_NOW_STORAGE_DIR", str(tmp_path / "storage"))
    reset_api_client()
    yield
    reset_api_client()


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(env_name="test", api_base_url=API_BASE_URL)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def http(settings: ClientSettings) -> HttpClient:
    return HttpClient(settings=settings)


@pytest.fixture
def registry(settings: ClientSettings, storage: MemoryStorage, http: HttpClient) -> ApiClientRegistry:
    return ApiClientRegistry(settings=settings, storage=storage, http=http)

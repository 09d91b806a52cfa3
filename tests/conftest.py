"""Shared test fixtures."""

import os
from collections.abc import Generator

import pytest

from glogin.settings import get_settings

SECRET = "kfdj7dsk2-(83&%$jsd"


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate tests from GLOGIN_* variables and the cached settings."""
    for name in list(os.environ):
        if name.startswith("GLOGIN_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def secret() -> str:
    return SECRET

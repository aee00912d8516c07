import os
from datetime import datetime, timezone
from typing import Generator

import pytest

from jsonview.bootstrap.deps import get_settings
from jsonview.core.encoding import get_default_encoder, set_default_encoder
from tests.fake.fake_encoder import FakeEncoder
from tests.helpers import Person


@pytest.fixture(autouse=True)
def restore_default_encoder() -> Generator[None, None, None]:
    previous = get_default_encoder()
    try:
        yield
    finally:
        set_default_encoder(previous)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path) -> Generator[None, None, None]:
    # Keep a developer's jsonview.yaml or JSONVIEW_* variables out of the tests
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("JSONVIEW"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_encoder() -> FakeEncoder:
    return FakeEncoder()


@pytest.fixture
def ada() -> Person:
    return Person(name="Ada", age=30, updated_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc))


@pytest.fixture
def lin() -> Person:
    return Person(name="Lin", age=41, updated_at=datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc))

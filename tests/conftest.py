from typing import Optional

import pytest
from pydantic import BaseModel

from gelato_mate.core.config import get_settings
from gelato_mate.core.exceptions import I18nException
from gelato_mate.schemas.common import Envelope


class Gender(BaseModel):
    code: int
    name: str


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in (
        "GELATO_ENV",
        "GELATO_LOG_LEVEL",
        "GELATO_SUCCESS_CODE",
        "GELATO_SUCCESS_MESSAGE",
        "GELATO_FAILURE_CODE",
        "GELATO_FAILURE_MESSAGE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def gender() -> Gender:
    return Gender(code=1, name="M")


@pytest.fixture
def api_result(gender) -> Envelope[Gender]:
    """E1: full envelope."""
    return Envelope[Gender](code=200, message="success", data=gender)


@pytest.fixture
def result(gender) -> Envelope[Gender]:
    """E2: envelope without a message."""
    return Envelope[Gender](code=200, data=gender)


@pytest.fixture
def error_mapper():
    calls = []

    def mapper(envelope) -> I18nException:
        calls.append(envelope)
        return I18nException("error: " + str(envelope.code))

    mapper.calls = calls
    return mapper


class Recorder:
    """Consumer stub recording every payload it receives."""

    def __init__(self):
        self.received: list[Optional[object]] = []

    def __call__(self, data):
        self.received.append(data)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()

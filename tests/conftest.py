from typing import Sequence

import pytest

from peercat.config.settings import ClientConfig, get_settings
from peercat.execution.executor import RequestExecutor
from tests.helpers import ENV_VARS, FakeTransport, Outcome, RecordingSleep


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def make_executor(sleep):
    def _make(outcomes: Sequence[Outcome], **config_overrides):
        config_overrides.setdefault("api_key", "pcat_test_key")
        config = ClientConfig(**config_overrides)
        transport = FakeTransport(outcomes)
        return RequestExecutor(config, transport, sleep=sleep), transport

    return _make

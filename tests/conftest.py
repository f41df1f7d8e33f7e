import pytest

import logfiles

ENV_KEYS = ("LOG_DIR", "LOG_PROGRAM", "MAX_SIZE_BYTES", "MAX_SIZE_MB", "LOG_LEVEL", "LOGFILES_CONFIG")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_default_manager():
    logfiles._default_manager = None
    yield
    logfiles._default_manager = None

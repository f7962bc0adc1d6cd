import os

import pytest

from steamid_codec.config import ENV_KEYS



@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep STEAMID_* variables (and anything a .env file sets) out of other tests."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    for key in ENV_KEYS:
        os.environ.pop(key, None)

import pytest

from nats_json.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Each test starts from default settings, whatever the host env says."""
    monkeypatch.delenv("NATS_JSON_ZONE", raising=False)
    monkeypatch.delenv("NATS_JSON_OBJECT_SCAN", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

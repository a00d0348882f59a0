import httpx
import pytest

from scarf_events.constants import ENV_DO_NOT_TRACK, ENV_NO_ANALYTICS, ENV_VERBOSE
from tests.helpers import RecordingHandler


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """
    Make sure the host environment cannot opt tests out of analytics.
    """
    for name in (ENV_DO_NOT_TRACK, ENV_NO_ANALYTICS, ENV_VERBOSE):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def recorder() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def http_client(recorder: RecordingHandler):
    client = httpx.Client(transport=httpx.MockTransport(recorder))
    yield client
    client.close()

import pytest

from nexmo_client import NexmoClient, NexmoConfig

from .helpers import API_KEY, API_ROOT, API_SECRET, RecordingTransport


@pytest.fixture
def config():
    return NexmoConfig(
        api_root=API_ROOT,
        api_key=API_KEY,
        api_secret=API_SECRET,
        use_oauth=False,
        verbose_logging=False,
        timeout=5.0,
    )


@pytest.fixture
def make_client(config):
    """Build a client whose HTTP calls are served by a RecordingTransport."""
    clients = []

    def _make(transport: RecordingTransport, cfg: NexmoConfig = None) -> NexmoClient:
        client = NexmoClient(cfg or config, transport=transport)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()

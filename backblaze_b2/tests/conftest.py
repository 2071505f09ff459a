from collections.abc import Iterator

import pytest

from backblaze_b2.api.http_client import B2HttpClient
from backblaze_b2.client import B2Client
from backblaze_b2.config import B2Config
from backblaze_b2.tests.constants import ACCOUNT_ID, APPLICATION_KEY
from backblaze_b2.tests.utils.mock_transport import MockTransport


@pytest.fixture
def config() -> B2Config:
    return B2Config()


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def http(config: B2Config, mock_transport: MockTransport) -> Iterator[B2HttpClient]:
    with B2HttpClient(config, transport=mock_transport) as client:
        yield client


@pytest.fixture
def authorized_http(http: B2HttpClient, mock_transport: MockTransport) -> B2HttpClient:
    """HTTP client authorized against the canned account; the authorize request is dropped."""
    mock_transport.add_fixture("authorize_account.json")
    http.authorize(ACCOUNT_ID, APPLICATION_KEY)
    mock_transport.requests.clear()
    return http


@pytest.fixture
def client(config: B2Config, mock_transport: MockTransport) -> Iterator[B2Client]:
    with B2Client(config, transport=mock_transport) as b2:
        yield b2


@pytest.fixture
def authorized_client(client: B2Client, mock_transport: MockTransport) -> B2Client:
    mock_transport.add_fixture("authorize_account.json")
    client.authorize(ACCOUNT_ID, APPLICATION_KEY)
    mock_transport.requests.clear()
    return client

from unittest.mock import Mock

import pytest

from backblaze_b2.api.http_client import B2HttpClient, Session
from backblaze_b2.tests.constants import (
    ACCOUNT_ID,
    API_URL,
    APPLICATION_KEY,
    AUTH_TOKEN,
    DOWNLOAD_URL,
)


@pytest.fixture
def session() -> Session:
    return Session(
        account_id=ACCOUNT_ID,
        application_key=APPLICATION_KEY,
        authorization_token=AUTH_TOKEN,
        api_url=API_URL,
        download_url=DOWNLOAD_URL,
    )


@pytest.fixture
def mock_http(session: Session) -> Mock:
    http = Mock(spec=B2HttpClient)
    http.session = session
    return http

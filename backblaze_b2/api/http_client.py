"""
HTTP client for the Backblaze B2 API.

Holds the authorization session and runs every API call through one
pipeline: build the request, send it through the transport, decode JSON and
map B2 error codes to typed exceptions.
"""

import base64
from dataclasses import dataclass, field
from typing import Any, Self

import httpx
import structlog

from backblaze_b2.config import B2Config
from backblaze_b2.exceptions import (
    InvalidResponseError,
    UnauthorizedError,
    error_from_response,
)

logger = structlog.get_logger(__name__)

SENSITIVE_KEYS = frozenset(
    {
        "Authorization",
        "authorization",
        "authorizationToken",
        "applicationKey",
    }
)


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive fields from a dict before logging.

    Recursively sanitizes nested dictionaries and lists.

    Args:
        data: Dictionary that may contain sensitive values.

    Returns:
        Copy with sensitive values replaced by "***".
    """
    result = {}
    for key, value in data.items():
        if key in SENSITIVE_KEYS:
            result[key] = "***"
        elif isinstance(value, dict):
            result[key] = sanitize_for_log(value)
        elif isinstance(value, list):
            result[key] = [
                sanitize_for_log(item) if isinstance(item, dict) else item for item in value
            ]
        else:
            result[key] = value
    return result


@dataclass(frozen=True, slots=True)
class Session:
    """Immutable session data, replaced as a whole on every authorize()."""

    account_id: str
    application_key: str = field(repr=False)
    authorization_token: str = field(repr=False)
    api_url: str
    download_url: str


class B2HttpClient:
    """
    Synchronous HTTP client for the B2 API.

    Not thread-safe: share one instance per thread or serialize calls.
    """

    def __init__(
        self,
        config: B2Config,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional transport (mock transport for testing).
        """
        self._config = config
        self._transport = transport

        self._session: Session | None = None
        self._client: httpx.Client | None = None

    def __enter__(self) -> Self:
        self._ensure_client()
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._config.timeout,
                transport=self._transport,
                follow_redirects=False,
                headers={"User-Agent": self._config.user_agent},
            )
        return self._client

    def close(self) -> None:
        """Close the underlying HTTP client. The session is kept."""
        if self._client is None:
            logger.debug("Client not open.")
            return
        self._client.close()
        self._client = None

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def is_authorized(self) -> bool:
        """Check if authorize() has succeeded."""
        return self._session is not None

    def authorize(self, account_id: str, application_key: str) -> Session:
        """
        Authorize the account and store the token and base URLs.

        Overwrites any previous session. On failure the previous session,
        if any, is left untouched.

        Args:
            account_id: B2 account ID (or application key ID).
            application_key: Secret application key.

        Returns:
            The new session.

        Raises:
            B2APIError: If B2 rejects the credentials.
            InvalidResponseError: If the response is not valid JSON.
            httpx.HTTPError: If the request fails due to network issues.
        """
        credentials = base64.b64encode(f"{account_id}:{application_key}".encode()).decode("ascii")
        response = self._send(
            "GET",
            self._config.authorize_url,
            headers={"Authorization": f"Basic {credentials}"},
        )
        data = self._decode_json(response)
        if response.status_code != httpx.codes.OK:
            raise error_from_response(data, response.status_code)

        try:
            session = Session(
                account_id=account_id,
                application_key=application_key,
                authorization_token=data["authorizationToken"],
                api_url=data["apiUrl"] + self._config.api_version_path,
                download_url=data["downloadUrl"],
            )
        except (KeyError, TypeError) as e:
            msg = f"B2 API returned incomplete authorization response: {e}"
            raise InvalidResponseError(msg, status_code=response.status_code) from e

        self._session = session
        logger.info("Account authorized", account_id=account_id, api_url=session.api_url)
        return session

    def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make an API call.

        Args:
            method: HTTP method (B2 uses POST for every API call).
            endpoint: API operation path (e.g., "/b2_list_buckets").
            params: Parameters sent as the JSON body.

        Returns:
            Decoded JSON response, unchanged.

        Raises:
            UnauthorizedError: If authorize() has not succeeded. No request is sent.
            InvalidResponseError: If the response body is not valid JSON.
            B2APIError: If the API returns a non-200 status.
            httpx.HTTPError: If the request fails due to network issues.
        """
        session = self._require_session()
        params = params or {}

        logger.debug(
            "API request", method=method, endpoint=endpoint, params=sanitize_for_log(params)
        )
        response = self._send(
            method,
            f"{session.api_url}{endpoint}",
            json=params,
            headers={"Authorization": session.authorization_token},
        )
        data = self._decode_json(response)
        logger.debug("API response", endpoint=endpoint, status_code=response.status_code)

        if response.status_code != httpx.codes.OK:
            raise error_from_response(data, response.status_code)

        return data

    def request_download(self, path: str, *, params: dict[str, Any] | None = None) -> bytes:
        """
        Fetch raw file content from the download URL.

        Args:
            path: Path relative to the session download URL.
            params: Query parameters.

        Returns:
            Raw response bytes, never JSON-decoded.

        Raises:
            UnauthorizedError: If authorize() has not succeeded. No request is sent.
            InvalidResponseError: If an error response is not valid JSON.
            B2APIError: If the download fails.
        """
        session = self._require_session()

        logger.debug("Download request", path=path, params=params)
        response = self._send(
            "GET",
            f"{session.download_url}{path}",
            params=params,
            headers={"Authorization": session.authorization_token},
        )
        if response.status_code != httpx.codes.OK:
            raise error_from_response(self._decode_json(response), response.status_code)

        return response.content

    def upload_raw(self, url: str, content: bytes, headers: dict[str, str]) -> dict[str, Any]:
        """
        Send a raw upload body outside the JSON pipeline.

        Security:
            Only pass URLs and tokens obtained from b2_get_upload_url. The
            account token is not attached; the caller supplies the upload
            token in headers.

        Args:
            url: Upload URL from b2_get_upload_url.
            content: Raw file bytes.
            headers: Request headers, including the upload Authorization.

        Returns:
            Decoded JSON file metadata.

        Raises:
            InvalidResponseError: If the response body is not valid JSON.
            B2APIError: If the upload fails.
        """
        logger.debug("Upload request", headers=sanitize_for_log(headers), size=len(content))
        response = self._send("POST", url, content=content, headers=headers)
        data = self._decode_json(response)

        if response.status_code != httpx.codes.OK:
            raise error_from_response(data, response.status_code)

        return data

    def _require_session(self) -> Session:
        session = self._session  # Capture once for consistent reads
        if session is None:
            raise UnauthorizedError()
        return session

    def _send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        json: dict[str, Any] | None = None,
        content: bytes | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        client = self._ensure_client()
        return client.request(
            method=method,
            url=url,
            json=json,
            content=content,
            params=params,
            headers=headers,
        )

    @staticmethod
    def _decode_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(status_code=response.status_code) from e

"""
Backblaze B2 client facade.

This is the main entry point for users of the library. It provides a clean,
high-level API over the request pipeline and the bucket and file services.
"""

from pathlib import Path
from typing import Any, BinaryIO, Self

import httpx
import structlog

from backblaze_b2.api.http_client import B2HttpClient, Session
from backblaze_b2.config import B2Config
from backblaze_b2.models.bucket import BucketType
from backblaze_b2.services.bucket_service import BucketService
from backblaze_b2.services.file_service import FileService

logger = structlog.get_logger(__name__)


class B2Client:
    """
    Synchronous client for Backblaze B2.

    One instance holds one authorization session. Calls are not thread-safe;
    use one client per thread or serialize access.

    Example:
        ```python
        with B2Client() as client:
            client.authorize("account-id", "application-key")

            bucket_id = client.get_bucket_id_by_name("my-bucket")
            client.upload(bucket_id, "notes/today.txt", body=b"hello")

            content = client.get_file_content_by_name("my-bucket", "notes/today.txt")
        ```

    Args:
        config: Client configuration. Uses defaults if not provided.
        transport: Optional httpx transport (mock transport for testing).
    """

    BUCKET_TYPE_PUBLIC = BucketType.PUBLIC
    BUCKET_TYPE_PRIVATE = BucketType.PRIVATE

    def __init__(
        self,
        config: B2Config | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or B2Config()
        self._http = B2HttpClient(self._config, transport=transport)
        self._buckets = BucketService(self._http)
        self._files = FileService(self._http, self._config)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP connections."""
        self._http.close()
        logger.debug("Client closed")

    # Authorization

    def authorize(self, account_id: str, application_key: str) -> Session:
        """
        Authorize the account to get an auth token and the API/download URLs.

        Can be called again at any time; the new session replaces the old one.

        Args:
            account_id: B2 account ID (or application key ID).
            application_key: Secret application key.

        Returns:
            The new session.

        Raises:
            B2APIError: If the credentials are rejected.
            InvalidResponseError: If B2 does not answer with JSON.
        """
        return self._http.authorize(account_id, application_key)

    @property
    def is_authorized(self) -> bool:
        """Check if authorize() has succeeded."""
        return self._http.is_authorized

    @property
    def account_id(self) -> str | None:
        return self._session_value("account_id")

    @property
    def application_key(self) -> str | None:
        return self._session_value("application_key")

    @property
    def authorization_token(self) -> str | None:
        return self._session_value("authorization_token")

    @property
    def api_url(self) -> str | None:
        """API base URL, including the /b2api/v1 version path."""
        return self._session_value("api_url")

    @property
    def download_url(self) -> str | None:
        return self._session_value("download_url")

    def request(
        self, method: str, endpoint: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """
        Call any B2 API operation directly.

        Args:
            method: HTTP method.
            endpoint: Operation path, e.g. "/b2_list_buckets".
            params: JSON parameters.

        Returns:
            Decoded JSON response.
        """
        return self._http.request(method, endpoint, params)

    # Buckets

    def create_bucket(self, bucket_name: str, bucket_type: str) -> dict[str, Any]:
        """
        Create a bucket.

        Raises:
            InvalidOptionsError: If bucket_type is not "allPublic" or "allPrivate".
            BucketAlreadyExistsError: If the name is already taken.
        """
        return self._buckets.create_bucket(bucket_name, bucket_type)

    def update_bucket(self, bucket_id: str, bucket_type: str) -> dict[str, Any]:
        """
        Change the type of a bucket.

        Raises:
            InvalidOptionsError: If bucket_type is not "allPublic" or "allPrivate".
        """
        return self._buckets.update_bucket(bucket_id, bucket_type)

    def list_buckets(self) -> dict[str, Any]:
        """List all buckets of the account."""
        return self._buckets.list_buckets()

    def delete_bucket(self, bucket_id: str) -> dict[str, Any]:
        """
        Delete a bucket.

        Raises:
            BucketNotEmptyError: If the bucket still holds files.
        """
        return self._buckets.delete_bucket(bucket_id)

    def get_bucket_id_by_name(self, bucket_name: str) -> str | None:
        """Get a bucket ID by its name, or None if there is no such bucket."""
        return self._buckets.get_bucket_id_by_name(bucket_name)

    def get_bucket_name_by_id(self, bucket_id: str) -> str | None:
        """Get a bucket name by its ID, or None if there is no such bucket."""
        return self._buckets.get_bucket_name_by_id(bucket_id)

    # Files

    def upload(
        self,
        bucket_id: str,
        file_name: str,
        *,
        source_file: Path | str | None = None,
        body: bytes | str | BinaryIO | None = None,
        content_type: str | None = None,
        last_modified: int | None = None,
    ) -> dict[str, Any]:
        """
        Upload a file to a bucket and return the information about it.

        Exactly one of source_file and body must be given.

        Example:
            ```python
            client.upload(bucket_id, "report.pdf", source_file="/tmp/report.pdf")
            client.upload(bucket_id, "hello.txt", body="Hello", content_type="text/plain")
            ```

        Raises:
            InvalidOptionsError: If both or neither of source_file and body are given.
        """
        return self._files.upload(
            bucket_id,
            file_name,
            source_file=source_file,
            body=body,
            content_type=content_type,
            last_modified=last_modified,
        )

    def download(self, file_id: str, save_as: Path | str) -> Path:
        """Download a file by its ID and save it to save_as."""
        return self._files.download(file_id, save_as)

    def download_by_name(self, bucket_name: str, file_name: str, save_as: Path | str) -> Path:
        """Download a file by bucket and file name and save it to save_as."""
        return self._files.download_by_name(bucket_name, file_name, save_as)

    def get_file_content(self, file_id: str) -> bytes:
        """Get the raw content of a file by its ID."""
        return self._files.get_file_content(file_id)

    def get_file_content_by_name(self, bucket_name: str, file_name: str) -> bytes:
        """Get the raw content of a file by bucket and file name."""
        return self._files.get_file_content_by_name(bucket_name, file_name)

    def list_files(
        self,
        bucket_id: str,
        start_file_name: str | None = None,
        max_file_count: int | None = None,
    ) -> dict[str, Any]:
        """List one page (up to 1000 by default) of file names in a bucket."""
        return self._files.list_files(bucket_id, start_file_name, max_file_count)

    def file_exists(self, bucket_id: str, file_name: str) -> bool:
        """
        Check whether a file exists in a bucket.

        Note:
            Relies on B2 listing names starting at file_name. If file_name
            does not exist but a later name does, this returns True.
        """
        return self._files.file_exists(bucket_id, file_name)

    def get_file_info(self, file_id: str) -> dict[str, Any]:
        """Get metadata of a file version."""
        return self._files.get_file_info(file_id)

    def delete_file(self, file_name: str, file_id: str) -> dict[str, Any]:
        """Delete a file version identified by name and ID."""
        return self._files.delete_file(file_name, file_id)

    def _session_value(self, name: str) -> str | None:
        session = self._http.session
        return getattr(session, name) if session is not None else None

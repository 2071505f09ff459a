"""
File service for Backblaze B2.

Handles uploads, downloads, listing and deletion of files.
"""

import hashlib
from pathlib import Path
from typing import Any, BinaryIO
from urllib.parse import quote

import structlog

from backblaze_b2.api.endpoints.files import (
    delete_file_version,
    download_file_by_id,
    download_file_by_name,
    get_file_info,
    get_upload_url,
    list_file_names,
    upload_file,
)
from backblaze_b2.api.http_client import B2HttpClient
from backblaze_b2.config import B2Config
from backblaze_b2.exceptions import InvalidResponseError
from backblaze_b2.models.file import UploadRequest

logger = structlog.get_logger(__name__)


def build_upload_headers(
    request: UploadRequest, content: bytes, upload_token: str
) -> dict[str, str]:
    """
    Headers for b2_upload_file.

    The file name is percent-encoded as B2 requires; "/" stays as is.
    """
    return {
        "Authorization": upload_token,
        "Content-Type": request.content_type,
        "Content-Length": str(len(content)),
        "X-Bz-File-Name": quote(request.file_name, safe="/"),
        "X-Bz-Content-Sha1": hashlib.sha1(content).hexdigest(),
        "X-Bz-Info-src_last_modified_millis": str(request.last_modified),
    }


class FileService:
    """
    Service for uploading and downloading files.

    Content is always buffered in memory; there is no streaming or
    large-file (multipart) support.
    """

    def __init__(self, http: B2HttpClient, config: B2Config | None = None) -> None:
        """
        Args:
            http: B2 HTTP client.
            config: Client configuration for defaults. Uses defaults if not provided.
        """
        self._http = http
        self._config = config or B2Config()

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
        Upload a file to a bucket.

        Exactly one of source_file and body must be given.

        Args:
            bucket_id: Target bucket ID.
            file_name: File name in the bucket; a leading "/" is stripped.
            source_file: Local path to read the content from.
            body: Content as bytes, str or a readable binary stream.
            content_type: MIME type. Defaults to "b2/x-auto".
            last_modified: Modification time in milliseconds. Defaults to now.

        Returns:
            Metadata of the uploaded file as returned by B2.

        Raises:
            InvalidOptionsError: If both or neither of source_file and body are given,
                or source_file is not an existing file.
            UnauthorizedError: If the client is not authorized.
            B2APIError: If getting the upload URL or the upload itself fails.
        """
        request = UploadRequest.create(
            bucket_id,
            file_name,
            source_file=source_file,
            body=body,
            content_type=(
                self._config.default_content_type if content_type is None else content_type
            ),
            last_modified=last_modified,
        )
        return self.upload_request(request)

    def upload_request(self, request: UploadRequest) -> dict[str, Any]:
        """
        Run the two-step upload for a validated request.

        Gets a one-time upload URL, then posts the raw content to it.
        """
        target = get_upload_url(self._http, request.bucket_id)
        try:
            upload_url = target["uploadUrl"]
            upload_token = target["authorizationToken"]
        except KeyError as e:
            msg = f"B2 API returned incomplete upload URL response: missing {e}"
            raise InvalidResponseError(msg) from e

        content = request.source.read()
        headers = build_upload_headers(request, content, upload_token)

        result = upload_file(self._http, upload_url, content, headers)
        logger.info(
            "File uploaded",
            bucket_id=request.bucket_id,
            file_name=request.file_name,
            size=len(content),
            file_id=result.get("fileId"),
        )
        return result

    def get_file_content(self, file_id: str) -> bytes:
        """Download file content by file ID."""
        return download_file_by_id(self._http, file_id, api_path=self._config.api_version_path)

    def get_file_content_by_name(self, bucket_name: str, file_name: str) -> bytes:
        """Download file content by bucket name and file name."""
        return download_file_by_name(self._http, bucket_name, file_name)

    def download(self, file_id: str, save_as: Path | str) -> Path:
        """
        Download a file by ID and save it to disk.

        Args:
            file_id: File version ID.
            save_as: Local path to write to. Parent directories are created.

        Returns:
            The destination path.
        """
        return self._save(self.get_file_content(file_id), Path(save_as), file_id=file_id)

    def download_by_name(self, bucket_name: str, file_name: str, save_as: Path | str) -> Path:
        """Download a file by bucket and file name and save it to disk."""
        content = self.get_file_content_by_name(bucket_name, file_name)
        return self._save(content, Path(save_as), file_name=file_name)

    def list_files(
        self,
        bucket_id: str,
        start_file_name: str | None = None,
        max_file_count: int | None = None,
    ) -> dict[str, Any]:
        """
        List one page of file names in a bucket.

        Args:
            bucket_id: Bucket to list.
            start_file_name: First name to return. None starts at the beginning.
            max_file_count: Page size. Defaults to 1000.
        """
        return list_file_names(
            self._http,
            bucket_id,
            start_file_name=start_file_name,
            max_file_count=(
                self._config.default_max_file_count if max_file_count is None else max_file_count
            ),
        )

    def file_exists(self, bucket_id: str, file_name: str) -> bool:
        """
        Check whether a file exists in a bucket.

        Lists one file starting at file_name. B2 returns the first name that
        is equal to or sorts after file_name, so a missing file followed by
        another one also reports True.
        """
        response = self.list_files(bucket_id, start_file_name=file_name, max_file_count=1)
        files = response.get("files", response) if isinstance(response, dict) else response
        return len(files) > 0

    def get_file_info(self, file_id: str) -> dict[str, Any]:
        """Get metadata of a file version."""
        return get_file_info(self._http, file_id)

    def delete_file(self, file_name: str, file_id: str) -> dict[str, Any]:
        """
        Delete a file version.

        Raises:
            BadJsonError: If the file ID is malformed or unknown.
        """
        response = delete_file_version(self._http, file_name, file_id)
        logger.info("File deleted", file_name=file_name, file_id=file_id)
        return response

    @staticmethod
    def _save(content: bytes, destination: Path, **log_context: str) -> Path:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(content)
        logger.info("File saved", destination=str(destination), **log_context)
        return destination

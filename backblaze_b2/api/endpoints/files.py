"""File-related API endpoints (upload URL, listing, info, delete, download)."""

from typing import Any
from urllib.parse import quote

from backblaze_b2.api.http_client import B2HttpClient


def get_upload_url(http: B2HttpClient, bucket_id: str) -> dict[str, Any]:
    """
    Get a one-time upload URL for a bucket.

    Returns:
        Response with bucketId, uploadUrl and the upload authorizationToken.
    """
    return http.request("POST", "/b2_get_upload_url", {"bucketId": bucket_id})


def upload_file(
    http: B2HttpClient, upload_url: str, content: bytes, headers: dict[str, str]
) -> dict[str, Any]:
    """Send file content to an upload URL obtained from get_upload_url."""
    return http.upload_raw(upload_url, content, headers)


def list_file_names(
    http: B2HttpClient,
    bucket_id: str,
    *,
    start_file_name: str | None = None,
    max_file_count: int = 1000,
) -> dict[str, Any]:
    """
    List file names in a bucket, starting at start_file_name.

    Args:
        http: Authorized HTTP client.
        bucket_id: Bucket to list.
        start_file_name: First file name to return; None starts at the beginning.
        max_file_count: Maximum number of files in the response.

    Returns:
        Response with files and nextFileName.
    """
    return http.request(
        "POST",
        "/b2_list_file_names",
        {
            "bucketId": bucket_id,
            "startFileName": start_file_name,
            "maxFileCount": max_file_count,
        },
    )


def get_file_info(http: B2HttpClient, file_id: str) -> dict[str, Any]:
    """Get metadata of a file version."""
    return http.request("POST", "/b2_get_file_info", {"fileId": file_id})


def delete_file_version(http: B2HttpClient, file_name: str, file_id: str) -> dict[str, Any]:
    """Delete one version of a file. Both name and ID are required by B2."""
    return http.request(
        "POST",
        "/b2_delete_file_version",
        {
            "fileName": file_name,
            "fileId": file_id,
        },
    )


def download_file_by_id(
    http: B2HttpClient, file_id: str, *, api_path: str
) -> bytes:
    """Download file content by file ID. api_path is the API version path, e.g. "/b2api/v1"."""
    return http.request_download(f"{api_path}/b2_download_file_by_id", params={"fileId": file_id})


def download_file_by_name(http: B2HttpClient, bucket_name: str, file_name: str) -> bytes:
    """Download the latest version of a file by bucket and file name."""
    return http.request_download(f"/file/{quote(bucket_name)}/{quote(file_name, safe='/')}")

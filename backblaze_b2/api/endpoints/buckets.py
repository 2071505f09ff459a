"""Bucket-related API endpoints."""

from typing import Any

from backblaze_b2.api.http_client import B2HttpClient
from backblaze_b2.models.bucket import BucketType


def create_bucket(
    http: B2HttpClient, account_id: str, bucket_name: str, bucket_type: BucketType
) -> dict[str, Any]:
    """
    Create a bucket.

    Args:
        http: Authorized HTTP client.
        account_id: Owning account.
        bucket_name: Name, unique per account.
        bucket_type: Bucket visibility.

    Returns:
        The new bucket: accountId, bucketId, bucketName, bucketType.
    """
    return http.request(
        "POST",
        "/b2_create_bucket",
        {
            "accountId": account_id,
            "bucketName": bucket_name,
            "bucketType": bucket_type.value,
        },
    )


def update_bucket(
    http: B2HttpClient, account_id: str, bucket_id: str, bucket_type: BucketType
) -> dict[str, Any]:
    """Change the visibility of a bucket."""
    return http.request(
        "POST",
        "/b2_update_bucket",
        {
            "accountId": account_id,
            "bucketId": bucket_id,
            "bucketType": bucket_type.value,
        },
    )


def list_buckets(http: B2HttpClient, account_id: str) -> dict[str, Any]:
    """List every bucket of the account in a single response."""
    return http.request("POST", "/b2_list_buckets", {"accountId": account_id})


def delete_bucket(http: B2HttpClient, account_id: str, bucket_id: str) -> dict[str, Any]:
    """Delete an empty bucket."""
    return http.request(
        "POST",
        "/b2_delete_bucket",
        {
            "accountId": account_id,
            "bucketId": bucket_id,
        },
    )

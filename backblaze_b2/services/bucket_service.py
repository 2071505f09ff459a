"""
Bucket service for Backblaze B2.

Handles bucket CRUD and name/ID lookups.
"""

from typing import Any

import structlog

from backblaze_b2.api.endpoints.buckets import (
    create_bucket,
    delete_bucket,
    list_buckets,
    update_bucket,
)
from backblaze_b2.api.http_client import B2HttpClient
from backblaze_b2.exceptions import UnauthorizedError
from backblaze_b2.models.bucket import Bucket, BucketType

logger = structlog.get_logger(__name__)


class BucketService:
    """
    Service for managing buckets.

    Holds no cache: every lookup lists the buckets again.
    """

    def __init__(self, http: B2HttpClient) -> None:
        """
        Args:
            http: B2 HTTP client.
        """
        self._http = http

    def create_bucket(self, bucket_name: str, bucket_type: str) -> dict[str, Any]:
        """
        Create a bucket.

        Args:
            bucket_name: Name, unique per account.
            bucket_type: "allPublic" or "allPrivate".

        Returns:
            The created bucket as returned by B2.

        Raises:
            InvalidOptionsError: If bucket_type is not recognized. No request is sent.
            BucketAlreadyExistsError: If the name is taken.
        """
        validated_type = BucketType.validate(bucket_type)
        response = create_bucket(self._http, self._account_id(), bucket_name, validated_type)
        logger.info("Bucket created", bucket_name=bucket_name, bucket_type=validated_type)
        return response

    def update_bucket(self, bucket_id: str, bucket_type: str) -> dict[str, Any]:
        """
        Change the type of a bucket.

        Raises:
            InvalidOptionsError: If bucket_type is not recognized. No request is sent.
        """
        validated_type = BucketType.validate(bucket_type)
        return update_bucket(self._http, self._account_id(), bucket_id, validated_type)

    def list_buckets(self) -> dict[str, Any]:
        """List all buckets of the account (single page)."""
        return list_buckets(self._http, self._account_id())

    def delete_bucket(self, bucket_id: str) -> dict[str, Any]:
        """
        Delete a bucket.

        Raises:
            BucketNotEmptyError: If the bucket still holds files.
        """
        response = delete_bucket(self._http, self._account_id(), bucket_id)
        logger.info("Bucket deleted", bucket_id=bucket_id)
        return response

    def get_buckets(self) -> list[Bucket]:
        """List all buckets as Bucket models, in server order."""
        return [Bucket.from_api(b) for b in self.list_buckets().get("buckets", [])]

    def get_bucket_id_by_name(self, bucket_name: str) -> str | None:
        """Return the ID of the first bucket named bucket_name, or None."""
        bucket = next((b for b in self.get_buckets() if b.bucket_name == bucket_name), None)
        return bucket.bucket_id if bucket is not None else None

    def get_bucket_name_by_id(self, bucket_id: str) -> str | None:
        """Return the name of the first bucket with bucket_id, or None."""
        bucket = next((b for b in self.get_buckets() if b.bucket_id == bucket_id), None)
        return bucket.bucket_name if bucket is not None else None

    def _account_id(self) -> str:
        if (session := self._http.session) is None:
            raise UnauthorizedError()
        return session.account_id

"""
Bucket-related domain models.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Self

from backblaze_b2.exceptions import InvalidOptionsError


class BucketType(StrEnum):
    """Visibility of a bucket."""

    PUBLIC = "allPublic"
    PRIVATE = "allPrivate"

    @classmethod
    def validate(cls, value: str) -> Self:
        """
        Coerce a raw string into a BucketType.

        Raises:
            InvalidOptionsError: If value is not one of the two recognized types.
        """
        try:
            return cls(value)
        except ValueError:
            msg = f'Bucket type must be "{cls.PUBLIC}" or "{cls.PRIVATE}"'
            raise InvalidOptionsError(msg) from None


@dataclass(frozen=True, kw_only=True)
class Bucket:
    """
    Represents a B2 bucket as returned by b2_list_buckets.

    Bucket names are unique per account; bucket IDs are assigned by B2.
    """

    bucket_id: str
    bucket_name: str
    bucket_type: str
    account_id: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Self:
        return cls(
            bucket_id=data["bucketId"],
            bucket_name=data["bucketName"],
            bucket_type=data.get("bucketType", ""),
            account_id=data.get("accountId"),
        )

    @property
    def is_public(self) -> bool:
        """Check if files in this bucket are readable without authorization."""
        return self.bucket_type == BucketType.PUBLIC

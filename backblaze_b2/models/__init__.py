"""
Domain models for Backblaze B2.

These are immutable (frozen) dataclasses representing the core domain concepts.
"""

from backblaze_b2.models.bucket import Bucket, BucketType
from backblaze_b2.models.file import (
    BytesSource,
    FileSource,
    PathSource,
    UploadRequest,
    normalize_file_name,
)

__all__ = [
    # Buckets
    "Bucket",
    "BucketType",
    # Files
    "BytesSource",
    "FileSource",
    "PathSource",
    "UploadRequest",
    "normalize_file_name",
]

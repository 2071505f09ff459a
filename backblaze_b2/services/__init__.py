"""
Business logic services for Backblaze B2.
"""

from backblaze_b2.services.bucket_service import BucketService
from backblaze_b2.services.file_service import FileService

__all__ = [
    "BucketService",
    "FileService",
]

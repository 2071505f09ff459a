"""
Backblaze B2 Python Client.

A small synchronous client for the Backblaze B2 cloud storage API.

Example:
    ```python
    from backblaze_b2 import B2Client

    with B2Client() as client:
        client.authorize("account-id", "application-key")

        bucket = client.create_bucket("my-bucket", "allPrivate")
        client.upload(bucket["bucketId"], "hello.txt", body=b"Hello, B2")

        print(client.list_files(bucket["bucketId"]))
    ```
"""

from backblaze_b2.client import B2Client
from backblaze_b2.config import B2Config
from backblaze_b2.exceptions import (
    B2APIError,
    B2Error,
    BadJsonError,
    BadValueError,
    BucketAlreadyExistsError,
    BucketNotEmptyError,
    FileNotPresentError,
    InvalidOptionsError,
    InvalidResponseError,
    NotFoundError,
    UnauthorizedError,
)
from backblaze_b2.models import Bucket, BucketType, UploadRequest

__version__ = "0.1.0"

__all__ = [
    # Main client
    "B2Client",
    "B2Config",
    # Models
    "Bucket",
    "BucketType",
    "UploadRequest",
    # Exceptions
    "B2Error",
    "UnauthorizedError",
    "InvalidOptionsError",
    "InvalidResponseError",
    "B2APIError",
    "BadJsonError",
    "BadValueError",
    "BucketAlreadyExistsError",
    "NotFoundError",
    "FileNotPresentError",
    "BucketNotEmptyError",
]

"""
File upload models.

An upload source is either a path on disk or an in-memory body. Both are
resolved once into a single bytes buffer; streaming uploads are not supported.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Self

from backblaze_b2.exceptions import InvalidOptionsError

DEFAULT_CONTENT_TYPE = "b2/x-auto"


def current_time_millis() -> int:
    """Wall-clock time in milliseconds."""
    return round(time.time() * 1000)


@dataclass(frozen=True, slots=True)
class PathSource:
    """Upload content read from a local file."""

    path: Path

    def read(self) -> bytes:
        return self.path.read_bytes()


@dataclass(frozen=True, slots=True)
class BytesSource:
    """
    Upload content supplied by the caller.

    Accepts bytes, a str (encoded as UTF-8) or a readable binary stream.
    Streams are rewound before reading when they support it.
    """

    data: bytes | str | BinaryIO

    def read(self) -> bytes:
        if isinstance(self.data, bytes):
            return self.data
        if isinstance(self.data, str):
            return self.data.encode("utf-8")
        if self.data.seekable():
            self.data.seek(0)
        return self.data.read()


FileSource = PathSource | BytesSource


@dataclass(frozen=True, kw_only=True)
class UploadRequest:
    """
    Parameters of a single b2_upload_file call.

    Attributes:
        bucket_id: Target bucket.
        file_name: Name of the file inside the bucket, without a leading "/".
        source: Where the content comes from.
        content_type: MIME type, or "b2/x-auto" to let B2 detect it.
        last_modified: Source modification time in milliseconds, stored by B2
            as the src_last_modified_millis file info.
    """

    bucket_id: str
    file_name: str
    source: FileSource
    content_type: str = DEFAULT_CONTENT_TYPE
    last_modified: int = field(default_factory=current_time_millis)

    @classmethod
    def create(
        cls,
        bucket_id: str,
        file_name: str,
        *,
        source_file: Path | str | None = None,
        body: bytes | str | BinaryIO | None = None,
        content_type: str | None = None,
        last_modified: int | None = None,
    ) -> Self:
        """
        Validate raw upload arguments and build a request.

        Exactly one of source_file and body must be given.

        Raises:
            InvalidOptionsError: If both or neither content sources are given,
                or source_file is not an existing file.
        """
        if source_file is None and body is None:
            msg = '"source_file" or "body" option is required'
            raise InvalidOptionsError(msg)
        if source_file is not None and body is not None:
            msg = '"source_file" and "body" options must not be present at the same time'
            raise InvalidOptionsError(msg)

        source: FileSource
        if source_file is not None:
            path = Path(source_file)
            if not path.is_file():
                msg = f'"source_file" {path} is not an existing file'
                raise InvalidOptionsError(msg)
            source = PathSource(path)
        else:
            source = BytesSource(body)
        return cls(
            bucket_id=bucket_id,
            file_name=normalize_file_name(file_name),
            source=source,
            content_type=DEFAULT_CONTENT_TYPE if content_type is None else content_type,
            last_modified=last_modified if last_modified is not None else current_time_millis(),
        )


def normalize_file_name(file_name: str) -> str:
    """Strip a single leading path separator; B2 file names never start with "/"."""
    return file_name[1:] if file_name.startswith("/") else file_name

"""
Backblaze B2 client configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class B2Config:
    """
    Attributes:
        authorize_url: Well-known URL of b2_authorize_account.
        api_version_path: Path appended to apiUrl/downloadUrl for API calls.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
        default_content_type: Content type sent when the caller gives none;
            "b2/x-auto" lets B2 pick one from the file extension.
        default_max_file_count: Page size used by list_files when not given.
    """

    authorize_url: str = "https://api.backblazeb2.com/b2api/v1/b2_authorize_account"
    api_version_path: str = "/b2api/v1"
    timeout: float = 30.0
    user_agent: str = "backblaze-b2-python/0.1.0"
    default_content_type: str = "b2/x-auto"
    default_max_file_count: int = 1000

    def __post_init__(self) -> None:
        if not self.authorize_url:
            msg = "authorize_url must not be empty"
            raise ValueError(msg)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        if not self.default_content_type:
            msg = "default_content_type must not be empty"
            raise ValueError(msg)
        if self.default_max_file_count <= 0:
            msg = "default_max_file_count must be positive"
            raise ValueError(msg)

"""
B2 API client layer.

Provides synchronous HTTP communication with the B2 API.
"""

from backblaze_b2.api.http_client import B2HttpClient, Session, sanitize_for_log

__all__ = ["B2HttpClient", "Session", "sanitize_for_log"]

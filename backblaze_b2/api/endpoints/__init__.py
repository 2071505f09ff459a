"""One function per B2 API operation."""

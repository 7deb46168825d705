"""Exception types for baseliner."""

from __future__ import annotations


class BaselinerError(Exception):
    """Base exception for expected application errors."""


class NetworkError(BaselinerError):
    """Raised when the feature dataset cannot be downloaded."""

    def __init__(self, url: str, *, cause: str | None = None) -> None:
        detail = f"Unable to download feature data from {url}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class RequestTimeoutError(BaselinerError):
    """Raised when a request times out."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Request timed out for {url}")


class HttpStatusError(BaselinerError):
    """Raised when a non-200 HTTP response is returned."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"Request failed with HTTP {status_code} for {url}")


class ContentError(BaselinerError):
    """Raised when a response body is empty or not valid JSON."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Received invalid feature data from {url}")


class DatasetError(BaselinerError):
    """Raised when a local feature dataset cannot be read."""

    def __init__(self, path: str, *, cause: str | None = None) -> None:
        self.path = path
        detail = f"Unable to load feature data from {path}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class RewriteError(BaselinerError):
    """Raised by rewrite collaborators that could not produce output."""

"""
Error types for jaildash.

FetchError/ParseError are poll-cycle errors and are handled by the poller.
RenderError and the asset errors are request-scoped and map to HTTP statuses
in the Flask app.
"""

from typing import Optional


class JailDashError(Exception):
    """Base class for all jaildash errors"""


class FetchError(JailDashError):
    """Upstream request failed (connection error, timeout or non-2xx status)"""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(JailDashError):
    """Upstream body was not JSON or did not have the expected shape"""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class RenderError(JailDashError):
    """Template rendering failed"""


class AssetNotFound(JailDashError):
    """Requested static asset does not exist"""


class AssetTypeUnknown(JailDashError):
    """Static asset has no extension or one without a known content type"""

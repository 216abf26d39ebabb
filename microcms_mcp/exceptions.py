# microCMS Gateway Exceptions
"""Typed failures raised by the microCMS client and batch executor."""

from typing import Optional


class MicroCMSError(Exception):
    """Base class for every failure raised by this package."""


class ConfigurationError(MicroCMSError):
    """Required configuration (API key, base URL) is missing."""


class ApiError(MicroCMSError):
    """microCMS answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        status_text: str,
        body: Optional[str] = None,
        method: str = "",
        path: str = "",
    ):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body or None
        self.method = method
        self.path = path

        message = f"{method} {path} failed: {status_code} {status_text}".strip()
        if self.body:
            message += f" - {self.body}"
        super().__init__(message)


class TransportError(MicroCMSError):
    """The request never produced a usable response (network or decode failure)."""


class ItemError(MicroCMSError):
    """A single batch item could not be processed."""

    def __init__(self, index: int, message: str):
        self.index = index
        super().__init__(message)

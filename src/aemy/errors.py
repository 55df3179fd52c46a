"""Exception hierarchy shared by the transport, downloader and commands."""

from __future__ import annotations


class AemyError(Exception):
    """Base class for errors raised by the bot."""


class DeliveryError(AemyError):
    """An outbound protocol action (send, upload, react, mark read) failed."""


class DownloaderError(AemyError):
    """The downloader API was unreachable or returned an unusable payload."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class UnsupportedMediaError(AemyError):
    """A media URL resolved to a content type that cannot be sent."""

    def __init__(self, content_type: str) -> None:
        super().__init__(f"Unsupported content type: {content_type or 'unknown'}")
        self.content_type = content_type


class ShellError(AemyError):
    """A shell command exited non-zero or timed out."""


__all__ = [
    "AemyError",
    "DeliveryError",
    "DownloaderError",
    "UnsupportedMediaError",
    "ShellError",
]

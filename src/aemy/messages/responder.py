"""
Outbound capabilities bound to one inbound message.

Handlers never talk to the protocol client for the common actions; they get
a :class:`Responder` already parameterized with the message's chat, sender
and id. Every method performs exactly one outbound action, returns on
success and raises :class:`~aemy.errors.DeliveryError` on failure. Nothing
is retried.
"""

from __future__ import annotations

from typing import Protocol

from .model import ReplyContext, SendOptions


class Responder(Protocol):
    """Capability interface implemented by transport adapters."""

    async def reply(self, text: str) -> None:
        """Send ``text`` to the chat, quoting the inbound message."""

    async def reply_with_context(self, text: str, context: ReplyContext) -> None:
        """Send ``text`` with an explicit context card instead of the default quote."""

    async def react(self, emoji: str) -> None:
        """React to the inbound message (empty string clears the reaction)."""

    async def send_image(self, url: str, options: SendOptions | None = None) -> None:
        """Upload the image at ``url`` and send it to the chat."""

    async def send_video(self, url: str, options: SendOptions | None = None) -> None:
        """Upload the video at ``url`` and send it to the chat."""

    async def send_media(self, url: str, caption: str = "") -> None:
        """
        Probe ``url``'s content type and send it as an image or video.

        Raises :class:`~aemy.errors.UnsupportedMediaError` for anything else.
        """

    async def mark_read(self) -> None:
        """Send a read receipt for the inbound message."""


__all__ = ["Responder"]

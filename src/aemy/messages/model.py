"""
Canonical, behaviour-free message records.

``Message`` is built once per inbound event by :mod:`aemy.messages.normalizer`
and never mutated afterwards. Outbound actions live on a separate
:class:`~aemy.messages.responder.Responder` bound to the same message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Tuple

BROADCAST_SERVER = "broadcast"
STATUS_BROADCAST = "status@broadcast"

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


@dataclass(frozen=True, slots=True)
class Jid:
    """WhatsApp address split into ``user@server`` parts (device kept aside)."""

    user: str = ""
    server: str = ""
    device: int = 0

    @classmethod
    def parse(cls, raw: str | None) -> "Jid":
        """Parse ``user[:device]@server``; a bare string is treated as a server."""

        raw = (raw or "").strip()
        if not raw:
            return cls()
        if "@" not in raw:
            return cls(server=raw)

        user, server = raw.split("@", 1)
        device = 0
        if ":" in user:
            user, _, dev = user.partition(":")
            device = int(dev) if dev.isdigit() else 0
        # agent suffixes look like "user.0"; only the bare number identifies the account
        user = user.split(".", 1)[0]
        return cls(user=user, server=server, device=device)

    def __str__(self) -> str:
        if not self.user:
            return self.server
        return f"{self.user}@{self.server}"


@dataclass(frozen=True, slots=True)
class QuotedMessage:
    """Reduced view of the message a reply points at."""

    id: str
    sender: Jid
    body: str = ""
    raw: Any = field(default=None, repr=False, compare=False)


@dataclass(frozen=True, slots=True)
class ReplyContext:
    """Context card attached to a reply (quote + external link preview)."""

    title: str = ""
    body: str = ""
    thumbnail: bytes | None = field(default=None, repr=False)
    source_url: str = ""
    quote: bool = True
    large_thumbnail: bool = True


@dataclass(frozen=True, slots=True)
class SendOptions:
    """Per-send parameters for media messages."""

    caption: str = ""
    context: ReplyContext | None = None


@dataclass(frozen=True, slots=True)
class Message:
    """Canonical inbound message."""

    chat: Jid
    sender: Jid
    id: str
    timestamp: datetime = _EPOCH
    push_name: str = ""

    is_group: bool = False
    is_from_self: bool = False
    is_owner: bool = False
    is_broadcast_status: bool = False

    prefix: str = ""
    command: str = ""
    args: Tuple[str, ...] = ()
    text: str = ""
    body: str = ""

    mentions: Tuple[Jid, ...] = ()
    quoted: QuotedMessage | None = None
    raw: Any = field(default=None, repr=False, compare=False)

    @property
    def from_user(self) -> str:
        return self.chat.user

    @property
    def from_server(self) -> str:
        return self.chat.server

    @property
    def is_command(self) -> bool:
        return bool(self.prefix) and self.body.startswith(self.prefix)


__all__ = [
    "BROADCAST_SERVER",
    "STATUS_BROADCAST",
    "Jid",
    "Message",
    "QuotedMessage",
    "ReplyContext",
    "SendOptions",
]

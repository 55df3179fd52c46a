"""
Raw protocol event -> canonical :class:`~aemy.messages.model.Message`.

Works against the shape of neonize's ``MessageEv``::

    event.Info.MessageSource.{Chat, Sender, IsFromMe, IsGroup}
    event.Info.{ID, Pushname, Timestamp}
    event.Message.{conversation, extendedTextMessage, imageMessage, ...}

Every attribute is read defensively so that partial or unknown payloads
produce empty fields instead of exceptions.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Iterable, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from aemy.config import core

from .model import STATUS_BROADCAST, Jid, Message, QuotedMessage

logger = logging.getLogger(__name__)

# Where captions/text live, in priority order
_TEXT_PATHS: tuple[tuple[str, str], ...] = (
    ("imageMessage", "caption"),
    ("videoMessage", "caption"),
    ("extendedTextMessage", "text"),
    ("documentMessage", "caption"),
)

# Message kinds that may carry a contextInfo (quote / mentions)
_CONTEXT_CARRIERS = (
    "extendedTextMessage",
    "imageMessage",
    "videoMessage",
    "documentMessage",
)

_FALLBACK_TZ = timezone(timedelta(hours=7), "WIB")


def _get(obj: Any, *path: str) -> Any:
    """Follow ``path`` through attributes, returning ``None`` on any gap."""

    for name in path:
        if obj is None:
            return None
        try:
            obj = getattr(obj, name)
        except AttributeError:
            return None
    return obj


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _to_jid(value: Any) -> Jid:
    """Accept a protocol JID object (``User``/``Server``) or a JID string."""

    if value is None:
        return Jid()
    if isinstance(value, Jid):
        return value
    if isinstance(value, str):
        return Jid.parse(value)

    user = _str(_get(value, "User"))
    server = _str(_get(value, "Server"))
    device = _get(value, "Device")
    return Jid(user=user, server=server, device=device if isinstance(device, int) else 0)


def get_text(message: Any) -> str:
    """
    Extract the primary text of a protocol message.

    Image caption, video caption, extended text, document caption and plain
    conversation text are checked in that order; the first non-empty one
    wins. Returns ``""`` when nothing is present.
    """
    if message is None:
        return ""

    for kind, attr in _TEXT_PATHS:
        text = _str(_get(message, kind, attr))
        if text:
            return text
    return _str(_get(message, "conversation"))


def get_prefix(text: str, prefixes: Sequence[str] | None = None) -> str:
    """Return the first configured prefix ``text`` starts with, else ``""``."""

    if not text:
        return ""
    for prefix in core.PREFIXES if prefixes is None else prefixes:
        if prefix and text.startswith(prefix):
            return prefix
    return ""


def split_command(body: str, prefix: str) -> tuple[str, tuple[str, ...]]:
    """Split ``body`` into ``(command, args)``; both empty when ``prefix`` is."""

    if not prefix:
        return "", ()
    words = body.split()
    if not words or not words[0].startswith(prefix):
        return "", ()
    return words[0][len(prefix):].lower(), tuple(words[1:])


def is_owner(user: str, owners: Iterable[str] | None = None) -> bool:
    """Exact match of a bare user id against the owner allow-list."""

    if not user:
        return False
    return user in (core.OWNERS if owners is None else owners)


def _resolve_tz(name: str | None) -> tzinfo:
    try:
        return ZoneInfo(name or core.TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r; falling back to UTC+7", name)
        return _FALLBACK_TZ


def _to_datetime(raw: Any, tz: tzinfo) -> datetime:
    if isinstance(raw, datetime):
        return raw.astimezone(tz)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return datetime.fromtimestamp(0, tz=tz)
    seconds = float(raw)
    # whatsmeow may report milliseconds
    if seconds > 1e11:
        seconds /= 1000
    try:
        return datetime.fromtimestamp(seconds, tz=tz)
    except (OverflowError, OSError, ValueError):
        return datetime.fromtimestamp(0, tz=tz)


def _context_info(message: Any) -> Any:
    for kind in _CONTEXT_CARRIERS:
        ctx = _get(message, kind, "contextInfo")
        if ctx is not None and (_get(ctx, "stanzaID") or _get(ctx, "mentionedJID")):
            return ctx
    return None


def _quoted(ctx: Any) -> QuotedMessage | None:
    stanza = _str(_get(ctx, "stanzaID"))
    if not stanza:
        return None
    quoted_raw = _get(ctx, "quotedMessage")
    return QuotedMessage(
        id=stanza,
        sender=_to_jid(_str(_get(ctx, "participant"))),
        body=get_text(quoted_raw),
        raw=quoted_raw,
    )


def _mentions(ctx: Any) -> tuple[Jid, ...]:
    raw = _get(ctx, "mentionedJID")
    if not raw or isinstance(raw, str):
        return ()
    try:
        return tuple(_to_jid(item) for item in raw if item)
    except TypeError:
        return ()


def normalize(
    event: Any,
    *,
    prefixes: Sequence[str] | None = None,
    owners: Iterable[str] | None = None,
    tz: str | None = None,
) -> Message:
    """
    Build the canonical :class:`Message` for a raw message event.

    Never raises: missing content yields empty strings, and anything the
    protocol layer hands over in an unexpected shape is logged and reduced
    to an empty record.
    """
    try:
        return _normalize(event, prefixes, owners, tz)
    except Exception:
        logger.exception("Failed to normalize inbound message event")
        return Message(chat=Jid(), sender=Jid(), id="", raw=event)


def _normalize(
    event: Any,
    prefixes: Sequence[str] | None,
    owners: Iterable[str] | None,
    tz: str | None,
) -> Message:
    info = _get(event, "Info")
    source = _get(info, "MessageSource")
    raw_message = _get(event, "Message")

    chat = _to_jid(_get(source, "Chat"))
    sender = _to_jid(_get(source, "Sender"))
    from_self = _get(source, "IsFromMe") is True

    body = get_text(raw_message)
    prefix = get_prefix(body, prefixes)
    command, args = split_command(body, prefix)

    ctx = _context_info(raw_message)

    return Message(
        chat=chat,
        sender=sender,
        id=_str(_get(info, "ID")),
        timestamp=_to_datetime(_get(info, "Timestamp"), _resolve_tz(tz)),
        push_name=_str(_get(info, "Pushname")),
        is_group=_get(source, "IsGroup") is True,
        is_from_self=from_self,
        is_owner=from_self or is_owner(sender.user, owners),
        is_broadcast_status=str(chat) == STATUS_BROADCAST,
        prefix=prefix,
        command=command,
        args=args,
        text=" ".join(args),
        body=body,
        mentions=_mentions(ctx),
        quoted=_quoted(ctx),
        raw=event,
    )


__all__ = ["normalize", "get_text", "get_prefix", "split_command", "is_owner"]

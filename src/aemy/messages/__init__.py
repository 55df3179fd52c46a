"""Canonical message model, normalization and the outbound capability interface."""

from .model import (
    BROADCAST_SERVER,
    STATUS_BROADCAST,
    Jid,
    Message,
    QuotedMessage,
    ReplyContext,
    SendOptions,
)
from .normalizer import get_prefix, get_text, normalize, split_command
from .responder import Responder

__all__ = [
    "BROADCAST_SERVER",
    "STATUS_BROADCAST",
    "Jid",
    "Message",
    "QuotedMessage",
    "ReplyContext",
    "Responder",
    "SendOptions",
    "get_prefix",
    "get_text",
    "normalize",
    "split_command",
]

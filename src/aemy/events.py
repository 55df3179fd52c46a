"""
Inbound events the bot reacts to.

The transport wraps each protocol event it subscribes to in one of these
variants; hooks branch on the variant type only, never on the raw payload.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class MessageReceived:
    """A chat message arrived (any content type)."""

    raw: Any = field(repr=False)


@dataclass(frozen=True, slots=True)
class Connected:
    """The protocol client finished connecting."""


@dataclass(frozen=True, slots=True)
class PairSuccess:
    """First-time QR pairing completed for ``jid``."""

    jid: str = ""


@dataclass(frozen=True, slots=True)
class PairFailed:
    """QR pairing was attempted but rejected."""

    error: str = ""


def from_pair_status(raw: Any) -> Union[PairSuccess, PairFailed]:
    """
    Wrap a protocol pair-status event.

    A non-empty ``Error`` marks a failed attempt; otherwise the paired
    account's user id is kept.
    """
    error = getattr(raw, "Error", "") or ""
    if error:
        return PairFailed(error=str(error))
    return PairSuccess(jid=str(getattr(getattr(raw, "ID", None), "User", "") or ""))


@dataclass(frozen=True, slots=True)
class LoggedOut:
    """The session was revoked from the phone; the store must be re-paired."""

    reason: str = ""


InboundEvent = Union[MessageReceived, Connected, PairSuccess, PairFailed, LoggedOut]

__all__ = [
    "Connected",
    "InboundEvent",
    "LoggedOut",
    "MessageReceived",
    "PairFailed",
    "PairSuccess",
    "from_pair_status",
]

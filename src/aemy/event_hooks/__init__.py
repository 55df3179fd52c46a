"""Route inbound event variants to their hooks."""

from __future__ import annotations

from typing import Any, Callable

from aemy.commands import Dispatcher
from aemy.events import Connected, InboundEvent, LoggedOut, MessageReceived, PairFailed, PairSuccess
from aemy.messages import Message, Responder

from . import connection_hook, message_hook


async def handle(
    client: Any,
    event: InboundEvent,
    *,
    dispatcher: Dispatcher,
    make_responder: Callable[[Any, Message], Responder],
) -> None:
    if isinstance(event, MessageReceived):
        await message_hook.handle(client, event, dispatcher=dispatcher, make_responder=make_responder)
    elif isinstance(event, (Connected, PairSuccess, PairFailed, LoggedOut)):
        await connection_hook.handle(client, event)


__all__ = ["handle"]

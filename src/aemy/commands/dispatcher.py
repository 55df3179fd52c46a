"""Decide whether a canonical message is a command and run its handler."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from aemy.messages import BROADCAST_SERVER, Message, Responder

from .registry import CommandRegistry

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Route canonical messages to registered handlers.

    The first failing check ends processing silently:

    1. no prefix, or the body does not start with it;
    2. the chat lives on a blocked server (newsletters, status broadcasts), or self mode
       is on and the sender is not an owner;
    3. the lowercased command is not registered.

    Handler exceptions are logged and dropped so one command can never
    take down the event loop or other messages.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        *,
        self_mode: bool = False,
        blocked_servers: Iterable[str] = ("newsletter", BROADCAST_SERVER),
    ) -> None:
        self.registry = registry
        self.self_mode = self_mode
        self.blocked_servers = frozenset(blocked_servers)

    def is_allowed(self, message: Message) -> bool:
        """Return ``False`` for disallowed sources and non-owners in self mode."""

        if message.chat.server in self.blocked_servers:
            return False
        if self.self_mode and not message.is_owner:
            return False
        return True

    async def dispatch(self, client: Any, message: Message, responder: Responder) -> bool:
        """
        Run the handler for ``message`` if it is an allowed, known command.

        :returns: ``True`` when a handler was invoked (even if it failed).
        """
        if not message.prefix or not message.body.startswith(message.prefix):
            return False

        if not self.is_allowed(message):
            return False

        command = message.command.lower()
        handler = self.registry.lookup(command)
        if handler is None:
            return False

        logger.info(
            "Dispatching command '%s' from %s in %s with args: %s",
            command,
            message.sender,
            message.chat,
            list(message.args),
        )
        try:
            await handler.handle(client, message, responder)
        except Exception:
            logger.exception("Command '%s' failed (message %s)", command, message.id)
        return True


__all__ = ["Dispatcher"]

"""Handler contract shared by every command."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Protocol, Tuple

from aemy.messages import Message, Responder

if TYPE_CHECKING:
    from .registry import CommandRegistry


class CommandHandler(Protocol):
    """Anything the dispatcher can invoke."""

    async def handle(self, client: Any, message: Message, responder: Responder) -> None:
        """
        Execute the command.

        :param client: Protocol client handle (for actions beyond the responder).
        :param message: Canonical inbound message.
        :param responder: Outbound capabilities bound to ``message``.
        :raises Exception: On system errors; user errors are replied to and
            return normally.
        """


class Command:
    """
    Base class for concrete commands.

    Subclasses declare the names they answer to and their menu category, and
    implement :meth:`handle`.
    """

    names: ClassVar[Tuple[str, ...]] = ()
    category: ClassVar[str] = ""

    @classmethod
    def create(cls, registry: "CommandRegistry") -> "Command":
        """Construct the handler instance registered at startup."""

        return cls()

    async def handle(self, client: Any, message: Message, responder: Responder) -> None:
        raise NotImplementedError


__all__ = ["Command", "CommandHandler"]

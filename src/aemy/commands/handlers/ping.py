from __future__ import annotations

from typing import Any

from aemy.messages import Message, Responder

from ..base import Command


class PingCommand(Command):
    """Liveness check."""

    names = ("ping",)
    category = "utility"

    async def handle(self, client: Any, message: Message, responder: Responder) -> None:
        await responder.reply("Pong 🏓")

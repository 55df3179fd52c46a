"""Help menu built from the live command registry."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from aemy import system
from aemy.clients import downloader
from aemy.config import menu as menu_cfg
from aemy.errors import DownloaderError
from aemy.messages import Message, ReplyContext, Responder

from ..base import Command
from ..registry import CommandRegistry

logger = logging.getLogger(__name__)


def render_menu(registry: CommandRegistry, now: datetime) -> str:
    """
    Server info header followed by every command grouped by category.

    Categories are sorted by name and shown title-cased; names are sorted
    within each category.
    """
    lines = [
        "*Server Info*",
        f"• Hostname: {system.hostname()}",
        f"• Time: {now.strftime('%d-%b-%Y %H:%M:%S')}",
        f"• Uptime: {system.format_duration(system.uptime())}",
        "",
    ]

    grouped = registry.by_category()
    for category in sorted(grouped):
        lines.append(f"*{category.title()}:*")
        for name in sorted(grouped[category]):
            lines.append(f"  • *{name}*")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


async def load_thumbnail() -> bytes | None:
    """Menu card image: local file first, then the configured URL."""

    path = Path(menu_cfg.THUMBNAIL_PATH)
    try:
        return path.read_bytes()
    except OSError:
        logger.debug("Menu thumbnail %s not readable; trying URL", path)

    if not menu_cfg.THUMBNAIL_URL:
        return None
    try:
        return await downloader.fetch_buffer(menu_cfg.THUMBNAIL_URL)
    except DownloaderError as exc:
        logger.warning("Failed to fetch menu thumbnail: %s", exc)
        return None


class MenuCommand(Command):
    """List every registered command."""

    names = ("menu", "help")
    category = "main"

    def __init__(self, registry: CommandRegistry):
        self.registry = registry

    @classmethod
    def create(cls, registry: CommandRegistry) -> "MenuCommand":
        return cls(registry)

    async def handle(self, client: Any, message: Message, responder: Responder) -> None:
        now = datetime.now(message.timestamp.tzinfo)
        text = render_menu(self.registry, now)
        context = ReplyContext(
            title=f"Hello, {system.greeting(now.hour)}",
            body=f"Hello Everyone, I Am {menu_cfg.BOT_NAME} Bot",
            thumbnail=await load_thumbnail(),
            source_url=menu_cfg.SOURCE_URL,
        )
        await responder.reply_with_context(text, context)

"""Command registry, dispatcher and the startup registration builder."""

from __future__ import annotations

import logging
from typing import Iterable, Type

from .base import Command, CommandHandler
from .dispatcher import Dispatcher
from .registry import DEFAULT_CATEGORY, CommandEntry, CommandRegistry
from .handlers import HANDLERS

logger = logging.getLogger(__name__)


def build_registry(handlers: Iterable[Type[Command]] = HANDLERS) -> CommandRegistry:
    """
    Instantiate ``handlers`` and register each under its names.

    Returns a fresh registry; nothing is shared between calls.
    """
    registry = CommandRegistry()
    for cls in handlers:
        if not cls.names:
            raise TypeError(f"{cls.__name__} declares no command names")
        registry.register(cls.names, cls.create(registry), cls.category)

    if len(registry):
        logger.info("Registered %d command name(s)", len(registry))
    else:
        logger.warning("No commands registered; the bot will ignore every message")
    return registry


__all__ = [
    "Command",
    "CommandEntry",
    "CommandHandler",
    "CommandRegistry",
    "DEFAULT_CATEGORY",
    "Dispatcher",
    "HANDLERS",
    "build_registry",
]

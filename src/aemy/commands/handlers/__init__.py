"""
Startup registration list for command handlers.

Every command the bot answers is listed in :data:`HANDLERS`, in registration
order. To add a command:

1. Create a module in this directory with a :class:`~aemy.commands.base.Command`
   subclass declaring ``names`` and ``category``.
2. Append the class to :data:`HANDLERS`.
3. Cover it under ``tests/aemy/commands/``.
"""

from __future__ import annotations

from typing import Tuple, Type

from ..base import Command
from .instagram import InstagramCommand
from .menu import MenuCommand
from .ping import PingCommand
from .shell import ExecCommand
from .stats import StatsCommand
from .tiktok import TiktokCommand

HANDLERS: Tuple[Type[Command], ...] = (
    MenuCommand,
    PingCommand,
    StatsCommand,
    TiktokCommand,
    InstagramCommand,
    ExecCommand,
)

__all__ = ["HANDLERS"]

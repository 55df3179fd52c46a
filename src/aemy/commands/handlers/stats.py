"""Server and runtime diagnostics."""

from __future__ import annotations

import asyncio
import gc
import platform
import threading
from typing import Any

import psutil

from aemy import system
from aemy.messages import Message, Responder

from ..base import Command

_MB = 1024 * 1024


def render_stats() -> str:
    proc = psutil.Process()
    mem = proc.memory_info()
    vm = psutil.virtual_memory()
    gc_counts = gc.get_count()
    try:
        tasks = len(asyncio.all_tasks())
    except RuntimeError:
        tasks = 0

    return "\n".join(
        [
            "*Server Info*",
            "",
            f"• Hostname: {system.hostname()}",
            f"• OS: {platform.system()} {platform.release()}",
            f"• Arch: {platform.machine()}",
            f"• Python Version: {platform.python_version()}",
            f"• CPU: {system.cpu_model()}",
            f"• CPU Core: {psutil.cpu_count() or 0}",
            f"• Uptime: {system.format_duration(system.uptime())}",
            "",
            "*Memory Usage*",
            "",
            f"• RSS: {mem.rss / _MB:.2f} MB",
            f"• VMS: {mem.vms / _MB:.2f} MB",
            f"• System Used: {vm.used / _MB:.2f} MB / {vm.total / _MB:.2f} MB ({vm.percent:.1f}%)",
            "",
            "*Threads, Tasks & GC*",
            "",
            f"• Threads: {threading.active_count()}",
            f"• Asyncio Tasks: {tasks}",
            f"• GC Pending (gen0/1/2): {gc_counts[0]}/{gc_counts[1]}/{gc_counts[2]}",
            f"• GC Collections: {sum(s['collections'] for s in gc.get_stats())}",
        ]
    )


class StatsCommand(Command):
    """Report host, memory and runtime statistics."""

    names = ("stats",)
    category = "utility"

    async def handle(self, client: Any, message: Message, responder: Responder) -> None:
        await responder.reply(render_stats())

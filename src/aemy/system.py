"""Host and process introspection used by the info commands."""

from __future__ import annotations

import logging
import socket
import time
from datetime import timedelta
from pathlib import Path

import psutil

logger = logging.getLogger(__name__)

_CPUINFO = Path("/proc/cpuinfo")


def hostname() -> str:
    return socket.gethostname()


def uptime() -> timedelta:
    """Time since this process started, rounded to whole seconds."""

    started = psutil.Process().create_time()
    return timedelta(seconds=int(max(0.0, time.time() - started)))


def format_duration(delta: timedelta) -> str:
    """Render ``delta`` like ``1d 2h 3m 4s`` (zero units dropped)."""

    total = int(delta.total_seconds())
    days, rem = divmod(total, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, seconds = divmod(rem, 60)
    parts = [f"{v}{u}" for v, u in ((days, "d"), (hours, "h"), (minutes, "m")) if v]
    parts.append(f"{seconds}s")
    return " ".join(parts)


def cpu_model(path: Path = _CPUINFO) -> str:
    """CPU model name from ``/proc/cpuinfo``; ``"N/A"`` where unavailable."""

    try:
        with path.open(encoding="utf-8") as handle:
            for line in handle:
                if line.startswith("model name"):
                    _, _, value = line.partition(":")
                    return value.strip() or "N/A"
    except OSError:
        return "N/A"
    return "N/A"


def greeting(hour: int) -> str:
    """Time-of-day greeting shown on the menu card."""

    if 5 <= hour < 11:
        return "Good Morning 🌅"
    if 11 <= hour < 15:
        return "Good Afternoon 🌞"
    if 15 <= hour < 18:
        return "Good Evening 🌇"
    return "Good Night 🌙"


__all__ = ["hostname", "uptime", "format_duration", "cpu_model", "greeting"]

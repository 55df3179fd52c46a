from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict


DEFAULT_CONFIG_PATH = Path("config.toml")


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the bot config (``config.toml`` or ``$AEMY_CONFIG`` by default).

    Returns an empty dict when the file is missing so callers can fall back to
    environment variables.
    """
    if path is None:
        path = os.getenv("AEMY_CONFIG") or DEFAULT_CONFIG_PATH
    target = Path(path)
    if not target.is_file():
        return {}

    with target.open("rb") as handle:
        return tomllib.load(handle)


def section(config: dict | None, name: str) -> Dict[str, Any]:
    """Return the ``[aemy.<name>]`` table of ``config`` (empty when absent)."""

    return (config or {}).get("aemy", {}).get(name, {})


def split_list(raw: str | None) -> list[str]:
    """Split a comma-separated string, trim whitespace, drop empties"""
    return [item.strip() for item in (raw or "").split(",") if item.strip()]


def as_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in ("1", "true", "yes")


__all__ = ["load_raw_config", "section", "split_list", "as_bool", "DEFAULT_CONFIG_PATH"]

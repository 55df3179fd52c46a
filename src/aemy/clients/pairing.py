"""QR code artifact written during first-time device pairing."""

from __future__ import annotations

import logging
from pathlib import Path

import segno

logger = logging.getLogger(__name__)


def write_qr(code: str | bytes, path: str | Path) -> Path:
    """Render the pairing ``code`` as a PNG at ``path``."""

    if isinstance(code, bytes):
        code = code.decode("utf-8")

    target = Path(path)
    segno.make_qr(code, error="m").save(str(target), kind="png", scale=8, border=4)
    logger.info("QR code saved to %s; scan it from WhatsApp > Linked Devices", target)
    return target


def remove_qr(path: str | Path) -> bool:
    """Delete the QR image if present. Returns ``True`` when a file was removed."""

    target = Path(path)
    try:
        target.unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        logger.warning("Could not remove QR code %s: %s", target, exc)
        return False
    logger.debug("Removed QR code %s", target)
    return True


__all__ = ["write_qr", "remove_qr"]

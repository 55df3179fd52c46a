import logging
from typing import Any

from aemy.clients import pairing
from aemy.config import core
from aemy.events import Connected, InboundEvent, LoggedOut, PairFailed, PairSuccess

logger = logging.getLogger(__name__)


async def handle(client: Any, event: InboundEvent) -> None:
    """Log connection lifecycle changes and clean up the pairing QR image."""

    if isinstance(event, PairSuccess):
        logger.info("Paired as %s", event.jid or "unknown device")
        pairing.remove_qr(core.QR_PATH)
    elif isinstance(event, PairFailed):
        # QR is kept for the next attempt
        logger.error("Pairing failed: %s", event.error)
    elif isinstance(event, Connected):
        logger.info("WhatsApp connected and ready")
        pairing.remove_qr(core.QR_PATH)
    elif isinstance(event, LoggedOut):
        logger.error(
            "Logged out (%s); delete %s and pair again",
            event.reason or "no reason given",
            core.SESSION_DB,
        )

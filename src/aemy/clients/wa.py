"""WhatsApp client bootstrap (neonize / whatsmeow)."""

from __future__ import annotations

import asyncio
import logging

from neonize.aioze.client import NewAClient
from neonize.aioze.events import ConnectedEv, LoggedOutEv, MessageEv, PairStatusEv

from aemy import event_hooks
from aemy.clients import pairing
from aemy.clients.responder import NeonizeResponder
from aemy.commands import Dispatcher, build_registry
from aemy.config import core
from aemy.events import Connected, InboundEvent, LoggedOut, MessageReceived, from_pair_status

logger = logging.getLogger(__name__)


def create_client() -> NewAClient:
    """
    Build the protocol client on ``SESSION_DB`` with the command pipeline
    subscribed to its events.
    """
    registry = build_registry()
    dispatcher = Dispatcher(
        registry,
        self_mode=core.SELF_MODE,
        blocked_servers=core.BLOCKED_SERVERS,
    )
    client = NewAClient(core.SESSION_DB)

    async def _route(c: NewAClient, event: InboundEvent) -> None:
        await event_hooks.handle(
            c, event, dispatcher=dispatcher, make_responder=NeonizeResponder
        )

    # --- Event Handlers --------
    @client.event(MessageEv)
    async def on_message(c: NewAClient, message: MessageEv) -> None:
        await _route(c, MessageReceived(message))

    @client.event(ConnectedEv)
    async def on_connected(c: NewAClient, _: ConnectedEv) -> None:
        await _route(c, Connected())

    @client.event(PairStatusEv)
    async def on_pair_status(c: NewAClient, status: PairStatusEv) -> None:
        await _route(c, from_pair_status(status))

    @client.event(LoggedOutEv)
    async def on_logged_out(c: NewAClient, event: LoggedOutEv) -> None:
        await _route(c, LoggedOut(reason=str(getattr(event, "Reason", ""))))

    async def on_qr(c: NewAClient, code: bytes) -> None:
        pairing.write_qr(code, core.QR_PATH)

    client.qr(on_qr)
    return client


async def _main() -> None:
    client = create_client()
    try:
        await client.connect()
        await client.idle()
    finally:
        # a QR left behind after an expired or abandoned pairing is stale
        pairing.remove_qr(core.QR_PATH)
        await client.disconnect()


def run() -> None:
    """Start the bot and block until interrupted."""

    try:
        asyncio.run(_main())
    except KeyboardInterrupt:
        logger.info("Shutting down the bot.")
    except Exception as exc:  # pragma: no cover - startup failures
        logger.exception("Unexpected error while running client: %s", exc)

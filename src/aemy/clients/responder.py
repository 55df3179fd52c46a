"""neonize-backed :class:`~aemy.messages.Responder` for one inbound message."""

from __future__ import annotations

import logging
from typing import Any, Awaitable

from neonize.aioze.client import NewAClient
from neonize.proto.waE2E.WAWebProtobufsE2E_pb2 import ContextInfo, ExtendedTextMessage
from neonize.proto.waE2E.WAWebProtobufsE2E_pb2 import Message as WAMessage
from neonize.utils import build_jid
from neonize.utils.enum import ReceiptType

from aemy.clients import downloader
from aemy.errors import DeliveryError, UnsupportedMediaError
from aemy.messages import Jid, Message, ReplyContext, SendOptions

logger = logging.getLogger(__name__)


class NeonizeResponder:
    """Outbound actions addressed to ``message``'s chat, quoting ``message``."""

    def __init__(self, client: NewAClient, message: Message):
        self._client = client
        self._message = message

    # ---------- helpers ------------------------------------------------ #

    def _jid(self, jid: Jid, raw_attr: str):
        """Prefer the protocol's own JID object; rebuild from parts otherwise."""

        source = getattr(getattr(self._message.raw, "Info", None), "MessageSource", None)
        raw = getattr(source, raw_attr, None)
        if raw is not None:
            return raw
        return build_jid(jid.user, jid.server)

    @property
    def _chat(self):
        return self._jid(self._message.chat, "Chat")

    @property
    def _sender(self):
        return self._jid(self._message.sender, "Sender")

    async def _send(self, action: str, call: Awaitable[Any]) -> Any:
        try:
            return await call
        except Exception as exc:
            raise DeliveryError(f"{action} failed for {self._message.chat}: {exc}") from exc

    def _context_info(self, context: ReplyContext) -> ContextInfo:
        info = ContextInfo()
        if context.quote and self._message.id:
            info.stanzaID = self._message.id
            info.participant = str(self._message.sender)
            quoted = getattr(self._message.raw, "Message", None)
            if quoted is not None:
                info.quotedMessage.CopyFrom(quoted)

        if context.title or context.body or context.source_url or context.thumbnail:
            ad = info.externalAdReply
            ad.title = context.title
            ad.body = context.body
            ad.mediaType = ContextInfo.ExternalAdReplyInfo.IMAGE
            ad.sourceURL = context.source_url
            ad.renderLargerThumbnail = context.large_thumbnail
            if context.thumbnail:
                ad.thumbnail = context.thumbnail
        return info

    # ---------- Responder ---------------------------------------------- #

    async def reply(self, text: str) -> None:
        await self._send("reply", self._client.reply_message(text, self._message.raw))

    async def reply_with_context(self, text: str, context: ReplyContext) -> None:
        msg = WAMessage(
            extendedTextMessage=ExtendedTextMessage(
                text=text, contextInfo=self._context_info(context)
            )
        )
        await self._send("reply_with_context", self._client.send_message(self._chat, msg))

    async def react(self, emoji: str) -> None:
        reaction = await self._send(
            "build_reaction",
            self._client.build_reaction(self._chat, self._sender, self._message.id, emoji),
        )
        await self._send("react", self._client.send_message(self._chat, reaction))

    async def send_image(self, url: str, options: SendOptions | None = None) -> None:
        options = options or SendOptions()
        await self._send(
            "send_image",
            self._client.send_image(
                self._chat, url, caption=options.caption or None, quoted=self._message.raw
            ),
        )

    async def send_video(self, url: str, options: SendOptions | None = None) -> None:
        options = options or SendOptions()
        await self._send(
            "send_video",
            self._client.send_video(
                self._chat, url, caption=options.caption or None, quoted=self._message.raw
            ),
        )

    async def send_media(self, url: str, caption: str = "") -> None:
        content_type = await downloader.get_content_type(url)
        if content_type.startswith("video"):
            await self.send_video(url, SendOptions(caption=caption))
        elif content_type.startswith("image"):
            await self.send_image(url, SendOptions(caption=caption))
        else:
            raise UnsupportedMediaError(content_type)

    async def mark_read(self) -> None:
        await self._send(
            "mark_read",
            self._client.mark_read(
                self._message.id,
                chat=self._chat,
                sender=self._sender,
                receipt=ReceiptType.READ,
                timestamp=int(self._message.timestamp.timestamp()),
            ),
        )


__all__ = ["NeonizeResponder"]

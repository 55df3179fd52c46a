"""Instagram downloader: posts, reels and carousels."""

from __future__ import annotations

import logging
import re
from typing import Any

from aemy.clients import downloader
from aemy.errors import AemyError, DownloaderError, UnsupportedMediaError
from aemy.messages import Message, Responder

from ..base import Command

logger = logging.getLogger(__name__)

INSTAGRAM_RE = re.compile(
    r"https?://(www\.)?instagram\.com/(p|reel|reels|tv|stories|share)/[^\s]+"
)
ENDPOINT = "downloader/instagram"


class InstagramCommand(Command):
    """Download an Instagram post and send every media item."""

    names = ("instagram", "igdl", "ig")
    category = "downloader"

    async def handle(self, client: Any, message: Message, responder: Responder) -> None:
        url = message.text.strip()
        if not url:
            await responder.reply("Please send an Instagram link first.")
            return
        if not INSTAGRAM_RE.search(url):
            await responder.reply("Invalid link or not an Instagram link.")
            return

        await responder.reply("Please wait...")

        try:
            res = await downloader.fetch_api(ENDPOINT, {"url": url})
            if not res.body:
                raise DownloaderError(f"Empty response from {ENDPOINT}", status=res.status)
        except DownloaderError:
            await responder.reply("Feature error or server is down.")
            raise

        try:
            payload = downloader.parse_envelope(res, ENDPOINT)
        except DownloaderError:
            await responder.reply("Failed to get data from server.")
            raise

        data = payload.get("data")
        media_urls = [u for u in data if isinstance(u, str) and u] if isinstance(data, list) else []
        if not media_urls:
            await responder.reply("No media to send.")
            return

        for media_url in media_urls:
            try:
                await responder.send_media(media_url)
            except UnsupportedMediaError as exc:
                await responder.reply(str(exc))
            except DownloaderError:
                await responder.reply(f"Failed to determine content type for URL: {media_url}")
            except AemyError as exc:
                logger.warning("Failed to send %s: %s", media_url, exc)
                await responder.reply(f"Failed to send media: {exc}")

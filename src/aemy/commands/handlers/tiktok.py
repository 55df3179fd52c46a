"""TikTok downloader: no-watermark videos and photo slideshows."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, List

from aemy.clients import downloader
from aemy.errors import AemyError, DownloaderError
from aemy.messages import Message, Responder, SendOptions

from ..base import Command

logger = logging.getLogger(__name__)

TIKTOK_RE = re.compile(r"https://([a-z0-9]+\.)?tiktok\.com/[^\s]+")
ENDPOINT = "downloader/tiktok"


@dataclass(slots=True)
class TiktokResult:
    title: str = ""
    video_url: str = ""
    images: List[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: dict) -> "TiktokResult":
        """
        Pick the caption, no-watermark video and slideshow images out of an
        envelope.

        :raises DownloaderError: If ``data``, ``data.video`` or
            ``data.images`` has the wrong shape.
        """
        data = payload.get("data") or {}
        if not isinstance(data, dict):
            raise DownloaderError(f"{ENDPOINT} data is {type(data).__name__}, expected an object")
        video = data.get("video") or {}
        if not isinstance(video, dict):
            raise DownloaderError(f"{ENDPOINT} video is {type(video).__name__}, expected an object")
        raw_images = data.get("images") or []
        if not isinstance(raw_images, list):
            raise DownloaderError(f"{ENDPOINT} images is {type(raw_images).__name__}, expected a list")

        images = [
            img["url"]
            for img in raw_images
            if isinstance(img, dict) and isinstance(img.get("url"), str) and img["url"]
        ]
        title = data.get("title")
        video_url = video.get("noWatermark")
        return cls(
            title=title if isinstance(title, str) else "",
            video_url=video_url if isinstance(video_url, str) else "",
            images=images,
        )


class TiktokCommand(Command):
    """Download a TikTok post and send its media back to the chat."""

    names = ("tiktok", "ttdl", "tiktokdl", "tiktokslide")
    category = "downloader"

    async def handle(self, client: Any, message: Message, responder: Responder) -> None:
        url = message.text.strip()
        if not url:
            await responder.reply("Please send a TikTok link first.")
            return
        if not TIKTOK_RE.search(url):
            await responder.reply("Invalid link or not a TikTok link.")
            return

        try:
            res = await downloader.fetch_api(ENDPOINT, {"url": url})
            if not res.body:
                raise DownloaderError(f"Empty response from {ENDPOINT}", status=res.status)
        except DownloaderError:
            await responder.reply("Feature error or server is down.")
            raise

        try:
            result = TiktokResult.from_payload(downloader.parse_envelope(res, ENDPOINT))
        except DownloaderError:
            await responder.reply("Failed to get data from server.")
            raise

        if result.images:
            for idx, image_url in enumerate(result.images):
                caption = result.title if idx == 0 else ""
                try:
                    await responder.send_image(image_url, SendOptions(caption=caption))
                except AemyError as exc:
                    # keep going; one broken slide should not drop the rest
                    logger.warning("Failed to send slide %d of %s: %s", idx, url, exc)
                    await responder.reply(f"Failed to send image: {exc}")
        elif result.video_url:
            try:
                await responder.send_video(result.video_url, SendOptions(caption=result.title))
            except AemyError:
                await responder.reply("Failed to send video.")
                raise
        else:
            await responder.reply("No media to send.")

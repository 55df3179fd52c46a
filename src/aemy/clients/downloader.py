"""Helpers for the downloader HTTP API (TikTok / Instagram resolvers)"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import aiohttp

from aemy.config import downloader as cfg
from aemy.errors import DownloaderError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApiResponse:
    """Raw HTTP result of a downloader API call."""

    status: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    def json(self) -> Any:
        return json.loads(self.body)


def build_url(endpoint: str, base: str | None = None) -> str:
    return f"{(base or cfg.API_BASE_URL).rstrip('/')}/{endpoint.lstrip('/')}"


async def fetch_api(endpoint: str, params: Mapping[str, str] | None = None) -> ApiResponse:
    """
    ``GET {API_BASE_URL}/{endpoint}?{params}`` and return the raw response.

    :param endpoint: Path after the base URL, e.g. ``"downloader/tiktok"``.
    :param params: Query parameters to encode into the URL.
    :raises DownloaderError: On network failure or timeout.
    """
    url = build_url(endpoint)
    timeout = aiohttp.ClientTimeout(total=cfg.REQUEST_TIMEOUT)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url, params=dict(params or {})) as resp:
                body = await resp.read()
                return ApiResponse(status=resp.status, body=body, headers=dict(resp.headers))
    except (aiohttp.ClientError, TimeoutError) as exc:
        raise DownloaderError(f"Request to {endpoint} failed: {exc}") from exc


def parse_envelope(res: ApiResponse, endpoint: str = "") -> dict:
    """
    Decode the API's ``{status, data}`` envelope from ``res``.

    :raises DownloaderError: On invalid JSON, a non-object payload or an
        envelope whose ``status`` is not 200.
    """
    try:
        payload = res.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DownloaderError(f"Invalid JSON from {endpoint}: {exc}", status=res.status) from exc

    if not isinstance(payload, dict):
        raise DownloaderError(f"Unexpected payload from {endpoint}", status=res.status)

    status = payload.get("status")
    if status != 200:
        raise DownloaderError(f"{endpoint} returned status {status}", status=res.status)
    return payload


async def fetch_buffer(url: str, headers: Mapping[str, str] | None = None) -> bytes:
    """Download ``url`` and return the body bytes."""

    timeout = aiohttp.ClientTimeout(total=cfg.REQUEST_TIMEOUT)
    try:
        async with aiohttp.ClientSession(timeout=timeout, headers=dict(headers or {})) as s, s.get(url) as r:
            r.raise_for_status()
            return await r.read()
    except (aiohttp.ClientError, TimeoutError) as exc:
        raise DownloaderError(f"Failed to fetch {url}: {exc}") from exc


async def get_content_type(url: str) -> str:
    """
    Return the media type (``"video/mp4"``, ``"image/jpeg"``, ...) of ``url``.

    Uses a HEAD probe; some CDNs omit the header for HEAD, in which case the
    headers of a GET are used without reading the body.
    """
    timeout = aiohttp.ClientTimeout(total=cfg.PROBE_TIMEOUT)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.head(url, allow_redirects=True) as resp:
                resp.raise_for_status()
                content_type = resp.headers.get("Content-Type", "")
            if not content_type:
                async with session.get(url) as resp:
                    resp.raise_for_status()
                    content_type = resp.headers.get("Content-Type", "")
    except (aiohttp.ClientError, TimeoutError) as exc:
        raise DownloaderError(f"Content-type probe failed for {url}: {exc}") from exc

    return content_type.split(";", 1)[0].strip().lower()


__all__ = ["ApiResponse", "build_url", "fetch_api", "parse_envelope", "fetch_buffer", "get_content_type"]

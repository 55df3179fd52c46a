import os, sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add src/ to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

# Deterministic configuration for aemy.config (read once at import)
os.environ.setdefault("AEMY_CONFIG", str(Path(__file__).resolve().parent / "no-such-config.toml"))
os.environ.setdefault("PREFIXES", "!,.")
os.environ.setdefault("OWNERS", "6281111111111")
os.environ.setdefault("SELF_MODE", "0")
os.environ.setdefault("READ_STATUS", "0")
os.environ.setdefault("TIMEZONE", "Asia/Jakarta")
os.environ.setdefault("API_BASE_URL", "http://downloader.invalid/api")
os.environ.setdefault("MENU_THUMBNAIL_PATH", str(Path(__file__).resolve().parent / "no-thumbnail.png"))
os.environ.setdefault("MENU_THUMBNAIL_URL", "")

from aemy.errors import DeliveryError, UnsupportedMediaError  # noqa: E402


def _jid(user: str, server: str) -> SimpleNamespace:
    return SimpleNamespace(User=user, Server=server, Device=0)


def build_event(
    body: str | None = "",
    *,
    kind: str = "conversation",
    chat: tuple[str, str] = ("6282222222222", "s.whatsapp.net"),
    sender: tuple[str, str] | None = None,
    from_me: bool = False,
    is_group: bool = False,
    msg_id: str = "MSG1",
    timestamp: int = 1_700_000_000,
    context_info=None,
):
    """Mimic the attribute shape of neonize's ``MessageEv``."""

    if kind == "conversation":
        content = SimpleNamespace(conversation=body)
    elif kind == "extendedTextMessage":
        content = SimpleNamespace(
            extendedTextMessage=SimpleNamespace(text=body, contextInfo=context_info)
        )
    else:
        content = SimpleNamespace(**{kind: SimpleNamespace(caption=body, contextInfo=context_info)})

    sender = sender or chat
    return SimpleNamespace(
        Info=SimpleNamespace(
            MessageSource=SimpleNamespace(
                Chat=_jid(*chat),
                Sender=_jid(*sender),
                IsFromMe=from_me,
                IsGroup=is_group,
            ),
            ID=msg_id,
            Pushname="Tester",
            Timestamp=timestamp,
        ),
        Message=content,
    )


class FakeResponder:
    """Records every outbound action instead of talking to WhatsApp."""

    def __init__(self, *, fail_urls=(), content_types=None, fail_replies=False):
        self.calls: list[tuple] = []
        self.fail_urls = set(fail_urls)
        self.content_types = dict(content_types or {})
        self.fail_replies = fail_replies

    @property
    def replies(self) -> list[str]:
        return [c[1] for c in self.calls if c[0] in ("reply", "reply_with_context")]

    def sent(self, action: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == action]

    async def reply(self, text):
        if self.fail_replies:
            raise DeliveryError("reply failed")
        self.calls.append(("reply", text))

    async def reply_with_context(self, text, context):
        self.calls.append(("reply_with_context", text, context))

    async def react(self, emoji):
        self.calls.append(("react", emoji))

    async def send_image(self, url, options=None):
        if url in self.fail_urls:
            raise DeliveryError(f"upload failed for {url}")
        self.calls.append(("send_image", url, options))

    async def send_video(self, url, options=None):
        if url in self.fail_urls:
            raise DeliveryError(f"upload failed for {url}")
        self.calls.append(("send_video", url, options))

    async def send_media(self, url, caption=""):
        content_type = self.content_types.get(url, "")
        if content_type.startswith("video"):
            await self.send_video(url)
        elif content_type.startswith("image"):
            await self.send_image(url)
        else:
            raise UnsupportedMediaError(content_type)

    async def mark_read(self):
        self.calls.append(("mark_read",))


@pytest.fixture
def make_event():
    return build_event


@pytest.fixture
def responder():
    return FakeResponder()


@pytest.fixture
def responder_factory():
    return FakeResponder

import asyncio

import pytest

pytest.importorskip("neonize.aioze.client")

from neonize.proto.waE2E.WAWebProtobufsE2E_pb2 import Message as WAMessage  # noqa: E402

from aemy.clients import downloader  # noqa: E402
from aemy.clients.responder import NeonizeResponder  # noqa: E402
from aemy.errors import DeliveryError, DownloaderError, UnsupportedMediaError  # noqa: E402
from aemy.messages import ReplyContext, SendOptions, normalize  # noqa: E402


class FakeClient:
    """Records calls in the shape of neonize's async client."""

    def __init__(self, fail=()):
        self.calls = []
        self.fail = set(fail)

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        if name in self.fail:
            raise RuntimeError(f"{name} exploded")

    async def reply_message(self, text, quoted):
        self._record("reply_message", text, quoted)

    async def send_message(self, chat, message):
        self._record("send_message", chat, message)

    async def build_reaction(self, chat, sender, message_id, emoji):
        self._record("build_reaction", chat, sender, message_id, emoji)
        return ("reaction", emoji)

    async def send_image(self, chat, url, caption=None, quoted=None):
        self._record("send_image", chat, url, caption=caption, quoted=quoted)

    async def send_video(self, chat, url, caption=None, quoted=None):
        self._record("send_video", chat, url, caption=caption, quoted=quoted)

    async def mark_read(self, *ids, chat, sender, receipt, timestamp):
        self._record("mark_read", *ids, chat=chat, sender=sender, receipt=receipt, timestamp=timestamp)


@pytest.fixture
def inbound(make_event):
    event = make_event("!menu", sender=("6283333333333", "s.whatsapp.net"))
    event.Message = WAMessage(conversation="!menu")
    return normalize(event)


def _content_types(monkeypatch, mapping):
    async def fake_get_content_type(url):
        value = mapping[url]
        if isinstance(value, Exception):
            raise value
        return value

    monkeypatch.setattr(downloader, "get_content_type", fake_get_content_type)


def test_reply_quotes_the_inbound_event(inbound):
    client = FakeClient()
    asyncio.run(NeonizeResponder(client, inbound).reply("Pong"))

    [(name, args, _)] = client.calls
    assert name == "reply_message"
    assert args == ("Pong", inbound.raw)


def test_send_media_routes_by_content_type(monkeypatch, inbound):
    _content_types(
        monkeypatch,
        {"https://cdn.example/v": "video/mp4", "https://cdn.example/i": "image/webp"},
    )
    client = FakeClient()
    responder = NeonizeResponder(client, inbound)

    asyncio.run(responder.send_media("https://cdn.example/v", caption="clip"))
    asyncio.run(responder.send_media("https://cdn.example/i"))

    assert [c[0] for c in client.calls] == ["send_video", "send_image"]
    video, image = client.calls
    assert video[1] == (inbound.raw.Info.MessageSource.Chat, "https://cdn.example/v")
    assert video[2] == {"caption": "clip", "quoted": inbound.raw}
    assert image[2]["caption"] is None


def test_send_media_rejects_other_types(monkeypatch, inbound):
    _content_types(monkeypatch, {"https://cdn.example/doc": "application/pdf"})
    client = FakeClient()

    with pytest.raises(UnsupportedMediaError) as info:
        asyncio.run(NeonizeResponder(client, inbound).send_media("https://cdn.example/doc"))

    assert info.value.content_type == "application/pdf"
    assert client.calls == []


def test_send_media_probe_failure_propagates(monkeypatch, inbound):
    _content_types(monkeypatch, {"https://cdn.example/x": DownloaderError("HEAD 404")})

    with pytest.raises(DownloaderError):
        asyncio.run(NeonizeResponder(FakeClient(), inbound).send_media("https://cdn.example/x"))


@pytest.mark.parametrize(
    "action, call",
    [
        ("reply_message", lambda r: r.reply("hi")),
        ("send_image", lambda r: r.send_image("https://cdn.example/i", SendOptions(caption="c"))),
        ("send_video", lambda r: r.send_video("https://cdn.example/v")),
        ("send_message", lambda r: r.reply_with_context("hi", ReplyContext(title="t"))),
        ("build_reaction", lambda r: r.react("🔥")),
        ("mark_read", lambda r: r.mark_read()),
    ],
)
def test_client_failures_become_delivery_errors(inbound, action, call):
    client = FakeClient(fail={action})

    with pytest.raises(DeliveryError) as info:
        asyncio.run(call(NeonizeResponder(client, inbound)))

    assert isinstance(info.value.__cause__, RuntimeError)
    assert f"{action} exploded" in str(info.value)


def test_react_sends_built_reaction(inbound):
    client = FakeClient()
    asyncio.run(NeonizeResponder(client, inbound).react("👍"))

    assert [c[0] for c in client.calls] == ["build_reaction", "send_message"]
    assert client.calls[0][1][2:] == ("MSG1", "👍")
    assert client.calls[1][1][1] == ("reaction", "👍")


def test_mark_read_addresses_the_inbound_message(inbound):
    client = FakeClient()
    asyncio.run(NeonizeResponder(client, inbound).mark_read())

    [(name, args, kwargs)] = client.calls
    assert args == ("MSG1",)
    assert kwargs["timestamp"] == 1_700_000_000
    assert kwargs["sender"] is inbound.raw.Info.MessageSource.Sender


def test_context_info_quotes_and_carries_ad_card(inbound):
    info = NeonizeResponder(FakeClient(), inbound)._context_info(
        ReplyContext(
            title="Hello, Good Morning",
            body="Hello Everyone",
            thumbnail=b"\x89PNG",
            source_url="https://github.com/example/aemy",
        )
    )

    assert info.stanzaID == "MSG1"
    assert info.participant == "6283333333333@s.whatsapp.net"
    assert info.quotedMessage.conversation == "!menu"
    ad = info.externalAdReply
    assert ad.title == "Hello, Good Morning"
    assert ad.body == "Hello Everyone"
    assert ad.thumbnail == b"\x89PNG"
    assert ad.sourceURL == "https://github.com/example/aemy"
    assert ad.renderLargerThumbnail is True


def test_context_info_without_quote_or_card(inbound):
    info = NeonizeResponder(FakeClient(), inbound)._context_info(ReplyContext(quote=False))

    assert info.stanzaID == ""
    assert not info.HasField("quotedMessage")
    assert not info.HasField("externalAdReply")


def test_reply_with_context_sends_extended_text(inbound):
    client = FakeClient()
    asyncio.run(
        NeonizeResponder(client, inbound).reply_with_context("menu text", ReplyContext(title="Hi"))
    )

    [(name, args, _)] = client.calls
    assert name == "send_message"
    chat, message = args
    assert chat is inbound.raw.Info.MessageSource.Chat
    assert message.extendedTextMessage.text == "menu text"
    assert message.extendedTextMessage.contextInfo.externalAdReply.title == "Hi"
    assert message.extendedTextMessage.contextInfo.stanzaID == "MSG1"

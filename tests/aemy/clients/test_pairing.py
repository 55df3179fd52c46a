from aemy.clients.pairing import remove_qr, write_qr

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def test_write_qr_renders_png(tmp_path):
    target = write_qr("2@abcdef,ghijk,lmnop", tmp_path / "qrcode.png")

    assert target.read_bytes().startswith(PNG_SIGNATURE)


def test_write_qr_accepts_bytes(tmp_path):
    target = write_qr(b"2@abcdef", tmp_path / "qr.png")
    assert target.exists()


def test_remove_qr(tmp_path):
    target = tmp_path / "qrcode.png"
    target.write_bytes(b"png")

    assert remove_qr(target) is True
    assert not target.exists()
    assert remove_qr(target) is False

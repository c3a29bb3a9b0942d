"""Tests for item-to-bytes encoders."""
import pytest

from murmurbloom import UnencodableItemError, default_encoder, encode_item, text_encoder


class TestDefaultEncoder:
    def test_bytes_like_pass_through(self):
        assert default_encoder(b"abc") == b"abc"
        assert default_encoder(bytearray(b"abc")) == b"abc"
        assert default_encoder(memoryview(b"abc")) == b"abc"

    def test_str_is_utf8(self):
        assert default_encoder("héllo") == "héllo".encode("utf-8")

    def test_int_is_decimal_text(self):
        assert default_encoder(42) == b"42"
        assert default_encoder(-7) == b"-7"
        assert default_encoder(5) == default_encoder("5")

    @pytest.mark.parametrize("item", [True, 1.5, None, object(), (1, 2), ["a"]])
    def test_rejects_other_types(self, item):
        with pytest.raises(UnencodableItemError):
            default_encoder(item)


class TestTextEncoder:
    def test_renders_str(self):
        enc = text_encoder()
        assert enc(3.5) == b"3.5"
        assert enc((1, 2)) == b"(1, 2)"

    def test_codec(self):
        assert text_encoder("utf-16-le")("a") == b"a\x00"

    def test_bad_codec_raises(self):
        with pytest.raises(LookupError):
            text_encoder("not-a-codec")("a")


class TestEncodeItem:
    def test_normalises_bytearray(self):
        out = encode_item("x", lambda item: bytearray(b"x"))
        assert out == b"x"
        assert isinstance(out, bytes)

    def test_rejects_non_bytes(self):
        with pytest.raises(UnencodableItemError):
            encode_item("x", lambda item: item)

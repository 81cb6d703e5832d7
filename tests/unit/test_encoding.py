"""Unit tests for byte input decoding."""

import pytest

from html2mark import html_to_markdown
from html2mark.utils.encoding import decode_html_bytes


@pytest.mark.unit
class TestDecodeHtmlBytes:
    """Test encoding detection for bytes input."""

    def test_empty(self):
        assert decode_html_bytes(b"") == ""

    def test_utf8(self):
        assert decode_html_bytes("<p>Далеко</p>".encode("utf-8")) == "<p>Далеко</p>"

    def test_utf8_with_bom(self):
        assert decode_html_bytes(b"\xef\xbb\xbf<p>Text</p>") == "<p>Text</p>"

    def test_meta_charset_is_honored(self):
        data = '<meta charset="windows-1251"><p>Далеко</p>'.encode("windows-1251")
        assert "Далеко" in decode_html_bytes(data, known_encodings=())

    def test_bytes_through_public_api(self):
        assert html_to_markdown("<h1>Далеко</h1>".encode("utf-8")) == "\n# Далеко\n"

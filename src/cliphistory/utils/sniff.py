"""Content type detection for raw clipboard responses.

A reduced form of the WHATWG MIME sniffing algorithm: only the first 512
bytes are inspected, known signatures are matched first and anything that
does not look binary is reported as UTF-8 text.
"""

from typing import List, Tuple

SNIFF_LEN = 512

DEFAULT_TEXT = "text/plain; charset=utf-8"
DEFAULT_BINARY = "application/octet-stream"

_WHITESPACE = b"\t\n\x0c\r "

_HTML_TAGS: List[bytes] = [
    b"<!DOCTYPE HTML",
    b"<HTML",
    b"<HEAD",
    b"<SCRIPT",
    b"<IFRAME",
    b"<H1",
    b"<DIV",
    b"<FONT",
    b"<TABLE",
    b"<A",
    b"<STYLE",
    b"<TITLE",
    b"<B",
    b"<BODY",
    b"<BR",
    b"<P",
    b"<!--",
]

_EXACT_SIGNATURES: List[Tuple[bytes, str]] = [
    (b"%PDF-", "application/pdf"),
    (b"%!PS-Adobe-", "application/postscript"),
    (b"\xfe\xff", "text/plain; charset=utf-16be"),
    (b"\xff\xfe", "text/plain; charset=utf-16le"),
    (b"\xef\xbb\xbf", DEFAULT_TEXT),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"BM", "image/bmp"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b\x08", "application/x-gzip"),
    (b"\x00\x00\x01\x00", "image/x-icon"),
]

# Bytes that never appear in text content.
_BINARY_BYTES = frozenset(
    list(range(0x00, 0x09)) + [0x0B] + list(range(0x0E, 0x1B)) + list(range(0x1C, 0x20))
)


def _match_html(data: bytes) -> bool:
    stripped = data.lstrip(_WHITESPACE)
    upper = stripped.upper()
    for tag in _HTML_TAGS:
        if not upper.startswith(tag):
            continue
        if len(stripped) == len(tag):
            continue
        # the tag must be terminated by a space or '>'
        if stripped[len(tag)] in b" >":
            return True
    return False


def detect_content_type(data: bytes) -> str:
    """Return a MIME type for ``data``. Always returns a valid type."""
    data = data[:SNIFF_LEN]

    if _match_html(data):
        return "text/html; charset=utf-8"
    if data.lstrip(_WHITESPACE).startswith(b"<?xml"):
        return "text/xml; charset=utf-8"

    for signature, mime in _EXACT_SIGNATURES:
        if data.startswith(signature):
            return mime

    if data[:4] == b"RIFF" and data[8:14] == b"WEBPVP":
        return "image/webp"

    if any(byte in _BINARY_BYTES for byte in data):
        return DEFAULT_BINARY
    return DEFAULT_TEXT

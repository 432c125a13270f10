"""UTF-8 text helpers built on Python strings and code points."""

from __future__ import annotations

from collections.abc import Iterable

MAX_CODE_POINT = 0x10FFFF
SURROGATE_FIRST = 0xD800
SURROGATE_LAST = 0xDFFF

# Shown in place of a code point that cannot be encoded.
SAD_FACE = 0x2639


def validate_code_point(c: int) -> bool:
    """Return True if c is a Unicode scalar value that UTF-8 can encode."""
    return 0 <= c <= MAX_CODE_POINT and not SURROGATE_FIRST <= c <= SURROGATE_LAST


def code_point_to_text(c: int) -> str:
    """Return the one-character text for c, or a sad face if c is invalid."""
    if not validate_code_point(c):
        c = SAD_FACE
    return chr(c)


def text_to_bytes(text: str) -> bytes:
    """Return the UTF-8 bytes of text, without a terminator."""
    return text.encode("utf-8")


def bytes_to_text(data: bytes | bytearray | Iterable[int]) -> str:
    """Decode UTF-8 bytes into text; malformed sequences become U+FFFD."""
    raw = bytes(data)
    if not raw:
        return ""
    return raw.decode("utf-8", errors="replace")


def text_to_code_points(text: str) -> list[int]:
    """Return the code points of text in order."""
    return [ord(ch) for ch in text]


def code_points_to_text(points: Iterable[int]) -> str:
    """Build text from code points; invalid ones are shown as a sad face."""
    return "".join(code_point_to_text(c) for c in points)


def length_in_bytes(text: str) -> int:
    """Return the length of text in UTF-8 bytes."""
    return len(text.encode("utf-8"))
"""Byte/text alphabets for cookie tokens.

Base58 avoids the visually ambiguous characters ``0``, ``O``, ``I`` and
``l`` and needs no escaping inside a cookie header. Base64 is the standard
alphabet with padding, emitted on a single line.
"""

import base64
import binascii
import re

from glogin.constants import BASE58_CHARS, Alphabet
from glogin.exceptions import DecodingError

_BASE = len(BASE58_CHARS)
_BASE58_INDEX = {char: index for index, char in enumerate(BASE58_CHARS)}

_PATTERNS: dict[Alphabet, re.Pattern[str]] = {
    Alphabet.BASE58: re.compile(f"^[{BASE58_CHARS}]*$"),
    Alphabet.BASE64: re.compile(r"^[A-Za-z0-9+/=]*$"),
}


def b58encode(raw: bytes) -> str:
    """Encode bytes as Base58, one leading ``1`` per leading zero byte."""
    num = int.from_bytes(raw, "big")
    encoded = ""
    while num > 0:
        num, remainder = divmod(num, _BASE)
        encoded = BASE58_CHARS[remainder] + encoded
    zeros = len(raw) - len(raw.lstrip(b"\0"))
    return BASE58_CHARS[0] * zeros + encoded


def b58decode(text: str) -> bytes:
    """Decode a Base58 string produced by :func:`b58encode`."""
    num = 0
    for char in text:
        try:
            num = num * _BASE + _BASE58_INDEX[char]
        except KeyError:
            raise DecodingError(f"Character {char!r} is not valid Base58") from None
    zeros = len(text) - len(text.lstrip(BASE58_CHARS[0]))
    body = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    return b"\0" * zeros + body


def matches(text: str, alphabet: Alphabet) -> bool:
    """Return True if *text* only uses characters of *alphabet*."""
    return _PATTERNS[alphabet].match(text) is not None


def encode(raw: bytes, alphabet: Alphabet) -> str:
    """Encode raw bytes into a single-line string in *alphabet*."""
    if alphabet is Alphabet.BASE58:
        return b58encode(raw)
    return base64.b64encode(raw).decode("ascii")


def decode(text: str, alphabet: Alphabet) -> bytes:
    """Validate *text* against *alphabet* and decode it to raw bytes.

    Raises:
        DecodingError: If *text* has characters outside the alphabet or is
            not well-formed in it.
    """
    if not matches(text, alphabet):
        raise DecodingError(f"{text!r} is not a valid {alphabet} string")
    if alphabet is Alphabet.BASE58:
        return b58decode(text)
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as exc:
        raise DecodingError(f"{text!r} is not a valid {alphabet} string: {exc}") from exc

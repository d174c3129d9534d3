"""String literal decoding.

Go string literal rules:
- interpreted: "..." with backslash escapes, no raw newline
- raw: `...` verbatim, carriage returns dropped

\\x and octal escapes denote raw bytes, so decoding works on bytes
and the result is decoded as UTF-8 with surrogateescape: byte
sequences that are not UTF-8 survive as lone surrogates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gopdeps.domain.exceptions.fault import LiteralDecodeFault
from gopdeps.domain.model.token import TokenKind

if TYPE_CHECKING:
    from gopdeps.domain.model.token import Token

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OCT_DIGITS = frozenset("01234567")

# escape letter → number of hex digits
_HEX_ESCAPES = {"x": 2, "u": 4, "U": 8}

_MAX_RUNE = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def decode_string_literal(token: Token) -> str:
    """Decode a string literal token to its value.

    The caller guarantees a well-formed string literal (the header
    parser validates every literal it emits). Anything else is a
    broken invariant, not a user error.

    Args:
        token: STRING token with raw quoted text

    Returns:
        Decoded string value

    Raises:
        LiteralDecodeFault: If token is not a STRING or cannot be unquoted
    """
    if token.kind is not TokenKind.STRING:
        raise LiteralDecodeFault(token, "not a string literal")

    try:
        return unquote(token.text)
    except ValueError as e:
        raise LiteralDecodeFault(token, str(e)) from e


def unquote(text: str) -> str:
    """Interpret a quoted Go string literal.

    Args:
        text: Literal including its quotes

    Returns:
        Decoded value

    Raises:
        ValueError: If text is not a valid string literal
    """
    if len(text) < 2:
        raise ValueError("literal too short")

    quote = text[0]
    if text[-1] != quote:
        raise ValueError("mismatched quotes")

    body = text[1:-1]

    if quote == "`":
        if "`" in body:
            raise ValueError("unexpected backquote in raw string")
        return body.replace("\r", "")

    if quote != '"':
        raise ValueError(f"not a string literal: starts with {quote!r}")

    if "\n" in body:
        raise ValueError("newline in string")

    # fast path: nothing to interpret
    if "\\" not in body and '"' not in body:
        return body

    return _unescape(body)


def _unescape(body: str) -> str:
    """Interpret escapes of an interpreted string body (quotes stripped)."""
    out = bytearray()
    i = 0
    n = len(body)

    while i < n:
        ch = body[i]

        if ch == '"':
            raise ValueError("unescaped '\"' in string")

        if ch != "\\":
            out += ch.encode("utf-8", "surrogateescape")
            i += 1
            continue

        if i + 1 >= n:
            raise ValueError("escape sequence not terminated")

        esc = body[i + 1]
        i += 2

        if esc in _SIMPLE_ESCAPES:
            out += _SIMPLE_ESCAPES[esc].encode("utf-8")
        elif esc in _HEX_ESCAPES:
            width = _HEX_ESCAPES[esc]
            digits = body[i : i + width]
            if len(digits) != width or not set(digits) <= _HEX_DIGITS:
                raise ValueError(f"invalid \\{esc} escape: expected {width} hex digits")
            value = int(digits, 16)
            i += width
            if esc == "x":
                out.append(value)
            else:
                if value > _MAX_RUNE or value in _SURROGATES:
                    raise ValueError("escape sequence is invalid Unicode code point")
                out += chr(value).encode("utf-8")
        elif esc in _OCT_DIGITS:
            digits = body[i - 1 : i + 2]
            if len(digits) != 3 or not set(digits) <= _OCT_DIGITS:
                raise ValueError("invalid octal escape: expected 3 octal digits")
            value = int(digits, 8)
            if value > 0xFF:
                raise ValueError(f"octal escape value {value} > 255")
            out.append(value)
            i += 2
        else:
            raise ValueError(f"unknown escape sequence \\{esc}")

    return out.decode("utf-8", "surrogateescape")

"""
Quoting rules for tag values.

Values are written between double quotes with backslash escapes, the
same escape set double-quoted string literals use: the single-letter
control escapes, ``\\"`` and ``\\\\``, and ``\\xHH``/``\\uHHHH``/
``\\UHHHHHHHH``/octal code points. Commas are never escaped.
"""

import string
from typing import Dict

from .config import GrammarConfig
from .errors import TagValueSyntaxError

QUOTE = GrammarConfig.QUOTE
ESCAPE = GrammarConfig.ESCAPE

_UNESCAPES: Dict[str, str] = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    ESCAPE: ESCAPE,
    QUOTE: QUOTE,
}

_ESCAPES: Dict[str, str] = {v: ESCAPE + k for k, v in _UNESCAPES.items()}

# escape letter -> number of hex digits that follow it
_HEX_WIDTHS = {"x": 2, "u": 4, "U": 8}
_OCTAL_DIGITS = "01234567"

# Byte escapes above ASCII decode to lone low surrogates, as with the
# surrogateescape error handler, so they are written back as \xHH.
_BYTE_MARKER_BASE = 0xDC00


def _decode_byte(byte: int) -> str:
    if byte < 0x80:
        return chr(byte)
    return chr(_BYTE_MARKER_BASE + byte)


def unquote_value(body: str) -> str:
    """
    Decode the text found between the quotes of a tag value.

    Args:
        body: The raw value body, without the surrounding quotes

    Returns:
        The decoded value

    Raises:
        TagValueSyntaxError: On a bare quote or newline, a dangling
            backslash, or an unknown or malformed escape sequence.
    """
    if ESCAPE not in body and QUOTE not in body and "\n" not in body:
        return body

    decoded = []
    i = 0
    while i < len(body):
        char = body[i]
        if char == QUOTE or char == "\n":
            raise TagValueSyntaxError(
                f"unexpected {char!r} in quoted value", body, i
            )
        if char != ESCAPE:
            decoded.append(char)
            i += 1
            continue

        if i + 1 >= len(body):
            raise TagValueSyntaxError("unterminated escape sequence", body, i)

        letter = body[i + 1]
        if letter in _UNESCAPES:
            decoded.append(_UNESCAPES[letter])
            i += 2
        elif letter in _HEX_WIDTHS:
            width = _HEX_WIDTHS[letter]
            digits = body[i + 2 : i + 2 + width]
            if len(digits) != width or not all(d in string.hexdigits for d in digits):
                raise TagValueSyntaxError(
                    f"invalid \\{letter} escape sequence", body, i
                )
            code_point = int(digits, 16)
            if code_point > 0x10FFFF or 0xD800 <= code_point < 0xE000:
                raise TagValueSyntaxError(
                    f"invalid code point {digits} in escape sequence", body, i
                )
            if letter == "x":
                decoded.append(_decode_byte(code_point))
            else:
                decoded.append(chr(code_point))
            i += 2 + width
        elif letter in _OCTAL_DIGITS:
            digits = body[i + 1 : i + 4]
            if len(digits) != 3 or not all(d in _OCTAL_DIGITS for d in digits):
                raise TagValueSyntaxError("invalid octal escape sequence", body, i)
            code_point = int(digits, 8)
            if code_point > 0xFF:
                raise TagValueSyntaxError("octal escape value > 255", body, i)
            decoded.append(_decode_byte(code_point))
            i += 4
        else:
            raise TagValueSyntaxError(f"unknown escape sequence \\{letter}", body, i)

    return "".join(decoded)


def quote_value(value: str) -> str:
    """Wrap a value in quotes, escaping what the parser would not read back verbatim."""
    parts = [QUOTE]
    for char in value:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        else:
            code_point = ord(char)
            if _BYTE_MARKER_BASE + 0x80 <= code_point <= _BYTE_MARKER_BASE + 0xFF:
                parts.append(f"\\x{code_point - _BYTE_MARKER_BASE:02x}")
            elif code_point < 0x80:
                parts.append(f"\\x{code_point:02x}")
            elif code_point < 0x10000:
                parts.append(f"\\u{code_point:04x}")
            else:
                parts.append(f"\\U{code_point:08x}")
    parts.append(QUOTE)
    return "".join(parts)

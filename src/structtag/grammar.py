from typing import List, Optional, Tuple

from loguru import logger

from .config import GrammarConfig, get_option_separator
from .errors import (
    TagKeySyntaxError,
    TagSyntaxError,
    TagValueSyntaxError,
)
from .quoting import quote_value, unquote_value
from .schema import Tag
from .tags import Tags

__all__ = ["parse", "parse_tag_line", "split_value", "quote_value", "unquote_value"]

KEY_VALUE_SEPARATOR = GrammarConfig.KEY_VALUE_SEPARATOR
QUOTE = GrammarConfig.QUOTE
ESCAPE = GrammarConfig.ESCAPE
TAG_SEPARATOR = GrammarConfig.TAG_SEPARATOR


def _is_key_char(char: str) -> bool:
    # Spaces, quotes and control characters end a key.
    return char > " " and char not in (KEY_VALUE_SEPARATOR, QUOTE, "\x7f")


def split_value(value: str) -> Tuple[str, List[str]]:
    """Split a decoded value into its name and options."""
    name, *options = value.split(get_option_separator())
    return name, options


def parse(raw: str) -> Tags:
    r"""
    Parse a tag string into a Tags collection.

    Grammar:
    <TagString> ::= (<Space>* <Entry>)* <Space>*
    <Entry>     ::= <Key> ":" <Quote> <Body> <Quote>
    <Key>       ::= any chars above space except ":", <Quote> and DEL
    <Body>      ::= any chars except newline; <Quote> and backslash are backslash-escaped

    Every comma in the decoded body separates two tokens: the first one
    is the tag name, the rest are its options.

    Args:
        raw: The tag string, e.g. ``json:"foo,omitempty" xml:"foo"``

    Returns:
        The parsed collection; empty for an empty or blank string.

    Raises:
        TagKeySyntaxError: A key is missing or ends on something else than ":".
        TagValueSyntaxError: A value is not quoted, not terminated or badly escaped.
        TagSyntaxError: The input ends right after a key or its ":".
    """
    tags = []
    i = 0
    end = len(raw)

    while True:
        while i < end and raw[i] == TAG_SEPARATOR:
            i += 1
        if i >= end:
            break

        # Scan to the key/value separator
        key_start = i
        while i < end and _is_key_char(raw[i]):
            i += 1
        if i == key_start:
            raise TagKeySyntaxError("missing tag key", raw, i)
        if i >= end:
            raise TagSyntaxError("unexpected end of input after key", raw, i)
        if raw[i] != KEY_VALUE_SEPARATOR:
            raise TagKeySyntaxError(f"unexpected {raw[i]!r} in tag key", raw, i)
        key = raw[key_start:i]

        i += 1
        if i >= end:
            raise TagSyntaxError(f"unexpected end of input after {key}:", raw, i)
        if raw[i] != QUOTE:
            raise TagValueSyntaxError(f"value of {key} must be quoted", raw, i)

        # Scan the quoted value, stepping over escaped characters
        i += 1
        body_start = i
        while i < end and raw[i] != QUOTE:
            if raw[i] == ESCAPE:
                i += 1
            i += 1
        if i >= end:
            raise TagValueSyntaxError(
                f"unterminated value for {key}", raw, body_start - 1
            )

        try:
            value = unquote_value(raw[body_start:i])
        except TagValueSyntaxError as e:
            raise TagValueSyntaxError(
                e.reason, raw, body_start + (e.position or 0)
            ) from e
        i += 1

        name, options = split_value(value)
        tags.append(Tag(key=key, name=name, options=options))

    return Tags(tags)


def parse_tag_line(raw: str) -> Tuple[Optional[Tags], Optional[str]]:
    """
    Parse a tag string without raising.

    Returns:
        Tuple of (tags, error). On success error is None; on failure tags
        is None and error is the error code (SYNTAX, KEY_SYNTAX or
        VALUE_SYNTAX).
    """
    try:
        return parse(raw), None
    except TagSyntaxError as e:
        logger.debug(f"Failed to parse tag {raw!r}: {e.code.value}: {e}")
        return None, e.code.value

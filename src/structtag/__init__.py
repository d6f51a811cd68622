"""
Struct tag parsing and formatting.

This module parses annotation strings such as ``json:"foo,omitempty"``
into an ordered, editable collection of tags and writes them back in the
same textual form.
"""

from loguru import logger

from .errors import (
    ErrorCode,
    KeyNotSetError,
    StructTagError,
    TagKeySyntaxError,
    TagNotExistError,
    TagSyntaxError,
    TagValueSyntaxError,
)
from .grammar import parse, parse_tag_line
from .schema import Tag
from .tags import Tags

logger.disable("structtag")

__all__ = [
    "parse",
    "parse_tag_line",
    "Tag",
    "Tags",
    "ErrorCode",
    "StructTagError",
    "TagSyntaxError",
    "TagKeySyntaxError",
    "TagValueSyntaxError",
    "TagNotExistError",
    "KeyNotSetError",
]

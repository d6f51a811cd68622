from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Enumeration of the failure kinds reported by structtag."""

    # Parse failures
    SYNTAX = "SYNTAX"
    KEY_SYNTAX = "KEY_SYNTAX"
    VALUE_SYNTAX = "VALUE_SYNTAX"

    # Collection failures
    TAG_NOT_EXIST = "TAG_NOT_EXIST"
    KEY_NOT_SET = "KEY_NOT_SET"


class StructTagError(Exception):
    """Base exception for structtag errors"""

    code: ErrorCode

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TagSyntaxError(StructTagError):
    """Malformed tag string"""

    code = ErrorCode.SYNTAX

    def __init__(self, message: str, raw: str = "", position: Optional[int] = None):
        self.reason = message
        self.raw = raw
        self.position = position
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)


class TagKeySyntaxError(TagSyntaxError):
    """Missing or malformed key before the separator"""

    code = ErrorCode.KEY_SYNTAX


class TagValueSyntaxError(TagSyntaxError):
    """Missing opening quote, unterminated value or bad escape"""

    code = ErrorCode.VALUE_SYNTAX


class TagNotExistError(StructTagError):
    """No tag is stored under the requested key"""

    code = ErrorCode.TAG_NOT_EXIST

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"tag does not exist: {key!r}")


class KeyNotSetError(StructTagError):
    """A tag without a key was given to a mutator"""

    code = ErrorCode.KEY_NOT_SET

    def __init__(self):
        super().__init__("tag key is not set")

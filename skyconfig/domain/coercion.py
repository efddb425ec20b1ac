"""Scalar coercion helpers for environment-sourced configuration values.

Environment values are always text. These helpers centralize the boolean and
integer grammars so every section reader accepts exactly the same spellings.
"""

from __future__ import annotations

import re
from typing import Final

from .errors import BooleanParseError, IntegerParseError

_DOMAIN_EXTENDED_TRUE_LITERALS: Final[frozenset[str]] = frozenset({"Yes", "yes", "YES", "y"})
_DOMAIN_EXTENDED_FALSE_LITERALS: Final[frozenset[str]] = frozenset({"No", "no", "NO", "n"})

# Standard boolean spellings, matched case-sensitively per literal.
_DOMAIN_STRICT_TRUE_LITERALS: Final[frozenset[str]] = frozenset({"1", "t", "T", "true", "TRUE", "True"})
_DOMAIN_STRICT_FALSE_LITERALS: Final[frozenset[str]] = frozenset({"0", "f", "F", "false", "FALSE", "False"})

_DOMAIN_INT64_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_DOMAIN_INT64_MIN: Final[int] = -(2**63)
_DOMAIN_INT64_MAX: Final[int] = 2**63 - 1


def domain_parse_bool(value: str) -> bool:
    """Parse one boolean value using the extended vocabulary.

    `Yes`, `yes`, `YES` and `y` map to True; `No`, `no`, `NO` and `n` map to
    False. Anything else is delegated to the strict standard grammar
    (`1`, `t`, `T`, `true`, `TRUE`, `True` and their false counterparts).

    Args:
        value: Raw boolean text.

    Returns:
        bool: Parsed boolean value.

    Raises:
        BooleanParseError: Raised when value matches no supported literal,
            including the empty string.
    """

    if value in _DOMAIN_EXTENDED_TRUE_LITERALS:
        return True
    if value in _DOMAIN_EXTENDED_FALSE_LITERALS:
        return False
    return _domain_parse_strict_bool(value)


def _domain_parse_strict_bool(value: str) -> bool:
    if value in _DOMAIN_STRICT_TRUE_LITERALS:
        return True
    if value in _DOMAIN_STRICT_FALSE_LITERALS:
        return False
    raise BooleanParseError(f"invalid boolean value: {value!r}", value=value)


def domain_parse_int64(value: str) -> int:
    """Parse one base-10 signed 64-bit integer.

    Whitespace, underscores and other forms accepted by `int()` are rejected so
    the grammar stays strict.

    Args:
        value: Raw integer text.

    Returns:
        int: Parsed integer value.

    Raises:
        IntegerParseError: Raised when value is blank, malformed, or outside the
            signed 64-bit range.
    """

    if not _DOMAIN_INT64_PATTERN.fullmatch(value):
        raise IntegerParseError(f"invalid integer value: {value!r}", value=value)

    parsed_value = int(value)
    if parsed_value < _DOMAIN_INT64_MIN or parsed_value > _DOMAIN_INT64_MAX:
        raise IntegerParseError(f"integer value out of range: {value!r}", value=value)
    return parsed_value


__all__ = ["domain_parse_bool", "domain_parse_int64"]

# =============================================================================
# core/parsing.py - Typed Form Value Parsing
# =============================================================================
# Form submissions arrive as strings. These functions turn them into the
# types the product schema stores, and report *why* a value was rejected
# through the ParseFailure enum so callers can pick their own wording.
# =============================================================================

from __future__ import annotations

import math
from enum import Enum
from typing import Any


class ParseFailure(str, Enum):
    """Reasons a raw form value could not be parsed."""
    MISSING = "missing"
    NOT_A_NUMBER = "not_a_number"
    NOT_AN_INTEGER = "not_an_integer"
    NEGATIVE = "negative"
    UNRECOGNIZED_FLAG = "unrecognized_flag"


class ParseError(ValueError):
    """Raised by the parse_* functions. `reason` says what went wrong."""

    def __init__(self, reason: ParseFailure, value: Any):
        super().__init__(f"Cannot parse {value!r}: {reason.value}")
        self.reason = reason
        self.value = value


TRUE_FLAGS = frozenset({"on", "true", "1", "yes"})
FALSE_FLAGS = frozenset({"off", "false", "0", "no", ""})


def parse_price(raw: Any) -> int:
    """
    Parse a price in the smallest currency unit.

    Accepts ints and numeric strings. Strings that spell a whole number in
    another notation ("1999.0", "1e3") are accepted too.

    Raises:
        ParseError: MISSING, NOT_A_NUMBER, NOT_AN_INTEGER or NEGATIVE
    """
    if raw is None:
        raise ParseError(ParseFailure.MISSING, raw)

    if isinstance(raw, bool):
        raise ParseError(ParseFailure.NOT_A_NUMBER, raw)

    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        value = _whole_number(raw, raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise ParseError(ParseFailure.MISSING, raw)
        try:
            value = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                raise ParseError(ParseFailure.NOT_A_NUMBER, raw)
            value = _whole_number(number, raw)
    else:
        raise ParseError(ParseFailure.NOT_A_NUMBER, raw)

    if value < 0:
        raise ParseError(ParseFailure.NEGATIVE, raw)
    return value


def _whole_number(number: float, raw: Any) -> int:
    if not math.isfinite(number):
        raise ParseError(ParseFailure.NOT_A_NUMBER, raw)
    if not number.is_integer():
        raise ParseError(ParseFailure.NOT_AN_INTEGER, raw)
    return int(number)


def parse_flag(raw: Any) -> bool:
    """
    Parse a checkbox-style flag.

    An unchecked HTML checkbox is simply absent from the form, so None maps
    to False. Checked boxes send "on" unless the form sets a value.

    Raises:
        ParseError: UNRECOGNIZED_FLAG for anything that isn't a known token
    """
    if raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        token = raw.strip().lower()
        if token in TRUE_FLAGS:
            return True
        if token in FALSE_FLAGS:
            return False
    raise ParseError(ParseFailure.UNRECOGNIZED_FLAG, raw)


def count_words(text: str) -> int:
    """Number of whitespace-separated words in `text`."""
    return len(text.split())

"""Per-value type classification.

A value is classified by walking an ordered list of ``(label, predicate)``
pairs and stopping at the first predicate that accepts it. The order matters
because the categories overlap: ``"1"`` is both boolean-like and integer-like
and resolves to ``boolean``. All checks are format-only; ``2024-13-45`` is a
``date``.
"""

from __future__ import annotations

import re
from collections.abc import Callable

BOOLEAN_LITERALS = frozenset({"true", "false", "1", "0", "yes", "no", "oui", "non"})

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?|\.[0-9]+(?:[eE][+-]?[0-9]+)?"
    r"|inf|infinity|nan)",
    re.IGNORECASE,
)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}|\d{2}/\d{2}/\d{4}")
DATETIME_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(:\d{2})?(\.\d+)?(Z|[+-]\d{2}:?\d{2})?"
)
TIME_PATTERN = re.compile(r"\d{2}:\d{2}(:\d{2})?(\.\d+)?")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
URL_PATTERN = re.compile(r"(https?://)?[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}(/\S*)?")
IPV4_PATTERN = re.compile(r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}")
IPV6_PATTERN = re.compile(r"([0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}")

# Label for an all-empty sample; never produced by classify_value.
NULL_TYPE = "null"
FALLBACK_TYPE = "string"


def is_boolean(value: str) -> bool:
    return value.lower() in BOOLEAN_LITERALS


def is_integer(value: str) -> bool:
    """True for a signed decimal integer that fits in 64 bits."""
    if INTEGER_PATTERN.fullmatch(value) is None:
        return False
    return INT64_MIN <= int(value) <= INT64_MAX


def is_float(value: str) -> bool:
    """True for a float literal, accepting a decimal comma."""
    return parse_float(value) is not None


def is_date(value: str) -> bool:
    return DATE_PATTERN.fullmatch(value) is not None


def is_datetime(value: str) -> bool:
    return DATETIME_PATTERN.fullmatch(value) is not None


def is_time(value: str) -> bool:
    return TIME_PATTERN.fullmatch(value) is not None


def is_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_url(value: str) -> bool:
    return URL_PATTERN.fullmatch(value) is not None


def is_ip(value: str) -> bool:
    """True for a dotted-quad IPv4 or a full 8-group IPv6 address."""
    return (
        IPV4_PATTERN.fullmatch(value) is not None
        or IPV6_PATTERN.fullmatch(value) is not None
    )


def parse_float(value: str) -> float | None:
    """Parse a float literal after replacing ``,`` with ``.``.

    Returns None when the value is not a float literal.
    """
    normalized = value.replace(",", ".")
    if FLOAT_PATTERN.fullmatch(normalized) is None:
        return None
    return float(normalized)


# Evaluated in order; the first match wins.
TYPE_PREDICATES: tuple[tuple[str, Callable[[str], bool]], ...] = (
    ("boolean", is_boolean),
    ("integer", is_integer),
    ("float", is_float),
    ("date", is_date),
    ("datetime", is_datetime),
    ("time", is_time),
    ("email", is_email),
    ("url", is_url),
    ("ip", is_ip),
)

TYPE_LABELS: tuple[str, ...] = (*(label for label, _ in TYPE_PREDICATES), FALLBACK_TYPE)

# Precedence among labels with equal counts. float holds every integer value;
# boolean and the string fallback are the weakest signals and lose every tie.
TIE_BREAK_ORDER: tuple[str, ...] = (
    "float",
    "integer",
    "date",
    "datetime",
    "time",
    "email",
    "url",
    "ip",
    "boolean",
    "string",
)


def classify_value(value: str) -> str:
    """Return the type label of a trimmed, non-empty value.

    Args:
    ----
        value: Cell value with surrounding whitespace removed

    Returns:
    -------
        One of TYPE_LABELS, ``"string"`` when no predicate matches

    """
    for label, predicate in TYPE_PREDICATES:
        if predicate(value):
            return label
    return FALLBACK_TYPE


__all__ = [
    "FALLBACK_TYPE",
    "NULL_TYPE",
    "TIE_BREAK_ORDER",
    "TYPE_LABELS",
    "TYPE_PREDICATES",
    "classify_value",
    "is_boolean",
    "is_date",
    "is_datetime",
    "is_email",
    "is_float",
    "is_integer",
    "is_ip",
    "is_time",
    "is_url",
    "parse_float",
]

"""String predicates behind the leaf validators.

All predicates match the *whole* string: no surrounding whitespace, no
partial parses.
"""

from __future__ import annotations

import re
from re import Pattern as RegexPattern

BLANK_CHARS = frozenset(" \t\n\r")

INT_RE = re.compile(r"-?[0-9]+")
FLOAT_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?")

_EMAIL_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
EMAIL_RE = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    rf"@{_EMAIL_LABEL}(?:\.{_EMAIL_LABEL})*",
    re.IGNORECASE,
)


def is_blank(value: str) -> bool:
    """True if ``value`` is empty or only spaces, tabs, newlines and carriage returns."""
    return all(ch in BLANK_CHARS for ch in value)


def is_int(value: str) -> bool:
    """True if ``value`` is a base-10 integer, optionally negative.

    ``"42"`` and ``"-3"`` pass; ``"3.0"``, ``" 1"``, ``"+1"`` and ``""`` do not.
    """
    return INT_RE.fullmatch(value) is not None


def is_float(value: str) -> bool:
    """True if ``value`` is a decimal floating-point literal.

    Integers are accepted, as is an exponent (``"1.5e3"``). Digits are required
    on both sides of the point, and ``"nan"``/``"inf"`` are rejected.
    """
    return FLOAT_RE.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    """Syntactic email check; no DNS or mailbox verification.

    The domain is one or more dot-separated labels of 1-63 characters, so
    ``"foo@bar"`` passes.
    """
    return EMAIL_RE.fullmatch(value) is not None


def compile_pattern(pattern: str | RegexPattern) -> RegexPattern:
    """Compile a caller pattern case-insensitively, single-line.

    Raises:
        re.error: If the pattern is malformed
    """
    if isinstance(pattern, RegexPattern):
        return pattern
    return re.compile(pattern, re.IGNORECASE)


def matches_pattern(pattern: str | RegexPattern, value: str) -> bool:
    """True if ``pattern`` matches anywhere in ``value``.

    Anchor the pattern (``^...$``) to require a whole-string match.
    """
    return compile_pattern(pattern).search(value) is not None

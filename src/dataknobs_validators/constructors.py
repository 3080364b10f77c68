"""Leaf validators: one predicate applied to one projected field.

Each constructor takes an accessor (a callable, a field name, or None when the
subject itself is the field) and the error to report. The accessor runs on
every evaluation; anything it raises propagates to the caller.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from re import Pattern as RegexPattern
from typing import Any, TypeVar

from .accessors import AccessorLike, as_accessor, describe
from .exceptions import ConfigurationError
from .predicates import compile_pattern, is_blank, is_float, is_int, is_valid_email
from .validator import Validator

logger = logging.getLogger(__name__)

E = TypeVar("E")

_MISSING: Any = object()

INVALID_PATTERN_POLICIES = ("raise", "never_match")


def _when(
    kind: str,
    accessor: AccessorLike,
    fails: Callable[[Any], bool],
    make_error: Callable[[Any], E],
) -> Validator[E, Any]:
    get = as_accessor(accessor)

    def check(subject: Any) -> list[E]:
        value = get(subject)
        if fails(value):
            return [make_error(value)]
        return []

    return Validator(check, f"{kind}({describe(accessor)})")


def _static(error: E) -> Callable[[Any], E]:
    return lambda _value: error


def _error_builder(
    kind: str,
    error: E,
    make_error: Callable[[Any], E] | None,
) -> Callable[[Any], E]:
    if make_error is None and error is _MISSING:
        raise ConfigurationError(
            f"{kind} requires either an error or make_error",
            context={"constructor": kind},
        )
    if make_error is not None and error is not _MISSING:
        raise ConfigurationError(
            f"{kind} accepts an error or make_error, not both",
            context={"constructor": kind, "error": error},
        )
    if make_error is not None:
        return make_error
    return _static(error)


def if_blank(accessor: AccessorLike, error: E) -> Validator[E, Any]:
    """Report ``error`` when the field is empty or whitespace only."""
    return _when("if_blank", accessor, is_blank, _static(error))


def if_not_int(
    accessor: AccessorLike,
    error: E = _MISSING,
    *,
    make_error: Callable[[str], E] | None = None,
) -> Validator[E, Any]:
    """Report an error when the field is not a whole-string integer.

    Args:
        accessor: Projection to the string field
        error: Static error to report
        make_error: Alternative to ``error``; called with the offending string

    Example:
        ```python
        if_not_int("age", make_error=lambda s: f"{s!r} is not a number")
        ```
    """
    build = _error_builder("if_not_int", error, make_error)
    return _when("if_not_int", accessor, lambda value: not is_int(value), build)


def if_not_float(accessor: AccessorLike, error: E) -> Validator[E, Any]:
    """Report ``error`` when the field is not a decimal floating-point literal."""
    return _when("if_not_float", accessor, lambda value: not is_float(value), _static(error))


def _is_empty(value: Any) -> bool:
    return len(value) == 0


def if_empty_list(accessor: AccessorLike, error: E) -> Validator[E, Any]:
    """Report ``error`` when the projected list has no elements."""
    return _when("if_empty_list", accessor, _is_empty, _static(error))


def if_empty_dict(accessor: AccessorLike, error: E) -> Validator[E, Any]:
    """Report ``error`` when the projected mapping has no entries."""
    return _when("if_empty_dict", accessor, _is_empty, _static(error))


def if_empty_set(accessor: AccessorLike, error: E) -> Validator[E, Any]:
    """Report ``error`` when the projected set has no members."""
    return _when("if_empty_set", accessor, _is_empty, _static(error))


def if_nothing(accessor: AccessorLike, error: E) -> Validator[E, Any]:
    """Report ``error`` when the projected optional value is None."""
    return _when("if_nothing", accessor, lambda value: value is None, _static(error))


def if_invalid_email(
    accessor: AccessorLike,
    error: E = _MISSING,
    *,
    make_error: Callable[[str], E] | None = None,
) -> Validator[E, Any]:
    """Report an error when the field is not a syntactically valid email address.

    Args:
        accessor: Projection to the string field
        error: Static error to report
        make_error: Alternative to ``error``; called with the offending string
    """
    build = _error_builder("if_invalid_email", error, make_error)
    return _when("if_invalid_email", accessor, lambda value: not is_valid_email(value), build)


def if_no_regex_match(
    accessor: AccessorLike,
    pattern: str | RegexPattern,
    error: E,
    *,
    on_invalid_pattern: str = "raise",
) -> Validator[E, Any]:
    """Report ``error`` when ``pattern`` does not match the field.

    The pattern is compiled once, case-insensitively and single-line, and
    searched for anywhere in the value; anchor it to require a full match.

    Args:
        accessor: Projection to the string field
        pattern: Regular expression; a compiled pattern keeps its own flags
        error: Error to report
        on_invalid_pattern: ``"raise"`` to reject a malformed pattern with
            ConfigurationError, or ``"never_match"`` to accept it and report
            ``error`` for every subject

    Raises:
        ConfigurationError: If the pattern is malformed under the ``"raise"``
            policy, or the policy is unknown
    """
    if on_invalid_pattern not in INVALID_PATTERN_POLICIES:
        raise ConfigurationError(
            f"Unknown invalid-pattern policy: {on_invalid_pattern!r}",
            context={"policy": on_invalid_pattern, "allowed": list(INVALID_PATTERN_POLICIES)},
        )

    try:
        regex: RegexPattern | None = compile_pattern(pattern)
    except re.error as e:
        if on_invalid_pattern == "raise":
            raise ConfigurationError(
                f"Invalid regular expression {pattern!r}: {e}",
                context={"pattern": pattern, "error": str(e)},
            ) from e
        logger.warning(f"Invalid regular expression {pattern!r} will never match: {e}")
        regex = None

    def fails(value: str) -> bool:
        return regex is None or regex.search(value) is None

    return _when("if_no_regex_match", accessor, fails, _static(error))


def if_true(predicate: Callable[[Any], bool], error: E) -> Validator[E, Any]:
    """Report ``error`` when ``predicate(subject)`` is true."""
    return Validator(
        lambda subject: [error] if predicate(subject) else [],
        f"if_true({describe(predicate)})",
    )


def if_false(predicate: Callable[[Any], bool], error: E) -> Validator[E, Any]:
    """Report ``error`` when ``predicate(subject)`` is false."""
    return Validator(
        lambda subject: [] if predicate(subject) else [error],
        f"if_false({describe(predicate)})",
    )


def if_invalid(predicate: Callable[[Any], bool], error: E) -> Validator[E, Any]:
    """Older name for :func:`if_true`."""
    return if_true(predicate, error)

"""Custom exceptions for the dataknobs_validators package.

Validation failures are ordinary data (the error list a validator returns),
so these exceptions are reserved for misuse of the library: bad constructor
arguments, unusable configuration, and explicitly requested unwrapping of a
failed result. They are built on the common exception framework from
dataknobs_common, so ``except DataknobsError`` catches them too.

Example:
    ```python
    from dataknobs_validators import ConfigurationError, if_no_regex_match

    try:
        zip_check = if_no_regex_match("zip", "([0-9]{5}", "bad zip")
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        logger.error(f"Context: {e.context}")
    ```
"""

from __future__ import annotations

from typing import Any

from dataknobs_common import (
    ConfigurationError as BaseConfigurationError,
    DataknobsError,
    ValidationError as BaseValidationError,
)


class ValidatorsError(DataknobsError):
    """Base exception for the validators package."""

    pass


class ConfigurationError(ValidatorsError, BaseConfigurationError):
    """Raised when a validator cannot be built from the given arguments.

    Common scenarios include:
    - A malformed regular expression passed to ``if_no_regex_match``
    - Both (or neither of) ``error`` and ``make_error`` supplied to a constructor
    - An unknown check type or unimportable path in a validator configuration
    - A missing or unreadable configuration file
    - An inconsistent ``ValidationResult``
    """

    pass


class ValidationError(ValidatorsError, BaseValidationError):
    """Raised when a failed validation result is unwrapped.

    The ordered error list produced by the validator is available both as
    ``errors`` and as ``context["errors"]``.

    Example:
        ```python
        try:
            valid = validate_or_raise(signup_validator, form)
        except ValidationError as e:
            for error in e.errors:
                print(error)
        ```
    """

    def __init__(
        self,
        message: str,
        errors: list[Any] | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.errors = list(errors or [])
        merged = dict(context or {})
        merged.setdefault("errors", self.errors)
        super().__init__(message, context=merged)


__all__ = [
    "ValidatorsError",
    "ConfigurationError",
    "ValidationError",
]

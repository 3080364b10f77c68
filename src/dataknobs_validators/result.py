"""Validation results and the Valid marker.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .exceptions import ConfigurationError, ValidationError
from .validator import Validator

logger = logging.getLogger(__name__)

E = TypeVar("E")
S = TypeVar("S")

_CONSTRUCTION_KEY = object()


class Valid(Generic[S]):
    """Proof that a subject passed a validator with no errors.

    Instances are only handed out by :func:`validate` and
    :func:`validate_or_raise`, so a function taking ``Valid[Form]`` cannot be
    called with an unchecked form. The wrapped subject is exposed read-only
    and never modified.
    """

    __slots__ = ("_subject",)

    def __init__(self, subject: S, *, _key: object = None):
        if _key is not _CONSTRUCTION_KEY:
            raise TypeError("Valid instances are only created by validate()")
        object.__setattr__(self, "_subject", subject)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError("Valid is immutable")

    @property
    def subject(self) -> S:
        """The validated subject."""
        return self._subject

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Valid):
            return bool(self._subject == other._subject)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._subject)

    def __repr__(self) -> str:
        return f"Valid({self._subject!r})"


@dataclass(frozen=True)
class ValidationResult(Generic[E, S]):
    """Outcome of :func:`validate`.

    On success ``errors`` is empty and ``valid_subject`` holds the
    :class:`Valid` wrapper; on failure ``errors`` holds every reported error in
    evaluation order and ``valid_subject`` is None.
    """

    errors: list[E]
    valid_subject: Valid[S] | None

    def __post_init__(self) -> None:
        if bool(self.errors) == (self.valid_subject is not None):
            raise ConfigurationError(
                "A result holds either errors or a Valid subject, not both or neither",
                context={"errors": list(self.errors), "has_valid_subject": self.valid_subject is not None},
            )

    @property
    def is_valid(self) -> bool:
        return self.valid_subject is not None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.is_valid

    @property
    def subject(self) -> S:
        """The validated subject.

        Raises:
            ValidationError: If validation failed
        """
        return self.unwrap().subject

    def unwrap(self) -> Valid[S]:
        """Return the Valid wrapper, raising if validation failed.

        Raises:
            ValidationError: Carrying the error list when validation failed
        """
        if self.valid_subject is None:
            raise ValidationError(
                f"Validation failed with {len(self.errors)} error(s)",
                errors=self.errors,
            )
        return self.valid_subject

    @classmethod
    def success(cls, subject: S) -> ValidationResult[E, S]:
        return cls(errors=[], valid_subject=Valid(subject, _key=_CONSTRUCTION_KEY))

    @classmethod
    def failure(cls, errors: list[E]) -> ValidationResult[E, S]:
        return cls(errors=list(errors), valid_subject=None)


def validate(validator: Validator[E, S], subject: S) -> ValidationResult[E, S]:
    """Run ``validator`` on ``subject``.

    Args:
        validator: Validator to evaluate
        subject: Value to validate

    Returns:
        A successful result wrapping ``subject`` in :class:`Valid`, or a failed
        result with the non-empty ordered error list

    Example:
        ```python
        result = validate(signup, form)
        if result:
            register(result.unwrap())
        else:
            show(result.errors)
        ```
    """
    errors = validator(subject)
    if errors:
        logger.debug(f"{validator.name} rejected subject with {len(errors)} error(s)")
        return ValidationResult.failure(errors)
    logger.debug(f"{validator.name} accepted subject")
    return ValidationResult.success(subject)


def validate_or_raise(validator: Validator[E, S], subject: S) -> Valid[S]:
    """Run ``validator`` and return the Valid wrapper.

    Raises:
        ValidationError: If any errors were reported; ``errors`` holds them
    """
    return validate(validator, subject).unwrap()

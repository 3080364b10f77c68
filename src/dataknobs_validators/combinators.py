"""Combinators that sequence validators over the same subject.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from .validator import Validator

E = TypeVar("E")
S = TypeVar("S")


class AllOf(Validator):
    """Every validator runs; errors are concatenated in order.

    An explicitly named instance stays one unit under ``&``; unnamed ones are
    flattened into the new sequence.
    """

    __slots__ = ("validators", "named")

    def __init__(self, validators: Iterable[Validator], name: str | None = None):
        """Initialize with the validators to run.

        Args:
            validators: Validators to run, in order
            name: Optional label
        """
        children = tuple(validators)
        object.__setattr__(self, "validators", children)
        object.__setattr__(self, "named", name is not None)
        super().__init__(self._run, name or _label("all_of", children))

    def _run(self, subject: Any) -> list:
        errors: list = []
        for validator in self.validators:
            errors.extend(validator(subject))
        return errors


class FirstError(Validator):
    """Validators run in order until one reports errors; only those are returned."""

    __slots__ = ("validators",)

    def __init__(self, validators: Iterable[Validator], name: str | None = None):
        """Initialize with the validators to try.

        Args:
            validators: Validators to run, in order
            name: Optional label
        """
        children = tuple(validators)
        object.__setattr__(self, "validators", children)
        super().__init__(self._run, name or _label("first_error", children))

    def _run(self, subject: Any) -> list:
        for validator in self.validators:
            errors = validator(subject)
            if errors:
                return errors
        return []


def all_of(validators: Iterable[Validator[E, S]]) -> Validator[E, S]:
    """Run every validator and concatenate their errors.

    Never short-circuits: validator *i*'s errors always precede validator
    *i+1*'s, so the caller sees every problem at once.

    Args:
        validators: Validators to run, in order

    Returns:
        Composite validator

    Example:
        ```python
        signup = all_of([
            if_blank("name", "name required"),
            if_blank("email", "email required"),
            if_not_int("age", "age must be int"),
        ])
        ```
    """
    return AllOf(validators)


def first_error(validators: Iterable[Validator[E, S]]) -> Validator[E, S]:
    """Return the errors of the first failing validator only.

    Useful for dependent checks on one field, e.g. skip the email format check
    when the field is blank:

    ```python
    email_ok = first_error([
        if_blank("email", "email required"),
        if_invalid_email("email", "email invalid"),
    ])
    ```

    Args:
        validators: Validators to run, in order

    Returns:
        Composite validator yielding ``[]`` when every validator passes
    """
    return FirstError(validators)


def any_of(validators: Iterable[Validator[E, S]], subject: S) -> bool:
    """Check whether ``subject`` passes every validator.

    Stops at the first validator that reports an error. An empty sequence is
    vacuously true.

    Args:
        validators: Validators to run, in order
        subject: Value to check

    Returns:
        True if no validator produced an error
    """
    for validator in validators:
        if validator(subject):
            return False
    return True


def _label(kind: str, children: tuple[Validator, ...]) -> str:
    return f"{kind}({', '.join(v.name for v in children)})"

"""The Validator wrapper: an immutable, composable function from subject to errors.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from .accessors import AccessorLike, as_accessor, describe

E = TypeVar("E")
S = TypeVar("S")


class Validator(Generic[E, S]):
    """Wraps a pure function ``subject -> errors``.

    An empty error list means the subject passed. Validators are built by the
    leaf constructors (``if_blank``, ``if_not_int``, ...) or the combinators
    (``all_of``, ``first_error``) and are immutable once built.

    Example:
        ```python
        not_negative = Validator(lambda n: ["negative"] if n < 0 else [])
        not_negative(-1)
        # ['negative']
        ```
    """

    __slots__ = ("_fn", "_name")

    def __init__(self, fn: Callable[[S], Iterable[E]], name: str | None = None):
        """Initialize with the wrapped function.

        Args:
            fn: Function returning the errors found in a subject
            name: Optional label used in repr and log messages
        """
        object.__setattr__(self, "_fn", fn)
        object.__setattr__(self, "_name", name or getattr(fn, "__name__", "validator"))

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    def __call__(self, subject: S) -> list[E]:
        """Run the wrapped function, always returning a fresh list."""
        return list(self._fn(subject))

    def __repr__(self) -> str:
        return f"Validator({self._name})"

    def __and__(self, other: Validator[E, S]) -> Validator[E, S]:
        """Combine with AND: errors of both, this validator's first.

        Unnamed ``all_of`` chains are flattened, so ``a & b & c`` runs as one
        three-element sequence. An ``AllOf`` built with an explicit name (such
        as one from ``ValidatorFactory.create(name=...)``) is kept as a single
        child so its name survives.
        """
        from .combinators import AllOf

        left = self.validators if isinstance(self, AllOf) and not self.named else (self,)
        right = other.validators if isinstance(other, AllOf) and not other.named else (other,)
        return AllOf((*left, *right))

    def pre_map(self, project: AccessorLike) -> Validator[E, Any]:
        """Adapt this validator to a larger subject by projecting first.

        Args:
            project: Accessor from the larger subject to this validator's subject

        Returns:
            Validator over the larger subject
        """
        return pre_map(project, self)


def from_errors(fn: Callable[[S], Iterable[E]], name: str | None = None) -> Validator[E, S]:
    """Build a validator from any function returning the subject's errors."""
    return Validator(fn, name)


def apply(validator: Validator[E, S], subject: S) -> list[E]:
    """Evaluate ``validator`` against ``subject`` and return the error list.

    This is the bare-list form of :func:`~dataknobs_validators.result.validate`:
    an empty list means the subject is valid.
    """
    return validator(subject)


def pre_map(project: AccessorLike, validator: Validator[E, S]) -> Validator[E, Any]:
    """Reuse ``validator`` on a containing subject.

    Args:
        project: Accessor from the containing subject to the validator's
            subject (callable or field name)
        validator: Validator defined over the smaller subject

    Returns:
        Validator over the containing subject

    Example:
        ```python
        address_ok = all_of([if_blank("street", "street required")])
        order_ok = pre_map("shipping", address_ok)
        ```
    """
    accessor = as_accessor(project)

    def run(subject: Any) -> list[E]:
        return validator(accessor(subject))

    return Validator(run, f"{validator.name}@{describe(project)}")

"""Field accessors used to project a subject onto the value a check tests."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Union

from .exceptions import ConfigurationError

Accessor = Callable[[Any], Any]
AccessorLike = Union[Accessor, str, None]


def identity(subject: Any) -> Any:
    """Return the subject itself, for validators where the subject is the field."""
    return subject


def field(name: str) -> Accessor:
    """Build an accessor reading ``name`` from a subject.

    Mappings are read by key, every other subject by attribute. Dotted names
    walk nested structures, so ``field("address.zip")`` reads
    ``subject.address.zip`` (or ``subject["address"]["zip"]``).

    Missing keys or attributes raise ``KeyError``/``AttributeError`` at
    evaluation time like any other accessor failure.

    Args:
        name: Field name, optionally dotted

    Returns:
        Accessor function
    """
    parts = name.split(".")

    def get(subject: Any) -> Any:
        value = subject
        for part in parts:
            if isinstance(value, Mapping):
                value = value[part]
            else:
                value = getattr(value, part)
        return value

    get.__name__ = f"field({name!r})"
    get.__qualname__ = get.__name__
    return get


def as_accessor(accessor: AccessorLike) -> Accessor:
    """Normalize an accessor argument.

    Args:
        accessor: A callable, a field name for :func:`field`, or None for
            :func:`identity`

    Returns:
        Accessor function
    """
    if accessor is None:
        return identity
    if isinstance(accessor, str):
        return field(accessor)
    if not callable(accessor):
        raise ConfigurationError(
            f"Accessor must be callable, a field name or None, got {type(accessor).__name__}",
            context={"accessor": accessor},
        )
    return accessor


def describe(accessor: AccessorLike) -> str:
    """Short label for an accessor, used in validator names."""
    if accessor is None:
        return "subject"
    if isinstance(accessor, str):
        return accessor
    return getattr(accessor, "__name__", type(accessor).__name__)

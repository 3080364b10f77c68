"""Pytest configuration for dataknobs_validators tests."""

import sys
from dataclasses import dataclass, field
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_validators import all_of, if_blank, if_not_int  # noqa: E402


@dataclass(frozen=True)
class SignupForm:
    """Form subject used across tests."""

    name: str
    email: str
    age: str
    tags: tuple = ()
    nickname: str | None = None


@dataclass(frozen=True)
class Address:
    street: str
    zip: str


@dataclass(frozen=True)
class Order:
    shipping: Address
    billing: Address
    items: list = field(default_factory=list)


@pytest.fixture
def valid_form():
    """A form that passes the signup validator."""
    return SignupForm(name="Sam", email="sam@x.com", age="27")


@pytest.fixture
def invalid_form():
    """A form with a blank email and a non-numeric age."""
    return SignupForm(name="Sam", email="", age="abc")


@pytest.fixture
def signup_validator():
    """Name, email and age checks combined with all_of."""
    return all_of([
        if_blank("name", "name required"),
        if_blank("email", "email required"),
        if_not_int("age", "age must be int"),
    ])


@pytest.fixture
def make_form():
    """Build SignupForm instances with overridable defaults."""
    def build(**overrides):
        values = {"name": "Sam", "email": "sam@x.com", "age": "27"}
        values.update(overrides)
        return SignupForm(**values)

    return build


@pytest.fixture
def order():
    """An order whose billing address has a blank street."""
    return Order(
        shipping=Address(street="1 Main St", zip="12345"),
        billing=Address(street="  ", zip="abcde"),
        items=["widget"],
    )

"""Tests for the Validator wrapper, accessors and pre_map."""

import pytest

from dataknobs_validators import (
    AllOf,
    ConfigurationError,
    Validator,
    all_of,
    apply,
    field,
    from_errors,
    identity,
    if_blank,
    if_no_regex_match,
    pre_map,
)


class TestValidator:
    """Test the core wrapper."""

    def test_wraps_function(self):
        """Calling and apply() both run the wrapped function."""
        v = from_errors(lambda n: ["negative"] if n < 0 else [])
        assert v(-1) == ["negative"]
        assert apply(v, 1) == []

    def test_generator_results_materialized(self):
        """Iterable results come back as a list every time."""
        v = Validator(lambda s: (c for c in s if c.isdigit()))
        assert v("a1b2") == ["1", "2"]
        assert v("a1b2") == ["1", "2"]

    def test_returns_fresh_list(self):
        """Mutating a returned list does not affect later evaluations."""
        errors = ["boom"]
        v = Validator(lambda s: errors)
        first = v(None)
        first.append("extra")
        assert v(None) == ["boom"]

    def test_duplicates_preserved(self):
        v = from_errors(lambda s: ["dup", "dup"])
        assert v(None) == ["dup", "dup"]

    def test_immutable(self):
        v = from_errors(lambda s: [])
        with pytest.raises(AttributeError):
            v.name = "other"

    def test_name_and_repr(self):
        def no_errors(subject):
            return []

        assert from_errors(no_errors).name == "no_errors"
        assert repr(from_errors(no_errors, name="custom")) == "Validator(custom)"

    def test_caller_exceptions_propagate(self):
        """The library does not catch errors raised by caller functions."""
        v = from_errors(lambda s: 1 / 0)
        with pytest.raises(ZeroDivisionError):
            v(None)

    def test_and_operator(self):
        """'&' concatenates errors in order and flattens chains."""
        a = from_errors(lambda s: ["a"])
        b = from_errors(lambda s: ["b"])
        c = from_errors(lambda s: ["c"])

        combined = a & b & c
        assert combined(None) == ["a", "b", "c"]
        assert isinstance(combined, AllOf)
        assert len(combined.validators) == 3

        grouped = a & (b & c)
        assert len(grouped.validators) == 3
        assert grouped(None) == ["a", "b", "c"]

    def test_and_keeps_named_composite(self):
        """A named AllOf stays one child so its name is not lost."""
        a = from_errors(lambda s: ["a"])
        b = from_errors(lambda s: ["b"])
        signup = AllOf([a, b], name="signup")
        extra = from_errors(lambda s: ["c"], name="extra")

        combined = signup & extra
        assert combined.validators == (signup, extra)
        assert combined.name == "all_of(signup, extra)"
        assert combined(None) == ["a", "b", "c"]

        reversed_order = extra & signup
        assert reversed_order.validators == (extra, signup)
        assert reversed_order(None) == ["c", "a", "b"]


class TestAccessors:
    """Test field accessors."""

    def test_attribute_and_key_access(self, valid_form):
        assert field("email")(valid_form) == "sam@x.com"
        assert field("email")({"email": "x@y"}) == "x@y"

    def test_dotted_access(self, order):
        assert field("shipping.zip")(order) == "12345"
        assert field("a.b")({"a": {"b": 1}}) == 1

    def test_missing_field_raises(self, valid_form):
        with pytest.raises(AttributeError):
            field("missing")(valid_form)
        with pytest.raises(KeyError):
            field("missing")({})

    def test_identity(self):
        marker = object()
        assert identity(marker) is marker

    def test_string_accessor_shorthand(self, make_form):
        """Constructors accept a field name, a callable or None."""
        by_name = if_blank("name", "blank")
        by_callable = if_blank(lambda f: f.name, "blank")
        on_subject = if_blank(None, "blank")

        form = make_form(name=" ")
        assert by_name(form) == ["blank"]
        assert by_callable(form) == ["blank"]
        assert on_subject("") == ["blank"]

    def test_non_callable_accessor_rejected(self):
        with pytest.raises(ConfigurationError):
            if_blank(42, "blank")


class TestPreMap:
    """Test adapting validators to containing subjects."""

    @pytest.fixture
    def address_validator(self):
        return all_of([
            if_blank("street", "street required"),
            if_no_regex_match("zip", r"^[0-9]{5}$", "zip invalid"),
        ])

    def test_reuse_across_fields(self, order, address_validator):
        shipping = pre_map("shipping", address_validator)
        billing = address_validator.pre_map(lambda o: o.billing)

        assert shipping(order) == []
        assert billing(order) == ["street required", "zip invalid"]

    def test_equivalent_to_projection(self, order, address_validator):
        """pre_map(p, v)(s) == v(p(s))."""
        projected = pre_map(lambda o: o.billing, address_validator)
        assert projected(order) == address_validator(order.billing)

    def test_name_mentions_projection(self, address_validator):
        assert pre_map("billing", address_validator).name.endswith("@billing")

"""Composable validators for arbitrary subjects.

A validator is a pure function from a subject (a form, a request, a record) to
an ordered list of errors; an empty list means the subject is valid. Errors are
whatever the caller chooses: strings, enum members, tuples.

- **Leaf validators**: ``if_blank``, ``if_not_int``, ``if_invalid_email``, ...
  check one projected field
- **Combinators**: ``all_of`` collects every error, ``first_error`` stops at the
  first failing check, ``any_of`` answers pass/fail
- **Results**: ``validate`` returns a ``ValidationResult`` whose success path
  carries a ``Valid`` wrapper only this module can create
- **Configuration**: ``ValidatorFactory`` and ``load_validator`` build
  validators from YAML/JSON

Example:
    ```python
    from dataknobs_validators import all_of, if_blank, if_not_int, validate

    signup = all_of([
        if_blank("name", "name required"),
        if_blank("email", "email required"),
        if_not_int("age", "age must be int"),
    ])

    result = validate(signup, {"name": "Sam", "email": "", "age": "abc"})
    result.errors
    # ['email required', 'age must be int']
    ```
"""

from dataknobs_validators.accessors import field, identity
from dataknobs_validators.combinators import AllOf, FirstError, all_of, any_of, first_error
from dataknobs_validators.constructors import (
    if_blank,
    if_empty_dict,
    if_empty_list,
    if_empty_set,
    if_false,
    if_invalid,
    if_invalid_email,
    if_no_regex_match,
    if_not_float,
    if_not_int,
    if_nothing,
    if_true,
)
from dataknobs_validators.exceptions import (
    ConfigurationError,
    ValidationError,
    ValidatorsError,
)
from dataknobs_validators.factory import ValidatorFactory, load_validator, validator_factory
from dataknobs_validators.predicates import (
    is_blank,
    is_float,
    is_int,
    is_valid_email,
    matches_pattern,
)
from dataknobs_validators.result import (
    Valid,
    ValidationResult,
    validate,
    validate_or_raise,
)
from dataknobs_validators.validator import Validator, apply, from_errors, pre_map

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core
    "Validator",
    "from_errors",
    "apply",
    "pre_map",
    # Leaf validators
    "if_blank",
    "if_not_int",
    "if_not_float",
    "if_empty_list",
    "if_empty_dict",
    "if_empty_set",
    "if_nothing",
    "if_invalid_email",
    "if_no_regex_match",
    "if_true",
    "if_false",
    "if_invalid",
    # Combinators
    "all_of",
    "any_of",
    "first_error",
    "AllOf",
    "FirstError",
    # Results
    "Valid",
    "ValidationResult",
    "validate",
    "validate_or_raise",
    # Predicates
    "is_blank",
    "is_int",
    "is_float",
    "is_valid_email",
    "matches_pattern",
    # Accessors
    "field",
    "identity",
    # Configuration
    "ValidatorFactory",
    "validator_factory",
    "load_validator",
    # Exceptions
    "ValidatorsError",
    "ConfigurationError",
    "ValidationError",
]

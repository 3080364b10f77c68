"""Build validators from configuration dictionaries and files."""

from __future__ import annotations

import importlib
import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from dataknobs_config import FactoryBase

from .combinators import AllOf, FirstError
from .constructors import (
    if_blank,
    if_empty_dict,
    if_empty_list,
    if_empty_set,
    if_false,
    if_invalid_email,
    if_no_regex_match,
    if_not_float,
    if_not_int,
    if_nothing,
    if_true,
)
from .exceptions import ConfigurationError
from .validator import Validator, from_errors

logger = logging.getLogger(__name__)

FIELD_CHECKS: dict[str, Callable[..., Validator]] = {
    "blank": if_blank,
    "not_int": if_not_int,
    "not_float": if_not_float,
    "empty_list": if_empty_list,
    "empty_dict": if_empty_dict,
    "empty_set": if_empty_set,
    "nothing": if_nothing,
    "invalid_email": if_invalid_email,
}

PREDICATE_CHECKS: dict[str, Callable[..., Validator]] = {
    "true": if_true,
    "false": if_false,
}

COMPOSITES: dict[str, type[Validator]] = {
    "all": AllOf,
    "first_error": FirstError,
}


class ValidatorFactory(FactoryBase):
    """Factory for creating validators from configuration.

    Usable directly, or referenced from a dataknobs_config ``Config`` through
    ``factory: dataknobs_validators.factory.ValidatorFactory``. ``Config``
    strips the ``name`` key before calling ``create``.

    Configuration Options:
        name (str): Validator name, used in logs and repr
        combine (str): How top-level checks compose, ``all`` (default) or
            ``first_error``
        checks (list): List of check definitions

    Check Definition Options:
        type (str): One of blank, not_int, not_float, empty_list, empty_dict,
            empty_set, nothing, invalid_email, no_regex_match, true, false,
            custom, all, first_error
        field (str): Field to project, dotted for nested fields; omit to check
            the subject itself
        error (any): Error reported when the check fails
        pattern (str): Regular expression, for ``no_regex_match``
        on_invalid_pattern (str): ``raise`` (default) or ``never_match``
        predicate (str): Dotted import path of ``subject -> bool``, for
            ``true``/``false``
        function (str): Dotted import path of ``subject -> errors``, for ``custom``
        checks (list): Nested checks, for ``all``/``first_error``

    Example Configuration:
        name: signup
        checks:
          - type: blank
            field: name
            error: name required
          - type: first_error
            checks:
              - {type: blank, field: email, error: email required}
              - {type: invalid_email, field: email, error: email invalid}
          - type: not_int
            field: age
            error: age must be int
    """

    def create(self, **config: Any) -> Validator:
        """Create a Validator from configuration.

        Args:
            **config: Validator configuration

        Returns:
            Validator instance

        Raises:
            ConfigurationError: If the configuration cannot be built
        """
        name = config.get("name", "unnamed_validator")
        combine = config.get("combine", "all")

        logger.info(f"Creating validator: {name}")

        if combine not in COMPOSITES:
            raise ConfigurationError(
                f"Unknown combine mode: {combine!r}",
                context={"validator": name, "combine": combine, "allowed": sorted(COMPOSITES)},
            )

        checks = self._build_checks(config.get("checks", []), path=name)
        return COMPOSITES[combine](checks, name=name)

    def build_check(self, check_config: dict[str, Any], path: str = "check") -> Validator:
        """Build a single validator from one check definition.

        Args:
            check_config: Check definition
            path: Location of the definition, reported in errors

        Returns:
            Validator instance
        """
        if not isinstance(check_config, dict):
            raise ConfigurationError(
                f"Check definition at {path} must be a mapping",
                context={"path": path, "value": check_config},
            )

        check_type = str(check_config.get("type", "")).lower()

        if check_type in COMPOSITES:
            checks = self._build_checks(check_config.get("checks", []), path=path)
            return COMPOSITES[check_type](checks)

        if check_type == "custom":
            function = self._load_callable(check_config.get("function"), path)
            return from_errors(function)

        error = self._require_error(check_config, path)

        if check_type in FIELD_CHECKS:
            return FIELD_CHECKS[check_type](check_config.get("field"), error)

        if check_type == "no_regex_match":
            pattern = check_config.get("pattern")
            if pattern is None:
                raise ConfigurationError(
                    f"Check at {path} requires 'pattern'",
                    context={"path": path, "type": check_type},
                )
            return if_no_regex_match(
                check_config.get("field"),
                pattern,
                error,
                on_invalid_pattern=check_config.get("on_invalid_pattern", "raise"),
            )

        if check_type in PREDICATE_CHECKS:
            predicate = self._load_callable(check_config.get("predicate"), path)
            return PREDICATE_CHECKS[check_type](predicate, error)

        raise ConfigurationError(
            f"Unknown check type: {check_type!r}",
            context={"path": path, "type": check_type, "known_types": known_check_types()},
        )

    def _build_checks(self, check_configs: list[dict[str, Any]], path: str) -> list[Validator]:
        if not isinstance(check_configs, list):
            raise ConfigurationError(
                f"'checks' at {path} must be a list",
                context={"path": path, "value": check_configs},
            )
        return [
            self.build_check(check_config, path=f"{path}.checks[{index}]")
            for index, check_config in enumerate(check_configs)
        ]

    def _require_error(self, check_config: dict[str, Any], path: str) -> Any:
        if "error" not in check_config:
            raise ConfigurationError(
                f"Check at {path} requires 'error'",
                context={"path": path, "type": check_config.get("type")},
            )
        return check_config["error"]

    def _load_callable(self, dotted_path: Any, path: str) -> Callable[..., Any]:
        """Import a callable from a dotted path such as ``mypkg.rules.is_banned``."""
        if not isinstance(dotted_path, str) or "." not in dotted_path:
            raise ConfigurationError(
                f"Invalid callable path at {path}: {dotted_path!r}",
                context={"path": path, "callable": dotted_path},
            )

        module_path, attr_name = dotted_path.rsplit(".", 1)
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            raise ConfigurationError(
                f"Failed to import {dotted_path}: {e}",
                context={"path": path, "callable": dotted_path},
            ) from e

        target = getattr(module, attr_name, None)
        if not callable(target):
            raise ConfigurationError(
                f"{attr_name} not found or not callable in {module_path}",
                context={"path": path, "callable": dotted_path},
            )
        return target


def known_check_types() -> list[str]:
    """Names accepted as a check ``type``."""
    return sorted(
        [*FIELD_CHECKS, *PREDICATE_CHECKS, *COMPOSITES, "no_regex_match", "custom"]
    )


def load_validator(path: str | Path, factory: ValidatorFactory | None = None) -> Validator:
    """Build a validator from a YAML or JSON file.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file
        factory: Factory to use (defaults to the module-level instance)

    Returns:
        Validator instance

    Raises:
        ConfigurationError: If the file is missing, has an unsupported format
            or does not contain a mapping
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(
            f"Validator configuration file not found: {path}",
            context={"file": str(path)},
        )

    suffix = path.suffix.lower()
    with open(path) as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported file format: {suffix}",
                context={"file": str(path), "supported": [".yaml", ".yml", ".json"]},
            )

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Validator configuration in {path} must be a mapping",
            context={"file": str(path)},
        )

    data.setdefault("name", path.stem)
    return (factory or validator_factory).create(**data)


# Module-level instance used by load_validator
validator_factory = ValidatorFactory()

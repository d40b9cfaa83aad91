"""
config.py: YAML configuration for calculators.

A configuration file adds constants, built-in catalogue functions and
precedence overrides on top of the simple arithmetic context:

    constants:
      myConst: 20
    functions:          # catalogue names, optionally with a precedence
      sin: 4
      cos: null         # null keeps the catalogue default
      ">": 1
    operators:          # precedence overrides for operators already defined
      "^": 5

``functions`` may also be a plain list of names. Files are validated against
``schemas/config.schema.json`` before use.

Files are read without YAML 1.1 boolean resolution, so keys such as ``on:``
or ``yes:`` stay plain names. Numeric keys are turned into strings before
schema validation.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from shuntyard.builtins import create_builtin_registry
from shuntyard.context import ExpressionContext, create_simple_context
from shuntyard.errors import ConfigError
from shuntyard.functions import FunctionRegistry

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SHUNTYARD_CONFIG"

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "config.schema.json"


@dataclass
class ValidationIssue:
    """A single problem found in a configuration file."""

    file: Path | None
    message: str
    path: str = ""          # location within the document, e.g. "constants/pi"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        source = self.file if self.file is not None else "<config>"
        return f"[ERROR] {source}{loc}: {self.message}"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


class _ConfigLoader(yaml.SafeLoader):
    """SafeLoader that leaves yes/no/on/off/true/false as strings."""


_ConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _load_schema() -> dict[str, Any]:
    with _SCHEMA_PATH.open() as fh:
        return json.load(fh)


def _stringify_keys(obj: Any) -> Any:
    """Recursively turn YAML numeric keys back into strings."""
    if isinstance(obj, dict):
        return {str(k): _stringify_keys(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_stringify_keys(item) for item in obj]
    return obj


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema ValidationError path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


def validate_config(doc: Any, source: Path | None = None) -> list[ValidationIssue]:
    """Validate a parsed configuration document against the JSON Schema.

    Returns:
        A list of :class:`ValidationIssue` objects (empty on success).
    """
    validator = Draft202012Validator(_load_schema())
    return [
        ValidationIssue(file=source, message=error.message, path=_json_path(error))
        for error in sorted(validator.iter_errors(doc), key=_json_path)
    ]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@dataclass
class CalculatorConfig:
    """Settings used to build an ExpressionContext.

    Attributes:
        constants: Named constants, merged over catalogue constants
        functions: Catalogue name -> precedence override (None for default)
        operators: Precedence overrides for already-defined operators
    """

    constants: dict[str, float] = field(default_factory=dict)
    functions: dict[str, int | None] = field(default_factory=dict)
    operators: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, doc: dict[str, Any] | None, source: Path | None = None) -> CalculatorConfig:
        """Create config from a parsed document.

        Raises:
            ConfigError: If the document fails schema validation
        """
        doc = _stringify_keys(doc or {})
        issues = validate_config(doc, source)
        if issues:
            raise ConfigError(
                "Invalid configuration:\n" + "\n".join(str(i) for i in issues),
                issues,
            )

        functions = doc.get("functions", {})
        if isinstance(functions, list):
            functions = {name: None for name in functions}

        return cls(
            constants={k: float(v) for k, v in doc.get("constants", {}).items()},
            functions=dict(functions),
            operators=dict(doc.get("operators", {})),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> CalculatorConfig:
        """Load config from a YAML file.

        Raises:
            ConfigError: If the file cannot be read, parsed or validated
        """
        try:
            with path.open() as fh:
                raw = yaml.load(fh, Loader=_ConfigLoader)
        except OSError as exc:
            raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"YAML parse error in {path}: {exc}") from exc

        if raw is not None and not isinstance(raw, dict):
            raise ConfigError(f"Configuration file {path} must contain a mapping")

        logger.debug("Loaded calculator configuration from %s", path)
        return cls.from_dict(raw, source=path)

    @classmethod
    def from_env(cls) -> CalculatorConfig:
        """Create config from the environment.

        Resolution order:
        1. SHUNTYARD_CONFIG env var naming a YAML file
        2. Default: empty config (simple arithmetic only)
        """
        path = os.environ.get(CONFIG_ENV_VAR)
        if path:
            return cls.from_yaml(Path(path))
        return cls()

    def build_context(self, registry: FunctionRegistry | None = None) -> ExpressionContext:
        """Build the ExpressionContext described by this config.

        Args:
            registry: Function catalogue; the built-in one if omitted

        Raises:
            ConfigError: For unknown function names or operator overrides
        """
        registry = registry or create_builtin_registry()

        unknown = [name for name in self.functions if not registry.is_registered(name)]
        if unknown:
            raise ConfigError(f"Unknown function(s) in configuration: {', '.join(unknown)}")

        precedences = {k: v for k, v in self.functions.items() if v is not None}
        context = create_simple_context().with_functions(
            registry, self.functions, precedences
        )

        for name, precedence in self.operators.items():
            if not (context.is_binary(name) or context.is_unary(name)):
                raise ConfigError(f"Cannot set precedence of undefined operator '{name}'")
            context = context.with_precedence(name, precedence)

        return context.with_constants(self.constants)

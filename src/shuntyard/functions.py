"""Function catalogue for shuntyard expressions.

Named functions (e.g. `sin(x)`), extra operators (e.g. `a >= b`) and named
constants (e.g. `pi`) that can be added to an ExpressionContext. Each entry
carries its arity and a default precedence so it can be dropped straight into
the operator tables.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable


class FunctionCategory(Enum):
    """Categories for organizing functions in listings."""

    TRIGONOMETRIC = "trigonometric"
    EXPONENTIAL = "exponential"
    ROUNDING = "rounding"
    COMPARISON = "comparison"
    CONSTANT = "constant"


@dataclass
class FunctionDefinition:
    """Complete definition of a catalogue entry.

    Attributes:
        name: Name as used in expressions
        description: Human-readable description
        category: Category for listings
        arity: 1 for functions and prefix operators, 2 for infix operators,
            0 for constants
        precedence: Default operator precedence (unused for constants)
        examples: Example expressions
        implementation: The callable; constants take no arguments
    """

    name: str
    description: str
    category: FunctionCategory
    arity: int
    implementation: Callable[..., float]
    precedence: int = 4
    examples: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Export for listings."""
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "arity": self.arity,
            "precedence": self.precedence if self.arity else None,
            "examples": self.examples,
        }


class FunctionRegistry:
    """Catalogue of function definitions.

    Registries are plain instances; build one with
    shuntyard.builtins.create_builtin_registry() or register your own.

    Example:
        registry = FunctionRegistry()
        registry.register(FunctionDefinition(
            name="sqrt",
            description="Square root",
            category=FunctionCategory.EXPONENTIAL,
            arity=1,
            implementation=math.sqrt,
        ))
        ctx = create_simple_context().with_functions(registry, ["sqrt"])
    """

    def __init__(self) -> None:
        self._functions: dict[str, FunctionDefinition] = {}

    def register(self, func_def: FunctionDefinition) -> None:
        """Register a function definition.

        Raises:
            ValueError: If the arity is not 0, 1 or 2
        """
        if func_def.arity not in (0, 1, 2):
            raise ValueError(
                f"Function '{func_def.name}' has unsupported arity {func_def.arity}"
            )
        self._functions[func_def.name] = func_def

    def get(self, name: str) -> FunctionDefinition:
        """Get a function definition by name.

        Raises:
            KeyError: If the function is not registered
        """
        if name not in self._functions:
            raise KeyError(f"Unknown function: {name}")
        return self._functions[name]

    def is_registered(self, name: str) -> bool:
        return name in self._functions

    def names(self) -> list[str]:
        return list(self._functions)

    def list_all(self) -> list[FunctionDefinition]:
        return list(self._functions.values())

    def list_by_category(self, category: FunctionCategory) -> list[FunctionDefinition]:
        """List functions in a specific category."""
        return [f for f in self._functions.values() if f.category == category]

    def export_documentation(self) -> dict[str, Any]:
        """Export the catalogue organized by category."""
        by_category: dict[str, list[dict[str, Any]]] = {}
        for func_def in self._functions.values():
            by_category.setdefault(func_def.category.value, []).append(func_def.to_dict())

        return {
            "functions": {name: f.to_dict() for name, f in self._functions.items()},
            "byCategory": by_category,
        }

"""Expression context: the operators, precedences and constants a
calculator understands.

A context is immutable. To add entries, derive a new context with one of
the ``with_*`` methods:

    ctx = create_simple_context({"pi": 3.14})
    ctx = ctx.with_unary_operator("sin", math.sin, precedence=4)
    ctx = ctx.with_binary_operator(">", lambda a, b: float(a > b), precedence=1)
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Iterable, Mapping

if TYPE_CHECKING:
    from shuntyard.functions import FunctionRegistry

BinaryFunction = Callable[[float, float], float]
UnaryFunction = Callable[[float], float]

# Rank of "(" on the operator stack; below every real operator so it is only
# ever removed by a matching ")".
PAREN_PRECEDENCE = -1


def _frozen(mapping: Mapping | None) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True, eq=False)
class ExpressionContext:
    """Operator tables, precedences and named constants.

    Contexts compare and hash by identity.

    Attributes:
        binary_operators: name -> 2-argument function
        unary_operators: name -> 1-argument function (also named functions
            such as sin or cos)
        operator_precedence: name -> integer rank, higher binds tighter
        constants: name -> value
    """

    binary_operators: Mapping[str, BinaryFunction] = field(default_factory=dict)
    unary_operators: Mapping[str, UnaryFunction] = field(default_factory=dict)
    operator_precedence: Mapping[str, int] = field(default_factory=dict)
    constants: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "binary_operators", _frozen(self.binary_operators))
        object.__setattr__(self, "unary_operators", _frozen(self.unary_operators))
        precedence = dict(self.operator_precedence)
        precedence["("] = PAREN_PRECEDENCE
        for name, rank in precedence.items():
            if name != "(" and rank <= PAREN_PRECEDENCE:
                raise ValueError(
                    f"Precedence of '{name}' must be greater than {PAREN_PRECEDENCE}, got {rank}"
                )
        object.__setattr__(self, "operator_precedence", _frozen(precedence))
        object.__setattr__(
            self, "constants", _frozen({k: float(v) for k, v in self.constants.items()})
        )

    def is_unary(self, name: str) -> bool:
        return name in self.unary_operators

    def is_binary(self, name: str) -> bool:
        return name in self.binary_operators

    def missing_precedence(self) -> list[str]:
        """Operator names that have no precedence entry."""
        names = set(self.binary_operators) | set(self.unary_operators)
        return sorted(n for n in names if n not in self.operator_precedence)

    # -------------------------------------------------------------------------
    # Derivation
    # -------------------------------------------------------------------------

    def with_binary_operator(
        self, name: str, fn: BinaryFunction, precedence: int
    ) -> ExpressionContext:
        """Return a copy with a binary operator added or replaced."""
        return replace(
            self,
            binary_operators={**self.binary_operators, name: fn},
            operator_precedence={**self.operator_precedence, name: precedence},
        )

    def with_unary_operator(
        self, name: str, fn: UnaryFunction, precedence: int
    ) -> ExpressionContext:
        """Return a copy with a unary operator or named function added."""
        return replace(
            self,
            unary_operators={**self.unary_operators, name: fn},
            operator_precedence={**self.operator_precedence, name: precedence},
        )

    def with_precedence(self, name: str, precedence: int) -> ExpressionContext:
        return replace(
            self, operator_precedence={**self.operator_precedence, name: precedence}
        )

    def with_constants(self, constants: Mapping[str, float]) -> ExpressionContext:
        """Return a copy with the given constants merged in."""
        return replace(self, constants={**self.constants, **constants})

    def with_functions(
        self,
        registry: FunctionRegistry,
        names: Iterable[str] | None = None,
        precedences: Mapping[str, int] | None = None,
    ) -> ExpressionContext:
        """Return a copy with catalogue functions added.

        Args:
            registry: Function catalogue to take definitions from
            names: Function names to add; all registered functions if None
            precedences: Optional per-name precedence overrides

        Raises:
            KeyError: If a name is not in the registry
        """
        precedences = precedences or {}
        binary = dict(self.binary_operators)
        unary = dict(self.unary_operators)
        precedence = dict(self.operator_precedence)
        constants = dict(self.constants)

        selected = list(names) if names is not None else registry.names()
        for name in selected:
            func_def = registry.get(name)
            if func_def.arity == 0:
                constants[name] = func_def.implementation()
                continue
            if func_def.arity == 2:
                binary[name] = func_def.implementation
            else:
                unary[name] = func_def.implementation
            precedence[name] = precedences.get(name, func_def.precedence)

        return ExpressionContext(binary, unary, precedence, constants)


def create_simple_context(
    constants: Mapping[str, float] | None = None,
) -> ExpressionContext:
    """Create the standard {+, -, *, /, ^} context.

    Unary "+" and "-" share the precedence of their binary forms. In prefix
    position the binary table wins the step lookup, so "-x" evaluates as
    "0 - x" with the unary dummy as left operand.

    Args:
        constants: Named constants available in expressions
    """
    return ExpressionContext(
        binary_operators={
            "+": operator.add,
            "-": operator.sub,
            "*": operator.mul,
            "/": operator.truediv,
            "^": math.pow,
        },
        unary_operators={
            "+": lambda value: value,
            "-": operator.neg,
        },
        operator_precedence={
            "(": PAREN_PRECEDENCE,
            "+": 2,
            "-": 2,
            "*": 3,
            "/": 3,
            "^": 4,
        },
        constants=constants or {},
    )

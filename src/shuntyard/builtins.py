"""Built-in function catalogue.

Categories:
- Trigonometric: sin, cos, tan, asin, acos, atan
- Exponential: sqrt, exp, ln, log
- Rounding: abs, floor, ceil
- Comparison: > < >= <= == != (return 1.0 or 0.0)
- Constant: pi, e

Function names are letters and underscores only, since the scanner does not
allow digits inside words (hence "log" rather than "log10").
"""

import math

from shuntyard.functions import FunctionCategory, FunctionDefinition, FunctionRegistry

FUNCTION_PRECEDENCE = 4
COMPARISON_PRECEDENCE = 1


def create_builtin_registry() -> FunctionRegistry:
    """Create a registry holding every built-in function."""
    registry = FunctionRegistry()
    _register_trigonometric_functions(registry)
    _register_exponential_functions(registry)
    _register_rounding_functions(registry)
    _register_comparison_operators(registry)
    _register_constants(registry)
    return registry


def _unary(
    registry: FunctionRegistry,
    name: str,
    description: str,
    category: FunctionCategory,
    implementation,
    examples: list[str],
) -> None:
    registry.register(
        FunctionDefinition(
            name=name,
            description=description,
            category=category,
            arity=1,
            implementation=implementation,
            precedence=FUNCTION_PRECEDENCE,
            examples=examples,
        )
    )


# -----------------------------------------------------------------------------
# Trigonometric Functions
# -----------------------------------------------------------------------------


def _register_trigonometric_functions(registry: FunctionRegistry) -> None:
    trig = FunctionCategory.TRIGONOMETRIC
    _unary(registry, "sin", "Sine of an angle in radians", trig, math.sin, ["sin(pi/2)"])
    _unary(registry, "cos", "Cosine of an angle in radians", trig, math.cos, ["cos(0)"])
    _unary(registry, "tan", "Tangent of an angle in radians", trig, math.tan, ["tan(pi/4)"])
    _unary(registry, "asin", "Arc sine, in radians", trig, math.asin, ["asin(1)"])
    _unary(registry, "acos", "Arc cosine, in radians", trig, math.acos, ["acos(0)"])
    _unary(registry, "atan", "Arc tangent, in radians", trig, math.atan, ["atan(1)*4"])


# -----------------------------------------------------------------------------
# Exponential Functions
# -----------------------------------------------------------------------------


def _register_exponential_functions(registry: FunctionRegistry) -> None:
    exp = FunctionCategory.EXPONENTIAL
    _unary(registry, "sqrt", "Square root", exp, math.sqrt, ["sqrt(16)"])
    _unary(registry, "exp", "e raised to the given power", exp, math.exp, ["exp(1)"])
    _unary(registry, "ln", "Natural logarithm", exp, math.log, ["ln(e)"])
    _unary(registry, "log", "Base-10 logarithm", exp, math.log10, ["log(1000)"])


# -----------------------------------------------------------------------------
# Rounding Functions
# -----------------------------------------------------------------------------


def _floor(value: float) -> float:
    return float(math.floor(value))


def _ceil(value: float) -> float:
    return float(math.ceil(value))


def _register_rounding_functions(registry: FunctionRegistry) -> None:
    rounding = FunctionCategory.ROUNDING
    _unary(registry, "abs", "Absolute value", rounding, math.fabs, ["abs(-3)"])
    _unary(registry, "floor", "Largest integer not above the value", rounding, _floor, ["floor(2.7)"])
    _unary(registry, "ceil", "Smallest integer not below the value", rounding, _ceil, ["ceil(2.1)"])


# -----------------------------------------------------------------------------
# Comparison Operators
# -----------------------------------------------------------------------------


def _truth(value: bool) -> float:
    return 1.0 if value else 0.0


def _register_comparison_operators(registry: FunctionRegistry) -> None:
    comparisons = [
        (">", "Greater than", lambda a, b: _truth(a > b)),
        ("<", "Less than", lambda a, b: _truth(a < b)),
        (">=", "Greater than or equal", lambda a, b: _truth(a >= b)),
        ("<=", "Less than or equal", lambda a, b: _truth(a <= b)),
        ("==", "Equal", lambda a, b: _truth(a == b)),
        ("!=", "Not equal", lambda a, b: _truth(a != b)),
    ]
    for symbol, description, implementation in comparisons:
        registry.register(
            FunctionDefinition(
                name=symbol,
                description=f"{description}; 1 when true, 0 when false",
                category=FunctionCategory.COMPARISON,
                arity=2,
                implementation=implementation,
                precedence=COMPARISON_PRECEDENCE,
                examples=[f"sin(3.14/2) {symbol} 0"],
            )
        )


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------


def _register_constants(registry: FunctionRegistry) -> None:
    registry.register(
        FunctionDefinition(
            name="pi",
            description="Ratio of a circle's circumference to its diameter",
            category=FunctionCategory.CONSTANT,
            arity=0,
            implementation=lambda: math.pi,
            examples=["2*pi"],
        )
    )
    registry.register(
        FunctionDefinition(
            name="e",
            description="Euler's number",
            category=FunctionCategory.CONSTANT,
            arity=0,
            implementation=lambda: math.e,
            examples=["e^2"],
        )
    )

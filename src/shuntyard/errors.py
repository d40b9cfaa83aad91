"""Error types raised while converting or evaluating an expression.

Every error is raised at the point of detection and aborts the whole
calculation; there is no partial result.
"""


class ExpressionError(Exception):
    """Base class for all expression errors."""
    pass


class UnresolvedIdentifierError(ExpressionError):
    """A word is neither a unary operator nor a constant."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unable to find constant or function called '{name}'")


class UnknownOperatorError(ExpressionError):
    """An operator name is in neither the binary nor the unary table."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f"This operator or function is unknown: '{name}'")


class MissingPrecedenceError(UnknownOperatorError):
    """An operator is registered but has no precedence entry."""

    def __init__(self, name: str):
        super().__init__(name, f"No precedence defined for operator '{name}'")


class UnrecognizedUnaryError(ExpressionError):
    """An operator follows another operator but has no unary form."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unrecognized unary operator or function: '{symbol}'")


class MalformedExpressionError(ExpressionError):
    """The value stack does not hold what the RPN queue requires."""
    pass


class UnmatchedParenthesisError(ExpressionError):
    """A ')' has no matching '(' or a '(' is never closed."""
    pass


class EvaluationError(ExpressionError):
    """An operator function failed (division by zero, domain error, ...)."""
    pass


class ConfigError(ExpressionError):
    """A configuration file could not be loaded or failed validation."""

    def __init__(self, message: str, issues: list | None = None):
        self.issues = issues or []
        super().__init__(message)

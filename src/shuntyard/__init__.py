"""shuntyard: an embeddable infix arithmetic engine.

This package provides:
- Scanner: splits expressions into number, word and operator events
- RPNVisitor: shunting-yard conversion to an RPN queue
- Evaluation steps: Scalar, BinaryOp and UnaryTrickOp
- ExpressionContext: operators, precedences and constants
- Calculator: evaluates expressions against a context
"""

from shuntyard.calculator import Calculator, calculate
from shuntyard.context import (
    PAREN_PRECEDENCE,
    ExpressionContext,
    create_simple_context,
)
from shuntyard.converter import RPNVisitor, convert_to_rpn
from shuntyard.errors import (
    ConfigError,
    EvaluationError,
    ExpressionError,
    MalformedExpressionError,
    MissingPrecedenceError,
    UnknownOperatorError,
    UnmatchedParenthesisError,
    UnrecognizedUnaryError,
    UnresolvedIdentifierError,
)
from shuntyard.functions import FunctionCategory, FunctionDefinition, FunctionRegistry
from shuntyard.scanner import ExpressionVisitor, Token, TokenType, parse_expression, tokenize
from shuntyard.steps import (
    BinaryOp,
    EvaluationStep,
    Scalar,
    UnaryTrickOp,
    create_step,
    format_rpn,
)

__all__ = [
    # Calculator
    "Calculator",
    "calculate",
    # Context
    "PAREN_PRECEDENCE",
    "ExpressionContext",
    "create_simple_context",
    # Converter
    "RPNVisitor",
    "convert_to_rpn",
    # Errors
    "ConfigError",
    "EvaluationError",
    "ExpressionError",
    "MalformedExpressionError",
    "MissingPrecedenceError",
    "UnknownOperatorError",
    "UnmatchedParenthesisError",
    "UnrecognizedUnaryError",
    "UnresolvedIdentifierError",
    # Functions
    "FunctionCategory",
    "FunctionDefinition",
    "FunctionRegistry",
    # Scanner
    "ExpressionVisitor",
    "Token",
    "TokenType",
    "parse_expression",
    "tokenize",
    # Steps
    "BinaryOp",
    "EvaluationStep",
    "Scalar",
    "UnaryTrickOp",
    "create_step",
    "format_rpn",
]

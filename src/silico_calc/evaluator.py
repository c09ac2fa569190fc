"""
Expression evaluation for Silico Calculator.

Turns the display text into a number and the number back into display text.
Supports: + - * / ^, unary minus and plus, parentheses, and decimal numbers.

Grammar (``^`` is right-associative and binds tighter than unary minus)::

    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary)*
    unary      := ("-" | "+") unary | power
    power      := primary ("^" unary)?
    primary    := NUMBER | "(" expression ")"
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal

import structlog

from silico_calc.models import (
    ERROR_MARKER,
    CalculatorError,
    GlyphVariant,
    MalformedExpressionError,
    NonFiniteResultError,
)

logger = structlog.get_logger()

# Deepest chain of brackets, signs and exponents the parser will follow
MAX_NESTING = 100


# =============================================================================
# Tokenizer
# =============================================================================

_TOKEN_SPEC = [
    ("NUMBER", r"\d+\.?\d*|\.\d+"),
    ("OP", r"[-+*/^]"),
    ("LPAREN", r"\("),
    ("RPAREN", r"\)"),
    ("SKIP", r"\s+"),
    ("MISMATCH", r"."),
]
_TOKEN_RE = re.compile("|".join(f"(?P<{name}>{pattern})" for name, pattern in _TOKEN_SPEC))


@dataclass(frozen=True)
class Token:
    """A lexical token of a normalized expression."""
    kind: str  # "NUMBER", "OP", "LPAREN", "RPAREN" or "EOF"
    text: str
    pos: int


def tokenize(expression: str) -> list[Token]:
    """Split a normalized expression into tokens, ending with an EOF token."""
    tokens: list[Token] = []
    for match in _TOKEN_RE.finditer(expression):
        kind = match.lastgroup
        if kind == "SKIP":
            continue
        if kind == "MISMATCH":
            raise MalformedExpressionError(
                f"Unexpected character {match.group()!r} at position {match.start()}"
            )
        tokens.append(Token(kind, match.group(), match.start()))
    tokens.append(Token("EOF", "", len(expression)))
    return tokens


# =============================================================================
# Parser
# =============================================================================

def _checked(value: float) -> float:
    if not math.isfinite(value):
        raise NonFiniteResultError(f"Result is not finite: {value}")
    return value


class Parser:
    """Recursive-descent parser that evaluates as it parses."""

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.index = 0
        self.depth = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        if token.kind != "EOF":
            self.index += 1
        return token

    def _accept_op(self, *ops: str) -> str | None:
        if self.current.kind == "OP" and self.current.text in ops:
            return self._advance().text
        return None

    def parse(self) -> float:
        """Parse the whole token stream and return its value."""
        if self.current.kind == "EOF":
            raise MalformedExpressionError("Empty expression")
        value = self.expression()
        if self.current.kind != "EOF":
            raise MalformedExpressionError(
                f"Unexpected {self.current.text!r} at position {self.current.pos}"
            )
        return value

    def expression(self) -> float:
        value = self.term()
        op = self._accept_op("+", "-")
        while op is not None:
            right = self.term()
            value = _checked(value + right if op == "+" else value - right)
            op = self._accept_op("+", "-")
        return value

    def term(self) -> float:
        value = self.unary()
        op = self._accept_op("*", "/")
        while op is not None:
            right = self.unary()
            if op == "*":
                value = _checked(value * right)
            elif right == 0:
                raise NonFiniteResultError("Division by zero")
            else:
                value = _checked(value / right)
            op = self._accept_op("*", "/")
        return value

    def unary(self) -> float:
        self.depth += 1
        if self.depth > MAX_NESTING:
            raise MalformedExpressionError("Expression is nested too deeply")
        try:
            op = self._accept_op("-", "+")
            if op == "-":
                return -self.unary()
            if op == "+":
                return self.unary()
            return self.power()
        finally:
            self.depth -= 1

    def power(self) -> float:
        base = self.primary()
        if self._accept_op("^") is None:
            return base
        exponent = self.unary()
        try:
            return _checked(math.pow(base, exponent))
        except (OverflowError, ValueError) as e:
            raise NonFiniteResultError(f"Cannot raise {base} to {exponent}: {e}") from e

    def primary(self) -> float:
        token = self._advance()
        if token.kind == "NUMBER":
            return _checked(float(token.text))
        if token.kind == "LPAREN":
            value = self.expression()
            if self._advance().kind != "RPAREN":
                raise MalformedExpressionError("Unbalanced parentheses")
            return value
        if token.kind == "EOF":
            raise MalformedExpressionError("Unexpected end of expression")
        raise MalformedExpressionError(f"Unexpected {token.text!r} at position {token.pos}")


# =============================================================================
# Public API
# =============================================================================

def normalize_glyphs(text: str) -> str:
    """Rewrite display-only operator glyphs into parser operators."""
    return text.replace(GlyphVariant.UNICODE.multiply, "*").replace(GlyphVariant.UNICODE.divide, "/")


def evaluate_expression(expression: str) -> float:
    """
    Evaluate an arithmetic expression.

    Display glyphs are accepted. Raises ``MalformedExpressionError`` for
    syntax errors, including nesting deeper than ``MAX_NESTING``, and
    ``NonFiniteResultError`` for division by zero, overflow and non-real
    powers.
    """
    parser = Parser(tokenize(normalize_glyphs(expression)))
    try:
        return parser.parse()
    except RecursionError as e:
        raise MalformedExpressionError("Expression is nested too deeply") from e


def format_result(value: float, precision: int = 8) -> str:
    """
    Format a result for the screen.

    Integral values print without a decimal point or exponent; everything
    else is rounded to ``precision`` fractional digits with trailing zeros
    removed.
    """
    if value.is_integer():
        # repr() gives the shortest round-tripping digits, so 1e22 prints as 1 and 22 zeros
        return str(int(Decimal(repr(value))))
    return f"{value:.{precision}f}".rstrip("0")


def evaluate_display(text: str, precision: int = 8) -> str:
    """Evaluate screen text, returning the formatted result or the error marker."""
    try:
        value = evaluate_expression(text)
    except CalculatorError as e:
        logger.info("Evaluation failed", expression=text, error=str(e))
        return ERROR_MARKER
    return format_result(value, precision)

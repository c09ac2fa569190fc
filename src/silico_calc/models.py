"""
Core data models for Silico Calculator.

Defines the glyph variants, the fixed token set, the command values delivered
by the front-end, and the calculator error hierarchy.
"""

from dataclasses import dataclass
from enum import Enum


#: Display text shown in place of the expression when evaluation fails.
ERROR_MARKER = "Error"

DIGITS = tuple("0123456789")


# =============================================================================
# Enums
# =============================================================================

class GlyphVariant(str, Enum):
    """Operator glyph sets used on the keypad and on screen."""
    UNICODE = "unicode"
    ASCII = "ascii"

    @property
    def multiply(self) -> str:
        return "×" if self is GlyphVariant.UNICODE else "*"

    @property
    def divide(self) -> str:
        return "÷" if self is GlyphVariant.UNICODE else "/"

    @property
    def operators(self) -> frozenset[str]:
        """Binary operator glyphs that receive a trailing space after backspace."""
        return frozenset({"+", "-", self.multiply, self.divide})


class CommandKind(str, Enum):
    """Discrete input events understood by the calculator."""
    APPEND = "append"
    BACKSPACE = "backspace"
    CLEAR = "clear"
    EVALUATE = "evaluate"


# =============================================================================
# Tokens and commands
# =============================================================================

def spaced(glyph: str) -> str:
    """Return the operator token for a glyph, padded on both sides."""
    return f" {glyph} "


def tokens_for_variant(variant: GlyphVariant) -> frozenset[str]:
    """Return the fixed set of tokens a key press may append."""
    operators = ("+", "-", variant.multiply, variant.divide, "^")
    return frozenset(DIGITS) | {".", "(", ")"} | {spaced(op) for op in operators}


@dataclass(frozen=True)
class Command:
    """A single command raised by the front-end for one input event."""
    kind: CommandKind
    token: str | None = None

    def __post_init__(self):
        if (self.kind is CommandKind.APPEND) != (self.token is not None):
            raise ValueError("Only append commands carry a token")

    @classmethod
    def append(cls, token: str) -> "Command":
        return cls(CommandKind.APPEND, token)

    @classmethod
    def backspace(cls) -> "Command":
        return cls(CommandKind.BACKSPACE)

    @classmethod
    def clear(cls) -> "Command":
        return cls(CommandKind.CLEAR)

    @classmethod
    def evaluate(cls) -> "Command":
        return cls(CommandKind.EVALUATE)


# =============================================================================
# Errors
# =============================================================================

class CalculatorError(Exception):
    """Base exception for calculator errors."""
    pass


class MalformedExpressionError(CalculatorError):
    """Raised when an expression cannot be parsed."""
    pass


class NonFiniteResultError(CalculatorError):
    """Raised when evaluation produces an infinite, NaN or non-real value."""
    pass


class UnknownTokenError(CalculatorError, ValueError):
    """Raised when appending text that is not part of the token set."""
    pass

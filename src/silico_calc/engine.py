"""
Calculator engine for Silico Calculator.

Holds the one ``ExpressionBuffer`` of a running calculator and applies the
commands raised by the front-end to it, strictly in the order they arrive.
"""

import structlog

from silico_calc.buffer import ExpressionBuffer
from silico_calc.config import settings
from silico_calc.evaluator import evaluate_display
from silico_calc.models import Command, CommandKind, GlyphVariant

logger = structlog.get_logger()


class Calculator:
    """
    Command handler that owns the expression buffer.

    Front-ends keep a single instance across redraws, call ``dispatch`` once
    per input event and render ``current_text()``.
    """

    def __init__(
        self,
        variant: GlyphVariant | None = None,
        precision: int | None = None,
    ):
        self.variant = GlyphVariant(variant or settings.glyph_variant)
        self.precision = precision or settings.precision
        self.buffer = ExpressionBuffer(self.variant)

    def dispatch(self, command: Command) -> str:
        """Apply one command and return the new display text."""
        logger.debug("Dispatching command", kind=command.kind.value, token=command.token)

        if command.kind is CommandKind.APPEND:
            self.buffer.append(command.token)
        elif command.kind is CommandKind.BACKSPACE:
            self.buffer.backspace()
        elif command.kind is CommandKind.CLEAR:
            self.buffer.clear()
        elif command.kind is CommandKind.EVALUATE:
            self.buffer.replace(evaluate_display(self.buffer.current_text(), self.precision))
        else:
            raise ValueError(f"Unhandled command kind: {command.kind}")

        return self.buffer.current_text()

    def append(self, token: str) -> str:
        return self.dispatch(Command.append(token))

    def backspace(self) -> str:
        return self.dispatch(Command.backspace())

    def clear(self) -> str:
        return self.dispatch(Command.clear())

    def evaluate(self) -> str:
        return self.dispatch(Command.evaluate())

    def current_text(self) -> str:
        """Return the display text without changing it."""
        return self.buffer.current_text()

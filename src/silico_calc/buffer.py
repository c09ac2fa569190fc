"""
Expression buffer for Silico Calculator.

Owns the editable expression text and applies the append, backspace and
clear edits with the display normalization rules:
- operator tokens carry their own surrounding spaces
- any key pressed after an error starts a fresh expression
- backspace deletes one grapheme cluster from the visible end of the text
  and restores the space after an exposed operator
"""

import regex
import structlog

from silico_calc.models import ERROR_MARKER, GlyphVariant, UnknownTokenError, tokens_for_variant

logger = structlog.get_logger()

# One extended grapheme cluster (user-perceived character)
_GRAPHEME = regex.compile(r"\X")


class ExpressionBuffer:
    """
    The single mutable expression string shown on the calculator screen.

    The buffer is owned by one ``Calculator`` for the lifetime of the
    application; renderers only ever read ``current_text()``.
    """

    def __init__(self, variant: GlyphVariant = GlyphVariant.UNICODE, text: str = ""):
        self.variant = variant
        self.tokens = tokens_for_variant(variant)
        self._text = text

    def __len__(self) -> int:
        """Number of grapheme clusters in the buffer."""
        return len(_GRAPHEME.findall(self._text))

    def __repr__(self):
        return f"ExpressionBuffer({self._text!r})"

    def current_text(self) -> str:
        """Return the buffer contents for display."""
        return self._text

    def is_error(self) -> bool:
        return self._text == ERROR_MARKER

    def append(self, token: str) -> None:
        """Append a keypad token, starting over if the screen shows an error."""
        if token not in self.tokens:
            raise UnknownTokenError(f"Unknown token: {token!r}")

        if self.is_error():
            self._text = ""

        self._text += token

    def backspace(self) -> None:
        """Remove the last visible character."""
        clusters = _GRAPHEME.findall(self._text.rstrip())
        text = "".join(clusters[:-1]).rstrip()

        # Operator tokens are stored as " op "; put back the space the strip removed
        if text and text[-1] in self.variant.operators:
            text += " "

        logger.debug("Backspace", before=self._text, after=text)
        self._text = text

    def clear(self) -> None:
        """Reset the buffer to the empty string."""
        self._text = ""

    def replace(self, text: str) -> None:
        """Overwrite the whole buffer, as evaluation does with its result."""
        self._text = text

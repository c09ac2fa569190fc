"""
Keypad layout and key bindings for Silico Calculator.

Maps the physical inputs of the front-end (a key chord, or a character typed
into the terminal) to calculator commands. The calculator core never sees
keys, only the resulting ``Command`` values.
"""

from dataclasses import dataclass

from silico_calc.models import DIGITS, Command, CommandKind, GlyphVariant, spaced


DIGIT_BACKGROUND = "#353A4E"
OPERATOR_BACKGROUND = "#2C2C40"
EQUALS_BACKGROUND = "#4CC2FF"
DEFAULT_FOREGROUND = "#FFFFFF"


@dataclass(frozen=True)
class Button:
    """
    A keypad button and the key chord that presses it.

    ``requires_shift`` is True when shift must be held, False when it must
    not be held, and None when the shift state does not matter.
    """
    label: str
    key: str
    command: Command
    requires_shift: bool | None = False
    background: str = OPERATOR_BACKGROUND
    foreground: str = DEFAULT_FOREGROUND

    def is_pressed(self, key: str, shift: bool) -> bool:
        if key != self.key:
            return False
        if self.requires_shift is None:
            return True
        return self.requires_shift == shift


def _digit(digit: str) -> Button:
    return Button(digit, f"Num{digit}", Command.append(digit), background=DIGIT_BACKGROUND)


def _operator(glyph: str, key: str, requires_shift: bool | None = False) -> Button:
    return Button(glyph, key, Command.append(spaced(glyph)), requires_shift)


# Typed character -> (key, shift held) on a US keyboard layout
CHAR_CHORDS: dict[str, tuple[str, bool]] = {
    **{digit: (f"Num{digit}", False) for digit in DIGITS},
    ".": ("Period", False),
    "^": ("Num6", True),
    "/": ("Slash", False),
    "÷": ("Slash", False),
    "*": ("Num8", True),
    "x": ("Num8", True),
    "×": ("Num8", True),
    "-": ("Minus", False),
    "+": ("Plus", True),
    "(": ("Num9", True),
    ")": ("Num0", True),
    "=": ("Enter", False),
    "\n": ("Enter", False),
    "\r": ("Enter", False),
    "c": ("C", False),
    "C": ("C", False),
    "<": ("Backspace", False),
    "\b": ("Backspace", False),
    "\x7f": ("Backspace", False),
}


class Keypad:
    """The button grid of the calculator plus its keyboard-only bindings."""

    def __init__(self, rows: list[list[Button]], hidden: list[Button] | None = None):
        self.rows = rows
        self.hidden = hidden or []

    @classmethod
    def for_variant(cls, variant: GlyphVariant = GlyphVariant.UNICODE) -> "Keypad":
        """Build the standard 5x4 layout using the given operator glyphs."""
        rows = [
            [
                Button("C", "C", Command.clear()),
                Button(".", "Period", Command.append(".")),
                _operator("^", "Num6", requires_shift=True),
                _operator(variant.divide, "Slash"),
            ],
            [_digit("7"), _digit("8"), _digit("9"), _operator(variant.multiply, "Num8", requires_shift=True)],
            [_digit("4"), _digit("5"), _digit("6"), _operator("-", "Minus")],
            [_digit("1"), _digit("2"), _digit("3"), _operator("+", "Plus", requires_shift=None)],
            [
                Button("(", "Num9", Command.append("("), requires_shift=True),
                _digit("0"),
                Button(")", "Num0", Command.append(")"), requires_shift=True),
                Button(
                    "=", "Enter", Command.evaluate(),
                    background=EQUALS_BACKGROUND, foreground="#000000",
                ),
            ],
        ]
        hidden = [Button("⌫", "Backspace", Command.backspace())]
        return cls(rows, hidden)

    @property
    def buttons(self) -> list[Button]:
        return [button for row in self.rows for button in row] + self.hidden

    @property
    def tokens(self) -> frozenset[str]:
        """Every token a button on this keypad can append."""
        return frozenset(
            button.command.token
            for button in self.buttons
            if button.command.kind is CommandKind.APPEND
        )

    def resolve(self, key: str, shift: bool = False) -> Command | None:
        """Return the command for a key chord, or None if no button is bound to it."""
        for button in self.buttons:
            if button.is_pressed(key, shift):
                return button.command
        return None

    def resolve_char(self, char: str) -> Command | None:
        """Return the command for a typed character, or None if it is not a key."""
        chord = CHAR_CHORDS.get(char)
        if chord is None:
            return None
        return self.resolve(*chord)

"""
Tests for the keypad layout and key bindings.
"""

import pytest

from silico_calc.keypad import DIGIT_BACKGROUND, EQUALS_BACKGROUND, Button, Keypad
from silico_calc.models import Command, GlyphVariant, tokens_for_variant


class TestLayout:
    """Test the button grid."""

    def setup_method(self):
        self.keypad = Keypad.for_variant(GlyphVariant.UNICODE)

    def test_grid_is_five_by_four(self):
        assert len(self.keypad.rows) == 5
        assert all(len(row) == 4 for row in self.keypad.rows)

    def test_labels(self):
        labels = [[button.label for button in row] for row in self.keypad.rows]
        assert labels == [
            ["C", ".", "^", "÷"],
            ["7", "8", "9", "×"],
            ["4", "5", "6", "-"],
            ["1", "2", "3", "+"],
            ["(", "0", ")", "="],
        ]

    def test_colors(self):
        buttons = {button.label: button for button in self.keypad.buttons}
        assert buttons["7"].background == DIGIT_BACKGROUND
        assert buttons["="].background == EQUALS_BACKGROUND
        assert buttons["="].foreground == "#000000"

    @pytest.mark.parametrize("variant", list(GlyphVariant))
    def test_tokens_match_token_set(self, variant):
        assert Keypad.for_variant(variant).tokens == tokens_for_variant(variant)


class TestResolve:
    """Test key chord resolution."""

    def setup_method(self):
        self.keypad = Keypad.for_variant(GlyphVariant.UNICODE)

    def test_digit_without_shift(self):
        assert self.keypad.resolve("Num8") == Command.append("8")

    def test_shifted_digit_is_operator(self):
        assert self.keypad.resolve("Num8", shift=True) == Command.append(" × ")
        assert self.keypad.resolve("Num6", shift=True) == Command.append(" ^ ")
        assert self.keypad.resolve("Num9", shift=True) == Command.append("(")
        assert self.keypad.resolve("Num0", shift=True) == Command.append(")")

    def test_shifted_digit_without_binding(self):
        assert self.keypad.resolve("Num7", shift=True) is None

    def test_plus_ignores_shift(self):
        assert self.keypad.resolve("Plus", shift=False) == Command.append(" + ")
        assert self.keypad.resolve("Plus", shift=True) == Command.append(" + ")

    def test_control_keys(self):
        assert self.keypad.resolve("Enter") == Command.evaluate()
        assert self.keypad.resolve("Backspace") == Command.backspace()
        assert self.keypad.resolve("C") == Command.clear()

    def test_unbound_key(self):
        assert self.keypad.resolve("Q") is None

    def test_button_is_pressed(self):
        button = Button("×", "Num8", Command.append(" × "), requires_shift=True)
        assert button.is_pressed("Num8", True)
        assert not button.is_pressed("Num8", False)
        assert not button.is_pressed("Num9", True)


class TestResolveChar:
    """Test typed character resolution."""

    @pytest.mark.parametrize("char, command", [
        ("7", Command.append("7")),
        (".", Command.append(".")),
        ("*", Command.append(" × ")),
        ("x", Command.append(" × ")),
        ("/", Command.append(" ÷ ")),
        ("-", Command.append(" - ")),
        ("+", Command.append(" + ")),
        ("^", Command.append(" ^ ")),
        ("(", Command.append("(")),
        (")", Command.append(")")),
        ("=", Command.evaluate()),
        ("\n", Command.evaluate()),
        ("c", Command.clear()),
        ("<", Command.backspace()),
    ])
    def test_characters(self, char, command):
        assert Keypad.for_variant(GlyphVariant.UNICODE).resolve_char(char) == command

    def test_ascii_variant(self):
        keypad = Keypad.for_variant(GlyphVariant.ASCII)
        assert keypad.resolve_char("*") == Command.append(" * ")
        assert keypad.resolve_char("÷") == Command.append(" / ")

    @pytest.mark.parametrize("char", ["a", " ", "%"])
    def test_unknown_characters(self, char):
        assert Keypad.for_variant(GlyphVariant.UNICODE).resolve_char(char) is None

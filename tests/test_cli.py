"""
Tests for the command-line interface.
"""

from typer.testing import CliRunner

from silico_calc.cli import app

runner = CliRunner()


class TestEval:
    """Test the eval command."""

    def test_eval_prints_result(self):
        result = runner.invoke(app, ["eval", "7 + 3"])
        assert result.exit_code == 0
        assert result.output.strip() == "10"

    def test_eval_error_exits_nonzero(self):
        result = runner.invoke(app, ["eval", "(5"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestPress:
    """Test the press command."""

    def test_press_evaluates(self):
        result = runner.invoke(app, ["press", "7+3="])
        assert result.exit_code == 0
        assert result.output.strip() == "10"

    def test_press_shows_expression(self):
        result = runner.invoke(app, ["press", "2*3"])
        assert result.output.strip() == "2 × 3"

    def test_press_after_error(self):
        result = runner.invoke(app, ["press", "(5=9"])
        assert result.output.strip() == "9"

    def test_press_backspace(self):
        result = runner.invoke(app, ["press", "12<"])
        assert result.output.strip() == "1"

    def test_press_ascii(self):
        result = runner.invoke(app, ["--ascii", "press", "6*7"])
        assert result.output.strip() == "6 * 7"

    def test_press_ignores_unknown_keys(self):
        result = runner.invoke(app, ["press", "7a"])
        assert result.exit_code == 0
        assert "Ignoring key" in result.output


class TestKeypad:
    """Test the keypad command."""

    def test_keypad_lists_buttons(self):
        result = runner.invoke(app, ["keypad"])
        assert result.exit_code == 0
        for label in ["C", "÷", "×", "="]:
            assert label in result.output


class TestRepl:
    """Test the interactive session."""

    def test_repl_evaluates_lines(self):
        result = runner.invoke(app, ["repl"], input="7+3=\nquit\n")
        assert result.exit_code == 0
        assert "10" in result.output

    def test_repl_enter_does_not_evaluate(self):
        result = runner.invoke(app, ["repl"], input="7+\n3\n=\n")
        assert result.exit_code == 0
        assert "7 + 3" in result.output
        assert "10" in result.output

    def test_repl_banner_explains_evaluate_key(self):
        result = runner.invoke(app, ["repl"], input="quit\n")
        assert "'=' evaluates" in result.output

    def test_repl_ends_on_eof(self):
        result = runner.invoke(app, ["repl"], input="12\n")
        assert result.exit_code == 0
        assert "12" in result.output

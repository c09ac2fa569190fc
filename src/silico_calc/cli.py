"""
Command-line interface for Silico Calculator.

Provides commands for:
- Evaluating an expression
- Replaying a sequence of key presses
- Showing the keypad
- Running an interactive calculator session
"""

import logging
import sys

import structlog
import typer
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from silico_calc import __version__
from silico_calc.config import keypad_config, settings
from silico_calc.engine import Calculator
from silico_calc.evaluator import evaluate_display
from silico_calc.keypad import Keypad
from silico_calc.models import ERROR_MARKER, GlyphVariant

app = typer.Typer(
    name="silico",
    help="Silico Calculator - pocket calculator in the terminal",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    ascii_glyphs: bool = typer.Option(False, "--ascii", help="Use * and / instead of × and ÷"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Silico Calculator - pocket calculator in the terminal."""
    level = logging.DEBUG if verbose or settings.debug else logging.getLevelName(settings.log_level)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
    ctx.obj = GlyphVariant.ASCII if ascii_glyphs else settings.glyph_variant


# =============================================================================
# Commands
# =============================================================================

@app.command("eval")
def eval_expression(
    expression: str = typer.Argument(..., help="Expression, e.g. '2 × (3 + 4)'"),
):
    """Evaluate an expression and print the result."""
    result = evaluate_display(expression, settings.precision)
    if result == ERROR_MARKER:
        console.print(f"[red]{result}[/]")
        raise typer.Exit(1)
    console.print(result)


@app.command()
def press(
    ctx: typer.Context,
    keys: str = typer.Argument(..., help="Keys to press, e.g. '7+3='; '<' is backspace, 'c' clears"),
):
    """Press keys on a fresh calculator and print the screen."""
    calculator = Calculator(ctx.obj)
    keypad = Keypad.for_variant(calculator.variant)
    _feed(calculator, keypad, keys)
    console.print(calculator.current_text())


@app.command()
def keypad(ctx: typer.Context):
    """Show the keypad layout."""
    console.print(_render_keypad(Keypad.for_variant(ctx.obj)))


@app.command()
def repl(ctx: typer.Context):
    """Run an interactive calculator session."""
    calculator = Calculator(ctx.obj)
    pad = Keypad.for_variant(calculator.variant)

    console.print(f"[bold]{settings.app_name}[/] [dim]v{__version__}[/]")
    console.print("[dim]Type keys and press Enter; '=' evaluates, '<' is backspace, 'c' clears, 'quit' exits.[/]")
    if keypad_config.show_keypad:
        console.print(_render_keypad(pad))

    while True:
        try:
            line = console.input("[bold cyan]>[/] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if line.strip() in ("quit", "exit"):
            break

        _feed(calculator, pad, line)
        console.print(_render_screen(calculator.current_text()))


# =============================================================================
# Helpers
# =============================================================================

def _feed(calculator: Calculator, pad: Keypad, keys: str) -> None:
    """Dispatch the command for each typed character."""
    for char in keys:
        command = pad.resolve_char(char)
        if command is None:
            if not char.isspace():
                console.print(f"[yellow]Ignoring key: {char!r}[/]")
            continue
        calculator.dispatch(command)


def _render_screen(text: str) -> Panel:
    style = "bold red" if text == ERROR_MARKER else "bold white"
    return Panel(
        Text(text or " ", style=style, justify="right"),
        width=keypad_config.screen_width + 4,
        style="on #1A1F32",
    )


def _render_keypad(pad: Keypad) -> Group:
    table = Table(show_header=False, show_edge=False, box=None, padding=(0, 1))
    for _ in range(len(pad.rows[0])):
        table.add_column(justify="center")

    for row in pad.rows:
        table.add_row(*[
            Text(f" {button.label} ", style=f"bold {button.foreground} on {button.background}")
            for button in row
        ])

    return Group(_render_screen(""), table)


if __name__ == "__main__":
    app()

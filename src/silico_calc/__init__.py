"""
Silico Calculator - pocket-calculator input and evaluation core

Maintains a single editable expression buffer driven by discrete key commands
(append token, backspace, clear, evaluate) and renders it as a normalized
display string. The terminal front-end in ``silico_calc.cli`` renders the
screen and the calculator keypad.
"""

__version__ = "1.0.0"
__author__ = "Silico Calculator Team"

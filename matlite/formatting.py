"""
Console presentation: leveled messages, caret diagnostics and variable dumps.

Nothing here touches calculator state.
"""

import sys
from enum import Enum
from typing import List, Optional, TextIO

from .state import Variable


class MessageLevel(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


ANSI_COLORS = {
    MessageLevel.INFO: "\033[34m",      # blue
    MessageLevel.WARNING: "\033[33m",   # yellow
    MessageLevel.ERROR: "\033[31m",     # red
}
ANSI_RESET = "\033[0m"


def _supports_color(out: TextIO) -> bool:
    isatty = getattr(out, "isatty", None)
    return bool(isatty and isatty())


def print_message(level: MessageLevel, message: str, out: Optional[TextIO] = None,
                  use_color: bool = True) -> None:
    """Print ``message`` followed by a newline, colored by level on a terminal."""
    out = out or sys.stdout
    if use_color and _supports_color(out):
        out.write(f"{ANSI_COLORS[level]}{message}{ANSI_RESET}\n")
    else:
        out.write(f"{message}\n")


def format_error_caret(text: str, error_location: int) -> str:
    """The input, then a caret under column ``error_location``."""
    return f"{text}\n{' ' * error_location}^\n"


def format_variable(var: Variable) -> str:
    """
    Render a variable the way the REPL shows it::

        Name: a
        Size = (2 X 2).
        Data = [1.000000 , 2.000000
                3.000000 , 4.000000]
    """
    value = var.value
    lines: List[str] = [f"Name: {var.name}", f"Size = ({value.rows} X {value.cols})."]

    rows = [" , ".join(f"{x:f}" for x in value.get_row(i)) for i in range(value.rows)]
    if not rows:
        lines.append("Data = []")
    else:
        lines.append("Data = [" + "\n        ".join(rows) + "]")

    return "\n".join(lines) + "\n"


def print_variable(var: Variable, out: Optional[TextIO] = None) -> None:
    (out or sys.stdout).write(format_variable(var))

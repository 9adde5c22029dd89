"""Zeilenorientierte Textausgabe über Rich.

Datensatz- und Alarmzeilen gehen direkt in den Stream der Konsole, ohne
Rich-Rendering: Markup, Tabulatoren und Steuerzeichen kommen unverändert an.
"""

from typing import Iterable, Optional

from rich.console import Console

# Ohne festes ``file`` schreibt Rich auf das jeweils aktuelle sys.stdout.
_default_console = Console()


def get_console(console: Optional[Console] = None) -> Console:
    """Gibt die übergebene oder die gemeinsame Standard-Konsole zurück."""
    return console if console is not None else _default_console


def emit_line(console: Optional[Console], text: str = "") -> None:
    """Schreibt genau eine Textzeile unverändert."""
    stream = get_console(console).file
    stream.write(text + "\n")
    stream.flush()


def emit_lines(console: Optional[Console], lines: Iterable[str]) -> None:
    for line in lines:
        emit_line(console, line)

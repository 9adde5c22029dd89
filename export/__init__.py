"""Ausgabe-Modul: zeilenweise Textausgabe und Tabellenübersicht (Rich)."""

from export.console_output import emit_line, emit_lines, get_console
from export.table_renderer import build_records_table

__all__ = ["emit_line", "emit_lines", "get_console", "build_records_table"]

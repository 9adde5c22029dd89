"""Tabellarische Übersicht des Hotel-Registers für die Terminal-Anzeige.

Wird von ``show --table`` und ``demo --table`` verwendet.
"""

from typing import TYPE_CHECKING, Iterable

from rich import box
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from models.record import Record


def record_detail(record: "Record") -> str:
    """Variantenspezifische Anzeigezeilen ohne die gemeinsame Basiszeile."""
    return "\n".join(record.info_lines()[1:])


def build_records_table(records: Iterable["Record"], title: str = "Hotel Records") -> Table:
    """Baut eine Rich-Tabelle (Art, ID, Name, Details) in Einfügereihenfolge."""
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Kind", style="bold")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Details")
    for record in records:
        table.add_row(record.KIND, str(record.id), escape(record.name), escape(record_detail(record)))
    return table

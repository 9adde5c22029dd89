"""Datenmodell für einen Mitarbeiter (Pydantic v2)."""

from typing import ClassVar, Optional

from rich.console import Console

from export.console_output import emit_line
from models.record import Record


class Employee(Record):
    """Mitarbeiter mit frei änderbarer Position. Löst nie Alarme aus."""

    KIND: ClassVar[str] = "employee"

    position: str   # "Receptionist", "Housekeeper" (keine Prüfung)

    def __init__(self, name: str, id: int, position: str) -> None:
        super().__init__(name=name, id=id, position=position)

    def info_lines(self) -> list[str]:
        return super().info_lines() + [f"Position: {self.position}"]

    def perform_action(self, console: Optional[Console] = None) -> None:
        emit_line(console, f"{self.name} is performing their duties as {self.position}.")

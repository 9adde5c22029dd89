"""Datenmodell für einen Hotelgast (Pydantic v2)."""

from typing import ClassVar, Optional

from pydantic import Field, field_validator
from rich.console import Console

from export.console_output import emit_line
from models.record import Record


class Guest(Record):
    """Gast mit Zimmernummer und Aufenthaltsdauer (beide unveränderlich)."""

    KIND: ClassVar[str] = "guest"
    # Ab mehr als so vielen Nächten gilt ein Aufenthalt als Langzeitaufenthalt
    LONG_STAY_NIGHTS: ClassVar[int] = 10
    LONG_STAY_ALERT: ClassVar[str] = "Long stay detected, consider offering a discount."

    room_number: int = Field(frozen=True, strict=True)
    nights: int = Field(frozen=True, strict=True)

    def __init__(self, name: str, id: int, room_number: int, nights: int) -> None:
        super().__init__(name=name, id=id, room_number=room_number, nights=nights)

    @field_validator("room_number")
    @classmethod
    def _check_room_number(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Invalid room number")
        return v

    @field_validator("nights")
    @classmethod
    def _check_nights(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Nights must be positive")
        return v

    @property
    def is_long_stay(self) -> bool:
        return self.nights > self.LONG_STAY_NIGHTS

    def info_lines(self) -> list[str]:
        return super().info_lines() + [f"Room: {self.room_number} | Nights: {self.nights}"]

    def perform_action(self, console: Optional[Console] = None) -> None:
        emit_line(console, f"{self.name} is staying in room {self.room_number} for {self.nights} nights.")
        if self.is_long_stay:
            self._trigger_alert(self.LONG_STAY_ALERT)

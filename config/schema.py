from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class RecordKind(str, Enum):
    GUEST = "guest"
    EMPLOYEE = "employee"
    ROOM = "room"


# Pflichtfelder je Art (zusätzlich zu name und id)
KIND_FIELDS: dict[RecordKind, tuple[str, ...]] = {
    RecordKind.GUEST: ("room_number", "nights"),
    RecordKind.EMPLOYEE: ("position",),
    RecordKind.ROOM: ("is_occupied",),
}


# ─── DATENSÄTZE ───

class RecordDef(BaseModel):
    """Beschreibung eines Datensatzes, aus dem beim Start ein Modell erzeugt wird.

    Welche Zusatzfelder nötig sind, hängt von ``kind`` ab:
    - guest:    room_number, nights
    - employee: position
    - room:     is_occupied

    Die eigentliche Wertprüfung (Name nicht leer, positive Zahlen) passiert
    erst beim Erzeugen des Modells.
    """
    # Art des Datensatzes
    kind: RecordKind
    # Anzeigename, z.B. "Ali Ahmad" oder "Room-203"
    name: str
    # Eindeutige Kennung (> 0)
    id: int
    # Nur Gäste: Zimmernummer
    room_number: Optional[int] = None
    # Nur Gäste: Anzahl Nächte
    nights: Optional[int] = None
    # Nur Mitarbeiter: Position
    position: Optional[str] = None
    # Nur Zimmer: belegt?
    is_occupied: Optional[bool] = None

    @model_validator(mode='after')
    def check_kind_fields(self):
        """Prüfe dass die zur Art passenden Felder gesetzt sind."""
        missing = [f for f in KIND_FIELDS[self.kind] if getattr(self, f) is None]
        if missing:
            raise ValueError(
                f"Datensatz '{self.name}' ({self.kind.value}): fehlende Felder {missing}")
        return self


# ─── AUSGABE ───

class OutputConfig(BaseModel):
    """Ausgabe- und Logging-Einstellungen."""
    # Datensätze zusätzlich als Tabelle anzeigen
    show_table: bool = Field(False,
        description="Datensätze zusätzlich als Rich-Tabelle anzeigen")
    # Log-Level (DEBUG, INFO, WARNING, ERROR)
    log_level: str = Field("WARNING",
        description="Log-Level für stderr")

    @model_validator(mode='after')
    def normalize_level(self):
        level = self.log_level.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unbekanntes Log-Level: {self.log_level}")
        self.log_level = level
        return self


# ─── GESAMT-CONFIG ───

class HotelConfig(BaseModel):
    """Gesamtkonfiguration des Hotels."""
    # Name des Hotels (Überschrift in der CLI)
    hotel_name: str = Field("Hotel",
        description="Name des Hotels")
    # Datensätze in Einfügereihenfolge
    records: list[RecordDef] = Field(default_factory=list,
        description="Gäste, Mitarbeiter und Zimmer")
    # Ausgabe-Einstellungen
    output: OutputConfig = Field(default_factory=OutputConfig)

    def count_by_kind(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for r in self.records:
            counts[r.kind.value] = counts.get(r.kind.value, 0) + 1
        return counts

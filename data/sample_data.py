"""Aufbau des Hotel-Registers aus der Konfiguration.

Übersetzt jede ``RecordDef`` in das passende Modell (Gast, Mitarbeiter,
Zimmer) und fügt alle Datensätze in Konfigurationsreihenfolge ein.
Ungültige Werte brechen den Aufbau mit dem typisierten Validierungsfehler ab.
"""

import logging
from typing import Optional

from rich.console import Console

from config.schema import KIND_FIELDS, HotelConfig, RecordDef
from models import RECORD_TYPES, Hotel, Record

logger = logging.getLogger(__name__)


def build_record(defn: RecordDef) -> Record:
    """Erzeugt einen einzelnen Datensatz aus seiner Beschreibung."""
    record_cls = RECORD_TYPES[defn.kind.value]
    extra = {field: getattr(defn, field) for field in KIND_FIELDS[defn.kind]}
    return record_cls(defn.name, defn.id, **extra)


def build_hotel(config: HotelConfig, console: Optional[Console] = None) -> Hotel:
    """Erzeugt alle Datensätze und nimmt sie in ein neues Register auf."""
    hotel = Hotel(console)
    for defn in config.records:
        hotel.add_entity(build_record(defn))
    logger.info(f"{config.hotel_name}: {len(hotel)} Datensätze aufgenommen")
    return hotel

from models.record import Record
from models.guest import Guest
from models.employee import Employee
from models.room import Room
from models.hotel import Hotel
from models.statistics import RecordStatistics, increment_total, total_entities
from models.errors import (
    ImmutableFieldError,
    InvalidId,
    InvalidName,
    InvalidNights,
    InvalidRoomNumber,
    RecordValidationError,
)

# Geschlossene Menge der Varianten, Schlüssel = RecordKind-Wert der Konfiguration
RECORD_TYPES: dict[str, type[Record]] = {
    cls.KIND: cls for cls in (Guest, Employee, Room)
}

__all__ = [
    "Record",
    "Guest",
    "Employee",
    "Room",
    "Hotel",
    "RecordStatistics",
    "increment_total",
    "total_entities",
    "RECORD_TYPES",
    "RecordValidationError",
    "InvalidName",
    "InvalidId",
    "InvalidRoomNumber",
    "InvalidNights",
    "ImmutableFieldError",
]

"""Fehlerhierarchie für die Validierung von Hotel-Datensätzen.

Pydantic meldet Feldfehler als ``ValidationError``. An der Modellgrenze wird
daraus der typisierte Fehler des ersten ungültigen Feldes, damit Aufrufer
gezielt ``InvalidName``, ``InvalidId`` usw. abfangen können.
"""

from pydantic import ValidationError


class RecordValidationError(ValueError):
    """Basisklasse aller Validierungsfehler eines Datensatzes."""


class InvalidName(RecordValidationError):
    """Name ist leer oder besteht nur aus Leerzeichen."""


class InvalidId(RecordValidationError):
    """ID ist keine positive Ganzzahl."""


class InvalidRoomNumber(RecordValidationError):
    """Zimmernummer eines Gastes ist nicht positiv."""


class InvalidNights(RecordValidationError):
    """Anzahl der Nächte eines Gastes ist nicht positiv."""


class ImmutableFieldError(AttributeError):
    """Schreibzugriff auf ein nach der Erzeugung unveränderliches Feld."""


# Feldname → Fehlerklasse
_FIELD_ERRORS: dict[str, type[RecordValidationError]] = {
    "name": InvalidName,
    "id": InvalidId,
    "room_number": InvalidRoomNumber,
    "nights": InvalidNights,
}


def translate_validation_error(exc: ValidationError) -> Exception:
    """Übersetzt den ersten Pydantic-Fehler in die passende Fehlerklasse."""
    first = exc.errors()[0]
    field = str(first["loc"][0]) if first["loc"] else ""

    if first["type"] == "frozen_field":
        return ImmutableFieldError(f"Feld '{field}' ist nach der Erzeugung schreibgeschützt")

    message = first["msg"].removeprefix("Value error, ")
    error_cls = _FIELD_ERRORS.get(field, RecordValidationError)
    return error_cls(message)

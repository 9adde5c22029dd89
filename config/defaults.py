from config.schema import HotelConfig, OutputConfig, RecordDef, RecordKind


def default_records() -> list[RecordDef]:
    """Beispielbelegung: zwei Gäste, zwei Mitarbeiter, zwei Zimmer.

    Sara Ibrahim bleibt 12 Nächte (Langzeit-Alarm), Room-305 ist frei
    (Verfügbarkeits-Alarm).
    """
    return [
        RecordDef(kind=RecordKind.GUEST, name="Ali Ahmad", id=101,
                  room_number=203, nights=3),
        RecordDef(kind=RecordKind.GUEST, name="Sara Ibrahim", id=102,
                  room_number=305, nights=12),
        RecordDef(kind=RecordKind.EMPLOYEE, name="Omar Khaled", id=201,
                  position="Receptionist"),
        RecordDef(kind=RecordKind.EMPLOYEE, name="Lina Hasan", id=202,
                  position="Housekeeper"),
        RecordDef(kind=RecordKind.ROOM, name="Room-203", id=301,
                  is_occupied=True),
        RecordDef(kind=RecordKind.ROOM, name="Room-305", id=302,
                  is_occupied=False),
    ]


def default_hotel_config() -> HotelConfig:
    return HotelConfig(
        hotel_name="Hotel",
        records=default_records(),
        output=OutputConfig(),
    )

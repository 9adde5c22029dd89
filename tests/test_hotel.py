"""Tests für das Hotel-Register und den Aufbau aus der Konfiguration."""

import io

import pytest
from rich.console import Console

from config.defaults import default_hotel_config
from config.schema import HotelConfig, RecordDef, RecordKind
from data.sample_data import build_hotel, build_record
from export.table_renderer import build_records_table
from models import (
    RECORD_TYPES,
    Employee,
    Guest,
    Hotel,
    InvalidNights,
    Room,
    total_entities,
)


def _console() -> Console:
    return Console(file=io.StringIO(), width=200)


def _lines(console: Console) -> list[str]:
    return console.file.getvalue().splitlines()


@pytest.fixture
def console() -> Console:
    return _console()


# ─── REGISTER ─────────────────────────────────────────────────────────────────

class TestHotel:
    def test_add_entity_keeps_order_and_subscribes(self, console):
        hotel = Hotel(console)
        g = Guest("Ali", 101, 203, 3)
        e = Employee("Omar", 201, "Receptionist")
        hotel.add_entity(g)
        hotel.add_entity(e)
        assert hotel.entities == (g, e)
        assert len(hotel) == 2
        assert list(hotel) == [g, e]
        assert g.subscriber_count == 1
        assert e.subscriber_count == 1

    def test_entities_view_is_read_only(self, console):
        hotel = Hotel(console)
        hotel.add_entity(Room("R1", 301, True))
        view = hotel.entities
        assert isinstance(view, tuple)
        assert len(view) == 1

    def test_add_does_not_count(self, console):
        """Einfügen ändert den Zähler nicht, nur die Erzeugung."""
        r = Room("R1", 301, True)
        before = total_entities()
        Hotel(console).add_entity(r)
        assert total_entities() == before

    def test_handle_alert_writes_unchanged(self, console):
        Hotel(console).handle_alert("[ALERT for X]: irgendwas")
        assert _lines(console) == ["[ALERT for X]: irgendwas"]

    def test_handle_alert_keeps_control_characters(self, console):
        """Tabulator und Wagenrücklauf werden nicht umgeschrieben."""
        Hotel(console).handle_alert("a\tb\rc")
        assert console.file.getvalue() == "a\tb\rc\n"

    def test_tab_in_name_written_byte_for_byte(self, console):
        """Name mit Tabulator erscheint unverändert in Anzeige, Aktion und Alarm."""
        hotel = Hotel(console)
        hotel.add_entity(Guest("Ali\tAhmad", 101, 203, 11))
        hotel.show_all()
        hotel.perform_all_actions()
        assert console.file.getvalue() == (
            "\n"
            "=== Hotel Records ===\n"
            "Name: Ali\tAhmad | ID: 101\n"
            "Room: 203 | Nights: 11\n"
            "\n"
            "\n"
            "=== Performing Hotel Actions ===\n"
            "Ali\tAhmad is staying in room 203 for 11 nights.\n"
            "[ALERT for Ali\tAhmad]: Long stay detected, consider offering a discount.\n"
        )

    def test_show_all(self, console):
        """Überschrift, dann je Datensatz Anzeige plus Leerzeile."""
        hotel = Hotel(console)
        hotel.add_entity(Guest("Ali", 101, 203, 3))
        hotel.add_entity(Room("R1", 301, True))
        hotel.show_all()
        assert _lines(console) == [
            "",
            "=== Hotel Records ===",
            "Name: Ali | ID: 101",
            "Room: 203 | Nights: 3",
            "",
            "Name: R1 | ID: 301",
            "Occupied: True",
            "",
        ]

    def test_show_all_triggers_no_alerts(self, console):
        hotel = Hotel(console)
        hotel.add_entity(Room("R2", 302, False))
        hotel.show_all()
        assert not any(line.startswith("[ALERT") for line in _lines(console))

    def test_empty_hotel(self, console):
        hotel = Hotel(console)
        hotel.show_all()
        hotel.perform_all_actions()
        assert _lines(console) == [
            "", "=== Hotel Records ===",
            "", "=== Performing Hotel Actions ===",
        ]

    def test_duplicate_insert_duplicates_alerts(self, console):
        """Doppelt eingefügte Referenz → Alarm erscheint doppelt (Aufrufer-Fehler)."""
        hotel = Hotel(console)
        r = Room("R2", 302, False)
        hotel.add_entity(r)
        hotel.add_entity(r)
        hotel.perform_all_actions()
        alerts = [l for l in _lines(console) if l.startswith("[ALERT")]
        assert len(alerts) == 4

    def test_end_to_end_scenario(self, console):
        """Gesamtszenario: Aktionen und Alarme in exakter Reihenfolge."""
        before = total_entities()
        records = [
            Guest("Ali", 101, 203, 3),
            Guest("Sara", 102, 305, 12),
            Employee("Omar", 201, "Receptionist"),
            Room("R1", 301, True),
            Room("R2", 302, False),
        ]
        assert total_entities() == before + len(records)

        hotel = Hotel(console)
        for record in records:
            hotel.add_entity(record)
        hotel.perform_all_actions()

        assert _lines(console) == [
            "",
            "=== Performing Hotel Actions ===",
            "Ali is staying in room 203 for 3 nights.",
            "Sara is staying in room 305 for 12 nights.",
            "[ALERT for Sara]: Long stay detected, consider offering a discount.",
            "Omar is performing their duties as Receptionist.",
            "Room R1 (ID: 301) is currently occupied.",
            "Room R2 (ID: 302) is currently available.",
            "[ALERT for R2]: Room is available for booking.",
        ]


# ─── AUFBAU AUS KONFIGURATION ─────────────────────────────────────────────────

class TestBuildHotel:
    def test_record_types_closed_set(self):
        assert RECORD_TYPES == {"guest": Guest, "employee": Employee, "room": Room}

    def test_build_record_kinds(self):
        assert isinstance(build_record(RecordDef(
            kind=RecordKind.GUEST, name="A", id=1, room_number=2, nights=3)), Guest)
        assert isinstance(build_record(RecordDef(
            kind=RecordKind.EMPLOYEE, name="B", id=2, position="Koch")), Employee)
        assert isinstance(build_record(RecordDef(
            kind=RecordKind.ROOM, name="C", id=3, is_occupied=False)), Room)

    def test_build_default_hotel(self, console):
        before = total_entities()
        hotel = build_hotel(default_hotel_config(), console)
        assert len(hotel) == 6
        assert total_entities() == before + 6
        assert [r.name for r in hotel] == [
            "Ali Ahmad", "Sara Ibrahim", "Omar Khaled",
            "Lina Hasan", "Room-203", "Room-305",
        ]
        assert hotel.console is console

    def test_default_actions(self, console):
        hotel = build_hotel(default_hotel_config(), console)
        hotel.perform_all_actions()
        lines = _lines(console)
        assert lines[lines.index("Sara Ibrahim is staying in room 305 for 12 nights.") + 1] == (
            "[ALERT for Sara Ibrahim]: Long stay detected, consider offering a discount."
        )
        assert lines[-1] == "[ALERT for Room-305]: Room is available for booking."
        assert "Lina Hasan is performing their duties as Housekeeper." in lines

    def test_invalid_record_aborts(self, console):
        """Ungültige Werte aus der Konfiguration → typisierter Fehler."""
        config = HotelConfig(records=[
            RecordDef(kind=RecordKind.GUEST, name="A", id=1, room_number=2, nights=0),
        ])
        with pytest.raises(InvalidNights):
            build_hotel(config, console)


class TestTableRenderer:
    def test_table_rows(self):
        hotel = Hotel(_console())
        hotel.add_entity(Guest("Ali", 101, 203, 3))
        hotel.add_entity(Room("R2", 302, False))
        table = build_records_table(hotel, title="Test")
        assert table.title == "Test"
        assert table.row_count == 2
        assert [c.header for c in table.columns] == ["Kind", "ID", "Name", "Details"]

    def test_table_renders(self):
        c = Console(file=io.StringIO(), width=120)
        hotel = Hotel(c)
        hotel.add_entity(Employee("Omar", 201, "Receptionist"))
        c.print(build_records_table(hotel))
        out = c.file.getvalue()
        assert "Omar" in out
        assert "Position: Receptionist" in out

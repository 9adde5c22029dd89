"""Hotel-Register — Haupt-CLI.

Verwendung:
  python main.py demo                     Gesamtablauf: Zähler, Anzeige, Aktionen
  python main.py show                     Alle Datensätze anzeigen
  python main.py show --table             Datensätze als Tabelle
  python main.py actions                  Aktionen aller Datensätze ausführen
  python main.py stats                    Anzahl erzeugter Datensätze
  python main.py config init              Beispiel-Konfiguration anlegen
  python main.py config show              Konfiguration anzeigen

Ohne Konfigurationsdatei wird die eingebaute Beispielbelegung verwendet.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)

# Standard-Pfad der YAML-Konfiguration
DEFAULT_CONFIG_PATH = Path("config/hotel_config.yaml")

_config_option = click.option(
    "--config", "config_path", default=str(DEFAULT_CONFIG_PATH),
    type=click.Path(dir_okay=False), help="Pfad zur YAML-Konfiguration.",
)
_verbose_option = click.option(
    "--verbose", "-v", is_flag=True, default=False, help="Debug-Logging auf stderr.",
)


def _configure_logging(level_name: str, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, level_name)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _load_config_or_abort(config_path: str, verbose: bool = False):
    """Lädt die Konfiguration (oder Standardwerte) oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager(Path(config_path))
    try:
        config = mgr.load_or_default()
    except ValueError as e:
        err_console.print(f"[red]{e}[/red]")
        sys.exit(1)
    _configure_logging(config.output.log_level, verbose)
    return config


def _build_hotel_or_abort(config):
    """Baut das Register auf; ungültige Datensätze beenden den Lauf."""
    from data.sample_data import build_hotel
    from models.errors import RecordValidationError

    try:
        return build_hotel(config, console)
    except RecordValidationError as e:
        err_console.print(f"[red]Ungültiger Datensatz:[/red] {e}")
        sys.exit(1)


def _print_table(hotel, title: str) -> None:
    from export.table_renderer import build_records_table
    console.print(build_records_table(hotel, title=title))


# ─── DEMO ─────────────────────────────────────────────────────────────────────

@click.command("demo")
@_config_option
@click.option("--table", "show_table", is_flag=True, default=False,
              help="Datensätze zusätzlich als Tabelle anzeigen.")
@_verbose_option
def cmd_demo(config_path: str, show_table: bool, verbose: bool):
    """Gesamtablauf: Datensätze anlegen, zählen, anzeigen, Aktionen ausführen."""
    from models.statistics import total_entities

    config = _load_config_or_abort(config_path, verbose)
    hotel = _build_hotel_or_abort(config)

    console.print(f"Total Entities: {total_entities()}", highlight=False)
    console.print()

    hotel.show_all()
    if show_table or config.output.show_table:
        _print_table(hotel, config.hotel_name)
    hotel.perform_all_actions()


# ─── SHOW / ACTIONS ───────────────────────────────────────────────────────────

@click.command("show")
@_config_option
@click.option("--table", "show_table", is_flag=True, default=False,
              help="Als Rich-Tabelle statt als Textzeilen.")
@_verbose_option
def cmd_show(config_path: str, show_table: bool, verbose: bool):
    """Zeigt alle Datensätze in Einfügereihenfolge an."""
    config = _load_config_or_abort(config_path, verbose)
    hotel = _build_hotel_or_abort(config)
    if show_table:
        _print_table(hotel, config.hotel_name)
    else:
        hotel.show_all()


@click.command("actions")
@_config_option
@_verbose_option
def cmd_actions(config_path: str, verbose: bool):
    """Führt die Aktion jedes Datensatzes aus (inkl. Alarme)."""
    config = _load_config_or_abort(config_path, verbose)
    hotel = _build_hotel_or_abort(config)
    hotel.perform_all_actions()


# ─── STATS ────────────────────────────────────────────────────────────────────

@click.command("stats")
@_config_option
@_verbose_option
def cmd_stats(config_path: str, verbose: bool):
    """Anzahl erzeugter Datensätze, gesamt und je Art."""
    from models.statistics import total_entities

    config = _load_config_or_abort(config_path, verbose)
    hotel = _build_hotel_or_abort(config)

    counts: dict[str, int] = {}
    for record in hotel:
        counts[record.KIND] = counts.get(record.KIND, 0) + 1

    table = Table(title="Statistik", box=box.ROUNDED)
    table.add_column("Art", style="bold")
    table.add_column("Anzahl", justify="right")
    for kind, n in counts.items():
        table.add_row(kind, str(n))
    console.print(table)
    console.print(f"Total Entities: {total_entities()}", highlight=False)


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anlegen oder anzeigen."""


@cmd_config.command("init")
@click.option("--path", "config_path", default=str(DEFAULT_CONFIG_PATH),
              type=click.Path(dir_okay=False), help="Zielpfad der YAML-Datei.")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Datei überschreiben.")
def config_init(config_path: str, force: bool):
    """Schreibt die Beispielbelegung als YAML-Konfiguration."""
    from config.defaults import default_hotel_config
    from config.manager import ConfigManager

    mgr = ConfigManager(Path(config_path))
    if not mgr.first_run_check() and not force:
        err_console.print(
            f"[yellow]Konfiguration existiert bereits:[/yellow] {config_path}\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        sys.exit(1)
    mgr.save(default_hotel_config())


@cmd_config.command("show")
@click.option("--path", "config_path", default=str(DEFAULT_CONFIG_PATH),
              type=click.Path(dir_okay=False), help="Pfad zur YAML-Datei.")
def config_show(config_path: str):
    """Zeigt die konfigurierten Datensätze an."""
    config = _load_config_or_abort(config_path)

    table = Table(title=f"Konfiguration: {config.hotel_name}", box=box.ROUNDED)
    table.add_column("Art", style="bold")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    for r in config.records:
        table.add_row(r.kind.value, str(r.id), escape(r.name))
    console.print(table)
    counts = ", ".join(f"{k}: {n}" for k, n in config.count_by_kind().items())
    console.print(f"[bold]Datensätze:[/bold] {counts or 'keine'}")
    console.print(
        f"[bold]Ausgabe:[/bold] Tabelle {'an' if config.output.show_table else 'aus'} | "
        f"Log-Level {config.output.log_level}"
    )


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
def cli():
    """Hotel-Register: Gäste, Mitarbeiter und Zimmer mit Alarm-Meldungen.

    Starten Sie mit: python main.py demo
    """


def main(argv: Optional[list[str]] = None):
    """Einstiegspunkt. Ohne Argumente wird der Gesamtablauf gestartet."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        args = ["demo"]
    cli(args)


# Befehle registrieren
cli.add_command(cmd_demo)
cli.add_command(cmd_show)
cli.add_command(cmd_actions)
cli.add_command(cmd_stats)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()

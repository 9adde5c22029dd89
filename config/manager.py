"""Konfigurationsmanager: Laden, Speichern und Validieren der Hotel-Konfiguration.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from rich.console import Console
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from config.defaults import default_hotel_config
from config.schema import HotelConfig

logger = logging.getLogger(__name__)

console = Console(stderr=True)
yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


# ─── YAML-KOMMENTAR-AUFBAU ───

_YAML_HEADER = f"""\
# ============================================
# Hotel-Register — Konfiguration
# Erstellt: {date.today().isoformat()}
# ============================================
"""

_SECTION_COMMENTS = {
    "records": (
        "Datensätze",
        "kind: guest (room_number, nights) | employee (position) | room (is_occupied).\n"
        "Reihenfolge = Einfügereihenfolge im Register.",
    ),
    "output": (
        "Ausgabe",
        None,
    ),
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "hotel_config.yaml"

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else self.DEFAULT_CONFIG

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert (Erstaufruf)."""
        return not self.config_path.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> HotelConfig:
        """Lade Config aus YAML. Validiert automatisch via Pydantic."""
        target = Path(path) if path else self.config_path
        if not target.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {target}\n"
                f"Führen Sie 'hotel-registry config init' aus, um sie anzulegen."
            )
        try:
            with open(target, "r", encoding="utf-8") as f:
                raw = yaml.load(f)
            config = HotelConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e
        logger.info(f"Konfiguration geladen: {target} ({len(config.records)} Datensätze)")
        return config

    def load_or_default(self, path: Optional[Path] = None) -> HotelConfig:
        """Wie ``load``, fällt aber ohne Datei auf die Beispielbelegung zurück."""
        target = Path(path) if path else self.config_path
        if not target.exists():
            logger.info(f"Keine Konfiguration unter {target}, verwende Standardwerte")
            return default_hotel_config()
        return self.load(target)

    # ─── Speichern ───

    def save(self, config: HotelConfig, path: Optional[Path] = None) -> Path:
        """Speichere Config als YAML mit Kommentaren."""
        target = Path(path) if path else self.config_path
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")
        return target

    def _build_commented_yaml(self, config: HotelConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Kommentaren auf."""
        raw = json.loads(config.model_dump_json(exclude_none=True))
        cm = CommentedMap(raw)

        for field, (label, comment) in _SECTION_COMMENTS.items():
            if field not in cm:
                continue
            cm.yaml_set_comment_before_after_key(
                field,
                before=f"\n─── {label} ───" + (f"\n{comment}" if comment else ""),
            )

        return cm

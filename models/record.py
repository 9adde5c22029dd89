"""Abstrakte Basis aller Hotel-Datensätze (Pydantic v2).

Gemeinsamer Zustand (Name, ID), Anzeige- und Aktionsvertrag sowie der
Alarm-Kanal, über den ein Datensatz Meldungen an Abonnenten weitergibt.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, field_validator
from rich.console import Console

from export.console_output import emit_lines
from models.errors import translate_validation_error
from models.statistics import increment_total

logger = logging.getLogger(__name__)

AlertHandler = Callable[[str], None]


class Record(BaseModel, ABC):
    """Benannter, identifizierter Eintrag im Hotel-Register.

    ``name`` bleibt änderbar (wird bei jeder Zuweisung neu validiert),
    ``id`` ist nach der Erzeugung schreibgeschützt. Jede erfolgreiche
    Erzeugung erhöht den prozessweiten Zähler um genau 1.
    """

    model_config = ConfigDict(validate_assignment=True)

    KIND: ClassVar[str] = "record"

    name: str = Field(strict=True)
    id: int = Field(frozen=True, strict=True)

    _subscribers: list[AlertHandler] = PrivateAttr(default_factory=list)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise translate_validation_error(exc) from exc

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as exc:
            raise translate_validation_error(exc) from exc

    def model_post_init(self, __context: Any) -> None:
        # Läuft erst nach vollständiger Validierung aller Felder
        increment_total()
        logger.debug(f"{self.KIND} erzeugt: {self.name} (ID {self.id})")

    def model_copy(self, *, update: Optional[dict[str, Any]] = None, deep: bool = False):
        """Kopie als eigener Datensatz: wird gezählt und startet ohne Abonnenten.

        Wie bei Pydantic üblich wird ``update`` nicht validiert.
        """
        copied = super().model_copy(update=update, deep=deep)
        copied._subscribers = []
        increment_total()
        return copied

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v

    @field_validator("id")
    @classmethod
    def _check_id(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("ID must be positive")
        return v

    # ─── Umbenennen ───

    def rename(self, new_name: str) -> None:
        """Setzt einen neuen Namen; bei ungültigem Wert bleibt der alte erhalten."""
        self.name = new_name

    # ─── Anzeige ───

    def info_lines(self) -> list[str]:
        """Textzeilen der Anzeige; Varianten hängen ihre Felder hinten an."""
        return [f"Name: {self.name} | ID: {self.id}"]

    def display_info(self, console: Optional[Console] = None) -> None:
        emit_lines(console, self.info_lines())

    @abstractmethod
    def perform_action(self, console: Optional[Console] = None) -> None:
        """Variantenspezifische Aktion; darf Alarme auslösen."""

    # ─── Alarm-Kanal ───

    def subscribe(self, handler: AlertHandler) -> None:
        """Hängt einen Abonnenten an. Mehrfaches Anhängen führt zu Mehrfachaufrufen."""
        self._subscribers.append(handler)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _trigger_alert(self, message: str) -> None:
        """Formatiert ``message`` und ruft alle Abonnenten synchron auf.

        Die Liste wird vor dem Aufruf kopiert: Abonnenten, die während der
        Verteilung hinzukommen, werden erst beim nächsten Alarm berücksichtigt.
        Ohne Abonnenten passiert nichts.
        """
        handlers = list(self._subscribers)
        if not handlers:
            return
        payload = f"[ALERT for {self.name}]: {message}"
        logger.debug(f"Alarm von {self.name} an {len(handlers)} Abonnenten")
        for handler in handlers:
            handler(payload)

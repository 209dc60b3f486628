"""
Entry point für die Notenverwaltung.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from .service import GradingStore
from .view import ConsoleGradingView
from .controller import GradingController

logger = logging.getLogger(__name__)


SILENT = logging.CRITICAL + 1

# LOG_LEVEL -> Logging-Level. Unbekannte Werte: still.
LOG_LEVELS = {"0": SILENT, "1": logging.INFO, "2": logging.DEBUG}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging() -> None:
    """
    Richtet das Logging ein.
    - LOG_LEVEL: 0 = aus (Standard), 1 = INFO, 2 = DEBUG
    - LOG_FILE: optional, sonst stderr
    Die Konsole (stdout) bleibt frei für das Menü.
    """
    level = LOG_LEVELS.get(os.environ.get("LOG_LEVEL", "0").strip(), SILENT)
    log_file = os.environ.get("LOG_FILE")

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            level=level, format=LOG_FORMAT, filename=log_file, encoding="utf-8", force=True
        )
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def main() -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Logging einrichten
    - Komponenten erstellen
    - Controller starten
    """
    setup_logging()
    try:
        # Bausteine der App erstellen.
        # Der Store lebt nur so lange wie der Prozess.
        store = GradingStore()
        view = ConsoleGradingView()
        controller = GradingController(store, view)

        controller.starte_app()

    except KeyboardInterrupt:
        # Sauberer Abbruch per Strg+C.
        print("\nProgram terminated.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        logger.exception("Unexpected error")
        print(f"\nERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

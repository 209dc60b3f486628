"""
Controller layer

Der GradingController steuert die App. Er verbindet GradingStore und View.

Aufgaben:
- Menü anzeigen und Eingaben verarbeiten
- Zahlen aus Eingaben lesen
- Ergebnisse über ConsoleGradingView ausgeben
"""

from __future__ import annotations

import logging
from typing import Optional

from .service import GradingStore, NoGradesError, format_decimal
from .view import ConsoleGradingView

logger = logging.getLogger(__name__)

# Größte Zahl, die als Menüauswahl gelesen wird (u32).
MAX_CHOICE = 2**32 - 1


class GradingController:
    """
    Hauptcontroller für die Notenverwaltung.

    Aufgaben:
    - Menü-Schleife
    - Aufrufe an Store und View
    """

    def __init__(self, store: GradingStore, view: ConsoleGradingView) -> None:
        """
        Erstellt den Controller.

        - store: Daten und Berechnungen
        - view: Ein-/Ausgabe
        """
        self._store = store
        self._view = view

    def starte_app(self) -> None:
        """
        Startet die Menü-Schleife.
        Ende bei Auswahl 10 oder wenn keine Eingabe mehr kommt (EOF).
        """
        while True:
            self._view.render_menue()
            try:
                # Das Menü ist die Frage, deshalb kein eigener Text.
                raw = self._view.prompt("").strip()
            except EOFError:
                logger.debug("Input closed, leaving menu loop")
                break

            choice = self._parse_choice(raw)
            if choice is None:
                self._view.show_message("Invalid input!")
                continue

            if choice == 10:
                break

            try:
                erledigt = self._dispatch(choice)
            except EOFError:
                logger.debug("Input closed during command %d", choice)
                break
            # Abgebrochene Befehle bekommen keine Leerzeile.
            if erledigt:
                self._view.show_message("")

    def _dispatch(self, choice: int) -> bool:
        """
        Führt einen Menüpunkt aus.
        False, wenn der Befehl abgebrochen wurde.
        """
        if choice == 1:
            self.register_student()
        elif choice == 2:
            self.add_subject()
        elif choice == 3:
            return self.add_grade()
        elif choice == 4:
            self.generate_grade_report()
        elif choice == 5:
            self.subject_average()
        elif choice == 6:
            self.overall_average()
        elif choice == 7:
            self.display_student_records()
        elif choice == 8:
            self.display_subject_grades()
        elif choice == 9:
            self.statistical_analysis()
        else:
            self._view.show_message("Invalid choice!")
        return True

    def register_student(self) -> None:
        """Liest einen Namen und legt den Studenten an."""
        name = self._view.prompt("Enter student name:").strip()
        self._store.register_student(name)

    def add_subject(self) -> None:
        """Liest einen Namen und legt das Fach an."""
        name = self._view.prompt("Enter subject name:").strip()
        self._store.add_subject(name)

    def add_grade(self) -> bool:
        """
        Liest Student, Fach und Note.
        Ist die Note keine Zahl, wird abgebrochen (False).
        """
        student_name = self._view.prompt("Enter student name:").strip()
        subject_name = self._view.prompt("Enter subject name:").strip()
        grade = self._parse_grade(self._view.prompt("Enter grade:"))
        if grade is None:
            self._view.show_message("Invalid grade!")
            return False
        self._store.add_grade(student_name, subject_name, grade)
        return True

    def generate_grade_report(self) -> None:
        """Zeigt den Notenbericht eines Studenten."""
        student_name = self._view.prompt("Enter student name:").strip()
        report = self._store.generate_grade_report(student_name)
        if report is None:
            self._view.show_message("Student not found!")
            return
        self._view.show_message(report)

    def subject_average(self) -> None:
        """Zeigt den Durchschnitt eines Fachs."""
        subject_name = self._view.prompt("Enter subject name:").strip()
        average = self._store.subject_average(subject_name)
        if average is None:
            self._view.show_message(f"No grades available for subject '{subject_name}'")
            return
        self._view.show_message(f"Average grade for subject '{subject_name}': {format_decimal(average)}")

    def overall_average(self) -> None:
        """Zeigt den Durchschnitt der Studenten-Durchschnitte."""
        average = self._store.overall_average()
        if average is None:
            self._view.show_message("No grades available")
            return
        self._view.show_message(f"Overall average grade: {format_decimal(average)}")

    def display_student_records(self) -> None:
        """Zeigt alle Studenten sortiert nach Name."""
        self._view.render_student_records(self._store.student_records())

    def display_subject_grades(self) -> None:
        """Zeigt alle Fächer sortiert nach Name."""
        self._view.render_subject_grades(self._store.subject_grades())

    def statistical_analysis(self) -> None:
        """
        Zeigt die Statistik eines Fachs.
        Ohne Noten kommt eine Meldung statt der Statistik.
        """
        subject_name = self._view.prompt("Enter subject name:").strip()
        try:
            stats = self._store.statistical_analysis(subject_name)
        except NoGradesError as e:
            self._view.show_message(str(e))
            return
        self._view.render_statistics(stats)

    def _parse_choice(self, raw: str) -> Optional[int]:
        """
        Liest die Menüauswahl.
        Erlaubt sind nur ASCII-Ziffern (optional mit "+") bis MAX_CHOICE.
        Alles andere, z.B. "-1" oder "1_0", ist keine Auswahl.
        """
        digits = raw[1:] if raw.startswith("+") else raw
        if not (digits.isascii() and digits.isdigit()):
            return None
        choice = int(digits)
        if choice > MAX_CHOICE:
            return None
        return choice

    def _parse_grade(self, raw: str) -> Optional[float]:
        """
        Liest eine Note aus Text.
        None, wenn es keine Zahl ist.
        Unterstriche und Nicht-ASCII-Ziffern sind nicht erlaubt.
        """
        text = raw.strip()
        if not text.isascii() or "_" in text:
            return None
        try:
            return float(text)
        except ValueError:
            return None

"""
UI layer für die Console

Diese View gibt alles in der Konsole aus.
- Menü anzeigen
- Eingaben lesen
- Listen und Statistik als Text bauen und ausgeben
"""

from __future__ import annotations

from typing import Callable, List, Optional

from .service import StudentRecord, SubjectGrades, SubjectStatistics, format_decimal, format_grade

SEPARATOR = "-" * 25

MENU_ENTRIES = [
    "Register a student",
    "Add a subject",
    "Add a grade",
    "Generate a grade report",
    "Calculate average grade for a subject",
    "Calculate overall average grade",
    "Display student records",
    "Display subject grades",
    "Perform statistical analysis on subject grades",
    "Exit",
]


class ConsoleGradingView:
    """
    View für die Konsole.

    Ein- und Ausgabe sind austauschbar, damit Tests ohne echte Konsole laufen.
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Erstellt die View.
        - input_fn: Standard ist input()
        - output_fn: Standard ist print()
        """
        self._input = input_fn or input
        self._output = output_fn or print

    def render_menue(self) -> None:
        """Zeigt das Hauptmenü."""
        for nummer, text in enumerate(MENU_ENTRIES, 1):
            self._output(f"{nummer}. {text}")

    def prompt(self, frage: str) -> str:
        """
        Gibt die Frage als eigene Zeile aus und liest eine Zeile ein.
        Leere Frage: nur lesen.
        EOFError wird an den Aufrufer weitergegeben.
        """
        if frage:
            self._output(frage)
        return self._input("")

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        self._output(text)

    def render_student_records(self, records: List[StudentRecord]) -> None:
        """Zeigt alle Studenten mit Noten und Durchschnitt."""
        self._output(self._build_student_records(records))

    def render_subject_grades(self, subjects: List[SubjectGrades]) -> None:
        """Zeigt alle Fächer mit den Noten der Studenten."""
        self._output(self._build_subject_grades(subjects))

    def render_statistics(self, stats: SubjectStatistics) -> None:
        """Zeigt die Statistik eines Fachs."""
        self._output(self._build_statistics(stats))

    def _build_student_records(self, records: List[StudentRecord]) -> str:
        """
        Baut die Studentenliste als Text.
        """
        lines = ["Student Records:"]
        for r in records:
            lines.append(f"Student: {r.name}")
            for subject_name, grade in r.grades:
                lines.append(f"Subject: {subject_name}, Grade: {format_grade(grade)}")
            lines.append(f"Average Grade: {format_grade(r.average)}")
            lines.append(SEPARATOR)
        return "\n".join(lines)

    def _build_subject_grades(self, subjects: List[SubjectGrades]) -> str:
        """
        Baut die Fächerliste als Text.
        """
        lines = ["Subject Grades:"]
        for s in subjects:
            lines.append(f"Subject: {s.subject_name}")
            for student_name, grade in s.entries:
                lines.append(f"Student: {student_name}, Grade: {format_grade(grade)}")
            lines.append(SEPARATOR)
        return "\n".join(lines)

    def _build_statistics(self, stats: SubjectStatistics) -> str:
        """
        Baut den Statistikblock.
        Alle Werte mit zwei Nachkommastellen, nur die Anzahl nicht.
        """
        return "\n".join([
            f"Statistical Analysis for Subject '{stats.subject_name}'",
            f"Count: {stats.count}",
            f"Average: {self._fmt_2(stats.average)}",
            f"Median: {self._fmt_2(stats.median)}",
            f"Minimum Grade: {self._fmt_2(stats.minimum)}",
            f"Maximum Grade: {self._fmt_2(stats.maximum)}",
        ])

    def _fmt_2(self, value: float) -> str:
        """Formatiert eine Zahl mit zwei Nachkommastellen."""
        return format_decimal(value)

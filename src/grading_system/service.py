"""
Application/Use-Case layer

Der GradingStore hält alle Studenten und Fächer im Speicher und beantwortet
Abfragen darüber. Für die Listen und die Statistik baut er kleine
Datenobjekte, die von der ConsoleGradingView ausgegeben werden.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .domain import Student, Subject

logger = logging.getLogger(__name__)


class NoGradesError(ValueError):
    """Für ein Fach liegt keine einzige Note vor."""

    def __init__(self, subject_name: str) -> None:
        super().__init__(f"No grades available for subject '{subject_name}'")
        self.subject_name = subject_name


def _fmt_special(value: float) -> Optional[str]:
    """Text für NaN und unendlich, sonst None."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return None


def format_grade(grade: float) -> str:
    """
    Formatiert eine Note in kürzester Form, ohne Exponent.
    - 88.0 -> "88"
    - 88.5 -> "88.5"
    - 0.00001 -> "0.00001"
    - NaN -> "NaN"
    """
    special = _fmt_special(grade)
    if special is not None:
        return special
    if float(grade).is_integer():
        return str(int(grade))
    return format(Decimal(repr(float(grade))), "f")


def format_decimal(value: float) -> str:
    """Zwei Nachkommastellen, NaN als "NaN"."""
    special = _fmt_special(value)
    if special is not None:
        return special
    return f"{value:.2f}"


@dataclass(slots=True)
class StudentRecord:
    """
    Eine Zeile für die Studentenliste.
    """
    name: str
    grades: List[Tuple[str, float]] = field(default_factory=list)
    average: float = 0.0


@dataclass(slots=True)
class SubjectGrades:
    """
    Ein Fach mit allen Studenten, die dafür eine Note haben.
    """
    subject_name: str
    entries: List[Tuple[str, float]] = field(default_factory=list)


@dataclass(slots=True)
class SubjectStatistics:
    """
    Datenobjekt für die Statistik eines Fachs.
    """
    subject_name: str
    count: int
    average: float
    median: float
    minimum: float
    maximum: float


class GradingStore:
    """
    Register für Studenten und Fächer.
    Beide Register sind unabhängig voneinander. Gleiche Namen überschreiben.
    """

    def __init__(self) -> None:
        """Erstellt einen leeren Store."""
        self._students: Dict[str, Student] = {}
        self._subjects: Dict[str, Subject] = {}

    @property
    def students(self) -> Dict[str, Student]:
        """Alle Studenten nach Name."""
        return self._students

    @property
    def subjects(self) -> Dict[str, Subject]:
        """Alle Fächer nach Name."""
        return self._subjects

    def register_student(self, name: str) -> None:
        """
        Legt einen Studenten an.
        Existiert der Name schon, wird der alte Student samt Noten ersetzt.
        """
        if name in self._students:
            logger.info("Replacing existing student %r", name)
        else:
            logger.info("Registered student %r", name)
        self._students[name] = Student(name=name)

    def add_subject(self, name: str) -> None:
        """Legt ein Fach an (oder überschreibt es)."""
        self._subjects[name] = Subject(name=name)
        logger.info("Added subject %r", name)

    def add_grade(self, student_name: str, subject_name: str, grade: float) -> None:
        """
        Setzt eine Note.
        - Unbekannter Student: nichts passiert.
        - Das Fach muss nicht angelegt sein.
        """
        student = self._students.get(student_name)
        if student is None:
            logger.debug("Ignoring grade for unknown student %r", student_name)
            return
        student.set_grade(subject_name, grade)
        logger.info("Set grade %s for %r in %r", grade, student_name, subject_name)

    def generate_grade_report(self, student_name: str) -> Optional[str]:
        """
        Baut den Notenbericht eines Studenten.
        None, wenn es den Studenten nicht gibt.
        """
        student = self._students.get(student_name)
        if student is None:
            logger.debug("No report for unknown student %r", student_name)
            return None

        report = f"Grade Report for {student.name}\n"
        for subject_name, grade in student.grades.items():
            report += f"Subject: {subject_name}, Grade: {format_grade(grade)}\n"
        return report

    def subject_average(self, subject_name: str) -> Optional[float]:
        """
        Durchschnitt eines Fachs über alle Studenten mit Note in diesem Fach.
        None, wenn niemand eine Note hat (nicht 0).
        """
        grades = self._grades_for(subject_name)
        if not grades:
            return None
        return sum(grades) / len(grades)

    def overall_average(self) -> Optional[float]:
        """
        Durchschnitt der Studenten-Durchschnitte (nicht über alle Noten).
        - Keine Studenten: None.
        - Ein Student ohne Noten bringt NaN ein.
        """
        if not self._students:
            return None
        averages = [s.average_grade() for s in self._students.values()]
        return sum(averages) / len(averages)

    def student_records(self) -> List[StudentRecord]:
        """Alle Studenten, nach Name sortiert, mit Noten und Durchschnitt."""
        records = []
        for name in sorted(self._students):
            s = self._students[name]
            records.append(StudentRecord(
                name=s.name,
                grades=list(s.grades.items()),
                average=s.average_grade(),
            ))
        return records

    def subject_grades(self) -> List[SubjectGrades]:
        """
        Alle angelegten Fächer, nach Name sortiert.
        Pro Fach die Studenten, die dafür eine Note haben.
        """
        result = []
        for name in sorted(self._subjects):
            entries = [
                (s.name, s.grades[name])
                for s in self._students.values()
                if name in s.grades
            ]
            result.append(SubjectGrades(subject_name=name, entries=entries))
        return result

    def statistical_analysis(self, subject_name: str) -> SubjectStatistics:
        """
        Statistik für ein Fach.
        - Noten aufsteigend sortiert
        - Median: bei gerader Anzahl Mittel der beiden mittleren Werte
        - Ohne Noten: NoGradesError
        """
        grades = sorted(self._grades_for(subject_name))
        count = len(grades)
        if count == 0:
            raise NoGradesError(subject_name)

        mid = count // 2
        if count % 2 == 0:
            median = (grades[mid - 1] + grades[mid]) / 2.0
        else:
            median = grades[mid]

        return SubjectStatistics(
            subject_name=subject_name,
            count=count,
            average=sum(grades) / count,
            median=median,
            minimum=grades[0],
            maximum=grades[-1],
        )

    def _grades_for(self, subject_name: str) -> List[float]:
        """Alle Noten zu einem Fach über alle Studenten."""
        return [
            s.grades[subject_name]
            for s in self._students.values()
            if subject_name in s.grades
        ]

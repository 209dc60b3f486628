"""
Domain beinhaltet die Entities

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI-Logik.

- Entities sind Dataclasses.
- Ein Student hält seine Noten selbst (Fach -> Note).
- Fächer tragen nur ihren Namen. Noten dürfen auch auf Fächer verweisen,
  die nie angelegt wurden.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict


@dataclass(slots=True)
class Student:
    """
    Ein Student mit seinen Noten.
    Pro Fach gibt es höchstens eine Note. Eine neue Note überschreibt die alte.
    """
    name: str
    grades: Dict[str, float] = field(default_factory=dict)

    def set_grade(self, subject_name: str, grade: float) -> None:
        """Setzt oder überschreibt die Note für ein Fach. Keine Bereichsprüfung."""
        self.grades[subject_name] = grade

    def average_grade(self) -> float:
        """
        Durchschnitt über alle Noten des Studenten.
        Ohne Noten ist das Ergebnis NaN.
        """
        if not self.grades:
            return math.nan
        return sum(self.grades.values()) / len(self.grades)


@dataclass(slots=True)
class Subject:
    """Ein Fach. Hat nur einen Namen."""
    name: str

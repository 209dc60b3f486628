"""
grading_system package

Konsolen-Programm zur Notenverwaltung: Studenten und Fächer anlegen,
Noten eintragen, Berichte und Statistiken ausgeben. Alles bleibt im Speicher.

Schichtenarchitektur:
- domain.py: Entitäten (Student, Subject)
- service.py: GradingStore mit Abfragen und Statistik
- view.py: Textausgabe
- controller.py: Menü-Orchestrierung
- main.py: Einstiegspunkt
"""

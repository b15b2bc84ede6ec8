"""
Lesbarkeits- und Stilanalyse für deutsche Texte.

Unterstützt:
- Satz-/Wort-/Absatzzerlegung mit Zeichenpositionen
- Silbenzählung und Flesch-Wert (deutsche Konstanten)
- Lange Sätze, komplexe Wörter, Füllwörter, Passiv-Marker
- Abgeleitete Kennzahlen (Lesezeit, Checkliste)
"""

from textcheck.services.analysis.syllables import count_german_syllables
from textcheck.services.analysis.text_analyzer import analyze_text, flesch_level
from textcheck.services.analysis.text_models import (
    AnalysisResult,
    HighlightConfig,
    SentenceIssue,
    WordIssue,
)
from textcheck.services.analysis.text_report import TextReport, build_text_report

__all__ = [
    "AnalysisResult",
    "HighlightConfig",
    "SentenceIssue",
    "TextReport",
    "WordIssue",
    "analyze_text",
    "build_text_report",
    "count_german_syllables",
    "flesch_level",
]

"""
Datenmodelle der Textanalyse.

- SentenceIssue: ein zu langer Satz (Text, Start/Ende in Zeichen, Wortanzahl).
- WordIssue: ein markiertes Wort (komplex, Füllwort oder Passiv-Marker).
- AnalysisResult: kompletter Snapshot der Analyse für genau einen Eingabetext.
- HighlightConfig: welche der fünf Kategorien im Renderer markiert werden.

Alle Positionsangaben beziehen sich auf den exakten (nicht getrimmten)
Eingabetext, d.h. text[start_index:end_index] liefert den gespeicherten Text.
"""

from dataclasses import dataclass
from typing import Literal

WordIssueType = Literal["complex", "fill", "passive"]


@dataclass(frozen=True)
class SentenceIssue:
    text: str
    start_index: int
    end_index: int
    word_count: int


@dataclass(frozen=True)
class WordIssue:
    word: str
    start_index: int
    end_index: int
    type: WordIssueType


@dataclass(frozen=True)
class AnalysisResult:
    flesch_score: int = 0
    flesch_level: str = "-"

    # Statistik
    words: int = 0
    sentences: int = 0
    syllables: int = 0
    characters: int = 0
    paragraphs: int = 0
    avg_sentence_length: float = 0.0
    avg_word_length: float = 0.0

    # Issues (in Reihenfolge des Auftretens)
    long_sentences: tuple[SentenceIssue, ...] = ()
    very_long_sentences: tuple[SentenceIssue, ...] = ()
    complex_words: tuple[WordIssue, ...] = ()
    fill_words: tuple[WordIssue, ...] = ()
    passive_constructions: tuple[WordIssue, ...] = ()


@dataclass(frozen=True)
class HighlightConfig:
    very_long_sentences: bool = True
    long_sentences: bool = True
    complex_words: bool = True
    fill_words: bool = True
    passive_voice: bool = True

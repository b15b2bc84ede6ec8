"""
Abgeleitete Kennzahlen zu einem AnalysisResult.

Fasst zusammen, was der Editor neben der eigentlichen Analyse anzeigt:
Lesezeit, Anzahl aktiver Markierungen, Einordnung des Flesch-Werts und eine
kurze Checkliste mit fünf Punkten (eine pro Issue-Kategorie).
"""

from dataclasses import dataclass
import math
from typing import Literal

from textcheck.services.analysis.text_models import AnalysisResult, HighlightConfig

Rating = Literal["good", "warning", "poor"]

DEFAULT_WORDS_PER_MINUTE = 200

MAX_LONG_SENTENCES = 2
MAX_COMPLEX_WORD_RATIO = 0.3
MAX_FILL_WORDS = 3
MAX_PASSIVE_CONSTRUCTIONS = 2
MAX_AVG_SENTENCE_LENGTH = 20


@dataclass(frozen=True)
class ChecklistItem:
    key: str
    passed: bool
    rating: Rating
    message: str


@dataclass(frozen=True)
class TextReport:
    reading_time_minutes: int
    active_issues: int
    flesch_rating: Rating
    issue_rating: Rating
    sentence_length_rating: Rating
    complex_word_ratio: float
    checklist: tuple[ChecklistItem, ...]


def reading_time_minutes(words: int, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    if words_per_minute <= 0:
        raise ValueError("words_per_minute muss > 0 sein")
    return math.ceil(words / words_per_minute)


def count_active_issues(result: AnalysisResult, config: HighlightConfig) -> int:
    """Summe aller Issues in den aktivierten Kategorien."""
    total = 0
    if config.very_long_sentences:
        total += len(result.very_long_sentences)
    if config.long_sentences:
        total += len(result.long_sentences)
    if config.complex_words:
        total += len(result.complex_words)
    if config.fill_words:
        total += len(result.fill_words)
    if config.passive_voice:
        total += len(result.passive_constructions)
    return total


def flesch_rating(score: int) -> Rating:
    if score >= 60:
        return "good"
    if score >= 40:
        return "warning"
    return "poor"


def issue_rating(total: int) -> Rating:
    if total == 0:
        return "good"
    if total < 10:
        return "warning"
    return "poor"


def sentence_length_rating(avg_sentence_length: float) -> Rating:
    return "good" if avg_sentence_length <= MAX_AVG_SENTENCE_LENGTH else "warning"


def _item(key: str, rating: Rating, message: str) -> ChecklistItem:
    return ChecklistItem(key=key, passed=rating == "good", rating=rating, message=message)


def complex_word_ratio(result: AnalysisResult) -> float:
    return len(result.complex_words) / max(result.words, 1)


def build_checklist(result: AnalysisResult) -> tuple[ChecklistItem, ...]:
    very_long = len(result.very_long_sentences)
    long_ = len(result.long_sentences)
    fill = len(result.fill_words)
    passive = len(result.passive_constructions)
    ratio = complex_word_ratio(result)

    # sehr lange Sätze sind ein Fehler, alle anderen Punkte nur eine Warnung
    return (
        _item(
            "very_long_sentences",
            "good" if very_long == 0 else "poor",
            "Keine sehr langen Sätze (>30 Wörter)" if very_long == 0 else f"{very_long} sehr lange Sätze",
        ),
        _item(
            "long_sentences",
            "good" if long_ <= MAX_LONG_SENTENCES else "warning",
            "Keine langen Sätze (21-30 Wörter)" if long_ == 0 else f"{long_} lange Sätze",
        ),
        _item(
            "complex_words",
            "good" if ratio < MAX_COMPLEX_WORD_RATIO else "warning",
            f"{math.floor(ratio * 100 + 0.5)}% komplexe Wörter",
        ),
        _item(
            "fill_words",
            "good" if fill <= MAX_FILL_WORDS else "warning",
            "Keine Füllwörter" if fill == 0 else f"{fill} Füllwörter",
        ),
        _item(
            "passive_voice",
            "good" if passive <= MAX_PASSIVE_CONSTRUCTIONS else "warning",
            "Kein Passiv" if passive == 0 else f"{passive} Passivkonstruktionen",
        ),
    )


def build_text_report(
    result: AnalysisResult,
    config: HighlightConfig | None = None,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> TextReport:
    config = config or HighlightConfig()
    active = count_active_issues(result, config)
    return TextReport(
        reading_time_minutes=reading_time_minutes(result.words, words_per_minute),
        active_issues=active,
        flesch_rating=flesch_rating(result.flesch_score),
        issue_rating=issue_rating(active),
        sentence_length_rating=sentence_length_rating(result.avg_sentence_length),
        complex_word_ratio=round(complex_word_ratio(result), 3),
        checklist=build_checklist(result),
    )

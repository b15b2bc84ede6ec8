"""
TextAnalyzer: deterministische Lesbarkeits- und Stilanalyse deutscher Texte.

- Zerlegt den Text in Sätze und Wörter (mit Positionen im Originaltext).
- Zählt Silben und berechnet den Flesch-Wert mit deutschen Konstanten
  (180 - ASL - 58.5 * ASW), geclamped auf [0, 100].
- Markiert lange/sehr lange Sätze, komplexe Wörter, Füllwörter und Passiv-Marker.

Die Analyse ist eine totale Funktion: jede Eingabe (auch leer oder nur
Satzzeichen) liefert ein gültiges AnalysisResult, es wird nie eine Exception
geworfen. Es gibt keinen Zustand zwischen zwei Aufrufen.
"""

import math

from textcheck.services.analysis.syllables import count_german_syllables
from textcheck.services.analysis.text_models import AnalysisResult, SentenceIssue, WordIssue
from textcheck.services.analysis.tokenization import (
    count_paragraphs,
    count_whitespace_tokens,
    find_words,
    is_whitespace,
    split_sentences,
    strip_whitespace,
)
from textcheck.services.analysis.wordlists import is_fill_word, is_passive_indicator

LONG_SENTENCE_WORDS = 20
VERY_LONG_SENTENCE_WORDS = 30
COMPLEX_WORD_SYLLABLES = 3

FLESCH_BASE = 180.0
FLESCH_SYLLABLE_WEIGHT = 58.5

# (Schwelle, Label) absteigend; erster Treffer mit score >= Schwelle gewinnt
FLESCH_LEVELS = (
    (80, "Sehr leicht"),
    (70, "Leicht"),
    (60, "Mittel"),
    (50, "Mittelschwer"),
    (40, "Schwer"),
    (30, "Sehr schwer"),
)
FLESCH_LEVEL_FALLBACK = "Extrem schwer"
EMPTY_LEVEL = "-"


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def flesch_score(words: int, sentences: int, syllables: int) -> int:
    avg_sentence_length = words / max(sentences, 1)
    avg_syllables_per_word = syllables / max(words, 1)
    raw = FLESCH_BASE - avg_sentence_length - FLESCH_SYLLABLE_WEIGHT * avg_syllables_per_word
    return int(round_half_up(max(0.0, min(100.0, raw))))


def flesch_level(score: int) -> str:
    for threshold, label in FLESCH_LEVELS:
        if score >= threshold:
            return label
    return FLESCH_LEVEL_FALLBACK


def analyze_text(text: str) -> AnalysisResult:
    clean_text = strip_whitespace(text)
    if not clean_text:
        return AnalysisResult()

    sentences = split_sentences(text)
    words = find_words(text)

    total_syllables = 0
    complex_words: list[WordIssue] = []
    fill_words: list[WordIssue] = []
    passive_constructions: list[WordIssue] = []

    for token in words:
        syllables = count_german_syllables(token.text)
        total_syllables += syllables

        # ein Wort kann in mehreren Kategorien landen
        if syllables >= COMPLEX_WORD_SYLLABLES:
            complex_words.append(WordIssue(token.text, token.start, token.end, "complex"))
        if is_fill_word(token.text):
            fill_words.append(WordIssue(token.text, token.start, token.end, "fill"))
        if is_passive_indicator(token.text):
            passive_constructions.append(WordIssue(token.text, token.start, token.end, "passive"))

    long_sentences: list[SentenceIssue] = []
    very_long_sentences: list[SentenceIssue] = []
    for sentence in sentences:
        word_count = count_whitespace_tokens(sentence.text)
        issue = SentenceIssue(sentence.text, sentence.start, sentence.end, word_count)
        if word_count > VERY_LONG_SENTENCE_WORDS:
            very_long_sentences.append(issue)
        elif word_count > LONG_SENTENCE_WORDS:
            long_sentences.append(issue)

    score = flesch_score(len(words), len(sentences), total_syllables)
    avg_sentence_length = len(words) / max(len(sentences), 1)
    if words:
        non_whitespace = sum(1 for ch in clean_text if not is_whitespace(ch))
        avg_word_length = round_half_up(non_whitespace / len(words), 1)
    else:
        avg_word_length = 0.0

    return AnalysisResult(
        flesch_score=score,
        flesch_level=flesch_level(score),
        words=len(words),
        sentences=len(sentences),
        syllables=total_syllables,
        characters=len(clean_text),
        paragraphs=count_paragraphs(clean_text),
        avg_sentence_length=round_half_up(avg_sentence_length, 1),
        avg_word_length=avg_word_length,
        long_sentences=tuple(long_sentences),
        very_long_sentences=tuple(very_long_sentences),
        complex_words=tuple(complex_words),
        fill_words=tuple(fill_words),
        passive_constructions=tuple(passive_constructions),
    )

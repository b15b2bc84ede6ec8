"""Silbenzählung für deutsche Wörter (vereinfachte Heuristik)."""

import re

_NON_GERMAN_LETTER = re.compile(r"[^a-zäöüß]")

# Reihenfolge ist relevant: Ersetzung erfolgt nacheinander
DIPHTHONGS = ("ei", "ai", "au", "äu", "eu", "ie", "oi")
DIPHTHONG_PLACEHOLDER = "@"
VOWELS = "aeiouäöü"


def count_german_syllables(word: str) -> int:
    """
    Zählt Silben in einem deutschen Wort.

    - Nur Buchstaben a-z, ä, ö, ü, ß zählen; leeres Ergebnis -> 0.
    - Kurze Wörter (<= 3 Buchstaben) haben genau eine Silbe.
    - Diphthonge werden zu einem Vokalkern zusammengefasst.
    - Gezählt werden Übergänge Konsonant -> Vokal, mindestens 1.
    """
    cleaned = _NON_GERMAN_LETTER.sub("", word.lower())
    if not cleaned:
        return 0
    if len(cleaned) <= 3:
        return 1

    processed = cleaned
    for diphthong in DIPHTHONGS:
        processed = processed.replace(diphthong, DIPHTHONG_PLACEHOLDER)

    syllables = 0
    prev_was_vowel = False
    for char in processed:
        is_vowel = char in VOWELS or char == DIPHTHONG_PLACEHOLDER
        if is_vowel and not prev_was_vowel:
            syllables += 1
        prev_was_vowel = is_vowel

    return max(1, syllables)

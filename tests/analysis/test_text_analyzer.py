"""
Tests für analyze_text: Kennzahlen, Flesch-Wert, Issue-Erkennung und Positionen.
"""

import time

import pytest

from textcheck.services.analysis.text_analyzer import (
    analyze_text,
    flesch_level,
    flesch_score,
    round_half_up,
)
from textcheck.services.analysis.text_models import AnalysisResult
from textcheck.services.analysis.tokenization import find_words


def _sentence(n_words: int, word: str = "Wort") -> str:
    return " ".join([word] * n_words) + "."


def _all_issues(result: AnalysisResult):
    for s in result.long_sentences + result.very_long_sentences:
        yield s.text, s.start_index, s.end_index
    for w in result.complex_words + result.fill_words + result.passive_constructions:
        yield w.word, w.start_index, w.end_index


SAMPLE_TEXTS = [
    "Hallo.",
    "  Das ist eigentlich halt so. Wird das Haus gebaut?  Ja!  ",
    "Erster Absatz mit einer Verständlichkeitsprüfung.\n\nZweiter Absatz: Es wurde viel geredet!",
    "Kurz. " + _sentence(21) + " " + _sentence(31, "Straße"),
    "Ohne Satzzeichen aber mit Äußerungen und Größe",
    "z.B. 3.14 Euro?! <b>&amp;</b> \"Zitat\" 'einfach'",
]


def test_empty_text_returns_zeroed_result():
    """Leerer Text: alles 0, Level '-'."""
    result = analyze_text("")

    assert result == AnalysisResult()
    assert result.flesch_score == 0
    assert result.flesch_level == "-"
    assert result.words == 0
    assert result.sentences == 0
    assert result.long_sentences == ()
    assert result.passive_constructions == ()


@pytest.mark.parametrize("text", ["   ", "\n\n\t", " \n "])
def test_whitespace_only_returns_zeroed_result(text):
    assert analyze_text(text) == AnalysisResult()


def test_hallo_scenario():
    """'Hallo.' -> 1 Satz, 1 Wort, 2 Silben, keine Issues."""
    result = analyze_text("Hallo.")

    assert result.sentences == 1
    assert result.words == 1
    assert result.syllables == 2
    assert result.characters == 6
    assert result.paragraphs == 1
    assert result.avg_sentence_length == 1.0
    assert result.avg_word_length == 6.0
    assert result.complex_words == ()
    assert result.fill_words == ()
    assert result.passive_constructions == ()
    # 180 - 1 - 58.5 * 2 = 62
    assert result.flesch_score == 62
    assert result.flesch_level == "Mittel"


def test_21_words_is_long_sentence():
    result = analyze_text(_sentence(21))

    assert len(result.long_sentences) == 1
    assert result.very_long_sentences == ()
    assert result.long_sentences[0].word_count == 21


def test_31_words_is_very_long_sentence():
    result = analyze_text(_sentence(31))

    assert len(result.very_long_sentences) == 1
    assert result.long_sentences == ()
    assert result.very_long_sentences[0].word_count == 31


@pytest.mark.parametrize("n_words,long_count,very_long_count", [(20, 0, 0), (30, 1, 0)])
def test_sentence_length_boundaries(n_words, long_count, very_long_count):
    result = analyze_text(_sentence(n_words))

    assert len(result.long_sentences) == long_count
    assert len(result.very_long_sentences) == very_long_count


def test_long_sentence_offsets_point_into_original_text():
    """Satz-Positionen beziehen sich auf den ungetrimmten Originaltext."""
    text = "Kurz. " + _sentence(21)
    issue = analyze_text(text).long_sentences[0]

    assert issue.start_index == 6
    assert issue.end_index == len(text)
    assert text[issue.start_index : issue.end_index] == issue.text


@pytest.mark.parametrize("word", ["wird", "Wird", "WIRD"])
def test_passive_marker_case_insensitive(word):
    text = f"Das Haus {word} gebaut."
    result = analyze_text(text)

    assert len(result.passive_constructions) == 1
    issue = result.passive_constructions[0]
    assert issue.word == word
    assert issue.type == "passive"
    assert issue.start_index == text.index(word)
    assert issue.end_index == text.index(word) + len(word)


def test_fill_words_detected_case_insensitive():
    result = analyze_text("Also das ist eigentlich halt so.")

    assert [w.word for w in result.fill_words] == ["Also", "eigentlich", "halt"]
    assert all(w.type == "fill" for w in result.fill_words)


def test_word_can_be_complex_and_fill_word():
    """'eigentlich' hat 3 Silben und ist Füllwort."""
    result = analyze_text("Das ist eigentlich gut.")

    assert [w.word for w in result.complex_words] == ["eigentlich"]
    assert [w.word for w in result.fill_words] == ["eigentlich"]


def test_complex_words_have_three_or_more_syllables():
    result = analyze_text("Die Verständlichkeit der Äußerung ist gut.")

    assert [w.word for w in result.complex_words] == ["Verständlichkeit", "Äußerung"]
    assert all(w.type == "complex" for w in result.complex_words)


@pytest.mark.parametrize("text", SAMPLE_TEXTS)
def test_offsets_reproduce_issue_text(text):
    """Für jedes Issue gilt: text[start:end] == gespeicherter Text."""
    result = analyze_text(text)
    for issue_text, start, end in _all_issues(result):
        assert text[start:end] == issue_text


@pytest.mark.parametrize("text", SAMPLE_TEXTS)
def test_word_count_equals_word_matches(text):
    assert analyze_text(text).words == len(find_words(text))


@pytest.mark.parametrize("text", SAMPLE_TEXTS)
def test_analysis_is_deterministic(text):
    assert analyze_text(text) == analyze_text(text)


@pytest.mark.parametrize(
    "text",
    SAMPLE_TEXTS + ["!!!", "...", "a" * 10_000, "Ä" * 500 + ".", "1234 5678.", "ÄÖÜ ß 漢字"],
)
def test_flesch_score_is_int_in_range(text):
    result = analyze_text(text)

    assert isinstance(result.flesch_score, int)
    assert 0 <= result.flesch_score <= 100


def test_appending_fill_and_passive_words_never_decreases_counts():
    base = "Das Haus wird halt gebaut"
    before = analyze_text(base + ".")
    after = analyze_text(base + " und eigentlich wurde es auch schon bezahlt.")

    assert len(after.fill_words) >= len(before.fill_words)
    assert len(after.passive_constructions) >= len(before.passive_constructions)
    assert len(after.fill_words) == 3
    assert len(after.passive_constructions) == 2


def test_punctuation_only_text():
    """Nur Satzzeichen: ein Satz, keine Wörter, Score geclamped."""
    result = analyze_text("!!!")

    assert result.sentences == 1
    assert result.words == 0
    assert result.syllables == 0
    assert result.avg_word_length == 0.0
    assert result.flesch_score == 100
    assert result.flesch_level == "Sehr leicht"


def test_single_huge_word_does_not_crash():
    result = analyze_text("x" * 10_000)

    assert result.words == 1
    assert result.sentences == 1
    assert result.characters == 10_000


def test_characters_and_averages():
    text = "  Der Hund bellt. Die Katze schläft.  "
    result = analyze_text(text)

    assert result.characters == len(text.strip())
    assert result.words == 6
    assert result.sentences == 2
    assert result.avg_sentence_length == 3.0
    # 29 Nicht-Whitespace-Zeichen / 6 Wörter = 4.83
    assert result.avg_word_length == 4.8


def test_flesch_score_formula_and_clamp():
    # 180 - 3 - 58.5 = 118.5 -> 100
    assert flesch_score(words=3, sentences=1, syllables=3) == 100
    # 180 - 51 - 58.5 = 70.5 -> kaufmännisch gerundet 71
    assert flesch_score(words=51, sentences=1, syllables=51) == 71
    # 180 - 1 - 58.5 * 4 = -55 -> 0
    assert flesch_score(words=1, sentences=1, syllables=4) == 0
    assert flesch_score(words=0, sentences=0, syllables=0) == 100


@pytest.mark.parametrize(
    "score,label",
    [
        (100, "Sehr leicht"),
        (80, "Sehr leicht"),
        (79, "Leicht"),
        (70, "Leicht"),
        (69, "Mittel"),
        (60, "Mittel"),
        (59, "Mittelschwer"),
        (50, "Mittelschwer"),
        (49, "Schwer"),
        (40, "Schwer"),
        (39, "Sehr schwer"),
        (30, "Sehr schwer"),
        (29, "Extrem schwer"),
        (0, "Extrem schwer"),
    ],
)
def test_flesch_level_thresholds(score, label):
    assert flesch_level(score) == label


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.25, 1) == 0.3
    assert round_half_up(3.14, 1) == 3.1


def test_long_unterminated_tail_is_fast():
    """100k Zeichen ohne Satzzeichen nach dem ersten Satz: keine quadratische Laufzeit."""
    text = "Hallo. " + "x" * 100_000

    start = time.perf_counter()
    result = analyze_text(text)
    elapsed = time.perf_counter() - start

    assert result.sentences == 1
    assert result.words == 2
    assert elapsed < 2.0


@pytest.mark.parametrize("text", ["\ufeff", "\ufeff \n\ufeff", "\u3000 "])
def test_unicode_whitespace_only_returns_zeroed_result(text):
    assert analyze_text(text) == AnalysisResult()


def test_leading_bom_is_not_part_of_sentence():
    text = "\ufeff" + _sentence(21)
    result = analyze_text(text)

    assert result.characters == len(text) - 1
    issue = result.long_sentences[0]
    assert issue.start_index == 1
    assert text[issue.start_index : issue.end_index] == issue.text

"""
Erzeugt HTML mit <mark>-Markierungen für die Issues eines AnalysisResult.

Satz-Markierungen (sehr lang / lang) umschließen Wort-Markierungen (komplex,
Füllwort, Passiv). Pro Startposition und Ebene wird nur die erste Markierung
(sortiert nach Start, dann Priorität) angewendet, weitere mit gleichem Start
entfallen.

Vertrag: `result` muss aus exakt demselben `text` berechnet worden sein, sonst
stimmen die Positionen nicht. Das wird hier nicht geprüft.
"""

from dataclasses import dataclass

from textcheck.services.analysis.text_models import AnalysisResult, HighlightConfig

VERY_LONG_SENTENCE = "very-long-sentence"
LONG_SENTENCE = "long-sentence"
COMPLEX_WORD = "complex-word"
FILL_WORD = "fill-word"
PASSIVE = "passive"

SENTENCE_CATEGORIES = (VERY_LONG_SENTENCE, LONG_SENTENCE)
WORD_CATEGORIES = (COMPLEX_WORD, FILL_WORD, PASSIVE)

# kleinere Zahl = wichtiger
PRIORITIES = {
    VERY_LONG_SENTENCE: 1,
    LONG_SENTENCE: 2,
    COMPLEX_WORD: 3,
    FILL_WORD: 4,
    PASSIVE: 5,
}

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}


@dataclass(frozen=True)
class Highlight:
    start: int
    end: int
    category: str
    priority: int


def escape_html(text: str) -> str:
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in text)


def wrap(category: str, inner_html: str) -> str:
    return f'<mark class="highlight-{category}">{inner_html}</mark>'


def collect_highlights(result: AnalysisResult, config: HighlightConfig) -> list[Highlight]:
    """Alle aktivierten Issues als Highlights, sortiert nach (start, priority)."""
    sources = (
        (config.very_long_sentences, result.very_long_sentences, VERY_LONG_SENTENCE),
        (config.long_sentences, result.long_sentences, LONG_SENTENCE),
        (config.complex_words, result.complex_words, COMPLEX_WORD),
        (config.fill_words, result.fill_words, FILL_WORD),
        (config.passive_voice, result.passive_constructions, PASSIVE),
    )

    highlights: list[Highlight] = []
    for enabled, issues, category in sources:
        if not enabled:
            continue
        for issue in issues:
            highlights.append(
                Highlight(issue.start_index, issue.end_index, category, PRIORITIES[category])
            )

    # stabile Sortierung: bei gleichem Start und gleicher Priorität bleibt die Listenreihenfolge
    highlights.sort(key=lambda h: (h.start, h.priority))
    return highlights


def _index_by_start(highlights: list[Highlight]) -> dict[int, Highlight]:
    # erster Treffer pro Startposition gewinnt
    by_start: dict[int, Highlight] = {}
    for h in highlights:
        by_start.setdefault(h.start, h)
    return by_start


def _render_segment(text: str, start: int, end: int, words: dict[int, Highlight]) -> str:
    parts: list[str] = []
    i = start
    while i < end:
        word = words.get(i)
        if word is not None and word.end > i:
            word_end = min(word.end, end)
            parts.append(wrap(word.category, escape_html(text[i:word_end])))
            i = word_end
        else:
            parts.append(escape_html(text[i]))
            i += 1
    return "".join(parts)


def render_highlights(text: str, result: AnalysisResult, config: HighlightConfig) -> str:
    if not text:
        return ""

    highlights = collect_highlights(result, config)
    sentences = _index_by_start([h for h in highlights if h.category in SENTENCE_CATEGORIES])
    words = _index_by_start([h for h in highlights if h.category in WORD_CATEGORIES])

    parts: list[str] = []
    i = 0
    while i < len(text):
        sentence = sentences.get(i)
        if sentence is not None and sentence.end > i:
            sentence_end = min(sentence.end, len(text))
            parts.append(wrap(sentence.category, _render_segment(text, i, sentence_end, words)))
            i = sentence_end
            continue

        word = words.get(i)
        if word is not None and word.end > i:
            word_end = min(word.end, len(text))
            parts.append(wrap(word.category, escape_html(text[i:word_end])))
            i = word_end
            continue

        parts.append(escape_html(text[i]))
        i += 1

    return "".join(parts).replace("\n", "<br>")

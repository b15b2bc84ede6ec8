"""
Zerlegung eines Textes in Sätze, Wörter und Absätze (mit Zeichenpositionen).

Bekannte Einschränkung: Die Satzerkennung kennt keine Abkürzungen ("z.B.",
"Nr."), keine Dezimalzahlen ("3.14") und keine Satzzeichen in Anführungszeichen.
Solche Texte werden in mehr Sätze zerlegt als ein Mensch zählen würde.

Whitespace ist hier die Zeichenmenge von JavaScript (trim / \\s), inkl. BOM
(U+FEFF) und ohne die Steuerzeichen U+001C..U+001F, die Python zusätzlich kennt.
"""

from dataclasses import dataclass
import re

WHITESPACE_CHARS = (
    " \t\n\x0b\x0c\r\xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Satzende = Lauf aus '.', '!' oder '?'; der Satz ist der Text davor
TERMINATOR_RUN = re.compile(r"[.!?]+")
WORD_PATTERN = re.compile(r"[A-Za-zäöüÄÖÜß]+")
PARAGRAPH_SEPARATOR = re.compile(r"\n\n+")
WHITESPACE_RUN = re.compile("[" + re.escape(WHITESPACE_CHARS) + "]+")


@dataclass(frozen=True)
class Token:
    text: str
    start: int
    end: int


def strip_whitespace(text: str) -> str:
    return text.strip(WHITESPACE_CHARS)


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE_CHARS


def _trimmed_token(raw: str, offset: int) -> Token:
    # Position des getrimmten Textes im Original, damit text[start:end] == token.text
    stripped = strip_whitespace(raw)
    lead = len(raw) - len(raw.lstrip(WHITESPACE_CHARS))
    start = offset + lead
    return Token(text=stripped, start=start, end=start + len(stripped))


def split_sentences(text: str) -> list[Token]:
    """
    Liefert alle Sätze (Folge von Nicht-Satzzeichen + mind. ein '.', '!' oder '?').

    Läuft linear über die Satzzeichen-Läufe; ein Lauf ohne Text davor
    (z.B. am Textanfang) bildet keinen Satz. Wird kein Satz gefunden, gilt
    der gesamte (getrimmte) Text als ein Satz.
    """
    sentences: list[Token] = []
    prev_end = 0
    for run in TERMINATOR_RUN.finditer(text):
        if run.start() > prev_end:
            sentences.append(_trimmed_token(text[prev_end : run.end()], prev_end))
        prev_end = run.end()

    if not sentences and strip_whitespace(text):
        sentences.append(_trimmed_token(text, 0))
    return sentences


def find_words(text: str) -> list[Token]:
    """Maximale Folgen von Buchstaben (ASCII + ä, ö, ü, ß)."""
    return [Token(text=m.group(0), start=m.start(), end=m.end()) for m in WORD_PATTERN.finditer(text)]


def count_paragraphs(text: str) -> int:
    return sum(1 for p in PARAGRAPH_SEPARATOR.split(text) if strip_whitespace(p))


def count_whitespace_tokens(text: str) -> int:
    return sum(1 for token in WHITESPACE_RUN.split(text) if token)

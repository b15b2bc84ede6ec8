"""Feste deutsche Wortlisten für Füllwörter und Passiv-Marker."""

# Füllwörter (Abtönungspartikel und Weichmacher)
GERMAN_FILL_WORDS = frozenset(
    {
        "also", "eigentlich", "halt", "eben", "ja", "nun", "denn", "wohl", "mal", "schon",
        "doch", "etwa", "einfach", "quasi", "sozusagen", "gewissermaßen", "irgendwie",
        "praktisch", "grundsätzlich", "prinzipiell", "natürlich", "selbstverständlich",
        "offensichtlich", "offenbar", "anscheinend", "vermutlich", "wahrscheinlich",
        "durchaus", "jedenfalls", "überhaupt", "ziemlich", "relativ", "entsprechend",
    }
)

# Formen von "werden" als lexikalischer Hinweis auf Passiv (kein Parser)
PASSIVE_INDICATORS = frozenset(
    {
        "wird", "werden", "wurde", "wurden", "worden", "geworden",
        "werde", "wirst", "werdet",
    }
)


def is_fill_word(word: str) -> bool:
    return word.lower() in GERMAN_FILL_WORDS


def is_passive_indicator(word: str) -> bool:
    return word.lower() in PASSIVE_INDICATORS

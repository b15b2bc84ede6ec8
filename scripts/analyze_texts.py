"""
Analysiert viele Texte auf einmal und schreibt eine Kennzahlen-Tabelle.

Input (eins von beiden):
  --input texte/            Verzeichnis mit *.txt (UTF-8), ein Text pro Datei
  --input texte.csv         CSV mit einer Textspalte (--column, default: text)

Output:
  <out>.csv   eine Zeile pro Text (Flesch, Level, Zählwerte, Issue-Anzahlen)
  <out>.md    human-readable Übersicht
  optional --html_dir: pro Text eine HTML-Datei mit allen Markierungen
"""

import argparse
import logging
from pathlib import Path
import re
import sys
from typing import Any

from dotenv import load_dotenv
import pandas as pd

# Add project root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from textcheck.core.config import settings
from textcheck.services.analysis.text_analyzer import analyze_text
from textcheck.services.analysis.text_models import HighlightConfig
from textcheck.services.analysis.text_report import build_text_report
from textcheck.services.highlight.highlight_renderer import escape_html, render_highlights

load_dotenv()

logger = logging.getLogger(__name__)

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="de">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
.highlight-very-long-sentence {{ background-color: rgba(239, 68, 68, 0.25); }}
.highlight-long-sentence {{ background-color: rgba(249, 115, 22, 0.2); }}
.highlight-complex-word {{ background-color: rgba(168, 85, 247, 0.3); }}
.highlight-fill-word {{ background-color: rgba(6, 182, 212, 0.3); }}
.highlight-passive {{ background-color: rgba(234, 179, 8, 0.35); }}
</style>
</head>
<body>
<div class="analysis-text">{body}</div>
</body>
</html>
"""


# ---------------------------
# IO helpers
# ---------------------------


def load_texts_from_dir(path: Path) -> list[tuple[str, str]]:
    """Lädt alle *.txt eines Verzeichnisses als (id, text), sortiert nach Dateiname."""
    return [(p.stem, p.read_text(encoding="utf-8")) for p in sorted(path.glob("*.txt"))]


def load_texts_from_csv(path: Path, column: str) -> list[tuple[str, str]]:
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    if column not in df.columns:
        raise ValueError(f"Spalte '{column}' nicht in {path} (vorhanden: {list(df.columns)})")
    id_column = "id" if "id" in df.columns else None
    rows = []
    for idx, row in df.iterrows():
        text_id = row[id_column] if id_column else str(idx)
        rows.append((text_id, row[column]))
    return rows


# ---------------------------
# Analyse
# ---------------------------


def analyze_row(text_id: str, text: str, words_per_minute: int) -> dict[str, Any]:
    result = analyze_text(text)
    report = build_text_report(result, HighlightConfig(), words_per_minute)
    return {
        "id": text_id,
        "flesch_score": result.flesch_score,
        "flesch_level": result.flesch_level,
        "words": result.words,
        "sentences": result.sentences,
        "syllables": result.syllables,
        "characters": result.characters,
        "paragraphs": result.paragraphs,
        "avg_sentence_length": result.avg_sentence_length,
        "avg_word_length": result.avg_word_length,
        "long_sentences": len(result.long_sentences),
        "very_long_sentences": len(result.very_long_sentences),
        "complex_words": len(result.complex_words),
        "fill_words": len(result.fill_words),
        "passive_constructions": len(result.passive_constructions),
        "reading_time_minutes": report.reading_time_minutes,
        "checklist_passed": sum(1 for item in report.checklist if item.passed),
    }


def build_metrics_frame(
    texts: list[tuple[str, str]], words_per_minute: int = settings.words_per_minute
) -> pd.DataFrame:
    rows = [analyze_row(text_id, text, words_per_minute) for text_id, text in texts]
    return pd.DataFrame(rows)


def write_summary_md(df: pd.DataFrame, out_path: Path) -> None:
    """Schreibt human-readable Markdown-Übersicht."""
    lines = [
        "# Text Check Summary",
        "",
        f"**Texte:** {len(df)}",
    ]
    if not df.empty:
        lines.extend(
            [
                f"**Ø Flesch:** {df['flesch_score'].mean():.1f}",
                f"**Wörter gesamt:** {int(df['words'].sum())}",
                "",
                "## Verteilung Flesch-Level",
                "",
                "| Level | Anzahl |",
                "|---|---|",
            ]
        )
        for level, count in df["flesch_level"].value_counts().items():
            lines.append(f"| {level} | {count} |")

        lines.extend(
            [
                "",
                "## Texte",
                "",
                "| ID | Flesch | Level | Wörter | Sätze | lang | sehr lang | komplex | Füll | Passiv |",
                "|---|---|---|---|---|---|---|---|---|---|",
            ]
        )
        for _, row in df.iterrows():
            lines.append(
                f"| {row['id']} | {row['flesch_score']} | {row['flesch_level']} | {row['words']} "
                f"| {row['sentences']} | {row['long_sentences']} | {row['very_long_sentences']} "
                f"| {row['complex_words']} | {row['fill_words']} | {row['passive_constructions']} |"
            )
    lines.append("")

    out_path.write_text("\n".join(lines), encoding="utf-8")


def safe_file_stem(text_id: str, index: int) -> str:
    """Dateiname aus einer Text-ID: nur [\\w.-], keine führenden Punkte, sonst text_<index>."""
    stem = re.sub(r"[^\w.-]", "_", text_id).lstrip(".")
    return stem or f"text_{index}"


def write_html_files(texts: list[tuple[str, str]], html_dir: Path) -> None:
    html_dir.mkdir(parents=True, exist_ok=True)
    config = HighlightConfig()
    for index, (text_id, text) in enumerate(texts):
        body = render_highlights(text, analyze_text(text), config)
        out = html_dir / f"{safe_file_stem(text_id, index)}.html"
        out.write_text(HTML_TEMPLATE.format(title=escape_html(text_id), body=body), encoding="utf-8")
        logger.debug("HTML geschrieben: %s", out)


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Lesbarkeitsanalyse für viele Texte")
    ap.add_argument("--input", type=str, required=True, help="Verzeichnis mit *.txt oder CSV-Datei")
    ap.add_argument("--column", type=str, default="text", help="Textspalte bei CSV-Input")
    ap.add_argument(
        "--out",
        type=str,
        default="results/text_check/summary",
        help="Output-Pfad (ohne Extension, default: results/text_check/summary)",
    )
    ap.add_argument("--html_dir", type=str, default=None, help="Optional: HTML mit Markierungen")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    input_path = Path(args.input)
    if input_path.is_dir():
        texts = load_texts_from_dir(input_path)
    elif input_path.suffix.lower() == ".csv" and input_path.exists():
        try:
            texts = load_texts_from_csv(input_path, args.column)
        except ValueError as e:
            ap.error(str(e))
    else:
        ap.error(f"Input nicht gefunden oder kein Verzeichnis/CSV: {input_path}")

    if not texts:
        ap.error(f"Keine Texte gefunden in {input_path}")

    logger.info("Analysiere %d Texte...", len(texts))
    df = build_metrics_frame(texts)

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    csv_path = out_path.with_suffix(".csv")
    md_path = out_path.with_suffix(".md")
    df.to_csv(csv_path, index=False)
    write_summary_md(df, md_path)

    if args.html_dir:
        write_html_files(texts, Path(args.html_dir))

    logger.info("CSV: %s", csv_path)
    logger.info("MD:  %s", md_path)


if __name__ == "__main__":
    main()

import logging

from textcheck.core.config import settings
from textcheck.services.analysis.text_analyzer import analyze_text
from textcheck.services.analysis.text_models import AnalysisResult, HighlightConfig
from textcheck.services.analysis.text_report import TextReport, build_text_report
from textcheck.services.highlight.highlight_renderer import render_highlights

logger = logging.getLogger(__name__)


class TextTooLongError(ValueError):
    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Text hat {length} Zeichen, erlaubt sind höchstens {limit}.")
        self.length = length
        self.limit = limit


class TextCheckService:
    """
    Bündelt Analyse, Kennzahlen und Highlight-Rendering für einen Request.

    Hält keinen Zustand zwischen Aufrufen; jede Anfrage wird komplett neu
    berechnet.
    """

    def __init__(
        self,
        max_text_chars: int | None = None,
        words_per_minute: int | None = None,
    ) -> None:
        self.max_text_chars = max_text_chars if max_text_chars is not None else settings.max_text_chars
        self.words_per_minute = (
            words_per_minute if words_per_minute is not None else settings.words_per_minute
        )

    def analyze(
        self, text: str, config: HighlightConfig | None = None
    ) -> tuple[AnalysisResult, TextReport]:
        self._check_length(text)
        result = analyze_text(text)
        report = build_text_report(result, config, self.words_per_minute)
        logger.debug(
            "analyze: %d Wörter, %d Sätze, Flesch %d (%s)",
            result.words,
            result.sentences,
            result.flesch_score,
            result.flesch_level,
        )
        return result, report

    def highlight(
        self, text: str, config: HighlightConfig | None = None
    ) -> tuple[str, AnalysisResult, TextReport]:
        config = config or HighlightConfig()
        result, report = self.analyze(text, config)
        html = render_highlights(text, result, config)
        logger.debug("highlight: %d aktive Markierungen", report.active_issues)
        return html, result, report

    def _check_length(self, text: str) -> None:
        if len(text) > self.max_text_chars:
            logger.warning(
                "Text abgelehnt: %d Zeichen (Limit %d)", len(text), self.max_text_chars
            )
            raise TextTooLongError(len(text), self.max_text_chars)

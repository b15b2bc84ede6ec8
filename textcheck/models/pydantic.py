from dataclasses import asdict
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from textcheck.services.analysis.text_models import AnalysisResult, HighlightConfig
from textcheck.services.analysis.text_report import TextReport


class SentenceIssueModel(BaseModel):
    text: str
    start_index: int = Field(ge=0)
    end_index: int = Field(ge=0)
    word_count: int = Field(ge=0)


class WordIssueModel(BaseModel):
    word: str
    start_index: int = Field(ge=0)
    end_index: int = Field(ge=0)
    type: Literal["complex", "fill", "passive"]


class AnalysisModel(BaseModel):
    """
    Serialisierbare Form eines AnalysisResult.
    """
    flesch_score: int = Field(ge=0, le=100)
    flesch_level: str
    words: int
    sentences: int
    syllables: int
    characters: int
    paragraphs: int
    avg_sentence_length: float
    avg_word_length: float
    long_sentences: List[SentenceIssueModel] = Field(default_factory=list)
    very_long_sentences: List[SentenceIssueModel] = Field(default_factory=list)
    complex_words: List[WordIssueModel] = Field(default_factory=list)
    fill_words: List[WordIssueModel] = Field(default_factory=list)
    passive_constructions: List[WordIssueModel] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisModel":
        return cls.model_validate(asdict(result))


class ChecklistItemModel(BaseModel):
    key: str
    passed: bool
    rating: Literal["good", "warning", "poor"]
    message: str


class ReportModel(BaseModel):
    reading_time_minutes: int
    active_issues: int
    flesch_rating: Literal["good", "warning", "poor"]
    issue_rating: Literal["good", "warning", "poor"]
    sentence_length_rating: Literal["good", "warning", "poor"]
    complex_word_ratio: float
    checklist: List[ChecklistItemModel] = Field(default_factory=list)

    @classmethod
    def from_report(cls, report: TextReport) -> "ReportModel":
        return cls.model_validate(asdict(report))


class HighlightConfigModel(BaseModel):
    """
    Ein/Aus pro Kategorie, wird bei jedem Request neu mitgeschickt.
    """
    very_long_sentences: bool = True
    long_sentences: bool = True
    complex_words: bool = True
    fill_words: bool = True
    passive_voice: bool = True

    def to_config(self) -> HighlightConfig:
        return HighlightConfig(**self.model_dump())


class AnalyzeRequest(BaseModel):
    """
    Request-Body für den /analyze-Endpoint.
    """
    text: str


class AnalyzeResponse(BaseModel):
    analysis: AnalysisModel
    report: ReportModel


class HighlightRequest(BaseModel):
    """
    Request-Body für den /highlight-Endpoint.
    """
    text: str
    highlight_config: Optional[HighlightConfigModel] = None


class HighlightResponse(BaseModel):
    html: str
    analysis: AnalysisModel
    report: ReportModel

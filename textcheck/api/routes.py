import logging

from fastapi import APIRouter, HTTPException

from textcheck.models.pydantic import (
    AnalysisModel,
    AnalyzeRequest,
    AnalyzeResponse,
    HighlightRequest,
    HighlightResponse,
    ReportModel,
)
from textcheck.services.text_check_service import TextCheckService, TextTooLongError

logger = logging.getLogger(__name__)

router = APIRouter()
text_check_service = TextCheckService()


# einfacher Health-Check
@router.get("/health")
async def health():
    return {"status": "ok"}


# Analyse ohne Markup (Kennzahlen + Issues mit Positionen)
@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeRequest):
    try:
        result, report = text_check_service.analyze(req.text)
    except TextTooLongError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except Exception as e:
        logger.exception("analyze FAILED")
        raise HTTPException(status_code=500, detail=str(e))

    return AnalyzeResponse(
        analysis=AnalysisModel.from_result(result),
        report=ReportModel.from_report(report),
    )


# Analyse + HTML mit Markierungen für die aktivierten Kategorien
@router.post("/highlight", response_model=HighlightResponse)
def highlight(req: HighlightRequest):
    config = req.highlight_config.to_config() if req.highlight_config else None
    try:
        html, result, report = text_check_service.highlight(req.text, config)
    except TextTooLongError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except Exception as e:
        logger.exception("highlight FAILED")
        raise HTTPException(status_code=500, detail=str(e))

    return HighlightResponse(
        html=html,
        analysis=AnalysisModel.from_result(result),
        report=ReportModel.from_report(report),
    )

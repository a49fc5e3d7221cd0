"""
AI insight routes: project summary and free-text questions
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from taskboard.api.deps import get_insight_service
from taskboard.errors import GenerationError
from taskboard.schemas.insight import AnswerResponse, AskRequest, SummarizeRequest, SummaryResponse
from taskboard.services.insight import InsightService

router = APIRouter()


@router.post("/summarize", response_model=SummaryResponse)
async def summarize(data: SummarizeRequest, service: InsightService = Depends(get_insight_service)):
    """Summarize project tasks with Gemini, or locally when no key is set"""
    try:
        summary = await service.summarize(data.tasks)
    except GenerationError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to generate summary"},
        )
    return SummaryResponse(summary=summary)


@router.post("/ask", response_model=AnswerResponse)
async def ask(data: AskRequest, service: InsightService = Depends(get_insight_service)):
    """Answer a question about the project tasks"""
    try:
        answer = await service.ask(data.tasks, data.question)
    except GenerationError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to process question"},
        )
    return AnswerResponse(answer=answer)

"""REST API routes for transcript assessment."""

import uuid

import structlog
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from talk_assessor.audio.duration import AudioDecodeError, decode_audio_payload
from talk_assessor.config import get_settings
from talk_assessor.pipeline import AssessmentPipeline
from talk_assessor.planning.catalog import PRACTICE_QUESTIONS

logger = structlog.get_logger()
router = APIRouter(prefix="/api")


class AnalyzeRequest(BaseModel):
    """Body of POST /api/analyze."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    transcript: str = ""
    question: str | None = None
    duration_seconds_hint: float | None = Field(default=None, gt=0)
    audio_data: str | None = None


def get_pipeline() -> AssessmentPipeline:
    return AssessmentPipeline.from_settings(get_settings())


@router.get("/questions")
async def list_questions() -> dict:
    """Practice prompts to answer aloud."""
    return {"questions": list(PRACTICE_QUESTIONS)}


@router.post("/analyze")
async def analyze(request: AnalyzeRequest) -> dict:
    """Assess a transcript and return scores plus an improvement plan.

    Nothing is stored; ``sessionId`` only identifies the response.
    """
    settings = get_settings()
    if len(request.transcript) > settings.max_transcript_chars:
        raise HTTPException(status_code=413, detail="Transcript too long")

    audio = None
    if request.audio_data:
        try:
            audio = decode_audio_payload(request.audio_data)
        except AudioDecodeError:
            raise HTTPException(status_code=400, detail="Invalid audio data")
        if len(audio) > settings.max_audio_bytes:
            raise HTTPException(status_code=413, detail="Audio too large")

    session_id = str(uuid.uuid4())
    structlog.contextvars.bind_contextvars(session_id=session_id)
    try:
        report = get_pipeline().run(
            request.transcript,
            duration_seconds_hint=request.duration_seconds_hint,
            audio=audio,
        )
    except Exception:
        logger.exception("analysis_failed")
        return JSONResponse({"error": "Analysis failed"}, status_code=500)
    finally:
        structlog.contextvars.unbind_contextvars("session_id")

    return {"sessionId": session_id, **report.to_payload()}


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}

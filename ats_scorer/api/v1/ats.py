from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ats_scorer.core.config import settings
from ats_scorer.schemas import ATSScore, ResumeContent
from ats_scorer.services.ats_service import InvalidInput, score

logger = logging.getLogger(__name__)

router = APIRouter()


class ScoreRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resume: ResumeContent
    job_description: str | None = Field(default="", max_length=settings.max_description_chars)
    job_title: str | None = Field(default="", max_length=settings.max_title_chars)


@router.post(
    "/ats/score",
    response_model=ATSScore,
    summary="Score a résumé",
    description="Score structured résumé content against a job description and title.",
)
async def ats_score(payload: ScoreRequest):
    try:
        return score(payload.resume, payload.job_description, payload.job_title)
    except InvalidInput as exc:
        logger.warning("ats_score_rejected reason=%s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": str(exc), "errors": exc.errors},
        ) from exc

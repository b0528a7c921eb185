from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ats_scorer.features import (
    build_insights,
    build_report,
    extract_keywords,
    match_keywords,
    score_sections,
)
from ats_scorer.schemas import ATSScore, ResumeContent
from ats_scorer.taxonomy import get_default_taxonomy_provider

logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """Raised when the résumé or job text does not have the expected shape."""

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


def _coerce_resume(resume: Any) -> ResumeContent:
    if isinstance(resume, ResumeContent):
        return resume
    if not isinstance(resume, Mapping):
        raise InvalidInput(f"resume must be an object, got {type(resume).__name__}")
    try:
        return ResumeContent.model_validate(dict(resume))
    except ValidationError as exc:
        raise InvalidInput("resume has an invalid shape", errors=exc.errors(include_url=False)) from exc


def _coerce_text(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidInput(f"{name} must be a string, got {type(value).__name__}")
    return value


def score(resume: ResumeContent | Mapping[str, Any], job_description: str, job_title: str) -> ATSScore:
    """Score ``resume`` against a job posting.

    Pure and deterministic: nothing is cached or persisted between calls, and
    the only failure is :class:`InvalidInput` for a malformed payload.
    """
    content = _coerce_resume(resume)
    description = _coerce_text(job_description, "job_description")
    title = _coerce_text(job_title, "job_title")
    taxonomy = get_default_taxonomy_provider()

    keywords = extract_keywords(title, description, taxonomy=taxonomy)
    match_result = match_keywords(keywords, content, taxonomy=taxonomy)
    section_scores = score_sections(match_result, content, title, taxonomy=taxonomy)
    insights = build_insights(section_scores.subscores, content, title, description, taxonomy=taxonomy)
    report = build_report(match_result, section_scores, insights)

    logger.info(
        "ats_score_computed overall=%s keywords=%s matched=%s format_issues=%s",
        report.overall,
        len(keywords),
        len(report.matched_keywords),
        len(report.format_issues),
    )
    return report

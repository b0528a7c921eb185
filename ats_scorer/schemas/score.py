from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TitleRelevance = Literal["high", "medium", "low"]
EducationStatus = Literal["not_specified", "exceeds", "meets", "partial", "missing"]


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class SubScores(_WireModel):
    keyword_match: int = Field(ge=0, le=100)
    title_match: int = Field(ge=0, le=100)
    skills_match: int = Field(ge=0, le=100)
    format_compliance: int = Field(ge=0, le=100)


class FormatIssue(_WireModel):
    id: str
    penalty: int = Field(ge=0)
    occurrences: int = Field(default=1, ge=1)
    suggestion: str


class EducationInsight(_WireModel):
    status: EducationStatus
    required_level: str | None = None
    resume_level: str | None = None


class SoftSkillsInsight(_WireModel):
    required: list[str] = Field(default_factory=list)
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class ATSInsights(_WireModel):
    title_relevance: TitleRelevance
    education: EducationInsight
    soft_skills: SoftSkillsInsight


class ATSScore(_WireModel):
    overall: int = Field(ge=0, le=100)
    subscores: SubScores
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    format_issues: list[FormatIssue] = Field(default_factory=list)
    insights: ATSInsights | None = None

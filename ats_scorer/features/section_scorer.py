from __future__ import annotations

import math
from dataclasses import dataclass, field

from ats_scorer.core.config.scoring import get_scoring_value
from ats_scorer.features.field_matcher import build_field_index
from ats_scorer.normalize.text import normalize, stem
from ats_scorer.schemas import FormatIssue, MatchResult, ResumeContent, SubScores
from ats_scorer.taxonomy import LocalTaxonomy, get_default_taxonomy_provider
from ats_scorer.taxonomy.lexicon import KNOWN_ACRONYMS, STOPWORDS

FORMAT_PENALTIES: dict[str, int] = {
    "missing_summary": int(get_scoring_value("format.penalties.missing_summary", 10)),
    "too_few_experience": int(get_scoring_value("format.penalties.too_few_experience", 15)),
    "experience_without_bullets": int(get_scoring_value("format.penalties.experience_without_bullets", 10)),
    "too_few_skills": int(get_scoring_value("format.penalties.too_few_skills", 15)),
    "missing_education": int(get_scoring_value("format.penalties.missing_education", 10)),
}
EXPERIENCE_WITHOUT_BULLETS_CAP = int(get_scoring_value("format.experience_without_bullets_cap", 30))
MIN_EXPERIENCE_ENTRIES = int(get_scoring_value("format.min_experience_entries", 2))
MIN_SKILLS = int(get_scoring_value("format.min_skills", 3))

FORMAT_REMEDIATIONS: dict[str, str] = {
    "missing_summary": "Add a professional summary",
    "too_few_experience": "Add at least two work experience entries",
    "experience_without_bullets": "Add bullet points describing your impact to every work experience entry",
    "too_few_skills": "List at least three relevant skills in a dedicated skills section",
    "missing_education": "Add an education section",
}


def clamp_score(value: float) -> int:
    """Round half up and clamp to [0, 100]."""
    rounded = int(math.floor(value + 0.5))
    return max(0, min(100, rounded))


@dataclass(slots=True)
class SectionScores:
    subscores: SubScores
    format_issues: list[FormatIssue] = field(default_factory=list)


def keyword_match_score(match_result: MatchResult) -> int:
    total = sum(keyword.weight for keyword in match_result.keywords)
    if total <= 0:
        return 100
    matched = sum(keyword.weight for keyword in match_result.matched())
    return clamp_score(100 * matched / total)


def significant_title_tokens(job_title: str) -> list[str]:
    tokens: list[str] = []
    for token in normalize(job_title or ""):
        if (token in STOPWORDS and token not in KNOWN_ACRONYMS) or token in tokens:
            continue
        tokens.append(token)
    return tokens


def title_match_score(
    job_title: str,
    resume: ResumeContent,
    *,
    taxonomy: LocalTaxonomy | None = None,
) -> int:
    """Fraction of significant job-title tokens found in the latest role title.

    ``experience[0]`` is the most recent role.
    """
    wanted = significant_title_tokens(job_title)
    if not wanted:
        return 100
    if not resume.experience:
        return 0

    taxonomy = taxonomy or get_default_taxonomy_provider()
    index = build_field_index([resume.experience[0].title], taxonomy)
    matched = 0
    for token in wanted:
        _, canonical = taxonomy.normalize_skill(token)
        if token in index.grams or stem(token) in index.stems or (canonical and canonical in index.concepts):
            matched += 1
    return clamp_score(100 * matched / len(wanted))


def skills_match_score(match_result: MatchResult, keyword_score: int) -> int:
    skill_keywords = [keyword for keyword in match_result.keywords if keyword.is_skill]
    if not skill_keywords:
        return keyword_score
    in_skills = sum(1 for keyword in skill_keywords if "skills" in match_result.matches[keyword.term].located_in)
    return clamp_score(100 * in_skills / len(skill_keywords))


def format_issues(resume: ResumeContent) -> list[FormatIssue]:
    issues: list[FormatIssue] = []

    def flag(issue_id: str, *, occurrences: int = 1, cap: int | None = None) -> None:
        penalty = FORMAT_PENALTIES[issue_id] * occurrences
        if cap is not None:
            penalty = min(penalty, cap)
        issues.append(
            FormatIssue(
                id=issue_id,
                penalty=penalty,
                occurrences=occurrences,
                suggestion=FORMAT_REMEDIATIONS[issue_id],
            )
        )

    if not (resume.summary or "").strip():
        flag("missing_summary")
    if len(resume.experience) < MIN_EXPERIENCE_ENTRIES:
        flag("too_few_experience")
    bulletless = sum(1 for entry in resume.experience if not any(bullet.strip() for bullet in entry.bullets))
    if bulletless:
        flag("experience_without_bullets", occurrences=bulletless, cap=EXPERIENCE_WITHOUT_BULLETS_CAP)
    if len(resume.distinct_skills()) < MIN_SKILLS:
        flag("too_few_skills")
    if not resume.education:
        flag("missing_education")
    return issues


def format_compliance_score(issues: list[FormatIssue]) -> int:
    return clamp_score(100 - sum(issue.penalty for issue in issues))


def score_sections(
    match_result: MatchResult,
    resume: ResumeContent,
    job_title: str,
    *,
    taxonomy: LocalTaxonomy | None = None,
) -> SectionScores:
    keyword_score = keyword_match_score(match_result)
    issues = format_issues(resume)
    subscores = SubScores(
        keyword_match=keyword_score,
        title_match=title_match_score(job_title, resume, taxonomy=taxonomy),
        skills_match=skills_match_score(match_result, keyword_score),
        format_compliance=format_compliance_score(issues),
    )
    return SectionScores(subscores=subscores, format_issues=issues)

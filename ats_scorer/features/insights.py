from __future__ import annotations

from ats_scorer.core.config.scoring import get_scoring_value
from ats_scorer.features.field_matcher import FieldIndex, build_field_index, resume_field_texts
from ats_scorer.normalize.text import normalize, stem_phrase
from ats_scorer.schemas import (
    ATSInsights,
    EducationInsight,
    ResumeContent,
    SoftSkillsInsight,
    SubScores,
    TitleRelevance,
)
from ats_scorer.taxonomy import LocalTaxonomy, get_default_taxonomy_provider
from ats_scorer.taxonomy.lexicon import EDUCATION_ENTRY_LEVELS, EDUCATION_LEVELS, SOFT_SKILLS

HIGH_TITLE_RELEVANCE = int(get_scoring_value("insights.title_relevance.high", 80))
MEDIUM_TITLE_RELEVANCE = int(get_scoring_value("insights.title_relevance.medium", 50))

_LEVEL_NAMES = {1: "high school", 2: "associate", 3: "bachelor", 4: "master", 5: "doctorate"}


def title_relevance(title_match: int) -> TitleRelevance:
    if title_match >= HIGH_TITLE_RELEVANCE:
        return "high"
    if title_match >= MEDIUM_TITLE_RELEVANCE:
        return "medium"
    return "low"


def _contains_term(index: FieldIndex, term: str, *, use_stems: bool = True) -> bool:
    key = " ".join(normalize(term))
    if not key:
        return False
    return key in index.grams or (use_stems and stem_phrase(key) in index.stems)


def education_level(text: str, *, lenient: bool = True) -> int:
    """Highest degree level named in ``text``, 0 when none.

    Two-letter abbreviations (``BS``, ``MA``) and bare words such as
    ``Master`` are ambiguous in free text (``MS Excel``, ``Scrum Master``),
    so job descriptions are read with ``lenient=False``. Résumé education
    entries only hold degrees and are read leniently.
    """
    index = build_field_index([text])
    terms = dict(EDUCATION_LEVELS)
    if lenient:
        terms.update(EDUCATION_ENTRY_LEVELS)
    levels = [
        level
        for term, level in terms.items()
        if (lenient or len(term) > 2) and _contains_term(index, term, use_stems=False)
    ]
    return max(levels, default=0)


def education_insight(job_text: str, resume: ResumeContent) -> EducationInsight:
    required = education_level(job_text, lenient=False)
    candidate = max(
        (education_level(f"{entry.degree} {entry.field or ''}") for entry in resume.education),
        default=0,
    )
    if required == 0:
        status = "not_specified"
    elif candidate > required:
        status = "exceeds"
    elif candidate == required:
        status = "meets"
    elif candidate > 0:
        status = "partial"
    else:
        status = "missing"
    return EducationInsight(
        status=status,
        required_level=_LEVEL_NAMES.get(required),
        resume_level=_LEVEL_NAMES.get(candidate),
    )


def soft_skills_insight(
    job_text: str,
    resume: ResumeContent,
    *,
    taxonomy: LocalTaxonomy | None = None,
) -> SoftSkillsInsight:
    taxonomy = taxonomy or get_default_taxonomy_provider()
    job_index = build_field_index([job_text], taxonomy)
    resume_texts = [text for texts in resume_field_texts(resume).values() for text in texts]
    resume_index = build_field_index(resume_texts, taxonomy)

    required = sorted(skill for skill in SOFT_SKILLS if _contains_term(job_index, skill))
    matched = [skill for skill in required if _contains_term(resume_index, skill)]
    missing = [skill for skill in required if skill not in matched]
    return SoftSkillsInsight(required=required, matched=matched, missing=missing)


def build_insights(
    subscores: SubScores,
    resume: ResumeContent,
    job_title: str,
    job_description: str,
    *,
    taxonomy: LocalTaxonomy | None = None,
) -> ATSInsights:
    job_text = f"{job_title or ''}\n{job_description or ''}"
    return ATSInsights(
        title_relevance=title_relevance(subscores.title_match),
        education=education_insight(job_text, resume),
        soft_skills=soft_skills_insight(job_text, resume, taxonomy=taxonomy),
    )

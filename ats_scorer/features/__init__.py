from .field_matcher import FieldIndex, build_field_index, build_resume_indexes, match_keyword, match_keywords
from .insights import build_insights, education_insight, soft_skills_insight, title_relevance
from .keyword_extractor import classify_description_lines, extract_keywords
from .report import aggregate_overall, build_report, build_suggestions
from .section_scorer import (
    SectionScores,
    format_compliance_score,
    format_issues,
    keyword_match_score,
    score_sections,
    skills_match_score,
    title_match_score,
)

__all__ = [
    "extract_keywords",
    "classify_description_lines",
    "FieldIndex",
    "build_field_index",
    "build_resume_indexes",
    "match_keyword",
    "match_keywords",
    "SectionScores",
    "keyword_match_score",
    "title_match_score",
    "skills_match_score",
    "format_issues",
    "format_compliance_score",
    "score_sections",
    "aggregate_overall",
    "build_suggestions",
    "build_report",
    "build_insights",
    "title_relevance",
    "education_insight",
    "soft_skills_insight",
]

from .keywords import FieldName, Keyword, KeywordMatch, MatchKind, MatchResult, SourceSpan
from .resume import EducationEntry, ExperienceEntry, ResumeContent
from .score import (
    ATSInsights,
    ATSScore,
    EducationInsight,
    EducationStatus,
    FormatIssue,
    SoftSkillsInsight,
    SubScores,
    TitleRelevance,
)

__all__ = [
    "ResumeContent",
    "ExperienceEntry",
    "EducationEntry",
    "Keyword",
    "KeywordMatch",
    "MatchResult",
    "MatchKind",
    "SourceSpan",
    "FieldName",
    "SubScores",
    "FormatIssue",
    "TitleRelevance",
    "EducationStatus",
    "EducationInsight",
    "SoftSkillsInsight",
    "ATSInsights",
    "ATSScore",
]

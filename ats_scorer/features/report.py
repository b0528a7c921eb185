from __future__ import annotations

from ats_scorer.core.config.scoring import get_scoring_value
from ats_scorer.features.section_scorer import SectionScores, clamp_score
from ats_scorer.schemas import ATSInsights, ATSScore, Keyword, MatchResult, SubScores

SUBSCORE_WEIGHTS: dict[str, float] = {
    "keyword_match": float(get_scoring_value("aggregate.weights.keyword_match", 0.45)),
    "title_match": float(get_scoring_value("aggregate.weights.title_match", 0.20)),
    "skills_match": float(get_scoring_value("aggregate.weights.skills_match", 0.20)),
    "format_compliance": float(get_scoring_value("aggregate.weights.format_compliance", 0.15)),
}
MAX_MISSING_KEYWORDS = int(get_scoring_value("report.max_missing_keywords", 15))
MAX_KEYWORD_SUGGESTIONS = int(get_scoring_value("report.max_keyword_suggestions", 5))

KEYWORD_SUGGESTION_TEMPLATE = "Consider adding experience with {term}"


def aggregate_overall(subscores: SubScores) -> int:
    total = sum(getattr(subscores, name) * weight for name, weight in SUBSCORE_WEIGHTS.items())
    return clamp_score(total)


def _by_weight(keywords: list[Keyword]) -> list[Keyword]:
    # sorted() is stable, so equal weights keep extraction order.
    return sorted(keywords, key=lambda keyword: -keyword.weight)


def build_suggestions(section_scores: SectionScores, missing: list[Keyword]) -> list[str]:
    suggestions = [issue.suggestion for issue in section_scores.format_issues]
    suggestions.extend(
        KEYWORD_SUGGESTION_TEMPLATE.format(term=keyword.term)
        for keyword in missing[:MAX_KEYWORD_SUGGESTIONS]
    )
    return suggestions


def build_report(
    match_result: MatchResult,
    section_scores: SectionScores,
    insights: ATSInsights | None = None,
) -> ATSScore:
    matched = _by_weight(match_result.matched())
    missing = _by_weight(match_result.missing())[:MAX_MISSING_KEYWORDS]
    return ATSScore(
        overall=aggregate_overall(section_scores.subscores),
        subscores=section_scores.subscores,
        matched_keywords=[keyword.term for keyword in matched],
        missing_keywords=[keyword.term for keyword in missing],
        suggestions=build_suggestions(section_scores, missing),
        format_issues=list(section_scores.format_issues),
        insights=insights,
    )

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from ats_scorer.core.config.scoring import get_scoring_value
from ats_scorer.normalize.text import inflections, normalize, stem_phrase
from ats_scorer.normalize.utils import (
    contains_any,
    enumerate_lines,
    is_bullet_like,
    is_section_header,
    normalize_line,
    strip_bullet_prefix,
)
from ats_scorer.schemas import Keyword, SourceSpan
from ats_scorer.taxonomy import LocalTaxonomy, get_default_taxonomy_provider
from ats_scorer.taxonomy.lexicon import (
    AMBIGUOUS_TERMS,
    COMPOUND_TERMS,
    KNOWN_ACRONYMS,
    LOW_SIGNAL_TERMS,
    REQUIREMENT_MARKERS,
    SOFT_SKILLS,
    STOPWORDS,
    TECH_SKILLS,
)

logger = logging.getLogger(__name__)

MAX_KEYWORDS = int(get_scoring_value("extraction.max_keywords", 40))
SOURCE_MULTIPLIERS: dict[str, float] = {
    "title": float(get_scoring_value("extraction.source_multipliers.title", 3.0)),
    "requirements-line": float(get_scoring_value("extraction.source_multipliers.requirements-line", 2.0)),
    "summary-line": float(get_scoring_value("extraction.source_multipliers.summary-line", 1.5)),
    "body": float(get_scoring_value("extraction.source_multipliers.body", 1.0)),
}

_NUMERIC_NOISE_RE = re.compile(r"^[\d+\-]+[a-z]{0,3}$")
_MAX_PHRASE_WORDS = 3


def _phrase_key(phrase: str) -> str:
    return " ".join(normalize(phrase))


def known_phrases(taxonomy: LocalTaxonomy) -> frozenset[str]:
    """Multi-word terms matched as one unit, in normalized token form."""
    raw = set(COMPOUND_TERMS) | set(taxonomy.phrases)
    raw |= {term for term in TECH_SKILLS | SOFT_SKILLS if " " in term}
    keys = {_phrase_key(term) for term in raw}
    return frozenset(key for key in keys if " " in key)


def is_skill_term(term: str, taxonomy: LocalTaxonomy) -> bool:
    if term in TECH_SKILLS:
        return True
    _, canonical = taxonomy.normalize_skill(term)
    return canonical is not None and canonical in TECH_SKILLS


def _is_candidate(token: str, taxonomy: LocalTaxonomy, *, allow_ambiguous: bool) -> bool:
    if token in AMBIGUOUS_TERMS and not allow_ambiguous:
        return False
    if token in TECH_SKILLS or taxonomy.normalize_skill(token)[1] is not None:
        return True
    if token in STOPWORDS or token in LOW_SIGNAL_TERMS:
        return False
    if _NUMERIC_NOISE_RE.match(token):
        return False
    if len(token) <= 2 and token not in KNOWN_ACRONYMS:
        return False
    return True


def candidate_terms(
    tokens: list[str],
    phrases: frozenset[str],
    taxonomy: LocalTaxonomy,
    *,
    allow_ambiguous: bool = True,
) -> list[str]:
    """Greedy longest-phrase-first scan; words inside a phrase are consumed by it."""
    terms: list[str] = []
    index = 0
    while index < len(tokens):
        for size in range(_MAX_PHRASE_WORDS, 1, -1):
            if index + size > len(tokens):
                continue
            phrase = " ".join(tokens[index:index + size])
            if phrase in phrases:
                terms.append(phrase)
                index += size
                break
        else:
            token = tokens[index]
            if _is_candidate(token, taxonomy, allow_ambiguous=allow_ambiguous):
                terms.append(token)
            index += 1
    return terms


def classify_description_lines(description: str) -> list[tuple[str, SourceSpan]]:
    """Tag each non-empty description line with the span it belongs to.

    Bullets, lines with requirement wording and every line under a
    requirements header are requirements lines. Lines of the first paragraph
    are summary lines; the rest is body. Bullet markers are stripped from the
    returned text.
    """
    tagged: list[tuple[str, SourceSpan]] = []
    in_requirements_section = False
    first_paragraph_done = False
    seen_content = False

    for _, raw_line in enumerate_lines(description or ""):
        line = normalize_line(raw_line)
        if not line:
            if seen_content:
                first_paragraph_done = True
            continue
        seen_content = True

        if is_section_header(line):
            in_requirements_section = contains_any(line, REQUIREMENT_MARKERS)

        span: SourceSpan
        if in_requirements_section or is_bullet_like(raw_line) or contains_any(line, REQUIREMENT_MARKERS):
            span = "requirements-line"
        elif not first_paragraph_done:
            span = "summary-line"
        else:
            span = "body"
        tagged.append((strip_bullet_prefix(line), span))
    return tagged


@dataclass(slots=True)
class _TermStats:
    display: str
    canonical: str
    first_seen: int
    frequency: int = 0
    multiplier: float = 0.0
    span: SourceSpan = "body"
    surfaces: set[str] = field(default_factory=set)

    def add(self, surface: str, span: SourceSpan) -> None:
        self.frequency += 1
        self.surfaces.add(surface)
        multiplier = SOURCE_MULTIPLIERS[span]
        if multiplier > self.multiplier:
            self.multiplier = multiplier
            self.span = span


def _variants(stats: _TermStats) -> frozenset[str]:
    variants: set[str] = set(stats.surfaces)
    for surface in stats.surfaces:
        if " " not in surface:
            variants |= inflections(surface)
    variants.discard(stats.display)
    return frozenset(variants)


def extract_keywords(
    job_title: str,
    job_description: str,
    *,
    taxonomy: LocalTaxonomy | None = None,
    limit: int = MAX_KEYWORDS,
) -> list[Keyword]:
    taxonomy = taxonomy or get_default_taxonomy_provider()
    phrases = known_phrases(taxonomy)

    segments: list[tuple[list[str], SourceSpan]] = [(normalize(job_title or ""), "title")]
    segments.extend((normalize(line), span) for line, span in classify_description_lines(job_description))

    stats_by_concept: dict[str, _TermStats] = {}
    order = 0
    for tokens, span in segments:
        allow_ambiguous = span in ("title", "requirements-line")
        for term in candidate_terms(tokens, phrases, taxonomy, allow_ambiguous=allow_ambiguous):
            _, canonical = taxonomy.normalize_skill(term)
            concept = canonical or stem_phrase(term)
            stats = stats_by_concept.get(concept)
            if stats is None:
                stats = _TermStats(display=canonical or term, canonical=canonical or term, first_seen=order)
                stats_by_concept[concept] = stats
                order += 1
            stats.add(term, span)

    ranked = sorted(
        stats_by_concept.values(),
        key=lambda item: (-(item.frequency * item.multiplier), item.first_seen),
    )
    keywords = [
        Keyword(
            term=stats.display,
            weight=stats.frequency * stats.multiplier,
            source_span=stats.span,
            variants=_variants(stats),
            canonical=stats.canonical,
            is_skill=any(is_skill_term(surface, taxonomy) for surface in stats.surfaces | {stats.display}),
            frequency=stats.frequency,
        )
        for stats in ranked[: max(limit, 0)]
    ]
    logger.debug(
        "ats_keywords_extracted candidates=%s kept=%s skills=%s",
        len(stats_by_concept),
        len(keywords),
        sum(1 for keyword in keywords if keyword.is_skill),
    )
    return keywords

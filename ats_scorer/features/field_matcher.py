from __future__ import annotations

from dataclasses import dataclass, field

from ats_scorer.core.config.scoring import get_scoring_value
from ats_scorer.normalize.text import fold_hyphens, ngram_set, normalize, stem_phrase
from ats_scorer.schemas import FieldName, Keyword, KeywordMatch, MatchKind, MatchResult, ResumeContent
from ats_scorer.taxonomy import LocalTaxonomy, get_default_taxonomy_provider

FIELD_PRIORITY: tuple[FieldName, ...] = tuple(
    get_scoring_value("matching.field_priority", ["skills", "experience", "summary", "education"])
)


@dataclass(slots=True)
class FieldIndex:
    """Normalized n-grams of one résumé field, plus their stems and synonym concepts."""

    grams: set[str] = field(default_factory=set)
    stems: set[str] = field(default_factory=set)
    concepts: set[str] = field(default_factory=set)

    def add_text(self, text: str, taxonomy: LocalTaxonomy) -> None:
        # Each unit (one skill, one bullet) is expanded on its own so phrases
        # never straddle two bullets.
        tokens = normalize(text)
        grams = ngram_set(tokens)
        self.grams |= grams
        folded = fold_hyphens(tokens)
        # "machine-learning" reaches "machine learning" at stem level only.
        if folded != tokens:
            grams = grams | ngram_set(folded)
        for gram in grams:
            self.stems.add(stem_phrase(gram))
            _, canonical = taxonomy.normalize_skill(gram)
            if canonical:
                self.concepts.add(canonical)


def resume_field_texts(resume: ResumeContent) -> dict[FieldName, list[str]]:
    experience: list[str] = []
    for entry in resume.experience:
        if entry.title:
            experience.append(entry.title)
        experience.extend(bullet for bullet in entry.bullets if bullet)
    education = [
        " ".join(part for part in (entry.degree, entry.field or "") if part)
        for entry in resume.education
    ]
    return {
        "skills": resume.distinct_skills(),
        "experience": experience,
        "summary": [resume.summary] if resume.summary else [],
        "education": [text for text in education if text],
    }


def build_field_index(texts: list[str], taxonomy: LocalTaxonomy | None = None) -> FieldIndex:
    taxonomy = taxonomy or get_default_taxonomy_provider()
    index = FieldIndex()
    for text in texts:
        index.add_text(text, taxonomy)
    return index


def build_resume_indexes(
    resume: ResumeContent,
    taxonomy: LocalTaxonomy | None = None,
) -> dict[FieldName, FieldIndex]:
    taxonomy = taxonomy or get_default_taxonomy_provider()
    texts = resume_field_texts(resume)
    return {name: build_field_index(texts.get(name, []), taxonomy) for name in FIELD_PRIORITY}


def match_in_field(keyword: Keyword, index: FieldIndex) -> MatchKind:
    if keyword.term in index.grams:
        return "exact"
    if keyword.variants & index.grams or stem_phrase(keyword.term) in index.stems:
        return "stem"
    if keyword.canonical in index.concepts:
        return "synonym"
    return "none"


def match_keyword(keyword: Keyword, indexes: dict[FieldName, FieldIndex]) -> KeywordMatch:
    kind: MatchKind = "none"
    located_in: list[FieldName] = []
    for name in FIELD_PRIORITY:
        index = indexes.get(name)
        if index is None:
            continue
        hit = match_in_field(keyword, index)
        if hit == "none":
            continue
        located_in.append(name)
        if kind == "none":
            kind = hit
    return KeywordMatch(matched=bool(located_in), match_kind=kind, located_in=located_in)


def match_keywords(
    keywords: list[Keyword],
    resume: ResumeContent,
    *,
    taxonomy: LocalTaxonomy | None = None,
) -> MatchResult:
    indexes = build_resume_indexes(resume, taxonomy)
    matches = {keyword.term: match_keyword(keyword, indexes) for keyword in keywords}
    return MatchResult(keywords=list(keywords), matches=matches)

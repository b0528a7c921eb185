from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

SourceSpan = Literal["title", "summary-line", "requirements-line", "body"]
MatchKind = Literal["exact", "stem", "synonym", "none"]
FieldName = Literal["skills", "experience", "summary", "education"]


class Keyword(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str
    weight: float = Field(gt=0)
    source_span: SourceSpan
    variants: frozenset[str] = frozenset()
    canonical: str
    is_skill: bool = False
    frequency: int = Field(default=1, ge=1)


class KeywordMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: bool
    match_kind: MatchKind = "none"
    located_in: list[FieldName] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_consistency(self) -> "KeywordMatch":
        if not self.matched and (self.located_in or self.match_kind != "none"):
            raise ValueError("an unmatched keyword cannot have a match kind or locations")
        if self.matched and (not self.located_in or self.match_kind == "none"):
            raise ValueError("a matched keyword needs a match kind and at least one location")
        return self


class MatchResult(BaseModel):
    """Per-keyword match outcome, keyed by the keyword's term."""

    keywords: list[Keyword] = Field(default_factory=list)
    matches: dict[str, KeywordMatch] = Field(default_factory=dict)

    def matched(self) -> list[Keyword]:
        return [keyword for keyword in self.keywords if self.matches[keyword.term].matched]

    def missing(self) -> list[Keyword]:
        return [keyword for keyword in self.keywords if not self.matches[keyword.term].matched]

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ExperienceEntry(BaseModel):
    title: str = ""
    company: str = ""
    bullets: list[str] = Field(default_factory=list)

    @field_validator("bullets", mode="before")
    @classmethod
    def _default_bullets(cls, value):
        return [] if value is None else value


class EducationEntry(BaseModel):
    degree: str = ""
    field: str | None = None
    institution: str = ""


class ResumeContent(BaseModel):
    summary: str | None = None
    experience: list[ExperienceEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)

    def distinct_skills(self) -> list[str]:
        """Skills deduplicated case-insensitively, first spelling wins."""
        seen: set[str] = set()
        output: list[str] = []
        for skill in self.skills:
            key = " ".join(skill.split()).lower()
            if not key or key in seen:
                continue
            seen.add(key)
            output.append(skill)
        return output

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _text_or_empty(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _clean_text_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [_text_or_empty(item) for item in value if item is not None]
    return value


class ResumeHeader(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    title: str = ""
    location: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""

    @field_validator("name", "title", "location", "email", "phone", "linkedin", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _text_or_empty(value)


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = ""
    role: str = ""
    company_or_client: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    bullets: list[str] = Field(default_factory=list)

    @field_validator("id", "role", "company_or_client", "start_date", "end_date", "location", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _text_or_empty(value)

    @field_validator("bullets", mode="before")
    @classmethod
    def _coerce_bullets(cls, value: Any) -> Any:
        return _clean_text_list(value)


class EducationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = ""
    degree: str = ""
    field: str = ""
    institution: str = ""
    gpa: str = ""
    graduation_date: str = ""
    location: str = ""

    @field_validator("id", "degree", "field", "institution", "gpa", "graduation_date", "location", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _text_or_empty(value)


class CertificationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str = ""
    issuer: str = ""
    date: str = ""

    @field_validator("id", "name", "issuer", "date", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _text_or_empty(value)


class ProjectEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = ""
    title: str = ""
    organization: str = ""
    date: str = ""
    bullets: list[str] = Field(default_factory=list)

    @field_validator("id", "title", "organization", "date", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _text_or_empty(value)

    @field_validator("bullets", mode="before")
    @classmethod
    def _coerce_bullets(cls, value: Any) -> Any:
        return _clean_text_list(value)


class ResumeDocument(BaseModel):
    """Structured resume as produced by the form editor or document extraction.

    Every text field is a string (never ``None``) so scorers can rely on
    ``.strip()`` without null checks. ``skills`` maps a category key to its
    skills and keeps the insertion order of categories.
    """

    model_config = ConfigDict(frozen=True)

    header: ResumeHeader = Field(default_factory=ResumeHeader)
    summary: str = ""
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    certifications: list[CertificationEntry] = Field(default_factory=list)
    skills: dict[str, list[str]] = Field(default_factory=dict)
    projects: list[ProjectEntry] = Field(default_factory=list)

    @field_validator("header", mode="before")
    @classmethod
    def _coerce_header(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("summary", mode="before")
    @classmethod
    def _coerce_summary(cls, value: Any) -> Any:
        return _text_or_empty(value)

    @field_validator("experience", "education", "certifications", "projects", mode="before")
    @classmethod
    def _coerce_entries(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [item for item in value if item is not None]
        return value

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(key): _clean_text_list(items) for key, items in value.items()}
        return value

    def all_skills(self) -> list[str]:
        """Flattened skills across categories, blanks removed."""
        return [skill for items in self.skills.values() for skill in items if skill.strip()]

    def valid_experience(self) -> list[ExperienceEntry]:
        return [entry for entry in self.experience if entry.company_or_client]

    def valid_education(self) -> list[EducationEntry]:
        return [entry for entry in self.education if entry.institution]

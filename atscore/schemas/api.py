from __future__ import annotations

from pydantic import BaseModel, Field

from .report import ATSScoreReport, Issue, KeywordCoverage, KeywordMatch
from .resume import ResumeDocument


class ScoreRequest(BaseModel):
    resume: ResumeDocument
    job_description: str | None = Field(default=None, max_length=50000)


class ScoreResponse(BaseModel):
    report: ATSScoreReport
    keywords: list[KeywordMatch] = Field(default_factory=list)
    keyword_coverage: KeywordCoverage | None = None


class KeywordRequest(BaseModel):
    resume: ResumeDocument
    job_description: str = Field(default="", max_length=50000)


class KeywordResponse(BaseModel):
    keywords: list[KeywordMatch]
    coverage: KeywordCoverage


class FixPromptRequest(BaseModel):
    section: str = Field(min_length=1, max_length=100)
    resume: ResumeDocument
    issues: list[Issue] | None = None


class FixPromptResponse(BaseModel):
    section: str
    prompt: str


class ValidateRequest(BaseModel):
    resume: ResumeDocument


class ValidateResponse(BaseModel):
    experience: list[dict[str, str | None]] = Field(default_factory=list)
    education: list[dict[str, str | None]] = Field(default_factory=list)
    date_suggestions: dict[str, str] = Field(default_factory=dict)
    summary: str | None = None
    linkedin: str | None = None

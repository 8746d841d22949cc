from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["critical", "warning", "suggestion"]

SEVERITY_RANK: dict[str, int] = {"critical": 0, "warning": 1, "suggestion": 2}


class Issue(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    section: str
    severity: Severity
    title: str
    description: str
    fix: str | None = None


class SectionScore(BaseModel):
    section: str
    score: int | float = Field(ge=0)
    max_score: int = Field(gt=0)
    issues: list[Issue] = Field(default_factory=list)


class ATSScoreReport(BaseModel):
    overall: int = Field(ge=0, le=100)
    sections: list[SectionScore]
    issues: list[Issue] = Field(default_factory=list)
    passes_ats: bool
    summary: str

    def section(self, name: str) -> SectionScore | None:
        for section in self.sections:
            if section.section == name:
                return section
        return None


class KeywordMatch(BaseModel):
    keyword: str
    found: bool
    context: str | None = None


class KeywordCoverage(BaseModel):
    total: int = 0
    matched: int = 0
    missing: list[str] = Field(default_factory=list)
    match_rate: float = Field(default=0.0, ge=0.0, le=1.0)

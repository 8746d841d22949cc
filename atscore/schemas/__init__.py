from .report import ATSScoreReport, Issue, KeywordCoverage, KeywordMatch, SectionScore, Severity
from .resume import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeDocument,
    ResumeHeader,
)

__all__ = [
    "ResumeHeader",
    "ExperienceEntry",
    "EducationEntry",
    "CertificationEntry",
    "ProjectEntry",
    "ResumeDocument",
    "Severity",
    "Issue",
    "SectionScore",
    "ATSScoreReport",
    "KeywordMatch",
    "KeywordCoverage",
]

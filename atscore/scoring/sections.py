from __future__ import annotations

from atscore.schemas.report import Issue, SectionScore, Severity

HEADER = "Contact Info"
SUMMARY = "Professional Summary"
EXPERIENCE = "Work Experience"
EDUCATION = "Education"
SKILLS = "Skills"
FORMATTING = "Formatting"
CONTENT_QUALITY = "Content Quality"

# Fixed per-section maxima; they must total 100.
SECTION_MAX_SCORES: dict[str, int] = {
    HEADER: 10,
    SUMMARY: 10,
    EXPERIENCE: 30,
    EDUCATION: 10,
    SKILLS: 15,
    FORMATTING: 10,
    CONTENT_QUALITY: 15,
}


def make_issue(
    section: str,
    issue_id: str,
    severity: Severity,
    title: str,
    description: str,
    fix: str | None = None,
) -> Issue:
    return Issue(id=issue_id, section=section, severity=severity, title=title, description=description, fix=fix)


def section_result(section: str, score: float, issues: list[Issue]) -> SectionScore:
    max_score = SECTION_MAX_SCORES[section]
    bounded = max(0, min(score, max_score))
    return SectionScore(section=section, score=bounded, max_score=max_score, issues=issues)

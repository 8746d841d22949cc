from __future__ import annotations

from atscore.schemas.report import Issue, SectionScore
from atscore.schemas.resume import EducationEntry, ResumeDocument

from .patterns import DEFAULT_PATTERNS, PatternLibrary
from .sections import EDUCATION, make_issue, section_result
from .text import round_half_up

BASE_POINTS = 3
DETAIL_POINTS = 7
ENTRY_SCALE = 7


def _score_entry(entry: EducationEntry, idx: int) -> tuple[int, list[Issue]]:
    issues: list[Issue] = []
    points = 0

    if not entry.degree.strip():
        issues.append(
            make_issue(
                EDUCATION,
                f"ed{idx}-degree",
                "warning",
                f"{entry.institution}: Missing degree type",
                "ATS filters require degree level (Bachelor's, Master's, PhD). Without it, you won't pass "
                "education filters.",
            )
        )
    else:
        points += 3

    if not entry.graduation_date.strip():
        issues.append(
            make_issue(
                EDUCATION,
                f"ed{idx}-date",
                "suggestion",
                f"{entry.institution}: Missing graduation date",
                "Dates help ATS verify degree completion and calculate experience timeline.",
            )
        )
    else:
        points += 2

    if not entry.field.strip():
        issues.append(
            make_issue(
                EDUCATION,
                f"ed{idx}-field",
                "warning",
                f"{entry.institution}: Missing field of study",
                "ATS may filter by major/field (e.g., 'Computer Science degree required'). Include your field "
                "of study.",
            )
        )
    else:
        points += 2

    return points, issues


def score_education(document: ResumeDocument, patterns: PatternLibrary = DEFAULT_PATTERNS) -> SectionScore:
    issues: list[Issue] = []
    entries = document.valid_education()

    if not entries:
        issues.append(
            make_issue(
                EDUCATION,
                "ed-missing",
                "warning",
                "No education listed",
                "Many ATS systems filter by education level (e.g., 'Bachelor's required'). Missing education can "
                "auto-reject your application.",
            )
        )
        return section_result(EDUCATION, 0, issues)

    score = BASE_POINTS
    earned = 0
    for idx, entry in enumerate(entries):
        entry_points, entry_issues = _score_entry(entry, idx)
        earned += entry_points
        issues.extend(entry_issues)

    possible = ENTRY_SCALE * len(entries)
    if possible > 0:
        score += round_half_up((earned / possible) * DETAIL_POINTS)

    return section_result(EDUCATION, score, issues)

from __future__ import annotations

import logging
from typing import Callable

from atscore.schemas.report import SEVERITY_RANK, ATSScoreReport, Issue, SectionScore
from atscore.schemas.resume import ResumeDocument

from .content_quality import score_content_quality
from .education import score_education
from .experience import score_experience
from .formatting import score_formatting
from .header import score_header
from .patterns import DEFAULT_PATTERNS, PatternLibrary
from .policy import DEFAULT_POLICY, ScoringPolicy
from .skills import score_skills
from .summary import score_summary
from .text import round_half_up

logger = logging.getLogger(__name__)

SectionScorer = Callable[[ResumeDocument, PatternLibrary], SectionScore]

SECTION_SCORERS: tuple[SectionScorer, ...] = (
    score_header,
    score_summary,
    score_experience,
    score_education,
    score_skills,
    score_formatting,
    score_content_quality,
)


def sort_issues(issues: list[Issue]) -> list[Issue]:
    """Order issues critical -> warning -> suggestion, keeping input order within a tier."""
    return sorted(issues, key=lambda issue: SEVERITY_RANK[issue.severity])


def build_verdict(
    overall: int, critical_count: int, warning_count: int, policy: ScoringPolicy = DEFAULT_POLICY
) -> str:
    if overall >= policy.excellent:
        return (
            "Excellent! Your resume is highly optimized for ATS systems. "
            "It should pass most automated screening filters."
        )
    if overall >= policy.very_good:
        return (
            "Very good. Your resume is ATS-compatible with minor improvements possible. "
            "Focus on the suggestions below to reach 90+."
        )
    if overall >= policy.decent:
        return (
            f"Decent, but needs work. You have {warning_count} warnings that should be addressed "
            "to improve your match rate."
        )
    if overall >= policy.needs_improvement:
        return (
            f"Needs significant improvement. {critical_count} critical issues and {warning_count} warnings "
            "are reducing your chances. Address critical issues first."
        )
    return (
        f"Your resume has major ATS compatibility issues. {critical_count} critical problems must be fixed "
        "immediately or your resume will likely be auto-rejected."
    )


def aggregate(sections: list[SectionScore], policy: ScoringPolicy = DEFAULT_POLICY) -> ATSScoreReport:
    total_score = sum(section.score for section in sections)
    total_max = sum(section.max_score for section in sections)
    # Ratio of earned to available points, scaled to 0-100.
    overall = round_half_up((total_score / total_max) * 100) if total_max else 0

    issues = sort_issues([issue for section in sections for issue in section.issues])
    critical_count = sum(1 for issue in issues if issue.severity == "critical")
    warning_count = sum(1 for issue in issues if issue.severity == "warning")

    logger.debug(
        "ats_score_computed overall=%s critical=%s warnings=%s issues=%s",
        overall,
        critical_count,
        warning_count,
        len(issues),
    )
    return ATSScoreReport(
        overall=overall,
        sections=sections,
        issues=issues,
        passes_ats=overall >= policy.pass_threshold,
        summary=build_verdict(overall, critical_count, warning_count, policy),
    )


def score(
    document: ResumeDocument,
    patterns: PatternLibrary = DEFAULT_PATTERNS,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> ATSScoreReport:
    """Score a resume across the seven ATS sections and aggregate the report."""
    sections = [scorer(document, patterns) for scorer in SECTION_SCORERS]
    return aggregate(sections, policy)

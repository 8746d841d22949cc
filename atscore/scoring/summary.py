from __future__ import annotations

from atscore.schemas.report import Issue, SectionScore
from atscore.schemas.resume import ResumeDocument

from .patterns import DEFAULT_PATTERNS, PatternLibrary
from .sections import SUMMARY, make_issue, section_result
from .text import has_summary_metric, word_count


def score_summary(document: ResumeDocument, patterns: PatternLibrary = DEFAULT_PATTERNS) -> SectionScore:
    summary = document.summary
    issues: list[Issue] = []
    score = 0

    if not summary.strip():
        issues.append(
            make_issue(
                SUMMARY,
                "s-missing",
                "critical",
                "No professional summary",
                "A summary is the first thing ATS scans for keyword matching. Without it, you miss critical "
                "keyword opportunities and recruiters have no quick overview.",
                fix="Generate a professional summary",
            )
        )
        return section_result(SUMMARY, 0, issues)

    words = word_count(summary)
    if words < 20:
        issues.append(
            make_issue(
                SUMMARY,
                "s-short",
                "warning",
                "Summary too short",
                f"Only {words} words. ATS keyword matching works best with 30-60 words. "
                "Short summaries miss keyword opportunities.",
                fix="Expand summary to 30-60 words",
            )
        )
        score += 1
    elif words > 80:
        issues.append(
            make_issue(
                SUMMARY,
                "s-long",
                "suggestion",
                "Summary is too long",
                f"{words} words. Recruiters spend 6-7 seconds scanning. Keep under 60 words for maximum impact.",
                fix="Condense summary to under 60 words",
            )
        )
        score += 3
    else:
        score += 4

    if patterns.pronoun.search(summary):
        issues.append(
            make_issue(
                SUMMARY,
                "s-pronoun",
                "warning",
                "First-person pronouns detected",
                "Professional summaries should use implied first person. 'I managed a team' -> "
                "'Managed a team of 15 engineers'. This is an industry standard.",
                fix="Remove first-person pronouns",
            )
        )
    else:
        score += 2

    if has_summary_metric(summary, patterns):
        score += 2
    else:
        issues.append(
            make_issue(
                SUMMARY,
                "s-metrics",
                "suggestion",
                "No quantified results in summary",
                "Adding metrics like '8+ years experience' or 'managed $2M budget' makes your summary more "
                "compelling and ATS-friendly.",
            )
        )
        # Partial credit: a missing metric is only a suggestion.
        score += 1

    # Keyword-density proxy.
    if len(summary) > 50:
        score += 2

    return section_result(SUMMARY, score, issues)

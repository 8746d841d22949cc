from __future__ import annotations

from atscore.schemas.report import Issue, SectionScore
from atscore.schemas.resume import ResumeDocument

from .patterns import DEFAULT_PATTERNS, PatternLibrary
from .sections import FORMATTING, make_issue, section_result
from .text import round_half_up


def document_text(document: ResumeDocument) -> str:
    """Body text of the resume (header excluded) joined by single spaces."""
    parts: list[str] = [document.summary]
    for entry in document.experience:
        parts.extend([entry.role, entry.company_or_client, *entry.bullets])
    for edu in document.education:
        parts.append(f"{edu.degree} {edu.field} {edu.institution}")
    for items in document.skills.values():
        parts.extend(items)
    for project in document.projects:
        parts.extend([project.title, *project.bullets])
    for cert in document.certifications:
        parts.append(f"{cert.name} {cert.issuer}")
    return " ".join(parts)


def _collect_dates(document: ResumeDocument) -> list[str]:
    dates: list[str] = []
    for entry in document.experience:
        dates.extend(value for value in (entry.start_date, entry.end_date) if value)
    dates.extend(edu.graduation_date for edu in document.education if edu.graduation_date)
    return dates


def _missing_sections(document: ResumeDocument) -> list[str]:
    missing: list[str] = []
    if not (document.header.name.strip() and document.header.email.strip()):
        missing.append("Contact Info (name + email)")
    if not document.summary.strip():
        missing.append("Professional Summary")
    if not document.valid_experience():
        missing.append("Work Experience")
    if not document.valid_education():
        missing.append("Education")
    if not document.all_skills():
        missing.append("Skills")
    return missing


def score_formatting(document: ResumeDocument, patterns: PatternLibrary = DEFAULT_PATTERNS) -> SectionScore:
    issues: list[Issue] = []
    score = 0
    text = document_text(document)

    if patterns.emoji.search(text):
        issues.append(
            make_issue(
                FORMATTING,
                "f-emoji",
                "critical",
                "Emojis detected in resume",
                "ATS systems (Taleo, Workday, iCIMS) CANNOT parse emojis. They will corrupt your resume data and "
                "may cause rejection.",
                fix="Remove all emojis from resume content",
            )
        )
    else:
        score += 2

    if patterns.tab.search(text):
        issues.append(
            make_issue(
                FORMATTING,
                "f-tabs",
                "warning",
                "Tab characters detected",
                "Tabs cause ATS parsing errors. Use regular spaces instead.",
            )
        )
    else:
        score += 1

    total_words = len(text.split())
    if total_words < 100:
        issues.append(
            make_issue(
                FORMATTING,
                "f-short",
                "warning",
                "Resume is too sparse",
                f"Only ~{total_words} words. Competitive resumes have 300-700 words. Your resume lacks enough "
                "content for meaningful ATS keyword matching.",
            )
        )
    elif total_words < 200:
        issues.append(
            make_issue(
                FORMATTING,
                "f-brief",
                "suggestion",
                "Resume could use more content",
                f"~{total_words} words. Aim for 400-600 words for a strong single-page resume.",
            )
        )
        score += 1
    elif total_words > 1200:
        issues.append(
            make_issue(
                FORMATTING,
                "f-long",
                "suggestion",
                "Resume may be too long",
                f"~{total_words} words. Unless you have 15+ years experience, aim for 1-2 pages (400-800 words).",
            )
        )
        score += 2
    else:
        score += 3

    missing = _missing_sections(document)
    if missing:
        present = 5 - len(missing)
        issues.append(
            make_issue(
                FORMATTING,
                "f-sections",
                "critical",
                f"Missing essential sections: {', '.join(missing)}",
                f"Your resume is missing {len(missing)} essential section(s). ATS systems expect all 5 core "
                "sections: Contact Info, Summary, Experience, Education, and Skills.",
            )
        )
        score += round_half_up((present / 5) * 3)
    else:
        score += 3

    dates = _collect_dates(document)
    if len(dates) > 2:
        has_month = any(patterns.month_prefix.search(value) for value in dates)
        has_slash = any(patterns.slash_date.search(value) for value in dates)
        has_year = any(
            patterns.year_only.search(value) and not patterns.current_marker.search(value) for value in dates
        )
        if sum([has_month, has_slash, has_year]) > 1:
            issues.append(
                make_issue(
                    FORMATTING,
                    "f-date-mix",
                    "warning",
                    "Inconsistent date formats",
                    "You're mixing date formats (e.g., 'Jan 2023' and '01/2023'). Use one consistent format "
                    "throughout for ATS compatibility.",
                )
            )
        else:
            score += 1
    else:
        score += 1

    return section_result(FORMATTING, score, issues)

from __future__ import annotations

from atscore.schemas.report import Issue, SectionScore
from atscore.schemas.resume import ResumeDocument

from .patterns import DEFAULT_PATTERNS, PatternLibrary
from .sections import HEADER, make_issue, section_result


def score_header(document: ResumeDocument, patterns: PatternLibrary = DEFAULT_PATTERNS) -> SectionScore:
    header = document.header
    issues: list[Issue] = []
    score = 0

    if not header.name.strip():
        issues.append(
            make_issue(
                HEADER,
                "h-name",
                "critical",
                "Missing name",
                "ATS systems require a full name to create a candidate profile. Without it, your resume will be rejected.",
                fix="Add your full legal name",
            )
        )
    else:
        score += 3
        if header.name.upper() == header.name and len(header.name) > 3:
            issues.append(
                make_issue(
                    HEADER,
                    "h-name-case",
                    "warning",
                    "Name is ALL CAPS",
                    "Some ATS parsers (Taleo, Workday) misread ALL CAPS names. Use Title Case instead.",
                    fix="Convert name to Title Case",
                )
            )
            score -= 1
        if patterns.name_symbol.search(header.name):
            issues.append(
                make_issue(
                    HEADER,
                    "h-name-chars",
                    "warning",
                    "Special characters in name",
                    "Special characters may corrupt your name in ATS databases.",
                )
            )
            score -= 1

    if not header.email.strip():
        issues.append(
            make_issue(
                HEADER,
                "h-email",
                "critical",
                "Missing email address",
                "Without an email, recruiters cannot contact you. ATS will flag your application as incomplete.",
            )
        )
    elif not patterns.email.search(header.email):
        issues.append(
            make_issue(
                HEADER,
                "h-email-fmt",
                "warning",
                "Invalid email format",
                "ATS may reject improperly formatted email addresses.",
            )
        )
    else:
        score += 2

    if not header.phone.strip():
        issues.append(
            make_issue(
                HEADER,
                "h-phone",
                "warning",
                "Missing phone number",
                "Most recruiters and ATS expect a phone number for initial screening calls.",
            )
        )
    else:
        score += 2

    if not header.location.strip():
        issues.append(
            make_issue(
                HEADER,
                "h-location",
                "warning",
                "Missing location",
                "ATS location filters will exclude your resume. Add 'City, State' or 'Remote'.",
            )
        )
    else:
        score += 1

    if not header.title.strip():
        issues.append(
            make_issue(
                HEADER,
                "h-title",
                "suggestion",
                "No professional title",
                "A target job title (e.g., 'Senior Software Engineer') helps ATS match you to relevant positions.",
            )
        )
    else:
        score += 1

    if not header.linkedin.strip():
        issues.append(
            make_issue(
                HEADER,
                "h-linkedin",
                "suggestion",
                "No LinkedIn URL",
                "LinkedIn profiles help recruiters verify your background. Many ATS parse LinkedIn data.",
            )
        )
    else:
        score += 1
        if not patterns.linkedin_profile.search(header.linkedin):
            issues.append(
                make_issue(
                    HEADER,
                    "h-linkedin-fmt",
                    "suggestion",
                    "Non-standard LinkedIn URL",
                    "Use the standard format: linkedin.com/in/your-name",
                )
            )

    return section_result(HEADER, score, issues)

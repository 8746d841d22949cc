"""Form-level field checks for the resume editor.

These are independent of scoring: they tell the user what to fix while
typing, and return ``None`` when a field is fine or intentionally left blank.
"""

from __future__ import annotations

from atscore.schemas.api import ValidateResponse
from atscore.schemas.resume import EducationEntry, ExperienceEntry, ResumeDocument
from atscore.scoring.patterns import DEFAULT_PATTERNS, PatternLibrary

DATE_FORMAT_HINT = "Use 'Jan 2023' or 'Present' for best ATS compatibility"


def validate_experience_entry(entry: ExperienceEntry) -> dict[str, str | None]:
    has_content = any(
        value.strip() for value in (entry.company_or_client, entry.role, entry.start_date, entry.end_date)
    ) or any(bullet.strip() for bullet in entry.bullets)
    if not has_content:
        return {"company_or_client": None, "role": None}

    return {
        "company_or_client": None if entry.company_or_client.strip() else "Company name is required",
        "role": None if entry.role.strip() else "Job title is required",
    }


def validate_education_entry(entry: EducationEntry) -> dict[str, str | None]:
    has_content = any(
        value.strip() for value in (entry.institution, entry.degree, entry.field, entry.graduation_date)
    )
    if not has_content:
        return {"institution": None, "degree": None}

    return {
        "institution": None if entry.institution.strip() else "Institution is required",
        "degree": None if entry.degree.strip() else "Degree is required",
    }


def date_format_suggestion(value: str, patterns: PatternLibrary = DEFAULT_PATTERNS) -> str | None:
    if not value.strip():
        return None
    if patterns.is_valid_date(value):
        return None
    return DATE_FORMAT_HINT


def summary_length_warning(summary: str) -> str | None:
    if not summary.strip():
        return None
    if len(summary) < 50:
        return "Summary is very short. Aim for 2-3 sentences."
    if len(summary) > 500:
        return "Summary is quite long. ATS prefers 2-3 concise sentences."
    return None


def linkedin_url_warning(url: str, patterns: PatternLibrary = DEFAULT_PATTERNS) -> str | None:
    if not url.strip():
        return None
    if patterns.linkedin_profile.search(url):
        return None
    return "Should be a LinkedIn profile URL"


def validate_document(document: ResumeDocument, patterns: PatternLibrary = DEFAULT_PATTERNS) -> ValidateResponse:
    """Run every field check over a whole resume; date hints are keyed by field path."""
    date_suggestions: dict[str, str] = {}
    for idx, entry in enumerate(document.experience):
        for field in ("start_date", "end_date"):
            hint = date_format_suggestion(getattr(entry, field), patterns)
            if hint:
                date_suggestions[f"experience[{idx}].{field}"] = hint
    for idx, edu in enumerate(document.education):
        hint = date_format_suggestion(edu.graduation_date, patterns)
        if hint:
            date_suggestions[f"education[{idx}].graduation_date"] = hint

    return ValidateResponse(
        experience=[validate_experience_entry(entry) for entry in document.experience],
        education=[validate_education_entry(entry) for entry in document.education],
        date_suggestions=date_suggestions,
        summary=summary_length_warning(document.summary),
        linkedin=linkedin_url_warning(document.header.linkedin, patterns),
    )

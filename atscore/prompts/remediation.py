from __future__ import annotations

import json

from atscore.schemas.report import Issue
from atscore.schemas.resume import ResumeDocument
from atscore.scoring.policy import DEFAULT_POLICY

SUMMARY_SECTIONS = {"Summary", "Professional Summary"}
EXPERIENCE_SECTIONS = {"Experience", "Work Experience"}
SKILLS_SECTIONS = {"Skills"}

_EXPERT_PREFIX = "You are an ATS-optimization expert."


def format_issue_list(issues: list[Issue]) -> str:
    return "\n".join(f"- [{issue.severity.upper()}] {issue.title}: {issue.description}" for issue in issues)


def _summary_prompt(document: ResumeDocument, issue_list: str, skill_limit: int) -> str:
    title = document.header.title or "Professional"
    employers = ", ".join(entry.company_or_client for entry in document.valid_experience())
    skills = ", ".join([skill for items in document.skills.values() for skill in items][:skill_limit])
    return (
        f"{_EXPERT_PREFIX} Fix this professional summary to resolve these ATS issues:\n\n"
        f"ISSUES:\n{issue_list}\n\n"
        f'CURRENT SUMMARY:\n"{document.summary}"\n\n'
        f"CONTEXT: {title} with experience at {employers}. Skills: {skills}.\n\n"
        "RULES: No first-person pronouns. Include metrics. 30-60 words. Start with years of experience or key "
        "strength. Output ONLY the improved summary text, nothing else."
    )


def _experience_prompt(document: ResumeDocument, issue_list: str) -> str:
    blocks: list[str] = []
    for entry in document.valid_experience():
        bullets = "\n".join(f"- {bullet}" for bullet in entry.bullets)
        blocks.append(f"{entry.role} at {entry.company_or_client}:\n{bullets}")
    experience = "\n\n".join(blocks)
    return (
        f"{_EXPERT_PREFIX} Improve these experience bullet points to resolve ATS issues:\n\n"
        f"ISSUES:\n{issue_list}\n\n"
        f"EXPERIENCE:\n{experience}\n\n"
        "RULES: Start every bullet with a strong action verb (Led, Developed, Optimized, etc). Add quantifiable "
        "metrics (percentages, numbers, dollar amounts). Keep each bullet under 25 words. Return ONLY a JSON "
        'array of experience objects with "role", "company_or_client", and "bullets" fields.'
    )


def _skills_prompt(document: ResumeDocument, issue_list: str) -> str:
    title = document.header.title or "Professional"
    roles = ", ".join(entry.role for entry in document.valid_experience())
    skills_json = json.dumps(document.skills, indent=2, ensure_ascii=False)
    return (
        f"{_EXPERT_PREFIX} The skills section has these issues:\n\n"
        f"ISSUES:\n{issue_list}\n\n"
        f"CURRENT SKILLS:\n{skills_json}\n\n"
        f"CONTEXT: {title} role. Experience includes: {roles}.\n\n"
        "RULES: Organize into clear categories. Add relevant technical skills based on experience. Keep skill "
        "names concise (1-3 words each). Return ONLY a JSON object with category keys and string array values."
    )


def build_remediation_prompt(
    section_name: str,
    document: ResumeDocument,
    issues: list[Issue],
    *,
    skill_limit: int | None = None,
) -> str:
    """Render the rewrite instruction for one section, for an external text-generation model."""
    issue_list = format_issue_list(issues)

    if section_name in SUMMARY_SECTIONS:
        if skill_limit is None:
            skill_limit = DEFAULT_POLICY.context_skill_limit
        return _summary_prompt(document, issue_list, skill_limit)
    if section_name in EXPERIENCE_SECTIONS:
        return _experience_prompt(document, issue_list)
    if section_name in SKILLS_SECTIONS:
        return _skills_prompt(document, issue_list)
    return f"Fix ATS issues for the {section_name} section:\n{issue_list}"

from __future__ import annotations

from atscore.schemas.report import Issue, SectionScore
from atscore.schemas.resume import ResumeDocument

from .patterns import DEFAULT_PATTERNS, PatternLibrary
from .sections import SKILLS, make_issue, section_result
from .text import word_count


def score_skills(document: ResumeDocument, patterns: PatternLibrary = DEFAULT_PATTERNS) -> SectionScore:
    issues: list[Issue] = []
    score = 0
    skills = document.all_skills()
    count = len(skills)

    if count == 0:
        issues.append(
            make_issue(
                SKILLS,
                "sk-missing",
                "critical",
                "No skills listed",
                "The Skills section is where ATS performs PRIMARY keyword matching. Without skills, your resume "
                "will fail keyword matching for almost every job listing. This is the #1 reason resumes get "
                "rejected by ATS.",
            )
        )
        return section_result(SKILLS, 0, issues)

    if count < 5:
        issues.append(
            make_issue(
                SKILLS,
                "sk-few",
                "warning",
                f"Only {count} skills listed",
                "Most competitive resumes list 10-20 relevant skills. Fewer skills means fewer keyword matches "
                "with job descriptions.",
            )
        )
        score += 2
    elif count < 8:
        issues.append(
            make_issue(
                SKILLS,
                "sk-more",
                "suggestion",
                f"{count} skills, could add more",
                "You have a decent start. Adding 5-10 more relevant skills will significantly improve ATS match "
                "rates.",
            )
        )
        score += 4
    elif count < 12:
        issues.append(
            make_issue(
                SKILLS,
                "sk-good",
                "suggestion",
                "Good skill count, consider adding more",
                f"{count} skills is solid. 15-20 skills is optimal for maximum ATS keyword coverage.",
            )
        )
        score += 6
    elif count <= 25:
        score += 8
    else:
        issues.append(
            make_issue(
                SKILLS,
                "sk-too-many",
                "suggestion",
                f"{count} skills may be too many",
                "Focus on 15-20 most relevant skills. Too many skills can dilute your profile and look unfocused.",
            )
        )
        score += 6

    categories = [key for key, items in document.skills.items() if any(item.strip() for item in items)]
    if len(categories) < 2:
        issues.append(
            make_issue(
                SKILLS,
                "sk-cats",
                "suggestion",
                "Skills not categorized",
                "Organizing skills into categories (Technical Skills, Tools, Frameworks, Soft Skills) helps ATS "
                "parse and categorize your abilities.",
            )
        )
        score += 1
    elif len(categories) < 3:
        score += 3
    else:
        score += 4

    verbose = [skill for skill in skills if word_count(skill) > 4]
    if verbose:
        issues.append(
            make_issue(
                SKILLS,
                "sk-long",
                "suggestion",
                "Some skills are too verbose",
                f'"{verbose[0]}" looks like a phrase. Keep skills concise (1-3 words each) for ATS keyword '
                "matching.",
            )
        )
        score += 1
    else:
        score += 3

    return section_result(SKILLS, score, issues)

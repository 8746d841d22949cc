"""Work-experience scorer.

The section is worth 30 points: 5 for having any valid role, 2 for reverse
chronological order, and 23 distributed by per-role normalization. Each valid
role is scored on an internal 0-10 scale (title 2, dates 1, bullet count 3,
action verbs 2, metrics 2); the sum over all roles is divided by
``10 * role_count`` and rescaled to 23, so the number of roles does not bias
the result.
"""

from __future__ import annotations

from atscore.schemas.report import Issue, SectionScore
from atscore.schemas.resume import ExperienceEntry, ResumeDocument

from .patterns import DEFAULT_PATTERNS, PatternLibrary
from .sections import EXPERIENCE, make_issue, section_result
from .text import has_metric, round_half_up, starts_with_action_verb, word_count

BASE_POINTS = 5
ORDER_POINTS = 2
ROLE_POINTS = 23
ROLE_SCALE = 10


def _role_label(entry: ExperienceEntry, idx: int) -> str:
    return entry.role or f"Experience {idx + 1}"


def _is_reverse_chronological(entries: list[ExperienceEntry], patterns: PatternLibrary) -> bool:
    # Heuristic: only the first and last end dates are compared.
    end_dates = [entry.end_date for entry in entries if entry.end_date]
    if len(end_dates) < 2:
        return True
    first_is_current = bool(patterns.current_marker.search(end_dates[0]))
    last_is_current = bool(patterns.current_marker.search(end_dates[-1]))
    return not (last_is_current and not first_is_current)


def _score_role(entry: ExperienceEntry, idx: int, patterns: PatternLibrary) -> tuple[float, list[Issue]]:
    prefix = f"e{idx}"
    label = _role_label(entry, idx)
    issues: list[Issue] = []
    points = 0.0

    if not entry.role.strip():
        issues.append(
            make_issue(
                EXPERIENCE,
                f"{prefix}-role",
                "critical",
                f"Experience {idx + 1}: Missing job title",
                "ATS uses job titles as PRIMARY matching criteria. Without a title, this role won't match any "
                "job listings.",
            )
        )
    else:
        points += 2

    if not entry.start_date.strip() or not entry.end_date.strip():
        issues.append(
            make_issue(
                EXPERIENCE,
                f"{prefix}-dates",
                "warning",
                f"{label}: Missing dates",
                "ATS calculates total years of experience from dates. Missing dates means your experience won't "
                "count toward requirements like '5+ years experience'.",
            )
        )
    elif patterns.is_valid_date(entry.start_date) and patterns.is_valid_date(entry.end_date):
        points += 1
    else:
        issues.append(
            make_issue(
                EXPERIENCE,
                f"{prefix}-date-fmt",
                "suggestion",
                f"{label}: Non-standard date format",
                "Use 'Month Year' (e.g., 'January 2023' or 'Jan 2023') for best ATS compatibility.",
            )
        )
        points += 0.5

    bullets = entry.bullets
    bullet_count = len(bullets)
    if bullet_count == 0:
        issues.append(
            make_issue(
                EXPERIENCE,
                f"{prefix}-bullets",
                "critical",
                f"{label}: No bullet points",
                "ATS keyword matching relies heavily on bullet point content. Without bullets, this role "
                "contributes zero keywords.",
                fix="Add 3-6 bullet points with achievements",
            )
        )
    elif bullet_count < 3:
        issues.append(
            make_issue(
                EXPERIENCE,
                f"{prefix}-few-bullets",
                "warning",
                f"{label}: Only {bullet_count} bullet(s)",
                "Best practice is 3-6 bullets per role. Fewer bullets means fewer keyword matching opportunities.",
                fix="Add more bullet points",
            )
        )
        points += 1
    elif bullet_count > 8:
        issues.append(
            make_issue(
                EXPERIENCE,
                f"{prefix}-many-bullets",
                "suggestion",
                f"{label}: Too many bullets ({bullet_count})",
                "Keep 4-6 bullets per role. Too many bullets dilute impact and make the resume too long.",
            )
        )
        points += 2
    else:
        points += 3

    if bullet_count > 0:
        with_verbs = sum(1 for bullet in bullets if starts_with_action_verb(bullet, patterns))
        verb_ratio = with_verbs / bullet_count
        if verb_ratio >= 0.8:
            points += 2
        elif verb_ratio >= 0.5:
            points += 1
            weak = bullet_count - with_verbs
            issues.append(
                make_issue(
                    EXPERIENCE,
                    f"{prefix}-verbs",
                    "warning",
                    f"{label}: {weak} bullets lack strong action verbs",
                    "Start every bullet with a strong action verb (Led, Developed, Optimized, Implemented). "
                    "ATS parsers weight the first word heavily.",
                    fix="Rewrite bullets to start with strong action verbs",
                )
            )
        else:
            issues.append(
                make_issue(
                    EXPERIENCE,
                    f"{prefix}-verbs",
                    "warning",
                    f"{label}: Most bullets lack action verbs",
                    f"Only {with_verbs}/{bullet_count} bullets start with strong action verbs. Use words like "
                    "'Led', 'Developed', 'Optimized', 'Increased'.",
                    fix="Rewrite bullets to start with strong action verbs",
                )
            )

        with_metrics = sum(1 for bullet in bullets if has_metric(bullet, patterns))
        if with_metrics == 0:
            issues.append(
                make_issue(
                    EXPERIENCE,
                    f"{prefix}-metrics",
                    "warning",
                    f"{label}: No quantified achievements",
                    "Resumes with numbers get 40% more interviews. Add metrics: percentages, dollar amounts, "
                    "team sizes, or project counts.",
                    fix="Add quantifiable metrics to bullets",
                )
            )
        elif with_metrics / bullet_count < 0.4:
            points += 1
            issues.append(
                make_issue(
                    EXPERIENCE,
                    f"{prefix}-few-metrics",
                    "suggestion",
                    f"{label}: Only {with_metrics}/{bullet_count} bullets have metrics",
                    "Aim for at least 50% of bullets to include quantifiable results.",
                )
            )
        else:
            points += 2

    for b_idx, bullet in enumerate(bullets):
        words = word_count(bullet)
        if words > 30:
            issues.append(
                make_issue(
                    EXPERIENCE,
                    f"{prefix}-b{b_idx}-long",
                    "suggestion",
                    f"{label}: Bullet {b_idx + 1} too long",
                    f"{words} words. ATS may truncate long bullets. Keep under 25 words.",
                    fix="Shorten bullet to under 25 words",
                )
            )
        if words < 5 and bullet.strip():
            issues.append(
                make_issue(
                    EXPERIENCE,
                    f"{prefix}-b{b_idx}-short",
                    "suggestion",
                    f"{label}: Bullet {b_idx + 1} too brief",
                    f"Only {words} words. Expand with specific achievements and context.",
                    fix="Expand bullet with more detail",
                )
            )

    normalized = [bullet.lower().strip() for bullet in bullets]
    normalized = [bullet for bullet in normalized if bullet]
    if len(set(normalized)) < len(normalized):
        issues.append(
            make_issue(
                EXPERIENCE,
                f"{prefix}-dup",
                "warning",
                f"{label}: Duplicate bullet points",
                "Duplicate content wastes keyword space. Each bullet should be unique.",
            )
        )

    return points, issues


def score_experience(document: ResumeDocument, patterns: PatternLibrary = DEFAULT_PATTERNS) -> SectionScore:
    issues: list[Issue] = []
    entries = document.valid_experience()

    if not entries:
        issues.append(
            make_issue(
                EXPERIENCE,
                "e-missing",
                "critical",
                "No work experience listed",
                "Work experience is the most heavily weighted section by all major ATS systems (Taleo, Workday, "
                "Greenhouse). Without it, your resume will score extremely low.",
            )
        )
        return section_result(EXPERIENCE, 0, issues)

    score = BASE_POINTS

    if _is_reverse_chronological(entries, patterns):
        score += ORDER_POINTS
    else:
        issues.append(
            make_issue(
                EXPERIENCE,
                "e-order",
                "warning",
                "Not in reverse chronological order",
                "ATS systems and recruiters expect most recent role first. Reorder from newest to oldest.",
            )
        )

    earned = 0.0
    for idx, entry in enumerate(entries):
        role_points, role_issues = _score_role(entry, idx, patterns)
        earned += role_points
        issues.extend(role_issues)

    possible = ROLE_SCALE * len(entries)
    if possible > 0:
        score += round_half_up((earned / possible) * ROLE_POINTS)

    return section_result(EXPERIENCE, score, issues)

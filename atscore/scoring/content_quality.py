from __future__ import annotations

from atscore.schemas.report import Issue, SectionScore
from atscore.schemas.resume import ResumeDocument

from .patterns import DEFAULT_PATTERNS, PatternLibrary
from .sections import CONTENT_QUALITY, make_issue, section_result
from .text import has_metric, starts_with_action_verb


def _diversity_text(document: ResumeDocument) -> str:
    parts: list[str] = [document.summary]
    for entry in document.experience:
        parts.extend([entry.role, *entry.bullets])
    for items in document.skills.values():
        parts.extend(items)
    return " ".join(parts).lower()


def score_content_quality(document: ResumeDocument, patterns: PatternLibrary = DEFAULT_PATTERNS) -> SectionScore:
    issues: list[Issue] = []
    score = 0

    projects = [project for project in document.projects if project.title]
    if projects:
        if any(bullet.strip() for project in projects for bullet in project.bullets):
            score += 3
        else:
            issues.append(
                make_issue(
                    CONTENT_QUALITY,
                    "cq-proj-desc",
                    "suggestion",
                    "Projects lack descriptions",
                    "Add 1-3 bullet points per project describing what you built and technologies used.",
                )
            )
            score += 1
    else:
        issues.append(
            make_issue(
                CONTENT_QUALITY,
                "cq-no-proj",
                "suggestion",
                "No projects section",
                "Projects demonstrate practical skills, especially valuable for career changers or new graduates.",
            )
        )

    certifications = [cert for cert in document.certifications if cert.name]
    if certifications:
        if any(cert.issuer.strip() for cert in certifications):
            score += 2
        else:
            issues.append(
                make_issue(
                    CONTENT_QUALITY,
                    "cq-cert-issuer",
                    "suggestion",
                    "Certifications missing issuing organizations",
                    "Include the certifying organization (e.g., 'AWS', 'Google', 'PMI') for ATS verification.",
                )
            )
            score += 1

    bullets = [bullet for entry in document.experience for bullet in entry.bullets if bullet.strip()]
    if bullets:
        total = len(bullets)
        with_metrics = sum(1 for bullet in bullets if has_metric(bullet, patterns))
        metric_ratio = with_metrics / total
        if metric_ratio >= 0.5:
            score += 4
        elif metric_ratio >= 0.3:
            score += 3
            issues.append(
                make_issue(
                    CONTENT_QUALITY,
                    "cq-metrics-more",
                    "suggestion",
                    "Add more quantified achievements",
                    f"{with_metrics}/{total} bullets have metrics. Top resumes quantify 50%+ of bullets.",
                )
            )
        elif metric_ratio > 0:
            score += 2
            issues.append(
                make_issue(
                    CONTENT_QUALITY,
                    "cq-metrics-few",
                    "warning",
                    "Low metrics density",
                    f"Only {with_metrics}/{total} bullets include numbers. Quantify achievements wherever possible.",
                )
            )
        else:
            issues.append(
                make_issue(
                    CONTENT_QUALITY,
                    "cq-no-metrics",
                    "warning",
                    "No quantified achievements anywhere",
                    "Zero bullets contain metrics. Add percentages, dollar amounts, team sizes, or counts to "
                    "demonstrate impact.",
                )
            )

        # Per-role verb issues are already raised by the experience scorer.
        verb_ratio = sum(1 for bullet in bullets if starts_with_action_verb(bullet, patterns)) / total
        if verb_ratio >= 0.8:
            score += 3
        elif verb_ratio >= 0.5:
            score += 2
        elif verb_ratio > 0:
            score += 1

    unique_words = {word for word in _diversity_text(document).split() if len(word) > 3}
    if len(unique_words) > 150:
        score += 3
    elif len(unique_words) > 80:
        score += 2
    elif len(unique_words) > 40:
        score += 1
    else:
        issues.append(
            make_issue(
                CONTENT_QUALITY,
                "cq-diversity",
                "suggestion",
                "Low keyword diversity",
                "Your resume uses limited vocabulary. Use varied, industry-specific terminology to improve keyword "
                "matching.",
            )
        )

    return section_result(CONTENT_QUALITY, score, issues)

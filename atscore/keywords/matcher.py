from __future__ import annotations

import logging

from atscore.schemas.report import KeywordCoverage, KeywordMatch
from atscore.schemas.resume import ResumeDocument
from atscore.scoring.patterns import DEFAULT_PATTERNS, PatternLibrary
from atscore.scoring.policy import DEFAULT_POLICY

logger = logging.getLogger(__name__)

FOUND_CONTEXT = "Found in resume"


def tokenize_job_description(text: str, patterns: PatternLibrary = DEFAULT_PATTERNS) -> list[str]:
    """Lowercase tokens keeping technology markers (``c++``, ``c#``, ``.net``, ``node.js``)."""
    return patterns.keyword_strip.sub(" ", text.lower()).split()


def _is_content_token(token: str, patterns: PatternLibrary) -> bool:
    return len(token) > 2 and token not in patterns.stop_words


def count_phrases(tokens: list[str], patterns: PatternLibrary = DEFAULT_PATTERNS) -> dict[str, int]:
    """Frequency of unigrams, then adjacent bigrams, in first-seen order."""
    counts: dict[str, int] = {}
    for token in tokens:
        if _is_content_token(token, patterns):
            counts[token] = counts.get(token, 0) + 1
    for left, right in zip(tokens, tokens[1:]):
        if _is_content_token(left, patterns) and _is_content_token(right, patterns):
            phrase = f"{left} {right}"
            counts[phrase] = counts.get(phrase, 0) + 1
    return counts


def _is_important(phrase: str, count: int, patterns: PatternLibrary) -> bool:
    return count >= 2 or " " in phrase or bool(patterns.tech_marker.search(phrase)) or len(phrase) > 6


def resume_search_text(document: ResumeDocument) -> str:
    parts: list[str] = [document.header.title, document.summary]
    for entry in document.experience:
        parts.extend([entry.role, entry.company_or_client, *entry.bullets])
    for edu in document.education:
        parts.extend([edu.degree, edu.field, edu.institution])
    for items in document.skills.values():
        parts.extend(items)
    for project in document.projects:
        parts.extend([project.title, *project.bullets])
    for cert in document.certifications:
        parts.append(f"{cert.name} {cert.issuer}")
    return " ".join(parts).lower()


def extract_keywords(
    job_description: str,
    patterns: PatternLibrary = DEFAULT_PATTERNS,
    *,
    limit: int | None = None,
) -> list[str]:
    if limit is None:
        limit = DEFAULT_POLICY.keyword_limit
    counts = count_phrases(tokenize_job_description(job_description, patterns), patterns)
    important = [phrase for phrase, count in counts.items() if _is_important(phrase, count, patterns)]
    # sorted() is stable, so ties keep first-seen order.
    ranked = sorted(important, key=lambda phrase: counts[phrase], reverse=True)
    return ranked[:limit]


def match_keywords(
    document: ResumeDocument,
    job_description: str,
    patterns: PatternLibrary = DEFAULT_PATTERNS,
    *,
    limit: int | None = None,
) -> list[KeywordMatch]:
    if not job_description.strip():
        return []

    haystack = resume_search_text(document)
    matches: list[KeywordMatch] = []
    for keyword in extract_keywords(job_description, patterns, limit=limit):
        found = keyword in haystack
        matches.append(KeywordMatch(keyword=keyword, found=found, context=FOUND_CONTEXT if found else None))

    logger.debug(
        "ats_keywords_matched total=%s found=%s",
        len(matches),
        sum(1 for match in matches if match.found),
    )
    return matches


def summarize_keyword_matches(matches: list[KeywordMatch]) -> KeywordCoverage:
    total = len(matches)
    matched = sum(1 for match in matches if match.found)
    return KeywordCoverage(
        total=total,
        matched=matched,
        missing=[match.keyword for match in matches if not match.found],
        match_rate=round(matched / total, 3) if total else 0.0,
    )

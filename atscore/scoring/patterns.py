from __future__ import annotations

import re
from dataclasses import dataclass

_ACTION_VERBS = frozenset(
    {
        "achieved", "accelerated", "administered", "analyzed", "architected", "automated",
        "built", "championed", "collaborated", "configured", "consolidated", "created",
        "decreased", "delivered", "deployed", "designed", "developed", "directed",
        "drove", "eliminated", "enabled", "engineered", "enhanced", "established",
        "exceeded", "executed", "expanded", "facilitated", "formulated", "generated",
        "grew", "guided", "identified", "implemented", "improved", "increased",
        "initiated", "innovated", "integrated", "introduced", "launched", "led",
        "managed", "maximized", "mentored", "migrated", "minimized", "modernized",
        "negotiated", "optimized", "orchestrated", "organized", "oversaw", "partnered",
        "pioneered", "planned", "presented", "produced", "programmed", "propelled",
        "published", "re-engineered", "realized", "recommended", "reduced", "refined",
        "resolved", "restructured", "revamped", "scaled", "secured", "simplified",
        "spearheaded", "standardized", "streamlined", "strengthened", "supervised",
        "surpassed", "tested", "trained", "transformed", "tripled", "unified", "upgraded",
    }
)

_METRIC_UNITS = (
    "users|clients|team|members|engineers|developers|projects|repositories|pipelines|servers|"
    "applications|endpoints|requests|transactions|records|customers|employees|stakeholders|"
    "regions|countries|markets|products|features|tickets|bugs|issues|sprints|releases|"
    "deployments|databases|tables|queries|dashboards|reports|models|algorithms|microservices|"
    "apis|containers"
)

_MONTHS = (
    "Jan(uary)?|Feb(ruary)?|Mar(ch)?|Apr(il)?|May|Jun(e)?|Jul(y)?|Aug(ust)?|"
    "Sep(tember)?|Oct(ober)?|Nov(ember)?|Dec(ember)?"
)

_STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
        "by", "from", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
        "do", "does", "did", "will", "would", "could", "should", "may", "might", "shall",
        "can", "must", "need", "that", "this", "these", "those", "it", "its", "we", "our",
        "you", "your", "they", "their", "he", "she", "him", "her", "not", "no", "all", "each",
        "every", "any", "some", "such", "than", "too", "very", "just", "about", "also",
        "into", "through", "during", "before", "after", "above", "below", "between", "under",
        "over", "again", "further", "then", "once", "here", "there", "when", "where", "why",
        "how", "what", "which", "who", "whom", "both", "few", "more", "most", "other",
        "only", "own", "same", "so", "as", "if", "while", "per", "via", "etc",
        "including", "include", "includes", "required", "requirements", "preferred",
        "experience", "ability", "strong", "excellent", "proven", "minimum", "years",
        "work", "working", "role", "position", "job", "team", "company", "environment",
        "responsibilities", "qualifications", "skills", "candidate", "looking",
    }
)


@dataclass(frozen=True)
class PatternLibrary:
    """Closed vocabulary and detectors shared by every scorer.

    Instances are immutable; scorers receive one explicitly (defaulting to
    ``DEFAULT_PATTERNS``) so alternative vocabularies can be swapped in tests.
    """

    action_verbs: frozenset[str] = _ACTION_VERBS
    stop_words: frozenset[str] = _STOP_WORDS

    # Quantified-achievement detectors.
    metric: re.Pattern[str] = re.compile(
        rf"(\d+[%$kKmMbB+]|\$[\d,.]+|[\d,]+\+?\s*({_METRIC_UNITS}))", re.IGNORECASE
    )
    percentage: re.Pattern[str] = re.compile(r"\d+\s*%")
    currency: re.Pattern[str] = re.compile(r"\$[\d,.]+[kKmMbB]?")
    number: re.Pattern[str] = re.compile(r"\b\d{2,}\b")

    # Accepted date formats, matched against stripped values.
    valid_dates: tuple[re.Pattern[str], ...] = (
        re.compile(rf"^({_MONTHS})\s+\d{{4}}\Z", re.IGNORECASE),
        re.compile(r"^\d{1,2}/\d{4}\Z"),
        re.compile(r"^\d{4}\Z"),
        re.compile(r"^Present\Z", re.IGNORECASE),
        re.compile(r"^Current\Z", re.IGNORECASE),
    )
    current_marker: re.Pattern[str] = re.compile(r"present|current", re.IGNORECASE)

    # Date-style classifiers for the consistency check.
    month_prefix: re.Pattern[str] = re.compile(r"^(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)", re.IGNORECASE)
    slash_date: re.Pattern[str] = re.compile(r"^\d{1,2}/\d{4}\Z")
    year_only: re.Pattern[str] = re.compile(r"^\d{4}\Z")

    pronoun: re.Pattern[str] = re.compile(r"\b(I|me|my|myself)\b")
    emoji: re.Pattern[str] = re.compile(
        "[\U0001F600-\U0001F64F\U0001F300-\U0001F5FF\U0001F680-\U0001F6FF\u2600-\u26FF]"
    )
    tab: re.Pattern[str] = re.compile(r"\t")

    email: re.Pattern[str] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z")
    linkedin_profile: re.Pattern[str] = re.compile(r"linkedin\.com/in/", re.IGNORECASE)
    name_symbol: re.Pattern[str] = re.compile(r"[^\w\s\-'’.,]|[\d_]")

    # Job-description tokenizing.
    keyword_strip: re.Pattern[str] = re.compile(r"[^a-z0-9\s+#.-]")
    tech_marker: re.Pattern[str] = re.compile(r"[+#.]")

    def is_valid_date(self, value: str) -> bool:
        stripped = value.strip()
        return any(pattern.search(stripped) for pattern in self.valid_dates)


DEFAULT_PATTERNS = PatternLibrary()

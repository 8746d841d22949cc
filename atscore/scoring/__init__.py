from .aggregator import SECTION_SCORERS, aggregate, build_verdict, score, sort_issues
from .content_quality import score_content_quality
from .education import score_education
from .experience import score_experience
from .formatting import score_formatting
from .header import score_header
from .patterns import DEFAULT_PATTERNS, PatternLibrary
from .policy import DEFAULT_POLICY, ScoringPolicy
from .sections import SECTION_MAX_SCORES
from .skills import score_skills
from .summary import score_summary

__all__ = [
    "PatternLibrary",
    "DEFAULT_PATTERNS",
    "ScoringPolicy",
    "DEFAULT_POLICY",
    "SECTION_MAX_SCORES",
    "SECTION_SCORERS",
    "score_header",
    "score_summary",
    "score_experience",
    "score_education",
    "score_skills",
    "score_formatting",
    "score_content_quality",
    "aggregate",
    "build_verdict",
    "sort_issues",
    "score",
]

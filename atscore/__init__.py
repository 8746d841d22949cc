from atscore.keywords import match_keywords, summarize_keyword_matches
from atscore.prompts import build_remediation_prompt
from atscore.schemas import ATSScoreReport, Issue, KeywordCoverage, KeywordMatch, ResumeDocument, SectionScore
from atscore.scoring import DEFAULT_PATTERNS, DEFAULT_POLICY, PatternLibrary, ScoringPolicy, score

__version__ = "0.1.0"

__all__ = [
    "ResumeDocument",
    "Issue",
    "SectionScore",
    "ATSScoreReport",
    "KeywordMatch",
    "KeywordCoverage",
    "PatternLibrary",
    "DEFAULT_PATTERNS",
    "ScoringPolicy",
    "DEFAULT_POLICY",
    "score",
    "match_keywords",
    "summarize_keyword_matches",
    "build_remediation_prompt",
]

from .matcher import (
    count_phrases,
    extract_keywords,
    match_keywords,
    resume_search_text,
    summarize_keyword_matches,
    tokenize_job_description,
)

__all__ = [
    "tokenize_job_description",
    "count_phrases",
    "extract_keywords",
    "resume_search_text",
    "match_keywords",
    "summarize_keyword_matches",
]

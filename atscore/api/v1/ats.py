import logging

from fastapi import APIRouter, Depends, Request

from atscore.core.config.scoring import load_scoring_policy
from atscore.core.rate_limit import rate_limit
from atscore.core.security import require_api_key
from atscore.keywords import match_keywords, summarize_keyword_matches
from atscore.prompts import build_remediation_prompt
from atscore.schemas.api import (
    FixPromptRequest,
    FixPromptResponse,
    KeywordRequest,
    KeywordResponse,
    ScoreRequest,
    ScoreResponse,
    ValidateRequest,
    ValidateResponse,
)
from atscore.scoring import score
from atscore.validation import validate_document

router = APIRouter(dependencies=[Depends(require_api_key)])
logger = logging.getLogger(__name__)

# The prompt builder accepts short aliases; map them onto scored section labels.
_SECTION_ALIASES = {
    "Summary": "Professional Summary",
    "Experience": "Work Experience",
    "Header": "Contact Info",
}


@router.post("/ats/score", response_model=ScoreResponse)
@rate_limit()
async def ats_score(request: Request, payload: ScoreRequest):
    _ = request
    policy = load_scoring_policy()
    report = score(payload.resume, policy=policy)
    response = ScoreResponse(report=report)
    if payload.job_description and payload.job_description.strip():
        keywords = match_keywords(payload.resume, payload.job_description, limit=policy.keyword_limit)
        response = ScoreResponse(
            report=report,
            keywords=keywords,
            keyword_coverage=summarize_keyword_matches(keywords),
        )
    logger.info(
        "ats_score_request overall=%s passes=%s keywords=%s",
        report.overall,
        report.passes_ats,
        len(response.keywords),
    )
    return response


@router.post("/ats/keywords", response_model=KeywordResponse)
@rate_limit()
async def ats_keywords(request: Request, payload: KeywordRequest):
    _ = request
    policy = load_scoring_policy()
    keywords = match_keywords(payload.resume, payload.job_description, limit=policy.keyword_limit)
    coverage = summarize_keyword_matches(keywords)
    logger.info("ats_keywords_request total=%s matched=%s", coverage.total, coverage.matched)
    return KeywordResponse(keywords=keywords, coverage=coverage)


@router.post("/ats/fix-prompt", response_model=FixPromptResponse)
@rate_limit()
async def ats_fix_prompt(request: Request, payload: FixPromptRequest):
    _ = request
    policy = load_scoring_policy()
    issues = payload.issues
    if issues is None:
        label = _SECTION_ALIASES.get(payload.section, payload.section)
        section = score(payload.resume, policy=policy).section(label)
        issues = section.issues if section is not None else []
    prompt = build_remediation_prompt(
        payload.section, payload.resume, issues, skill_limit=policy.context_skill_limit
    )
    logger.info("ats_fix_prompt_request section=%s issues=%s", payload.section, len(issues))
    return FixPromptResponse(section=payload.section, prompt=prompt)


@router.post("/ats/validate", response_model=ValidateResponse)
@rate_limit()
async def ats_validate(request: Request, payload: ValidateRequest):
    _ = request
    result = validate_document(payload.resume)
    logger.info("ats_validate_request date_hints=%s", len(result.date_suggestions))
    return result

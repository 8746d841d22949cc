import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from atscore import __version__
from atscore.api.v1.ats import router as ats_router
from atscore.api.v1.health import router as health_router
from atscore.core.config import settings
from atscore.core.config.scoring import load_scoring_policy, scoring_config_path
from atscore.core.cors import cors_allow_origin_regex, cors_allowed_origins
from atscore.core.rate_limit import limiter

logging.basicConfig(level=settings.log_level, format="%(message)s")
logger = logging.getLogger(__name__)

if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)


@asynccontextmanager
async def lifespan(app):
    # Scoring policy must be readable before the first request.
    policy = load_scoring_policy()
    logger.info(
        "ats_scoring_config_loaded path=%s pass_threshold=%s keyword_limit=%s",
        scoring_config_path(),
        policy.pass_threshold,
        policy.keyword_limit,
    )
    yield


app = FastAPI(title="ATS Compatibility Scoring API", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_origin_regex=cors_allow_origin_regex(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(ats_router, prefix="/v1", tags=["ATS"])

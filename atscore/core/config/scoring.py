from __future__ import annotations

from pathlib import Path
from typing import Any

from atscore.core.config import settings
from atscore.scoring.policy import DEFAULT_POLICY, ScoringPolicy

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().parent / "scoring.yaml"


def scoring_config_path() -> Path:
    if settings.scoring_config_path:
        return Path(settings.scoring_config_path)
    return _DEFAULT_SCORING_CONFIG_PATH


def get_scoring_config() -> dict[str, Any]:
    """Load scoring config from the packaged scoring.yaml (or ATS_SCORING_CONFIG_PATH) and cache it."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    path = scoring_config_path()
    if not path.exists():
        raise RuntimeError(
            f"Scoring config not found at '{path}'. "
            "Expected file: atscore/core/config/scoring.yaml (or set ATS_SCORING_CONFIG_PATH)"
        )

    try:
        import yaml  # type: ignore[import-not-found]
    except Exception as exc:
        raise RuntimeError(
            "Unable to parse scoring config because PyYAML is unavailable. "
            "Install dependency: PyYAML."
        ) from exc

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:  # type: ignore[attr-defined]
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")

    _SCORING_CONFIG_CACHE = parsed
    return _SCORING_CONFIG_CACHE


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'ats.pass_threshold'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def clear_scoring_config_cache() -> None:
    global _SCORING_CONFIG_CACHE
    _SCORING_CONFIG_CACHE = None


def load_scoring_policy() -> ScoringPolicy:
    """Build the service-level ScoringPolicy, falling back to the built-in thresholds per key."""
    return ScoringPolicy(
        pass_threshold=int(get_scoring_value("ats.pass_threshold", DEFAULT_POLICY.pass_threshold)),
        excellent=int(get_scoring_value("ats.verdict_bands.excellent", DEFAULT_POLICY.excellent)),
        very_good=int(get_scoring_value("ats.verdict_bands.very_good", DEFAULT_POLICY.very_good)),
        decent=int(get_scoring_value("ats.verdict_bands.decent", DEFAULT_POLICY.decent)),
        needs_improvement=int(
            get_scoring_value("ats.verdict_bands.needs_improvement", DEFAULT_POLICY.needs_improvement)
        ),
        keyword_limit=int(get_scoring_value("keywords.top_n", DEFAULT_POLICY.keyword_limit)),
        context_skill_limit=int(
            get_scoring_value("remediation.context_skill_limit", DEFAULT_POLICY.context_skill_limit)
        ),
    )

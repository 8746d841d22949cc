from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringPolicy:
    """Thresholds used around the section scores.

    The engine only ever reads the values handed to it; ``DEFAULT_POLICY``
    carries the standard thresholds, and the service layer may build another
    instance from ``scoring.yaml``.
    """

    pass_threshold: int = 70
    excellent: int = 90
    very_good: int = 80
    decent: int = 70
    needs_improvement: int = 50
    keyword_limit: int = 25
    context_skill_limit: int = 15


DEFAULT_POLICY = ScoringPolicy()

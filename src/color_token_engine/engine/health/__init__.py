"""
health.
======

Does: Expose the token-system health scorer.
Used By: Orchestrator, CLI.
"""

from .scoring import (
    METRIC_WEIGHTS,
    HealthMetric,
    TokenHealthScore,
    calculate_token_health,
    summarize_score,
)

__all__ = [
    "METRIC_WEIGHTS",
    "HealthMetric",
    "TokenHealthScore",
    "calculate_token_health",
    "summarize_score",
]

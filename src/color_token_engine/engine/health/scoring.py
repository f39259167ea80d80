"""
scoring.py
==========

Does: Score the health of a token system on six weighted metrics (raw color
      count, unused tokens, duplicate shades, contrast failures, semantic
      coverage, naming consistency) and fold them into one 0–100 score.
Used By: Orchestrator reports, CLI.
Returns: TokenHealthScore with per-metric issues and suggestions.
"""

from __future__ import annotations

import logging
import math
import re
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from rapidfuzz import fuzz, process

from color_token_engine.engine.accessibility.contrast import check_accessibility
from color_token_engine.engine.color import BLACK, WHITE, normalize_hex
from color_token_engine.engine.tokens.types import BaseTokens, SemanticToken, token_key

__all__ = [
    "HealthMetric",
    "TokenHealthScore",
    "METRIC_WEIGHTS",
    "calculate_token_health",
    "summarize_score",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
METRIC_WEIGHTS: Dict[str, float] = {
    "Raw Colors Count": 0.10,
    "Unused Tokens": 0.15,
    "Duplicate Shades": 0.15,
    "Contrast Failures": 0.25,
    "Semantic Coverage": 0.20,
    "Naming Consistency": 0.15,
}

RAW_COLOR_SOFT_LIMIT = 20      # no penalty up to here
RAW_COLOR_PENALTY_SPAN = 50    # tokens above the soft limit until the metric bottoms out
RAW_COLOR_HARD_LIMIT = 50      # issue threshold
UNUSED_PENALTY_FACTOR = 2.0    # half the tokens unused → metric bottoms out
SEMANTIC_TARGET_RATIO = 0.5    # one semantic token per two raw colors is full coverage
SEMANTIC_MIN_COUNT = 10
NAMING_PENALTY_SPAN = 5        # five bad group names → metric bottoms out
NAME_SUGGEST_MIN_SCORE = 80
NAME_SUGGEST_MIN_LEN = 3       # shorter stems match any canonical name as a substring

CONTRAST_CHECK_GROUPS: Tuple[str, ...] = ("neutral", "primary")
CANONICAL_GROUPS: Tuple[str, ...] = (
    "primary", "secondary", "accent", "neutral", "success", "warning", "error", "info",
)
_GROUP_NAME_RE = re.compile(r"^[a-z]+$")

_TIERS: Tuple[Tuple[float, str], ...] = ((90, "excellent"), (75, "good"), (60, "fair"))


@dataclass(frozen=True)
class HealthMetric:
    name: str
    value: float
    max_value: float
    weight: float
    issues: Tuple[str, ...] = field(default_factory=tuple)
    suggestions: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def score(self) -> float:
        """Metric score in [0, 100]; 100 means no problems."""
        if self.max_value <= 0:
            return 100.0 if self.value <= 0 else 0.0
        return 100.0 - min(100.0, self.value / self.max_value * 100.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "maxValue": self.max_value,
            "weight": self.weight,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class TokenHealthScore:
    overall_score: float
    metrics: Tuple[HealthMetric, ...]
    summary: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallScore": self.overall_score,
            "metrics": [m.to_dict() for m in self.metrics],
            "summary": self.summary,
        }


def summarize_score(score: float) -> str:
    """Does: Map an overall score onto the four-tier label."""
    for threshold, label in _TIERS:
        if score >= threshold:
            return f"Token system is {label}"
    return "Token system needs improvement"


def _metric(name: str, value: float, max_value: float, issues: List[str], suggestions: List[str]) -> HealthMetric:
    return HealthMetric(
        name=name,
        value=value,
        max_value=max_value,
        weight=METRIC_WEIGHTS[name],
        issues=tuple(issues),
        suggestions=tuple(suggestions),
    )


# =============================================================================
# 1) INDIVIDUAL METRICS
# =============================================================================

def _raw_color_metric(raw_count: int) -> HealthMetric:
    over = max(0, raw_count - RAW_COLOR_SOFT_LIMIT)
    too_many = raw_count > RAW_COLOR_HARD_LIMIT
    return _metric(
        "Raw Colors Count",
        over,
        RAW_COLOR_PENALTY_SPAN,
        [f"Too many raw colors ({raw_count}). Consider consolidating."] if too_many else [],
        ["Use semantic tokens instead of raw colors", "Merge similar shades"] if too_many else [],
    )


def _unused_metric(base_tokens: BaseTokens, raw_count: int, usage_data: Optional[Mapping[str, int]]) -> HealthMetric:
    if usage_data is None:
        return _metric(
            "Unused Tokens",
            0,
            raw_count / UNUSED_PENALTY_FACTOR,
            [],
            ["Provide usage data to detect unused tokens"],
        )

    unused = [
        token_key(group, t.shade)
        for group, tokens in base_tokens.items()
        for t in tokens
        if not usage_data.get(token_key(group, t.shade))
    ]
    return _metric(
        "Unused Tokens",
        len(unused),
        raw_count / UNUSED_PENALTY_FACTOR,
        [f"{len(unused)} unused tokens found"] if unused else [],
        ["Remove unused tokens", "Consider if tokens are needed for future use"] if unused else [],
    )


def _duplicate_metric(base_tokens: BaseTokens, raw_count: int) -> HealthMetric:
    by_color: Dict[str, List[str]] = defaultdict(list)
    for group, tokens in base_tokens.items():
        for t in tokens:
            by_color[normalize_hex(t.value) or t.value.strip().lower()].append(token_key(group, t.shade))

    duplicates = [path for paths in by_color.values() if len(paths) > 1 for path in paths]
    issues = [f"{len(duplicates)} duplicate colors found"] if duplicates else []
    issues += [f"{', '.join(paths)} share {hx}" for hx, paths in by_color.items() if len(paths) > 1]
    return _metric(
        "Duplicate Shades",
        len(duplicates),
        raw_count,
        issues,
        ["Merge duplicate colors", "Use aliases instead of duplicates"] if duplicates else [],
    )


def _contrast_metric(base_tokens: BaseTokens, raw_count: int) -> HealthMetric:
    failures: List[str] = []
    for group in CONTRAST_CHECK_GROUPS:
        for t in base_tokens.get(group, ()):
            on_white = check_accessibility(t.value, WHITE)
            on_black = check_accessibility(t.value, BLACK)
            if not on_white.aa and not on_black.aa:
                failures.append(f"{token_key(group, t.shade)} fails contrast on both white and black")
    return _metric(
        "Contrast Failures",
        len(failures),
        raw_count,
        failures,
        [
            "Adjust colors to meet WCAG AA (4.5:1) minimum",
            "Use darker/lighter shades for better contrast",
            "Consider high-contrast mode variants",
        ] if failures else [],
    )


def _semantic_metric(semantic_tokens: Optional[Sequence[SemanticToken]], raw_count: int) -> HealthMetric:
    count = len(semantic_tokens or ())
    target = math.ceil(raw_count * SEMANTIC_TARGET_RATIO)
    low = count < SEMANTIC_MIN_COUNT
    return _metric(
        "Semantic Coverage",
        max(0, target - count),
        target,
        [f"Low semantic token coverage ({count} semantic for {raw_count} raw colors)"] if low else [],
        ["Create more semantic tokens", "Use semantic tokens instead of raw colors in designs"] if low else [],
    )


def _closest_canonical(group: str) -> Optional[str]:
    cleaned = re.sub(r"[^a-z]", "", group.lower())
    if len(cleaned) < NAME_SUGGEST_MIN_LEN:
        return None
    hit = process.extractOne(cleaned, CANONICAL_GROUPS, scorer=fuzz.partial_ratio)
    if hit is None or hit[1] < NAME_SUGGEST_MIN_SCORE:
        return None
    return hit[0]


def _naming_metric(base_tokens: BaseTokens) -> HealthMetric:
    issues: List[str] = []
    suggestions: List[str] = []
    for group in base_tokens:
        if _GROUP_NAME_RE.fullmatch(group.lower()):
            continue
        issues.append(f'Group "{group}" has inconsistent naming')
        closest = _closest_canonical(group)
        if closest is not None:
            suggestions.append(f'Rename "{group}" to "{closest}"')
    if issues:
        suggestions += ["Use lowercase, single-word group names", "Follow consistent naming patterns"]
    return _metric("Naming Consistency", len(issues), NAMING_PENALTY_SPAN, issues, suggestions)


# =============================================================================
# 2) AGGREGATE
# =============================================================================

def calculate_token_health(
    base_tokens: BaseTokens,
    semantic_tokens: Optional[Sequence[SemanticToken]] = None,
    usage_data: Optional[Mapping[str, int]] = None,
) -> TokenHealthScore:
    """
    Does: Compute the six metrics and overall = Σ metric.score * weight (weights sum to 1).
    Returns: TokenHealthScore with overall in [0, 100] rounded to one decimal.
    """
    raw_count = sum(len(tokens) for tokens in base_tokens.values())

    metrics = (
        _raw_color_metric(raw_count),
        _unused_metric(base_tokens, raw_count, usage_data),
        _duplicate_metric(base_tokens, raw_count),
        _contrast_metric(base_tokens, raw_count),
        _semantic_metric(semantic_tokens, raw_count),
        _naming_metric(base_tokens),
    )

    overall = sum(m.score * m.weight for m in metrics)
    overall = max(0.0, min(100.0, overall))
    log.debug("[health] raw=%d overall=%.2f %s", raw_count, overall, {m.name: round(m.score, 1) for m in metrics})

    return TokenHealthScore(
        overall_score=round(overall, 1),
        metrics=metrics,
        summary=summarize_score(overall),
    )

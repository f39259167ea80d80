"""
audit.py
========

Does: Grade a whole palette for readability: each token is tested against its
      best text color (white or black) and the system gets an A+…F grade.
Used By: Orchestrator reports and CLI output.
Returns: Rating / SystemScore records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from color_token_engine.engine.accessibility.contrast import (
    get_accessible_text_color,
    get_contrast,
)
from color_token_engine.engine.color import WCAG_AA, WCAG_AA_LARGE, WCAG_AAA
from color_token_engine.engine.tokens.types import BaseTokens

__all__ = ["Rating", "SystemScore", "get_rating", "evaluate_system"]

__docformat__ = "google"


@dataclass(frozen=True)
class Rating:
    label: str
    color: str
    pass_aa: bool
    pass_aaa: bool


@dataclass(frozen=True)
class SystemScore:
    grade: str
    grade_color: str
    summary: str
    avg_contrast: float
    aa_pass_percentage: int
    aaa_pass_percentage: int
    total_tested: int
    failed_count: int


def get_rating(contrast: float) -> Rating:
    """Does: Bucket one ratio into AAA / AA / AA Large / Fail."""
    if contrast >= WCAG_AAA:
        return Rating("AAA", "#22c55e", True, True)
    if contrast >= WCAG_AA:
        return Rating("AA", "#3b82f6", True, False)
    if contrast >= WCAG_AA_LARGE:
        return Rating("AA Large", "#eab308", False, False)
    return Rating("Fail", "#ef4444", False, False)


# (grade, color, summary) from best to worst
_GRADES: List[Tuple[str, str, str]] = [
    ("A+", "#22c55e", "Excellent readability and consistency."),
    ("A", "#22c55e", "Great contrast and accessibility coverage."),
    ("B", "#3b82f6", "Good overall, but some shades need attention."),
    ("C", "#f59e0b", "Passable, but many colors fail standard text contrast."),
    ("D", "#f97316", "Significant accessibility issues detected."),
    ("F", "#ef4444", "Poor readability across the system."),
]


def _round_half_up(x: float) -> int:
    return int(x + 0.5)


def evaluate_system(palettes: BaseTokens) -> SystemScore:
    """
    Does: Average each token's contrast against its best text color and count
          AA/AAA passes and hard failures (< 3:1).
    Returns: SystemScore; an empty palette grades F with zero counts.
    """
    total = 0.0
    aa = aaa = tested = failed = 0
    for tokens in palettes.values():
        for t in tokens:
            ratio = get_contrast(get_accessible_text_color(t.value), t.value)
            total += ratio
            tested += 1
            if ratio >= WCAG_AAA:
                aaa += 1
            if ratio >= WCAG_AA:
                aa += 1
            if ratio < WCAG_AA_LARGE:
                failed += 1

    avg = total / tested if tested else 0.0
    aa_pct = _round_half_up(aa / tested * 100) if tested else 0
    aaa_pct = _round_half_up(aaa / tested * 100) if tested else 0

    if avg > 10 and failed == 0:
        idx = 0
    elif avg > 8 and aa_pct > 90:
        idx = 1
    elif avg > 6 and aa_pct > 80:
        idx = 2
    elif avg > WCAG_AA:
        idx = 3
    elif avg > WCAG_AA_LARGE:
        idx = 4
    else:
        idx = 5
    grade, color, summary = _GRADES[idx]

    return SystemScore(
        grade=grade,
        grade_color=color,
        summary=summary,
        avg_contrast=round(avg, 1),
        aa_pass_percentage=aa_pct,
        aaa_pass_percentage=aaa_pct,
        total_tested=tested,
        failed_count=failed,
    )

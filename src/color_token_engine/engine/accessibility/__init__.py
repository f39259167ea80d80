"""
accessibility.
=============

Does: Group WCAG contrast evaluation, color-vision deficiency simulation, and
      palette-wide readability grading.
Used By: Mode transforms, health scoring, orchestrator, CLI.
"""

from .audit import Rating, SystemScore, evaluate_system, get_rating
from .blindness import BlindnessType, simulate_color_blindness, simulate_palette
from .contrast import (
    A11yScore,
    WcagLevel,
    check_accessibility,
    get_accessible_text_color,
    get_contrast,
    get_luminance,
    suggest_accessible_shade,
    suggest_fix,
)

__all__ = [
    # contrast
    "WcagLevel",
    "A11yScore",
    "get_contrast",
    "get_luminance",
    "get_accessible_text_color",
    "check_accessibility",
    "suggest_fix",
    "suggest_accessible_shade",
    # blindness
    "BlindnessType",
    "simulate_color_blindness",
    "simulate_palette",
    # audit
    "Rating",
    "SystemScore",
    "get_rating",
    "evaluate_system",
]

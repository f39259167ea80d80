# color_token_engine/engine/tokens/naming.py
from __future__ import annotations

"""
naming.py.

Does: Render a (group, shade) pair under one of the supported naming conventions.
"""

from enum import Enum
from typing import Dict, Optional, Union

__all__ = ["NamingConvention", "SHADE_NAMES", "format_shade_name"]

__docformat__ = "google"


class NamingConvention(str, Enum):
    SHADE_ONLY = "shade"
    KEBAB_CAPITAL = "kebab-capital"
    DOT_LOWERCASE = "dot-lowercase"
    ABBREVIATED = "abbreviated"
    CUSTOM = "custom"


SHADE_NAMES: Dict[int, str] = {
    25: "lightest",
    50: "lighter",
    100: "light",
    200: "lighter-medium",
    300: "medium-light",
    400: "medium",
    500: "base",
    600: "medium-dark",
    700: "dark",
    800: "darker",
    900: "darkest",
    950: "darkest-plus",
    975: "darkest-max",
}

DEFAULT_CUSTOM_PATTERN = "{group}-{shade}"


def format_shade_name(
    group: str,
    shade: int,
    convention: Union[NamingConvention, str] = NamingConvention.SHADE_ONLY,
    pattern: Optional[str] = None,
) -> str:
    """
    Does: 'kebab-capital' → 'Primary-100'; 'dot-lowercase' → 'primary.light';
          'abbreviated' → 'p1 / 100'; 'custom' fills {group}/{shade} placeholders;
          anything else → bare shade number.
    """
    group = group or "color"
    try:
        convention = NamingConvention(convention)
    except ValueError:
        convention = NamingConvention.SHADE_ONLY

    if convention is NamingConvention.KEBAB_CAPITAL:
        return f"{group[:1].upper()}{group[1:]}-{shade}"
    if convention is NamingConvention.DOT_LOWERCASE:
        return f"{group.lower()}.{SHADE_NAMES.get(shade, str(shade))}"
    if convention is NamingConvention.ABBREVIATED:
        return f"{group[:1].lower()}{str(shade)[:1]} / {shade}"
    if convention is NamingConvention.CUSTOM:
        return (pattern or DEFAULT_CUSTOM_PATTERN).replace("{group}", group).replace("{shade}", str(shade))
    return str(shade)

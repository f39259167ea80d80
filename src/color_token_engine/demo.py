# src/color_token_engine/demo.py
import argparse
import json
import os
import sys


def _parse_pairs(pairs):
    seeds = {}
    for item in pairs:
        group, sep, color = item.partition("=")
        if not sep or not group:
            raise ValueError(f"Expected group=color, got {item!r}")
        seeds[group.strip()] = color.strip()
    return seeds


def main(argv=None):
    """CLI demo: derive a full token system from seed colors and print it as JSON."""
    from .engine.general.utils.log import reload_topics
    from .engine.orchestrator import build_token_system
    from .engine.tokens.modes import ModeAdjustments
    from .engine.tokens.naming import NamingConvention
    from .engine.tokens.presets import get_preset
    from .engine.tokens.shades import generate_semantic_palette

    parser = argparse.ArgumentParser(
        prog="cte-demo",
        description="Derive shades, semantic aliases, modes, states and health from seed colors.",
    )
    parser.add_argument(
        "seeds",
        nargs="*",
        help="Seed colors as group=color (e.g. primary=#3b82f6 neutral=#6b7280)",
    )
    parser.add_argument("--brand", help="Single brand color; derives a starter palette from it")
    parser.add_argument("--preset", help="Preset id (saas-starter, startup, accessibility-first)")
    parser.add_argument("--background", default=None, help="Reference background for high-contrast mode")
    parser.add_argument("--hue-shift", type=float, default=0.0, dest="hue_shift")
    parser.add_argument("--saturation-shift", type=float, default=0.0, dest="saturation_shift")
    parser.add_argument("--lightness-shift", type=float, default=0.0, dest="lightness_shift")
    parser.add_argument("--contrast-multiplier", type=float, default=1.0, dest="contrast_multiplier")
    parser.add_argument(
        "--naming",
        choices=[c.value for c in NamingConvention],
        default=None,
        help="Naming convention for base token names",
    )
    parser.add_argument("--section", default=None, help="Print only this top-level key")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)

    if args.debug:
        os.environ["COLOR_TOKEN_DEBUG_TOPICS"] = "all"
        reload_topics()

    try:
        if args.preset:
            preset = get_preset(args.preset)
            if preset is None:
                raise ValueError(f"Unknown preset {args.preset!r}")
            seeds = dict(preset.base_colors)
        elif args.brand:
            seeds = generate_semantic_palette(args.brand)
            if not seeds:
                raise ValueError(f"{args.brand!r} is not a color")
        else:
            seeds = _parse_pairs(args.seeds) or generate_semantic_palette("#3b82f6")

        adjustments = ModeAdjustments(
            hue_shift_degrees=args.hue_shift,
            saturation_shift_percent=args.saturation_shift,
            lightness_shift_percent=args.lightness_shift,
            contrast_multiplier=args.contrast_multiplier,
        )
        result = build_token_system(
            seeds,
            reference_background=args.background,
            adjustments=adjustments,
            naming=NamingConvention(args.naming) if args.naming else None,
        )
        if args.section:
            result = result[args.section]
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

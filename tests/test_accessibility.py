# tests/test_accessibility.py


from __future__ import annotations

import importlib

import pytest

"""
accessibility tests
===================

Does: Validate WCAG contrast math, black/white text choice, fix searches,
      color-vision deficiency simulation, and whole-palette grading.
"""

contrast = importlib.import_module("color_token_engine.engine.accessibility.contrast")
blindness = importlib.import_module("color_token_engine.engine.accessibility.blindness")
audit = importlib.import_module("color_token_engine.engine.accessibility.audit")
types_ = importlib.import_module("color_token_engine.engine.tokens.types")

SAMPLE_COLORS = ["#3b82f6", "#ffffff", "#000000", "#777777", "#767676", "#ef4444", "#eab308", "#172b4d", "#f5f5f4"]


# ──────────────────────────────────────────────────────────────────────────────
# Contrast
# ──────────────────────────────────────────────────────────────────────────────
def test_black_on_white_is_21():
    assert contrast.get_contrast("#000000", "#ffffff") == pytest.approx(21.0)


@pytest.mark.parametrize("a", SAMPLE_COLORS)
@pytest.mark.parametrize("b", ["#ffffff", "#3b82f6", "#6b7280"])
def test_contrast_is_symmetric(a, b):
    assert contrast.get_contrast(a, b) == contrast.get_contrast(b, a)


def test_contrast_of_unparseable_is_zero():
    assert contrast.get_contrast("nope", "#ffffff") == 0.0
    assert contrast.get_luminance("nope") == 0.0


@pytest.mark.parametrize(
    "bg, expected",
    [("#000000", "#ffffff"), ("#ffffff", "#000000"), ("#3b82f6", "#000000"), ("#172b4d", "#ffffff")],
)
def test_accessible_text_color(bg, expected):
    assert contrast.get_accessible_text_color(bg) == expected


def test_accessible_text_color_tie_goes_to_black(monkeypatch):
    monkeypatch.setattr(contrast, "get_contrast", lambda a, b: 4.58)
    assert contrast.get_accessible_text_color("#777777") == "#000000"


@pytest.mark.parametrize("fg", SAMPLE_COLORS)
@pytest.mark.parametrize("bg", ["#ffffff", "#000000", "#3b82f6"])
def test_check_accessibility_flags_match_score(fg, bg):
    res = contrast.check_accessibility(fg, bg)
    assert res.aa == (res.score >= 4.5)
    assert res.aaa == (res.score >= 7.0)
    assert res.aa_large == (res.score >= 3.0)
    assert res.aaa_large == (res.score >= 4.5)


def test_check_accessibility_black_on_white():
    res = contrast.check_accessibility("#000", "#fff")
    assert res.aa and res.aaa and res.aa_large and res.aaa_large


# ──────────────────────────────────────────────────────────────────────────────
# Fix search
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("color", SAMPLE_COLORS)
@pytest.mark.parametrize("target, ratio", [("AA", 4.5), ("AAA", 7.0)])
def test_suggest_fix_never_returns_failing_color(color, target, ratio):
    paired = contrast.get_accessible_text_color(color)
    fixed = contrast.suggest_fix(color, target)
    if fixed is not None:
        assert contrast.get_contrast(paired, fixed) >= ratio


def test_suggest_fix_returns_passing_input_as_is():
    assert contrast.suggest_fix("#3b82f6", contrast.WcagLevel.AA) == "#3b82f6"


def test_suggest_fix_brightens_under_black_text():
    fixed = contrast.suggest_fix("#3b82f6", "AAA")
    assert fixed is not None
    assert contrast.get_luminance(fixed) > contrast.get_luminance("#3b82f6")
    assert contrast.get_contrast("#000000", fixed) >= 7.0


def test_suggest_fix_darkens_under_white_text():
    fixed = contrast.suggest_fix("#5a6b8c", "AAA")
    assert fixed is not None
    assert contrast.get_luminance(fixed) < contrast.get_luminance("#5a6b8c")
    assert contrast.get_contrast("#ffffff", fixed) >= 7.0


def test_suggest_fix_gives_up_after_budget(monkeypatch):
    monkeypatch.setattr(contrast, "FIX_MAX_STEPS", 0)
    assert contrast.suggest_fix("#3b82f6", "AAA") is None


def test_suggest_fix_invalid_input():
    assert contrast.suggest_fix("nope") is None


def test_suggest_accessible_shade():
    assert contrast.suggest_accessible_shade("#000000", "#ffffff") == "#000000"
    darker = contrast.suggest_accessible_shade("#3b82f6", "#ffffff")
    assert darker is not None
    assert contrast.get_contrast(darker, "#ffffff") >= 4.5
    # 36 Lab units down from white is still too light on white
    assert contrast.suggest_accessible_shade("#ffffff", "#ffffff") is None
    assert contrast.suggest_accessible_shade("nope", "#ffffff") is None


# ──────────────────────────────────────────────────────────────────────────────
# Color-vision deficiency
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("value", SAMPLE_COLORS + ["garbage", "#ABC", ""])
def test_none_is_identity(value):
    assert blindness.simulate_color_blindness(value, "none") == value


def test_protanopia_red():
    assert blindness.simulate_color_blindness("#ff0000", blindness.BlindnessType.PROTANOPIA) == "#918e00"


@pytest.mark.parametrize("kind", ["protanopia", "deuteranopia", "tritanopia"])
def test_achromatic_colors_survive(kind):
    assert blindness.simulate_color_blindness("#ffffff", kind) == "#ffffff"
    assert blindness.simulate_color_blindness("#000000", kind) == "#000000"


def test_invalid_input_passes_through():
    assert blindness.simulate_color_blindness("zzz", "tritanopia") == "zzz"


def test_simulate_palette_keys():
    out = blindness.simulate_palette(["#ff0000", "#00ff00"])
    assert list(out) == ["none", "protanopia", "deuteranopia", "tritanopia"]
    assert out["none"] == ["#ff0000", "#00ff00"]
    assert all(len(v) == 2 for v in out.values())


# ──────────────────────────────────────────────────────────────────────────────
# Audit
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "ratio, label, aa, aaa",
    [(21.0, "AAA", True, True), (7.0, "AAA", True, True), (5.0, "AA", True, False), (3.5, "AA Large", False, False), (2.0, "Fail", False, False)],
)
def test_get_rating(ratio, label, aa, aaa):
    r = audit.get_rating(ratio)
    assert (r.label, r.pass_aa, r.pass_aaa) == (label, aa, aaa)


def test_evaluate_system_empty():
    score = audit.evaluate_system({})
    assert score.grade == "F"
    assert score.total_tested == 0
    assert score.avg_contrast == 0.0


def test_evaluate_system_black_and_white():
    mono = {
        "mono": [
            types_.ColorToken(name="mono-50", value="#ffffff", shade=50),
            types_.ColorToken(name="mono-900", value="#000000", shade=900),
        ]
    }
    score = audit.evaluate_system(mono)
    assert score.grade == "A+"
    assert score.avg_contrast == 21.0
    assert score.aa_pass_percentage == 100
    assert score.aaa_pass_percentage == 100
    assert score.failed_count == 0

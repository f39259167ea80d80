# tests/test_health_scoring.py
"""Token-system health: metric formulas, weights, summary tiers, fuzzy rename hints."""

from __future__ import annotations

from importlib import import_module

import pytest

scoring = import_module("color_token_engine.engine.health.scoring")
shades = import_module("color_token_engine.engine.tokens.shades")
semantic = import_module("color_token_engine.engine.tokens.semantic")
types_ = import_module("color_token_engine.engine.tokens.types")

ColorToken = types_.ColorToken


def _metric(result, name):
    return next(m for m in result.metrics if m.name == name)


@pytest.fixture
def full_system():
    palette = shades.generate_semantic_palette("#3b82f6")
    base = {group: shades.generate_shades(seed, group) for group, seed in palette.items()}
    return base, semantic.suggest_semantic_tokens(base)


# ---------- invariants ----------
def test_weights_sum_to_one():
    assert sum(scoring.METRIC_WEIGHTS.values()) == pytest.approx(1.0)


def test_run_weights_and_bounds(full_system):
    base, sem = full_system
    result = scoring.calculate_token_health(base, sem)
    assert len(result.metrics) == 6
    assert sum(m.weight for m in result.metrics) == pytest.approx(1.0)
    assert 0.0 <= result.overall_score <= 100.0
    assert all(0.0 <= m.score <= 100.0 for m in result.metrics)


def test_overall_is_weighted_metric_scores(full_system):
    base, sem = full_system
    result = scoring.calculate_token_health(base, sem, {"primary/500": 3})
    expected = sum(m.score * m.weight for m in result.metrics)
    assert result.overall_score == pytest.approx(round(expected, 1))


def test_empty_system_is_excellent():
    result = scoring.calculate_token_health({})
    assert result.overall_score == 100.0
    assert result.summary == "Token system is excellent"


# ---------- individual metrics ----------
def test_raw_color_count_penalty(full_system):
    base, sem = full_system
    metric = _metric(scoring.calculate_token_health(base, sem), "Raw Colors Count")
    assert metric.value == 77 - 20
    assert metric.score == 0.0
    assert metric.issues == ("Too many raw colors (77). Consider consolidating.",)


def test_unused_requires_usage_data():
    base = {"primary": shades.generate_shades("#3b82f6", "primary")}
    metric = _metric(scoring.calculate_token_health(base), "Unused Tokens")
    assert metric.value == 0
    assert metric.score == 100.0
    assert metric.suggestions == ("Provide usage data to detect unused tokens",)


def test_unused_counts_zero_and_absent_keys():
    base = {"primary": shades.generate_shades("#3b82f6", "primary", [100, 500, 900])}
    usage = {"primary/500": 4, "primary/100": 0}
    metric = _metric(scoring.calculate_token_health(base, usage_data=usage), "Unused Tokens")
    assert metric.value == 2
    assert metric.max_value == 1.5
    assert metric.issues == ("2 unused tokens found",)


def test_duplicates_normalize_hex():
    base = {
        "a": [ColorToken(name="a-500", value="#FFFFFF", shade=500)],
        "b": [ColorToken(name="b-500", value="#fff", shade=500)],
        "c": [ColorToken(name="c-500", value="#000000", shade=500)],
    }
    metric = _metric(scoring.calculate_token_health(base), "Duplicate Shades")
    assert metric.value == 2
    assert metric.issues[0] == "2 duplicate colors found"
    assert "a/500, b/500" in metric.issues[1]


def test_contrast_only_checks_neutral_and_primary():
    base = {
        "primary": [ColorToken(name="primary-500", value="not-a-color", shade=500)],
        "accent": [ColorToken(name="accent-500", value="not-a-color", shade=500)],
        "neutral": shades.generate_shades("#6b7280", "neutral"),
    }
    metric = _metric(scoring.calculate_token_health(base), "Contrast Failures")
    assert metric.value == 1
    assert metric.issues == ("primary/500 fails contrast on both white and black",)


def test_valid_colors_never_fail_both_extremes(full_system):
    base, _ = full_system
    metric = _metric(scoring.calculate_token_health(base), "Contrast Failures")
    assert metric.value == 0


def test_semantic_coverage():
    base = {"primary": shades.generate_shades("#3b82f6", "primary")}
    metric = _metric(scoring.calculate_token_health(base), "Semantic Coverage")
    assert metric.max_value == 6
    assert metric.value == 6
    assert metric.score == 0.0
    assert metric.issues

    sem = semantic.suggest_semantic_tokens(base)
    covered = _metric(scoring.calculate_token_health(base, sem), "Semantic Coverage")
    assert covered.value == 5


def test_naming_consistency_with_rename_hint():
    base = {
        "Primary_Color": shades.generate_shades("#3b82f6", "Primary_Color", [500]),
        "Neutral": shades.generate_shades("#6b7280", "Neutral", [500]),
    }
    metric = _metric(scoring.calculate_token_health(base), "Naming Consistency")
    assert metric.value == 1
    assert metric.issues == ('Group "Primary_Color" has inconsistent naming',)
    assert 'Rename "Primary_Color" to "primary"' in metric.suggestions


def test_naming_without_close_match():
    base = {"x-1": shades.generate_shades("#3b82f6", "x-1", [500])}
    metric = _metric(scoring.calculate_token_health(base), "Naming Consistency")
    assert metric.value == 1
    assert not any(s.startswith("Rename") for s in metric.suggestions)


@pytest.mark.parametrize("group", ["a-1", "e_2", "In9"])
def test_short_group_names_get_no_rename_hint(group):
    base = {group: shades.generate_shades("#3b82f6", group, [500])}
    metric = _metric(scoring.calculate_token_health(base), "Naming Consistency")
    assert metric.value == 1
    assert not any(s.startswith("Rename") for s in metric.suggestions)


def test_trailing_newline_is_inconsistent_naming():
    base = {"primary\n": shades.generate_shades("#3b82f6", "primary\n", [500])}
    metric = _metric(scoring.calculate_token_health(base), "Naming Consistency")
    assert metric.value == 1
    assert len(metric.issues) == 1


# ---------- summary ----------
@pytest.mark.parametrize(
    "score, label",
    [
        (100, "Token system is excellent"),
        (90, "Token system is excellent"),
        (89.99, "Token system is good"),
        (75, "Token system is good"),
        (60, "Token system is fair"),
        (59.9, "Token system needs improvement"),
        (0, "Token system needs improvement"),
    ],
)
def test_summary_tiers(score, label):
    assert scoring.summarize_score(score) == label


def test_metric_zero_max():
    m = scoring.HealthMetric(name="x", value=0, max_value=0, weight=0.1)
    assert m.score == 100.0
    assert scoring.HealthMetric(name="x", value=1, max_value=0, weight=0.1).score == 0.0


def test_to_dict_shape(full_system):
    base, sem = full_system
    data = scoring.calculate_token_health(base, sem).to_dict()
    assert set(data) == {"overallScore", "metrics", "summary"}
    assert set(data["metrics"][0]) == {"name", "value", "maxValue", "weight", "issues", "suggestions"}

"""Season-wide reports — scoring averages and model accuracy."""
from __future__ import annotations

from typing import Any, Mapping

from ..models import YearData
from .common import NA, empty, fixed, pct, plain, readable, thousands

_PHASES = (
    ("auto_points_mean", "Autonomous", "Auto"),
    ("teleop_points_mean", "Teleoperated", "Teleop"),
    ("endgame_points_mean", "Endgame", "Endgame"),
)
_RP_KEYS = ("rp_1_mean", "rp_2_mean", "rp_3_mean")

# Substrings of breakdown keys that are surfaced in other sections
_ELEMENT_EXCLUDE = ("points_mean", "rp_mean", "total_", "foul", "tiebreaker")


def _is_game_element(key: str) -> bool:
    if key in _RP_KEYS:
        return False
    return not any(part in key for part in _ELEMENT_EXCLUDE)


def _scope_lines(label: str, metrics: Mapping[str, Any]) -> list[str]:
    lines = []
    win_prob = (metrics.get("win_prob") or {}).get(label)
    if win_prob:
        lines.append(
            f"Win Prediction ({label}): {pct(win_prob.get('acc'))} accuracy "
            f"({thousands(win_prob.get('count'))} matches)"
        )
    score_pred = (metrics.get("score_pred") or {}).get(label)
    if score_pred:
        lines.append(
            f"Score Prediction ({label}): {fixed(score_pred.get('rmse'), 1)} RMSE, "
            f"{fixed(score_pred.get('error'), 1)} avg error"
        )
    return lines


def format_year_stats(year: YearData) -> str:
    if not isinstance(year, Mapping) or not year:
        return "No data available."

    breakdown = year.get("breakdown") or {}
    lines = [f"=== FRC {year.get('year')} Season Statistics ===", ""]

    if year.get("score_mean") is not None:
        lines.append("📊 OVERALL SCORING")
        lines.append(f"Average Score: {plain(year['score_mean'])} ± {plain(year.get('score_sd') or None)}")
        if breakdown.get("no_foul_mean") is not None:
            lines.append(f"Score (no fouls): {plain(breakdown['no_foul_mean'])}")
        if breakdown.get("foul_mean") is not None:
            lines.append(f"Average Fouls: {plain(breakdown['foul_mean'])} points")
        lines.append("")

    if breakdown:
        phases = [
            f"{label}: {plain(breakdown[key])} points"
            for key, label, _ in _PHASES if breakdown.get(key) is not None
        ]
        if phases:
            lines.append("🎮 GAME PHASE BREAKDOWN")
            lines += phases
            lines.append("")

        elements = [
            f"{readable(key)}: {plain(value)}"
            for key, value in breakdown.items()
            if value is not None and _is_game_element(key)
        ]
        if elements:
            lines.append("🎯 GAME ELEMENT AVERAGES")
            lines += elements
            lines.append("")

        rps = [
            f"RP {key[3]}: {pct(breakdown[key])} achievement rate"
            for key in _RP_KEYS if breakdown.get(key) is not None
        ]
        if rps:
            lines.append("🏆 RANKING POINTS")
            lines += rps
            lines.append("")

    percentiles = year.get("percentiles") or {}
    if percentiles:
        lines.append("📈 PERFORMANCE PERCENTILES (Top 10% / Top 25% / Bottom 25%)")
        for category, p in percentiles.items():
            if not isinstance(p, Mapping):
                continue
            lines.append(
                f"{readable(category)}: {plain(p.get('p90'))}+ / {plain(p.get('p75'))}+ / {plain(p.get('p25'))}+"
            )
        lines.append("")

    metrics = year.get("metrics") or {}
    if metrics:
        lines.append("🤖 PREDICTION MODEL PERFORMANCE")
        model_lines = _scope_lines("season", metrics) + _scope_lines("champs", metrics)
        lines += model_lines or [f"Model metrics: {NA}"]
        lines.append("")

    return "\n".join(lines)


def format_years_list(years: list[YearData]) -> str:
    if not years:
        return empty("years")

    lines = [f"=== Found {len(years)} FRC Seasons ===", ""]
    for idx, year in enumerate(years):
        if idx > 0:
            lines.append("")
        breakdown = year.get("breakdown") or {}
        lines.append(
            f"{year.get('year')} | Average Score: {fixed(year.get('score_mean'), 1)} "
            f"(±{fixed(year.get('score_sd'), 1)})"
        )

        phases = [
            f"{short}: {fixed(breakdown[key], 1)}"
            for key, _, short in _PHASES if breakdown.get(key) is not None
        ]
        if phases:
            lines.append(f"   🎮 {' | '.join(phases)}")

        rps = [
            f"RP{key[3]}: {pct(breakdown[key], 0)}"
            for key in _RP_KEYS if breakdown.get(key) is not None
        ]
        if rps:
            lines.append(f"   🏆 {' | '.join(rps)}")

    lines.append("")
    lines.append("💡 Use get-year-stats with a specific year for detailed analysis")
    return "\n".join(lines)

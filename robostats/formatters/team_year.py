"""Team season reports."""
from __future__ import annotations

from typing import Any, Mapping

from ..models import TeamYear
from .common import empty, fixed, open_items, or_na, pct, plain, thousands, wlt

# Breakdown keys with a dedicated line; everything else is listed as-is
_PHASE_LABELS = {
    "total_points": "Total Points",
    "auto_points": "Auto Points",
    "teleop_points": "Teleop Points",
    "endgame_points": "Endgame Points",
}
_RP_KEYS = ("rp_1", "rp_2", "rp_3")

_RANK_SCOPES = (
    ("total", "Global"),
    ("country", "Country"),
    ("state", "State"),
    ("district", "District"),
)


def _rank_line(label: str, rank: Mapping[str, Any]) -> str:
    return (
        f"{label}: #{plain(rank.get('rank'))} of {thousands(rank.get('team_count'))} "
        f"({fixed(_percentile(rank.get('percentile')), 1)}th percentile)"
    )


def _percentile(value: Any) -> Any:
    return None if value is None else value * 100


def format_team_year(team_year: TeamYear) -> str:
    epa = team_year.get("epa") or {}
    total = epa.get("total_points") or {}
    conf = epa.get("conf") or [None, None]
    stats = epa.get("stats") or {}
    breakdown = epa.get("breakdown") or {}
    record = team_year.get("record") or {}
    ranks = epa.get("ranks") or {}

    lines = [
        f"=== Team {team_year.get('team')} \"{team_year.get('name', '')}\" - {team_year.get('year')} Season ===",
        "",
        "📍 TEAM INFO",
        f"Location: {or_na(team_year.get('state'))}, {or_na(team_year.get('country'))}",
        f"District: {or_na(team_year.get('district'))}",
        f"Rookie Year: {plain(team_year.get('rookie_year'))}",
        "",
        "📊 EPA PERFORMANCE",
        f"EPA (Norm): {plain(epa.get('norm'))}",
        f"EPA (Unitless): {plain(epa.get('unitless'))}",
        f"Expected Points: {fixed(total.get('mean'))} ± {fixed(total.get('sd'))}",
        f"Confidence Interval: [{fixed(conf[0])}, {fixed(conf[-1])}]",
        "",
        "📈 SEASON PROGRESSION",
        f"Start EPA: {fixed(stats.get('start'))}",
        f"Pre-Champs EPA: {fixed(stats.get('pre_champs'))}",
        f"Max EPA: {fixed(stats.get('max'))}",
        "",
    ]

    if breakdown:
        lines.append("🎮 GAME BREAKDOWN")
        for key, label in _PHASE_LABELS.items():
            if breakdown.get(key) is not None:
                lines.append(f"{label}: {fixed(breakdown[key])}")
        rps = [
            f"RP{key[-1]}: {pct(breakdown[key])}"
            for key in _RP_KEYS if breakdown.get(key) is not None
        ]
        if rps:
            lines.append(f"Ranking Points: {' | '.join(rps)}")
        for key, value in open_items(breakdown, exclude=(*_PHASE_LABELS, *_RP_KEYS)):
            lines.append(f"{key}: {fixed(value)}")
        lines.append("")

    lines += [
        "🏆 MATCH RECORD",
        f"Record: {wlt(record)}",
        f"Win Rate: {pct(record.get('winrate'))} ({plain(record.get('count'))} matches)",
        "",
    ]

    if ranks:
        lines.append("🌍 RANKINGS")
        for scope, label in _RANK_SCOPES:
            if ranks.get(scope):
                lines.append(_rank_line(label, ranks[scope]))
        lines.append("")

    if team_year.get("district_points") is not None:
        lines.append("🏅 DISTRICT")
        lines.append(f"District Points: {plain(team_year['district_points'])}")
        if team_year.get("district_rank") is not None:
            lines.append(f"District Rank: #{plain(team_year['district_rank'])}")
        lines.append("")

    return "\n".join(lines)


def format_team_years_list(team_years: list[TeamYear]) -> str:
    if not team_years:
        return empty("team years")

    lines = [f"=== {len(team_years)} Team Years Found ===", ""]
    for idx, team_year in enumerate(team_years):
        if idx > 0:
            lines.append("")
        epa = team_year.get("epa") or {}
        record = team_year.get("record") or {}
        global_rank = (epa.get("ranks") or {}).get("total") or {}

        lines.append(f"{idx + 1}. Team {team_year.get('team')} \"{team_year.get('name', '')}\" ({team_year.get('year')})")
        lines.append(
            f"   📍 {or_na(team_year.get('state'))}, {or_na(team_year.get('country'))} "
            f"| District: {or_na(team_year.get('district'))}"
        )
        lines.append(f"   📊 EPA: {plain(epa.get('norm'))} | Record: {wlt(record)} ({pct(record.get('winrate'))})")
        lines.append(
            f"   🌍 Global Rank: #{plain(global_rank.get('rank'))} "
            f"({fixed(_percentile(global_rank.get('percentile')), 1)}th percentile)"
        )

    lines.append("")
    lines.append("💡 Use get-team-year with specific team number and year for detailed analysis")
    return "\n".join(lines)

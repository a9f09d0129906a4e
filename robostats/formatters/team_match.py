"""Single-team-in-match reports — EPA contribution by game phase."""
from __future__ import annotations

from typing import Any

from ..models import TeamMatch
from .common import empty, fixed, open_items, timestamp

_PHASE_KEYS = ("total_points", "auto_points", "teleop_points", "endgame_points")


def _share(part: Any, total: Any) -> float:
    """Percentage of *total* contributed by *part*; 0 when total is not positive."""
    if not isinstance(part, (int, float)) or not isinstance(total, (int, float)) or total <= 0:
        return 0.0
    return part / total * 100


def _alliance(team_match: TeamMatch) -> str:
    return str(team_match.get("alliance") or "").upper()


def _match_type(team_match: TeamMatch) -> str:
    return "Elimination" if team_match.get("elim") else "Qualification"


def format_team_match(team_match: TeamMatch) -> str:
    epa = team_match.get("epa") or {}
    breakdown = epa.get("breakdown") or {}
    team = team_match.get("team")

    lines = [
        f"=== Team {team} in Match {team_match.get('match')} ===",
        "",
        "📅 MATCH DETAILS",
        f"Match: {team_match.get('match')}",
        f"Event: {team_match.get('event')} | Year: {team_match.get('year')} | Week: {team_match.get('week')}",
        f"Alliance: {_alliance(team_match)}",
        f"Type: {_match_type(team_match)}",
        f"Status: {team_match.get('status')}",
    ]
    when = timestamp(team_match.get("time"))
    if when:
        lines.append(f"Time: {when}")
    lines.append("")

    lines.append("🏷️ TEAM STATUS")
    if team_match.get("dq"):
        lines.append("❌ DISQUALIFIED")
    if team_match.get("surrogate"):
        lines.append("🔄 SURROGATE TEAM")
    if not team_match.get("dq") and not team_match.get("surrogate"):
        lines.append("✅ Regular team member")
    lines.append("")

    lines += [
        "📊 EPA PERFORMANCE",
        f"Total EPA Contribution: {fixed(epa.get('total_points'))} points",
        f"Post-Match EPA: {fixed(epa.get('post'))}",
        "",
        "🎮 PERFORMANCE BREAKDOWN",
        f"Total Points: {fixed(breakdown.get('total_points'))}",
        f"Auto Contribution: {fixed(breakdown.get('auto_points'))} points",
        f"Teleop Contribution: {fixed(breakdown.get('teleop_points'))} points",
        f"Endgame Contribution: {fixed(breakdown.get('endgame_points'))} points",
        "",
    ]

    extras = list(open_items(breakdown, exclude=_PHASE_KEYS))
    if extras:
        lines.append("🎯 GAME-SPECIFIC CONTRIBUTIONS")
        lines += [f"{key}: {fixed(value)}" for key, value in extras]
        lines.append("")

    total = breakdown.get("total_points")
    lines += [
        "📈 PERFORMANCE SUMMARY",
        f"Auto: {_share(breakdown.get('auto_points'), total):.1f}% of contribution",
        f"Teleop: {_share(breakdown.get('teleop_points'), total):.1f}% of contribution",
        f"Endgame: {_share(breakdown.get('endgame_points'), total):.1f}% of contribution",
        "",
        f"💡 This shows Team {team}'s individual contribution to their {team_match.get('alliance')} alliance",
        f"💡 Match format: {team_match.get('match')} | Event format: {team_match.get('event')}",
    ]
    return "\n".join(lines)


def format_team_matches_list(team_matches: list[TeamMatch]) -> str:
    if not team_matches:
        return empty("team matches")

    lines = [f"=== {len(team_matches)} Team Matches Found ===", ""]
    for idx, team_match in enumerate(team_matches):
        if idx > 0:
            lines.append("")
        epa = team_match.get("epa") or {}
        breakdown = epa.get("breakdown") or {}

        lines.append(f"{idx + 1}. Team {team_match.get('team')} in {team_match.get('match')}")
        lines.append(f"   📅 {team_match.get('year')} | Week {team_match.get('week')} | Event: {team_match.get('event')}")
        lines.append(
            f"   🏁 {_alliance(team_match)} Alliance | {_match_type(team_match)} | Status: {team_match.get('status')}"
        )

        flags = [label for key, label in (("dq", "DQ"), ("surrogate", "Surrogate")) if team_match.get(key)]
        if flags:
            lines.append(f"   🏷️ {', '.join(flags)}")

        lines.append(f"   📊 EPA: {fixed(epa.get('total_points'), 1)} | Post-Match: {fixed(epa.get('post'), 1)}")
        lines.append(
            f"   🎮 Contribution: Auto {fixed(breakdown.get('auto_points'), 1)} "
            f"| Teleop {fixed(breakdown.get('teleop_points'), 1)} "
            f"| Endgame {fixed(breakdown.get('endgame_points'), 1)}"
        )
        when = timestamp(team_match.get("time"))
        if when:
            lines.append(f"   ⏰ {when}")

    lines.append("")
    lines.append("💡 Use get-team-match with specific team and match for detailed analysis")
    return "\n".join(lines)

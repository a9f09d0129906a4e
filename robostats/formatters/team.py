"""Team reports — all-time record and normalized EPA snapshot."""
from __future__ import annotations

from ..models import Team
from .common import empty, fixed, location, or_na, pct, plain, wlt, yes_no


def format_team(team: Team) -> str:
    record = team.get("record") or {}
    epa = team.get("norm_epa") or {}
    return "\n".join([
        f"Team {team.get('team')}: {team.get('name', '')}",
        f"Country: {or_na(team.get('country'))}",
        f"State: {or_na(team.get('state'))}",
        f"District: {or_na(team.get('district'))}",
        f"Rookie Year: {plain(team.get('rookie_year'))}",
        f"Active: {yes_no(team.get('active'))}",
        f"Record: {wlt(record)} (Games: {plain(record.get('count'))}, Winrate: {pct(record.get('winrate'))})",
        "EPA (current/recent/mean/max): "
        f"{fixed(epa.get('current'))}/{fixed(epa.get('recent'))}/{fixed(epa.get('mean'))}/{fixed(epa.get('max'))}",
    ])


def format_teams_list(teams: list[Team]) -> str:
    if not teams:
        return empty("teams")

    lines = [f"=== Found {len(teams)} Teams ===", ""]
    for idx, team in enumerate(teams):
        if idx > 0:
            lines.append("")
        record = team.get("record") or {}
        epa = team.get("norm_epa") or {}
        district = f" ({team['district']})" if team.get("district") else ""

        lines.append(f"{team.get('team')} | {team.get('name', '')}")
        lines.append(f"   📍 {location(team.get('state'), team.get('country'))}{district}")
        lines.append(
            f"   📊 EPA: {fixed(epa.get('current'), 1)} | Record: {wlt(record)} "
            f"({pct(record.get('winrate'), 0)}) | Rookie: {plain(team.get('rookie_year'))}"
        )

    lines.append("")
    lines.append("💡 Use get-team with a specific team number for detailed analysis")
    return "\n".join(lines)

"""Team-at-event reports — EPA progression plus qual/elim/overall records."""
from __future__ import annotations

from ..models import TeamEvent
from .common import empty, fixed, location, open_items, or_na, pct, plain, wlt, yes_no


def format_team_event(team_event: TeamEvent) -> str:
    epa = team_event.get("epa") or {}
    total_points = epa.get("total_points") or {}
    conf = epa.get("conf") or [None, None]
    stats = epa.get("stats") or {}
    record = team_event.get("record") or {}
    qual = record.get("qual") or {}
    elim = record.get("elim") or {}
    total = record.get("total") or {}

    lines = [
        f"=== Team {team_event.get('team')} \"{team_event.get('team_name', '')}\" at {team_event.get('event_name', '')} ===",
        "",
        "📅 EVENT DETAILS",
        f"Event: {team_event.get('event_name', '')} ({team_event.get('event')})",
        f"Year: {team_event.get('year')} | Week: {plain(team_event.get('week'))} | Type: {team_event.get('type')}",
        f"Location: {location(team_event.get('state'), team_event.get('country'))}",
        f"District: {or_na(team_event.get('district'))}",
        f"Status: {team_event.get('status')}",
    ]
    if team_event.get("first_event"):
        lines.append("🆕 First event of the season")
    lines.append("")

    lines += [
        "📊 EPA PERFORMANCE",
        f"Final EPA: {fixed(epa.get('norm'))} (Normalized)",
        f"Unitless EPA: {fixed(epa.get('unitless'))}",
        f"Confidence Interval: [{fixed(conf[0])}, {fixed(conf[-1])}]",
        f"Expected Score: {fixed(total_points.get('mean'), 1)} ± {fixed(total_points.get('sd'), 1)}",
        "",
        "📈 EPA PROGRESSION",
        f"Starting EPA: {fixed(stats.get('start'))}",
        f"Pre-Elimination EPA: {fixed(stats.get('pre_elim'))}",
        f"Mean EPA: {fixed(stats.get('mean'))}",
        f"Peak EPA: {fixed(stats.get('max'))}",
        "",
    ]

    components = list(open_items(epa.get("breakdown")))
    if components:
        lines.append("🎮 GAME BREAKDOWN")
        lines += [f"{key}: {fixed(value)}" for key, value in components]
        lines.append("")

    lines.append("🏆 QUALIFICATION RECORD")
    lines.append(f"Record: {wlt(qual)} ({pct(qual.get('winrate'))})")
    if qual.get("rank") is not None:
        lines.append(f"Ranking: {qual['rank']}/{plain(qual.get('num_teams'))}")
    if qual.get("rps") is not None and qual.get("rps_per_match") is not None:
        lines.append(f"Ranking Points: {plain(qual['rps'])} total ({fixed(qual['rps_per_match'], 1)} per match)")
    lines.append(f"Matches Played: {plain(qual.get('count'))}")
    lines.append("")

    if (elim.get("count") or 0) > 0:
        lines.append("🥇 ELIMINATION RECORD")
        lines.append(f"Record: {wlt(elim)} ({pct(elim.get('winrate'))})")
        lines.append(f"Matches Played: {elim['count']}")
        if elim.get("alliance"):
            lines.append(f"Alliance: {elim['alliance']}")
            lines.append(f"Captain: {yes_no(elim.get('is_captain'))}")
        lines.append("")

    lines += [
        "📊 OVERALL EVENT RECORD",
        f"Total Record: {wlt(total)} ({pct(total.get('winrate'))})",
        f"Total Matches: {plain(total.get('count'))}",
        "",
    ]

    if team_event.get("district_points") is not None:
        lines.append("🏅 DISTRICT POINTS")
        lines.append(f"Points Earned: {plain(team_event['district_points'])}")
        lines.append("")

    lines.append(f"💡 Event key format: {team_event.get('event')} (Year + Location Code)")
    return "\n".join(lines)


def format_team_events_list(team_events: list[TeamEvent]) -> str:
    if not team_events:
        return empty("team events")

    lines = [f"=== {len(team_events)} Team Events Found ===", ""]
    for idx, team_event in enumerate(team_events):
        if idx > 0:
            lines.append("")
        record = team_event.get("record") or {}
        qual = record.get("qual") or {}
        elim = record.get("elim") or {}
        total = record.get("total") or {}
        epa = team_event.get("epa") or {}

        lines.append(
            f"{idx + 1}. Team {team_event.get('team')} \"{team_event.get('team_name', '')}\" "
            f"at {team_event.get('event_name', '')}"
        )
        lines.append(
            f"   📅 {team_event.get('year')} | Week {plain(team_event.get('week'))} "
            f"| {team_event.get('type')} | {team_event.get('event')}"
        )
        lines.append(
            f"   📍 {location(team_event.get('state'), team_event.get('country'))} "
            f"| District: {or_na(team_event.get('district'))}"
        )
        rank_info = f" | Rank: {qual['rank']}/{plain(qual.get('num_teams'))}" if qual.get("rank") is not None else ""
        lines.append(f"   🏆 Qual: {wlt(qual)} ({pct(qual.get('winrate'))}){rank_info}")
        if (elim.get("count") or 0) > 0:
            lines.append(f"   🥇 Elim: {wlt(elim)} ({pct(elim.get('winrate'))})")
        lines.append(
            f"   📊 EPA: {fixed(epa.get('norm'), 1)} | Overall: {wlt(total)} ({pct(total.get('winrate'))})"
        )
        if team_event.get("district_points") is not None:
            lines.append(f"   🏅 District Points: {plain(team_event['district_points'])}")

    lines.append("")
    lines.append("💡 Use get-team-event with specific team and event for detailed analysis")
    return "\n".join(lines)

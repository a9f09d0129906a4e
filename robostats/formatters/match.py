"""Match reports — predictions versus actual results."""
from __future__ import annotations

from typing import Any, Mapping

from ..models import Match
from .common import NA, empty, fixed, join_keys, open_items, pct, plain, timestamp

# Result keys rendered in ACTUAL RESULTS / SCORE BREAKDOWN
_RESULT_KEYS = (
    "winner", "red_score", "blue_score", "red_no_foul", "blue_no_foul",
    "red_auto_points", "blue_auto_points", "red_teleop_points", "blue_teleop_points",
    "red_endgame_points", "blue_endgame_points",
)

MATCH_KEY_HINT = "💡 Match types: qm## (qual), sf##m# (semifinal), f#m# (final)"


def _match_type(match: Match) -> str:
    return "Elimination" if match.get("elim") else "Qualification"


def _blue_win_prob(red_win_prob: Any) -> Any:
    return None if red_win_prob is None else 1 - red_win_prob


def _check(flag: Any) -> str:
    return "✅" if flag else "❌"


def _alliance_lines(label: str, alliance: Mapping[str, Any]) -> list[str]:
    lines = [f"{label}: {join_keys(alliance.get('team_keys'))}"]
    if alliance.get("surrogate_team_keys"):
        lines.append(f"   Surrogates: {join_keys(alliance['surrogate_team_keys'])}")
    if alliance.get("dq_team_keys"):
        lines.append(f"   DQ'd: {join_keys(alliance['dq_team_keys'])}")
    return lines


def _played(result: Mapping[str, Any]) -> bool:
    return bool(result.get("winner"))


def format_match(match: Match) -> str:
    alliances = match.get("alliances") or {}
    pred = match.get("pred") or {}
    result = match.get("result") or {}

    lines = [
        f"=== {match.get('match_name') or match.get('key')} ({match.get('key')}) ===",
        "",
        "📅 MATCH DETAILS",
        f"Event: {match.get('event')} | Year: {match.get('year')} | Week: {plain(match.get('week'))}",
        f"Type: {_match_type(match)} | Level: {match.get('comp_level')}",
        f"Set: {plain(match.get('set_number'))} | Match: {plain(match.get('match_number'))}",
        f"Status: {match.get('status')}",
    ]
    when = timestamp(match.get("time"))
    if when:
        lines.append(f"Time: {when}")
    lines.append("")

    lines.append("🤖 ALLIANCE LINEUP")
    lines += _alliance_lines("🔴 Red Alliance", alliances.get("red") or {})
    lines += _alliance_lines("🔵 Blue Alliance", alliances.get("blue") or {})
    lines.append("")

    red_win_prob = pred.get("red_win_prob")
    lines += [
        "🎯 PREDICTIONS",
        f"Predicted Winner: {pred.get('winner') or NA}",
        f"Win Probability: Red {pct(red_win_prob)} | Blue {pct(_blue_win_prob(red_win_prob))}",
        f"Predicted Score: Red {fixed(pred.get('red_score'), 1)} | Blue {fixed(pred.get('blue_score'), 1)}",
        "Predicted RPs:",
        f"  Red: RP1 {fixed(pred.get('red_rp_1'))} | RP2 {fixed(pred.get('red_rp_2'))}",
        f"  Blue: RP1 {fixed(pred.get('blue_rp_1'))} | RP2 {fixed(pred.get('blue_rp_2'))}",
        "",
    ]

    if _played(result):
        lines += [
            "🏆 ACTUAL RESULTS",
            f"Winner: {result['winner']}",
            f"Final Score: Red {plain(result.get('red_score'))} | Blue {plain(result.get('blue_score'))}",
            "",
            "📊 SCORE BREAKDOWN",
            f"Auto Points: Red {plain(result.get('red_auto_points'))} | Blue {plain(result.get('blue_auto_points'))}",
            f"Teleop Points: Red {plain(result.get('red_teleop_points'))} | Blue {plain(result.get('blue_teleop_points'))}",
            f"Endgame Points: Red {plain(result.get('red_endgame_points'))} | Blue {plain(result.get('blue_endgame_points'))}",
            f"No Fouls: Red {_check(result.get('red_no_foul'))} | Blue {_check(result.get('blue_no_foul'))}",
            "",
        ]
        extras = list(open_items(result, exclude=_RESULT_KEYS))
        if extras:
            lines.append("🎮 GAME-SPECIFIC BREAKDOWN")
            lines += [f"{key}: {plain(value)}" for key, value in extras]
            lines.append("")
    else:
        lines.append("⏳ Match has not been played yet")
        lines.append("")

    if match.get("video"):
        lines.append("📹 VIDEO")
        lines.append(f"Video: {match['video']}")
        lines.append("")

    lines.append(f"💡 Match key format: {match.get('key')} (Event + Match Identifier)")
    lines.append(MATCH_KEY_HINT)
    return "\n".join(lines)


def format_matches_list(matches: list[Match]) -> str:
    if not matches:
        return empty("matches")

    lines = [f"=== {len(matches)} Matches Found ===", ""]
    for idx, match in enumerate(matches):
        if idx > 0:
            lines.append("")
        alliances = match.get("alliances") or {}
        pred = match.get("pred") or {}
        result = match.get("result") or {}

        lines.append(f"{idx + 1}. {match.get('match_name') or match.get('key')} ({match.get('key')})")
        lines.append(f"   📅 {match.get('year')} | Week {plain(match.get('week'))} | Event: {match.get('event')}")
        lines.append(f"   🏁 Type: {_match_type(match)} | Status: {match.get('status')}")
        lines.append(f"   🔴 Red: {join_keys((alliances.get('red') or {}).get('team_keys'))}")
        lines.append(f"   🔵 Blue: {join_keys((alliances.get('blue') or {}).get('team_keys'))}")
        lines.append(
            f"   🎯 Predicted: {pred.get('winner') or NA} ({pct(pred.get('red_win_prob'))} Red) "
            f"| Score: {fixed(pred.get('red_score'), 0)}-{fixed(pred.get('blue_score'), 0)}"
        )
        if _played(result):
            lines.append(
                f"   🏆 Result: {result['winner']} wins {plain(result.get('red_score'))}-{plain(result.get('blue_score'))}"
            )
        else:
            lines.append("   ⏳ Match not yet played")
        if match.get("video"):
            lines.append(f"   📹 Video: {match['video']}")

    lines.append("")
    lines.append("💡 Use get-match with specific match key for detailed analysis")
    return "\n".join(lines)

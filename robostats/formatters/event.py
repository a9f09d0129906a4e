"""Event reports with EPA distribution and prediction accuracy."""
from __future__ import annotations

from typing import Any, Mapping

from ..models import Event
from .common import NA, empty, fixed, location, or_na, plain


def _prediction_lines(metrics: Mapping[str, Any]) -> list[str]:
    win_prob = metrics.get("win_prob") or {}
    score_pred = metrics.get("score_pred") or {}
    rp_pred = metrics.get("rp_pred") or {}
    lines = []

    if (win_prob.get("count") or 0) > 0 and win_prob.get("acc") is not None:
        lines.append(f"Win Probability: {fixed(win_prob['acc'], 3)} accuracy ({win_prob['count']} predictions)")
    else:
        lines.append(f"Win Probability: {NA}")

    if (score_pred.get("count") or 0) > 0 and score_pred.get("rmse") is not None:
        lines.append(
            f"Score Prediction: {fixed(score_pred['rmse'])} RMSE ({score_pred['count']} predictions)"
        )
    else:
        lines.append(f"Score Prediction: {NA}")

    # rp_pred keys are season-specific; anything shaped like {acc, error} is listed
    if (rp_pred.get("count") or 0) > 0:
        lines.append("Ranking Point Predictions:")
        for key, value in rp_pred.items():
            if key != "count" and isinstance(value, Mapping) and "acc" in value:
                lines.append(f"  • {key}: {fixed(value['acc'], 3)} accuracy")
    else:
        lines.append(f"Ranking Point Predictions: {NA}")
    return lines


def format_event(event: Event) -> str:
    epa = event.get("epa") or {}

    lines = [
        f"=== {event.get('name', '')} ({event.get('key')}) ===",
        "",
        "📅 EVENT DETAILS",
        f"Year: {event.get('year')}",
        f"Dates: {event.get('start_date')} to {event.get('end_date')}",
        f"Location: {location(event.get('state'), event.get('country'))}",
        f"District: {or_na(event.get('district'))}",
        f"Type: {event.get('type')}",
        f"Week: {plain(event.get('week'))}",
        "",
        "🏁 STATUS",
        f"Status: {event.get('status_str') or event.get('status')}",
        f"Teams: {plain(event.get('num_teams'))}",
        f"Qualification Matches: {plain(event.get('qual_matches'))}",
    ]
    if (event.get("current_match") or 0) > 0:
        lines.append(f"Current Match: {event['current_match']}")
    lines.append("")

    lines.append("📊 EPA STATISTICS")
    if epa.get("mean") is not None and epa.get("sd") is not None:
        lines.append(f"Mean EPA: {fixed(epa['mean'])} ± {fixed(epa['sd'])}")
    else:
        lines.append(f"Mean EPA: {NA}")
    lines.append(f"Max EPA: {fixed(epa.get('max'))}")
    lines.append(f"Top 8 EPA: {fixed(epa.get('top_8'))}")
    lines.append(f"Top 24 EPA: {fixed(epa.get('top_24'))}")
    lines.append("")

    lines.append("🎯 PREDICTION METRICS")
    lines += _prediction_lines(event.get("metrics") or {})
    lines.append("")

    if event.get("video"):
        lines.append("📹 VIDEO")
        lines.append(f"Video: {event['video']}")
        lines.append("")

    lines.append(f"💡 Event key format: {event.get('key')} (Year + Location Code)")
    return "\n".join(lines)


def format_events_list(events: list[Event]) -> str:
    if not events:
        return empty("events")

    lines = [f"=== {len(events)} Events Found ===", ""]
    for idx, event in enumerate(events):
        if idx > 0:
            lines.append("")
        epa = event.get("epa") or {}
        lines.append(f"{idx + 1}. {event.get('name', '')} ({event.get('key')})")
        lines.append(
            f"   📅 {event.get('start_date')} to {event.get('end_date')} "
            f"| Week {plain(event.get('week'))} | {event.get('type')}"
        )
        lines.append(
            f"   📍 {location(event.get('state'), event.get('country'))} | District: {or_na(event.get('district'))}"
        )
        lines.append(
            f"   👥 {plain(event.get('num_teams'))} teams | Status: {event.get('status_str') or event.get('status')}"
        )
        lines.append(
            f"   📊 Mean EPA: {fixed(epa.get('mean'), 1)} ± {fixed(epa.get('sd'), 1)} | Max: {fixed(epa.get('max'), 1)}"
        )

    lines.append("")
    lines.append("💡 Use get-event with specific event key for detailed analysis")
    return "\n".join(lines)

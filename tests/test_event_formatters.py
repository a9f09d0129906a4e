from __future__ import annotations

from robostats.formatters.event import format_event, format_events_list
from robostats.formatters.team_event import format_team_event, format_team_events_list

CASF = {
    "key": "2024casf",
    "year": 2024,
    "name": "San Francisco Regional",
    "country": "USA",
    "state": "CA",
    "district": None,
    "start_date": "2024-03-21",
    "end_date": "2024-03-24",
    "type": "regional",
    "week": 3,
    "video": None,
    "status": "Completed",
    "status_str": "Completed",
    "num_teams": 48,
    "current_match": 0,
    "qual_matches": 80,
    "epa": {"max": 95.5, "top_8": 80.25, "top_24": 60.0, "mean": 45.5, "sd": 12.5},
    "metrics": {
        "win_prob": {"count": 80, "conf": 0.8, "acc": 0.7251, "mse": 0.18},
        "score_pred": {"count": 80, "rmse": 14.5, "error": 11.2},
        "rp_pred": {"count": 80, "melody_rp": {"error": 0.1, "acc": 0.85}},
    },
}

POOFS_AT_CASF = {
    "team": 254,
    "year": 2024,
    "event": "2024casf",
    "team_name": "The Cheesy Poofs",
    "event_name": "San Francisco Regional",
    "country": "USA",
    "state": "CA",
    "district": None,
    "type": "regional",
    "week": 3,
    "status": "Completed",
    "first_event": True,
    "epa": {
        "total_points": {"mean": 70.0, "sd": 8.0},
        "unitless": 2010.0,
        "norm": 1940.0,
        "conf": [60.0, 78.0],
        "breakdown": {"total_points": 70.0, "auto_points": 20.0},
        "stats": {"start": 55.0, "pre_elim": 68.0, "mean": 66.0, "max": 72.0},
    },
    "record": {
        "qual": {
            "wins": 10, "losses": 0, "ties": 0, "count": 10, "winrate": 1.0,
            "rps": 40, "rps_per_match": 4.0, "rank": 1, "num_teams": 48,
        },
        "elim": {"wins": 0, "losses": 0, "ties": 0, "count": 0, "winrate": None},
        "total": {"wins": 10, "losses": 0, "ties": 0, "count": 10, "winrate": 1.0},
    },
    "district_points": None,
}


def test_event_report() -> None:
    lines = format_event(CASF).splitlines()
    assert lines[0] == "=== San Francisco Regional (2024casf) ==="
    assert "Dates: 2024-03-21 to 2024-03-24" in lines
    assert "Location: CA, USA" in lines
    assert "Mean EPA: 45.50 ± 12.50" in lines
    assert "Top 8 EPA: 80.25" in lines
    assert "Win Probability: 0.725 accuracy (80 predictions)" in lines
    assert "Score Prediction: 14.50 RMSE (80 predictions)" in lines
    assert "  • melody_rp: 0.850 accuracy" in lines
    assert "Current Match: 0" not in lines
    assert lines[-1] == "💡 Event key format: 2024casf (Year + Location Code)"


def test_event_null_epa_is_na() -> None:
    event = {**CASF, "epa": {"max": None, "top_8": None, "top_24": None, "mean": None, "sd": None}}
    lines = format_event(event).splitlines()
    assert "Mean EPA: N/A" in lines
    assert "Max EPA: N/A" in lines


def test_event_without_predictions() -> None:
    event = {**CASF, "metrics": {"win_prob": {"count": 0}, "score_pred": {"count": 0}}}
    lines = format_event(event).splitlines()
    assert "Win Probability: N/A" in lines
    assert "Score Prediction: N/A" in lines
    assert "Ranking Point Predictions: N/A" in lines


def test_event_video_section_is_conditional() -> None:
    assert "📹 VIDEO" not in format_event(CASF)
    assert "Video: https://youtu.be/x" in format_event({**CASF, "video": "https://youtu.be/x"})


def test_events_list() -> None:
    lines = format_events_list([CASF]).splitlines()
    assert lines[0] == "=== 1 Events Found ==="
    assert "1. San Francisco Regional (2024casf)" in lines
    assert "   📊 Mean EPA: 45.5 ± 12.5 | Max: 95.5" in lines
    assert lines[-1] == "💡 Use get-event with specific event key for detailed analysis"
    assert format_events_list([]) == "No events found."


def test_team_event_report() -> None:
    lines = format_team_event(POOFS_AT_CASF).splitlines()
    assert lines[0] == '=== Team 254 "The Cheesy Poofs" at San Francisco Regional ==='
    assert "🆕 First event of the season" in lines
    assert "Final EPA: 1940.00 (Normalized)" in lines
    assert "Pre-Elimination EPA: 68.00" in lines
    assert "Record: 10-0-0 (100.0%)" in lines
    assert "Ranking: 1/48" in lines
    assert "Ranking Points: 40 total (4.0 per match)" in lines
    assert "Total Record: 10-0-0 (100.0%)" in lines


def test_team_event_conditional_sections() -> None:
    text = format_team_event(POOFS_AT_CASF)
    assert "ELIMINATION RECORD" not in text
    assert "DISTRICT POINTS" not in text

    record = {
        **POOFS_AT_CASF["record"],
        "elim": {
            "wins": 6, "losses": 1, "ties": 0, "count": 7, "winrate": 0.857,
            "alliance": "Alliance 1", "is_captain": True,
        },
    }
    played = {**POOFS_AT_CASF, "record": record, "district_points": 12, "first_event": False}
    lines = format_team_event(played).splitlines()
    assert "🥇 ELIMINATION RECORD" in lines
    assert "Record: 6-1-0 (85.7%)" in lines
    assert "Captain: Yes" in lines
    assert "Points Earned: 12" in lines
    assert "🆕 First event of the season" not in lines


def test_team_events_list() -> None:
    lines = format_team_events_list([POOFS_AT_CASF]).splitlines()
    assert lines[0] == "=== 1 Team Events Found ==="
    assert "   🏆 Qual: 10-0-0 (100.0%) | Rank: 1/48" in lines
    assert not any("Elim:" in line for line in lines)
    assert lines[-1] == "💡 Use get-team-event with specific team and event for detailed analysis"
    assert format_team_events_list([]) == "No team events found."

from __future__ import annotations

from robostats.formatters.year import format_year_stats, format_years_list

SEASON_2024 = {
    "year": 2024,
    "score_mean": 60.5,
    "score_sd": 20.0,
    "breakdown": {
        "total_points_mean": 60.5,
        "auto_points_mean": 15.0,
        "teleop_points_mean": 35.5,
        "endgame_points_mean": 10.0,
        "rp_1_mean": 0.25,
        "foul_mean": 3.0,
        "no_foul_mean": 57.5,
        "notes_scored_mean": 8.0,
        "tiebreaker_points_mean": 1.0,
    },
    "percentiles": {
        "total_points": {"p99": 150, "p90": 100, "p75": 80, "p25": 40},
    },
    "metrics": {
        "win_prob": {
            "season": {"acc": 0.7, "count": 12000},
            "champs": {"acc": 0.75, "count": 500},
        },
        "score_pred": {"season": {"rmse": 15.2, "error": 11.0}},
    },
}


def test_year_stats_report() -> None:
    lines = format_year_stats(SEASON_2024).splitlines()
    assert lines[0] == "=== FRC 2024 Season Statistics ==="
    assert "Average Score: 60.5 ± 20" in lines
    assert "Score (no fouls): 57.5" in lines
    assert "Average Fouls: 3 points" in lines
    assert "Autonomous: 15 points" in lines
    assert "Teleoperated: 35.5 points" in lines
    assert "Endgame: 10 points" in lines
    assert "RP 1: 25.0% achievement rate" in lines
    assert "Total Points: 100+ / 80+ / 40+" in lines


def test_year_game_elements_exclude_totals_and_fouls() -> None:
    text = format_year_stats(SEASON_2024)
    assert "🎯 GAME ELEMENT AVERAGES" in text
    assert "Notes Scored: 8" in text
    assert "Tiebreaker" not in text
    assert "Foul Mean" not in text


def test_year_model_metrics_cover_season_and_champs() -> None:
    lines = format_year_stats(SEASON_2024).splitlines()
    season = lines.index("Win Prediction (season): 70.0% accuracy (12,000 matches)")
    champs = lines.index("Win Prediction (champs): 75.0% accuracy (500 matches)")
    assert season < champs
    assert "Score Prediction (season): 15.2 RMSE, 11.0 avg error" in lines


def test_year_stats_without_data() -> None:
    assert format_year_stats({}) == "No data available."


def test_year_sections_are_omitted_when_absent() -> None:
    text = format_year_stats({"year": 2002})
    assert text.startswith("=== FRC 2002 Season Statistics ===")
    assert "OVERALL SCORING" not in text
    assert "PREDICTION MODEL PERFORMANCE" not in text


def test_years_list() -> None:
    lines = format_years_list([SEASON_2024]).splitlines()
    assert lines[0] == "=== Found 1 FRC Seasons ==="
    assert "2024 | Average Score: 60.5 (±20.0)" in lines
    assert "   🎮 Auto: 15.0 | Teleop: 35.5 | Endgame: 10.0" in lines
    assert "   🏆 RP1: 25%" in lines
    assert lines[-1] == "💡 Use get-year-stats with a specific year for detailed analysis"


def test_empty_years_list() -> None:
    assert format_years_list([]) == "No years found."

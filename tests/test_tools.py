from __future__ import annotations

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from robostats.server import create_server
from robostats.tools.base import run_tool

ALL_TOOLS = {
    "get-team", "get-team-year", "get-teams", "get-team-years",
    "get-years", "get-year-stats",
    "get-event", "get-events", "get-team-event", "get-team-events",
    "get-match", "get-matches", "get-team-match", "get-team-matches",
}


async def call(rec, tool: str, args: dict) -> str:
    async with Client(create_server(rec.client())) as mcp:
        result = await mcp.call_tool(tool, args)
    return result.content[0].text


async def test_all_tools_are_registered(upstream) -> None:
    async with Client(create_server(upstream().client())) as mcp:
        tools = {tool.name: tool for tool in await mcp.list_tools()}
    assert set(tools) == ALL_TOOLS

    limit = tools["get-teams"].inputSchema["properties"]["limit"]
    assert limit["default"] == 100
    assert limit["maximum"] == 1000


async def test_get_team(upstream) -> None:
    rec = upstream({
        "team": 254,
        "name": "The Cheesy Poofs",
        "country": "USA",
        "state": "CA",
        "rookie_year": 1999,
        "active": True,
        "record": {"wins": 10, "losses": 2, "ties": 0, "count": 12, "winrate": 0.8333},
        "norm_epa": {"current": 1850.5, "recent": 1800, "mean": 1700.25, "max": 2000},
    })
    text = await call(rec, "get-team", {"team": 254})
    assert rec.urls == ["https://api.statbotics.io/v3/team/254"]
    assert text.splitlines()[0] == "Team 254: The Cheesy Poofs"
    assert "Record: 10-2-0 (Games: 12, Winrate: 83.3%)" in text


async def test_get_matches_defaults_and_empty_result(upstream) -> None:
    rec = upstream([])
    text = await call(rec, "get-matches", {})
    assert rec.urls == ["https://api.statbotics.io/v3/matches?limit=1000&offset=0"]
    assert text == "No matches found."


async def test_get_event_with_null_epa(upstream) -> None:
    rec = upstream({
        "key": "2024casf",
        "name": "San Francisco Regional",
        "year": 2024,
        "epa": {"mean": None, "sd": None, "max": None, "top_8": None, "top_24": None},
        "metrics": {},
    })
    text = await call(rec, "get-event", {"event": "2024casf"})
    assert "Mean EPA: N/A" in text.splitlines()


async def test_get_match_not_yet_played(upstream) -> None:
    rec = upstream({
        "key": "2024casf_qm80",
        "event": "2024casf",
        "alliances": {"red": {"team_keys": [254]}, "blue": {"team_keys": [1678]}},
        "pred": {"winner": "red", "red_win_prob": 0.6},
        "result": {"winner": ""},
    })
    text = await call(rec, "get-match", {"match": "2024casf_qm80"})
    assert "⏳ Match has not been played yet" in text
    assert "ACTUAL RESULTS" not in text


async def test_filters_reach_the_query_string(upstream) -> None:
    rec = upstream([])
    await call(rec, "get-team-events", {"team": 254, "year": 2024, "type": "regional", "limit": 5, "offset": 10})
    assert rec.urls == [
        "https://api.statbotics.io/v3/team_events?team=254&year=2024&type=regional&limit=5&offset=10"
    ]


async def test_boolean_filters_are_lowercase(upstream) -> None:
    rec = upstream([])
    await call(rec, "get-matches", {"event": "2024casf", "elim": True, "ascending": False})
    assert rec.urls == [
        "https://api.statbotics.io/v3/matches?event=2024casf&elim=true&ascending=false&limit=1000&offset=0"
    ]


@pytest.mark.parametrize(
    "tool, args, sentence",
    [
        ("get-team", {"team": 254}, "Failed to retrieve data for team 254"),
        ("get-team-year", {"team": 254, "year": 2024}, "Failed to retrieve data for team 254 in year 2024"),
        ("get-event", {"event": "2024casf"}, "Failed to retrieve data for event 2024casf"),
        ("get-year-stats", {"year": 2024}, "Failed to retrieve data for year 2024"),
        ("get-team-event", {"team": 254, "event": "2024casf"},
         "Failed to retrieve data for team 254 at event 2024casf"),
        ("get-match", {"match": "2024casf_f1m1"}, "Failed to retrieve data for match 2024casf_f1m1"),
        ("get-team-match", {"team": 254, "match": "2024casf_f1m1"},
         "Failed to retrieve data for team 254 in match 2024casf_f1m1"),
        ("get-teams", {}, "Failed to retrieve teams data"),
        ("get-years", {}, "Failed to retrieve years data"),
        ("get-team-years", {}, "Failed to retrieve team years data"),
        ("get-events", {}, "Failed to retrieve events data"),
        ("get-team-events", {}, "Failed to retrieve team events data"),
        ("get-matches", {}, "Failed to retrieve matches data"),
        ("get-team-matches", {}, "Failed to retrieve team matches data"),
    ],
)
async def test_upstream_failure_sentence(upstream, tool, args, sentence) -> None:
    assert await call(upstream({"detail": "error"}, status=500), tool, args) == sentence


async def test_list_tool_rejects_object_payload(upstream) -> None:
    assert await call(upstream({"team": 254}), "get-teams", {}) == "Failed to retrieve teams data"


@pytest.mark.parametrize(
    "tool, args",
    [
        ("get-teams", {"limit": 0}),
        ("get-teams", {"limit": 1001}),
        ("get-events", {"offset": -1}),
        ("get-events", {"week": 9}),
        ("get-team-years", {"year": 2001}),
        ("get-matches", {"team": -5}),
        ("get-teams", {"district": "xyz"}),
        ("get-teams", {"metric": "nonsense"}),
    ],
)
async def test_out_of_range_arguments_are_rejected(upstream, tool, args) -> None:
    rec = upstream([])
    with pytest.raises(ToolError):
        await call(rec, tool, args)
    assert rec.requests == []


async def test_run_tool_formats_payload(upstream) -> None:
    rec = upstream({"team": 254})
    client = rec.client()
    text = await run_tool(
        client, "get-team", client.url("team/{team}", ids={"team": 254}),
        lambda data: f"team={data['team']}", "failed",
    )
    assert text == "team=254"


async def test_run_tool_formatter_error_yields_failure(upstream) -> None:
    rec = upstream({"team": 254})
    client = rec.client()
    text = await run_tool(
        client, "get-team", client.url("team/{team}", ids={"team": 254}),
        lambda data: data["missing"], "Failed to retrieve data for team 254",
    )
    assert text == "Failed to retrieve data for team 254"


async def test_unbuildable_url_yields_failure_sentence(upstream) -> None:
    rec = upstream({"key": "2024casf"})
    text = await call(rec, "get-event", {"event": "x" * 70000})
    assert text == "Failed to retrieve data for event " + "x" * 70000
    assert rec.requests == []


async def test_out_of_range_time_still_renders_match(upstream) -> None:
    rec = upstream({
        "key": "2024casf_qm1",
        "event": "2024casf",
        "time": 1e20,
        "result": {"winner": ""},
    })
    text = await call(rec, "get-match", {"match": "2024casf_qm1"})
    assert text.startswith("=== 2024casf_qm1 (2024casf_qm1) ===")
    assert "Time:" not in text

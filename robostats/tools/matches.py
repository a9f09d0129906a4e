"""Match tools — full matches and single-team contributions."""
from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from pydantic import Field

from ..formatters.match import format_match, format_matches_list
from ..formatters.team_match import format_team_match, format_team_matches_list
from ..services import query
from ..services.statbotics_client import StatboticsClient
from .base import (
    Ascending,
    ElimFilter,
    EventFilter,
    Limit,
    MatchFilter,
    MatchKey,
    Offset,
    TeamFilter,
    TeamNumber,
    WeekFilter,
    YearFilter,
    run_tool,
)

MatchesMetric = Literal[
    "key", "year", "event", "week", "comp_level", "set_number", "match_number",
    "time", "predicted_time", "status", "red_score", "blue_score",
    "red_rp_1", "blue_rp_1", "red_rp_2", "blue_rp_2",
    "winner", "red_no_foul", "blue_no_foul",
]
TeamMatchesMetric = Literal[
    "team", "match", "year", "event", "week", "alliance", "time", "status", "epa",
]


def register(mcp: FastMCP, client: StatboticsClient) -> None:

    @mcp.tool(name="get-match")
    async def get_match(match: MatchKey) -> str:
        """Get Statbotics match statistics by match key"""
        return await run_tool(
            client, "get-match",
            client.url(query.MATCH, ids={"match": match}),
            format_match,
            f"Failed to retrieve data for match {match}",
            params={"match": match},
        )

    @mcp.tool(name="get-matches")
    async def get_matches(
        team: TeamFilter = None,
        year: YearFilter = None,
        event: EventFilter = None,
        week: WeekFilter = None,
        elim: ElimFilter = None,
        metric: Annotated[Optional[MatchesMetric], Field(description="How to sort the returned values")] = None,
        ascending: Ascending = None,
        limit: Limit = query.DEFAULT_LIMITS[query.MATCHES],
        offset: Offset = 0,
    ) -> str:
        """Query multiple matches with optional filters.

        Returns up to 1000 matches by default.
        """
        filters = {
            "team": team, "year": year, "event": event, "week": week, "elim": elim,
            "metric": metric, "ascending": ascending,
        }
        return await run_tool(
            client, "get-matches",
            client.url(query.MATCHES, filters=filters, limit=limit, offset=offset),
            format_matches_list,
            "Failed to retrieve matches data",
            expect=list,
            params={**filters, "limit": limit, "offset": offset},
        )

    @mcp.tool(name="get-team-match")
    async def get_team_match(team: TeamNumber, match: MatchKey) -> str:
        """Get a team's EPA contribution in a specific match"""
        return await run_tool(
            client, "get-team-match",
            client.url(query.TEAM_MATCH, ids={"team": team, "match": match}),
            format_team_match,
            f"Failed to retrieve data for team {team} in match {match}",
            params={"team": team, "match": match},
        )

    @mcp.tool(name="get-team-matches")
    async def get_team_matches(
        team: TeamFilter = None,
        year: YearFilter = None,
        event: EventFilter = None,
        week: WeekFilter = None,
        match: MatchFilter = None,
        elim: ElimFilter = None,
        metric: Annotated[Optional[TeamMatchesMetric], Field(description="How to sort the returned values")] = None,
        ascending: Ascending = None,
        limit: Limit = query.DEFAULT_LIMITS[query.TEAM_MATCHES],
        offset: Offset = 0,
    ) -> str:
        """Query multiple team matches with optional filters.

        Returns up to 50 team matches by default (max 1000).
        """
        filters = {
            "team": team, "year": year, "event": event, "week": week, "match": match,
            "elim": elim, "metric": metric, "ascending": ascending,
        }
        return await run_tool(
            client, "get-team-matches",
            client.url(query.TEAM_MATCHES, filters=filters, limit=limit, offset=offset),
            format_team_matches_list,
            "Failed to retrieve team matches data",
            expect=list,
            params={**filters, "limit": limit, "offset": offset},
        )

"""Team tools — all-time team stats and per-season team stats."""
from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from pydantic import Field

from ..formatters.team import format_team, format_teams_list
from ..formatters.team_year import format_team_year, format_team_years_list
from ..services import query
from ..services.statbotics_client import StatboticsClient
from .base import (
    Ascending,
    CountryFilter,
    DistrictFilter,
    Limit,
    Offset,
    StateFilter,
    TeamFilter,
    TeamNumber,
    Year,
    YearFilter,
    run_tool,
)

TeamsMetric = Literal[
    "norm_epa", "rookie_year", "wins", "losses", "ties", "winrate", "team", "name", "count",
]
TeamYearsMetric = Literal[
    "team", "year", "wins", "losses", "ties", "winrate", "norm_epa", "rookie_year", "count",
]


def register(mcp: FastMCP, client: StatboticsClient) -> None:

    @mcp.tool(name="get-team")
    async def get_team(team: TeamNumber) -> str:
        """Get Statbotics team statistics by team number"""
        return await run_tool(
            client, "get-team",
            client.url(query.TEAM, ids={"team": team}),
            format_team,
            f"Failed to retrieve data for team {team}",
            params={"team": team},
        )

    @mcp.tool(name="get-team-year")
    async def get_team_year(team: TeamNumber, year: Year) -> str:
        """Get Statbotics team performance statistics for a specific year"""
        return await run_tool(
            client, "get-team-year",
            client.url(query.TEAM_YEAR, ids={"team": team, "year": year}),
            format_team_year,
            f"Failed to retrieve data for team {team} in year {year}",
            params={"team": team, "year": year},
        )

    @mcp.tool(name="get-teams")
    async def get_teams(
        country: CountryFilter = None,
        state: StateFilter = None,
        district: DistrictFilter = None,
        active: Annotated[Optional[bool], Field(description="Whether the team has played in the last year")] = None,
        metric: Annotated[Optional[TeamsMetric], Field(description="How to sort the returned values")] = None,
        ascending: Ascending = None,
        limit: Limit = query.DEFAULT_LIMITS[query.TEAMS],
        offset: Offset = 0,
    ) -> str:
        """Get a list of teams and their general statistics based on optional filters.

        Returns up to 100 teams by default (max 1000).
        """
        filters = {
            "country": country, "state": state, "district": district, "active": active,
            "metric": metric, "ascending": ascending,
        }
        return await run_tool(
            client, "get-teams",
            client.url(query.TEAMS, filters=filters, limit=limit, offset=offset),
            format_teams_list,
            "Failed to retrieve teams data",
            expect=list,
            params={**filters, "limit": limit, "offset": offset},
        )

    @mcp.tool(name="get-team-years")
    async def get_team_years(
        team: TeamFilter = None,
        year: YearFilter = None,
        country: CountryFilter = None,
        state: StateFilter = None,
        district: DistrictFilter = None,
        metric: Annotated[
            Optional[TeamYearsMetric],
            Field(description="How to sort the returned values. Any column in the table is valid"),
        ] = None,
        ascending: Ascending = None,
        limit: Limit = query.DEFAULT_LIMITS[query.TEAM_YEARS],
        offset: Offset = 0,
    ) -> str:
        """Query multiple years of a team's statistics with optional filters.

        Returns up to 1000 team years by default.
        """
        filters = {
            "team": team, "year": year, "country": country, "state": state,
            "district": district, "metric": metric, "ascending": ascending,
        }
        return await run_tool(
            client, "get-team-years",
            client.url(query.TEAM_YEARS, filters=filters, limit=limit, offset=offset),
            format_team_years_list,
            "Failed to retrieve team years data",
            expect=list,
            params={**filters, "limit": limit, "offset": offset},
        )

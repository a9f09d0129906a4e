"""Event tools — events and a team's results at them."""
from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from pydantic import Field

from ..formatters.event import format_event, format_events_list
from ..formatters.team_event import format_team_event, format_team_events_list
from ..services import query
from ..services.statbotics_client import StatboticsClient
from .base import (
    Ascending,
    CountryFilter,
    DistrictFilter,
    EventFilter,
    EventKey,
    Limit,
    Offset,
    StateFilter,
    TeamFilter,
    TeamNumber,
    WeekFilter,
    YearFilter,
    run_tool,
)

EventType = Literal["regional", "district", "district_cmp"]
TeamEventType = Literal["regional", "district", "district_cmp", "cmp_division", "cmp_finals"]

EventsMetric = Literal[
    "year", "week", "name", "key", "type", "country", "state", "num_teams",
    "qual_matches", "start_date", "end_date", "status",
]
TeamEventsMetric = Literal[
    "team", "year", "event", "week", "type", "country", "state",
    "wins", "losses", "ties", "winrate", "norm_epa", "rank", "rps",
]


def register(mcp: FastMCP, client: StatboticsClient) -> None:

    @mcp.tool(name="get-event")
    async def get_event(event: EventKey) -> str:
        """Get Statbotics event statistics by event key"""
        return await run_tool(
            client, "get-event",
            client.url(query.EVENT, ids={"event": event}),
            format_event,
            f"Failed to retrieve data for event {event}",
            params={"event": event},
        )

    @mcp.tool(name="get-events")
    async def get_events(
        year: YearFilter = None,
        country: CountryFilter = None,
        state: StateFilter = None,
        district: DistrictFilter = None,
        type: Annotated[Optional[EventType], Field(description="Event type")] = None,
        week: WeekFilter = None,
        metric: Annotated[Optional[EventsMetric], Field(description="How to sort the returned values")] = None,
        ascending: Ascending = None,
        limit: Limit = query.DEFAULT_LIMITS[query.EVENTS],
        offset: Offset = 0,
    ) -> str:
        """Query multiple events with optional filters.

        Returns up to 50 events by default (max 1000).
        """
        filters = {
            "year": year, "country": country, "state": state, "district": district,
            "type": type, "week": week, "metric": metric, "ascending": ascending,
        }
        return await run_tool(
            client, "get-events",
            client.url(query.EVENTS, filters=filters, limit=limit, offset=offset),
            format_events_list,
            "Failed to retrieve events data",
            expect=list,
            params={**filters, "limit": limit, "offset": offset},
        )

    @mcp.tool(name="get-team-event")
    async def get_team_event(team: TeamNumber, event: EventKey) -> str:
        """Get a team's performance statistics at a specific event"""
        return await run_tool(
            client, "get-team-event",
            client.url(query.TEAM_EVENT, ids={"team": team, "event": event}),
            format_team_event,
            f"Failed to retrieve data for team {team} at event {event}",
            params={"team": team, "event": event},
        )

    @mcp.tool(name="get-team-events")
    async def get_team_events(
        team: TeamFilter = None,
        year: YearFilter = None,
        event: EventFilter = None,
        country: CountryFilter = None,
        state: StateFilter = None,
        district: DistrictFilter = None,
        type: Annotated[Optional[TeamEventType], Field(description="Event type")] = None,
        week: WeekFilter = None,
        metric: Annotated[Optional[TeamEventsMetric], Field(description="How to sort the returned values")] = None,
        ascending: Ascending = None,
        limit: Limit = query.DEFAULT_LIMITS[query.TEAM_EVENTS],
        offset: Offset = 0,
    ) -> str:
        """Query multiple team events with optional filters.

        Returns up to 50 team events by default (max 1000).
        """
        filters = {
            "team": team, "year": year, "event": event, "country": country, "state": state,
            "district": district, "type": type, "week": week,
            "metric": metric, "ascending": ascending,
        }
        return await run_tool(
            client, "get-team-events",
            client.url(query.TEAM_EVENTS, filters=filters, limit=limit, offset=offset),
            format_team_events_list,
            "Failed to retrieve team events data",
            expect=list,
            params={**filters, "limit": limit, "offset": offset},
        )

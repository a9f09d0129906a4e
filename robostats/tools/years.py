"""Season tools."""
from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from pydantic import Field

from ..formatters.year import format_year_stats, format_years_list
from ..services import query
from ..services.statbotics_client import StatboticsClient
from .base import Ascending, Limit, Offset, Year, run_tool

YearsMetric = Literal["year", "score_mean", "score_sd", "count"]


def register(mcp: FastMCP, client: StatboticsClient) -> None:

    @mcp.tool(name="get-years")
    async def get_years(
        metric: Annotated[Optional[YearsMetric], Field(description="How to sort the returned values")] = None,
        ascending: Ascending = None,
        limit: Limit = query.DEFAULT_LIMITS[query.YEARS],
        offset: Offset = 0,
    ) -> str:
        """Get a list of FRC seasons with scoring statistics and prediction accuracy"""
        filters = {"metric": metric, "ascending": ascending}
        return await run_tool(
            client, "get-years",
            client.url(query.YEARS, filters=filters, limit=limit, offset=offset),
            format_years_list,
            "Failed to retrieve years data",
            expect=list,
            params={**filters, "limit": limit, "offset": offset},
        )

    @mcp.tool(name="get-year-stats")
    async def get_year_stats(year: Year) -> str:
        """Get comprehensive statistics for an FRC season.

        Covers scoring averages, game phase breakdowns, ranking point rates,
        score percentiles and how well the EPA model predicted matches.
        """
        return await run_tool(
            client, "get-year-stats",
            client.url(query.YEAR, ids={"year": year}),
            format_year_stats,
            f"Failed to retrieve data for year {year}",
            params={"year": year},
        )

"""Shared tool plumbing: parameter types and the fetch → format pipeline.

Every tool is the same three steps.  The tool body builds a URL, then
``run_tool`` fetches it and either formats the payload or returns the tool's
fixed failure sentence.
"""
import logging
from typing import Annotated, Any, Callable, Literal, Optional

from pydantic import Field

from ..services.query import MAX_LIMIT
from ..services.statbotics_client import StatboticsClient

logger = logging.getLogger(__name__)

MIN_YEAR = 2002
MAX_YEAR = 2026

# ── Parameter schema building blocks ────────────────────────
District = Literal[
    "fma", "fnc", "fsc", "fit", "fin", "fim", "ne", "chs", "ont", "pnw", "pch", "isr",
]

TeamNumber = Annotated[int, Field(description="Team number (e.g. 254)")]
Year = Annotated[int, Field(description="Competition year (e.g. 2024)")]
EventKey = Annotated[str, Field(description="Event key (e.g. 2024ncwak, 2024casf)")]
MatchKey = Annotated[
    str,
    Field(description="Match key (e.g. 2024casd_f1m1 (finals 1 match 1), "
                      "2024ncwak_qm15 (qual 15), 2019casj_sf1m1 (semifinal 1 match 1))"),
]

TeamFilter = Annotated[Optional[int], Field(ge=0, description="Team number (no prefix), e.g. 5511")]
YearFilter = Annotated[Optional[int], Field(ge=MIN_YEAR, le=MAX_YEAR, description="Four-digit year")]
EventFilter = Annotated[Optional[str], Field(description="Event key, e.g. 2019ncwak")]
MatchFilter = Annotated[Optional[str], Field(description="Match key, e.g. 2019ncwak_f1m1")]
CountryFilter = Annotated[Optional[str], Field(description="Capitalized country name, e.g. USA or Canada")]
StateFilter = Annotated[Optional[str], Field(description="Capitalized two-letter state code, e.g. NC")]
DistrictFilter = Annotated[
    Optional[District],
    Field(description="District code (fma, fnc, fsc, fit, fin, fim, ne, chs, ont, pnw, pch, isr)"),
]
WeekFilter = Annotated[
    Optional[int], Field(ge=0, le=8, description="Week of the competition season. 8 is CMP"),
]
ElimFilter = Annotated[Optional[bool], Field(description="Whether the match is an elimination match")]
Ascending = Annotated[
    Optional[bool],
    Field(description="Whether to sort the returned values in ascending order. Default is ascending"),
]
Limit = Annotated[
    int, Field(ge=1, le=MAX_LIMIT, description=f"Maximum number of results to return (max {MAX_LIMIT})"),
]
Offset = Annotated[int, Field(ge=0, description="Offset from the first result to return (default: 0)")]


def _describe(params: dict[str, Any]) -> str:
    return ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)


async def run_tool(
    client: StatboticsClient,
    tool_name: str,
    url: Optional[str],
    formatter: Callable[[Any], str],
    failure: str,
    *,
    expect: type = dict,
    params: Optional[dict[str, Any]] = None,
) -> str:
    """Fetch *url* and render it with *formatter*.

    Returns *failure* when no URL could be built, when the fetch yields
    nothing, or when the payload is too malformed for the formatter to
    produce even a partial report.
    """
    logger.info("%s called with: %s", tool_name, _describe(params or {}))

    data = await client.fetch(url, expect=expect) if url is not None else None
    if data is None:
        logger.info("%s -> %s", tool_name, failure)
        return failure

    try:
        text = formatter(data)
    except (AttributeError, IndexError, KeyError, TypeError, ValueError):
        logger.exception("%s could not format the response from %s", tool_name, url)
        return failure

    logger.info("%s -> %d chars", tool_name, len(text))
    return text

"""Statbotics v3 endpoint paths and query-string assembly.

Path parameters are embedded as URL segments.  Optional filters only reach the
query string when the caller supplied them; ``limit`` and ``offset`` are always
emitted so identical requests produce identical URLs.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional
from urllib.parse import quote

import httpx

API_VERSION = "v3"
MAX_LIMIT = 1000

# ── Endpoint path templates ─────────────────────────────────
TEAM = "team/{team}"
TEAM_YEAR = "team_year/{team}/{year}"
TEAMS = "teams"
YEAR = "year/{year}"
YEARS = "years"
TEAM_YEARS = "team_years"
EVENT = "event/{event}"
EVENTS = "events"
TEAM_EVENT = "team_event/{team}/{event}"
TEAM_EVENTS = "team_events"
MATCH = "match/{match}"
MATCHES = "matches"
TEAM_MATCH = "team_match/{team}/{match}"
TEAM_MATCHES = "team_matches"

# ── Default page sizes for list endpoints ───────────────────
DEFAULT_LIMITS = {
    TEAMS: 100,
    YEARS: 1000,
    TEAM_YEARS: 1000,
    EVENTS: 50,
    TEAM_EVENTS: 50,
    MATCHES: 1000,
    TEAM_MATCHES: 50,
}


def canonical(value: Any) -> str:
    """Serialize a parameter value the way the API expects it.

    Booleans become ``"true"``/``"false"``; everything else uses ``str()``,
    which gives plain decimal integers.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_path(template: str, **ids: Any) -> str:
    """Fill a path template, percent-encoding each segment."""
    return template.format(**{k: quote(canonical(v), safe="") for k, v in ids.items()})


def build_query(
    filters: Optional[Mapping[str, Any]] = None,
    *,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> dict[str, str]:
    """Return the ordered query parameters for a request.

    Filters whose value is ``None`` (or an empty string) are left out.  When
    *limit* is given, ``limit`` and ``offset`` (default 0) are appended last.
    """
    params: dict[str, str] = {}
    for key, value in (filters or {}).items():
        if value is None or value == "":
            continue
        params[key] = canonical(value)
    if limit is not None:
        params["limit"] = canonical(limit)
        params["offset"] = canonical(offset or 0)
    return params


def build_url(
    base_url: str,
    template: str,
    *,
    ids: Optional[Mapping[str, Any]] = None,
    filters: Optional[Mapping[str, Any]] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> str:
    """Assemble ``{base}/v3/{path}[?{query}]`` as an absolute URL string."""
    path = build_path(template, **(ids or {}))
    url = httpx.URL(f"{base_url.rstrip('/')}/{API_VERSION}/{path}")
    params = build_query(filters, limit=limit, offset=offset)
    if params:
        url = url.copy_merge_params(params)
    return str(url)

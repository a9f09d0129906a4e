"""Statbotics API async client — EPA (Expected Points Added) data.

Uses the public Statbotics REST API v3 (https://api.statbotics.io/docs).
No API key required.  Every call is single-shot: one GET, no retry and no
cache, so two identical requests always reach the network twice.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from ..config import STATBOTICS_API_BASE, STATBOTICS_USER_AGENT
from .query import build_url

logger = logging.getLogger(__name__)


class StatboticsClient:
    """Thin async wrapper around the Statbotics REST API.

    Holds configuration only.  A fresh ``httpx.AsyncClient`` is opened for
    each fetch so nothing is shared between tool invocations.
    """

    def __init__(
        self,
        base_url: str = STATBOTICS_API_BASE,
        user_agent: str = STATBOTICS_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "application/json",
        }
        self._transport = transport

    def url(
        self,
        template: str,
        *,
        ids: Optional[Mapping[str, Any]] = None,
        filters: Optional[Mapping[str, Any]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Optional[str]:
        """Build an absolute request URL against this client's base.

        Returns ``None`` when the arguments cannot form a valid URL (for
        example a key long enough to exceed httpx's URL length limit).
        """
        try:
            return build_url(
                self.base_url, template, ids=ids, filters=filters, limit=limit, offset=offset,
            )
        except httpx.InvalidURL as e:
            logger.warning("Could not build Statbotics URL for %s: %s", template, e)
            return None

    async def fetch(self, url: str, expect: Optional[type] = None) -> Any:
        """GET *url* and return the decoded JSON body, or ``None`` on any failure.

        Connection errors, timeouts, non-2xx statuses and unparseable bodies
        are all treated alike.  When *expect* is given (``dict`` or ``list``)
        a body of any other top-level type is also a failure.
        """
        try:
            async with httpx.AsyncClient(headers=self.headers, transport=self._transport) as http:
                resp = await http.get(url)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Statbotics request failed: HTTP %s for %s", e.response.status_code, url)
            return None
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Statbotics request failed: %s for %s", e.__class__.__name__, url)
            return None
        except ValueError:
            logger.warning("Statbotics response was not valid JSON: %s", url)
            return None

        if expect is not None and not isinstance(data, expect):
            logger.warning(
                "Statbotics response for %s was %s, expected %s",
                url, type(data).__name__, expect.__name__,
            )
            return None
        return data

    async def ping(self) -> bool:
        """Return True if the API root answers with a 2xx status."""
        try:
            async with httpx.AsyncClient(headers=self.headers, transport=self._transport) as http:
                resp = await http.get(f"{self.base_url}/")
                return resp.is_success
        except httpx.HTTPError:
            return False

"""MCP server assembly — one FastMCP instance with all Statbotics tools."""
import logging
import sys
from typing import Optional

from fastmcp import FastMCP

from .config import LOG_LEVEL, MCP_SERVER_NAME
from .services.statbotics_client import StatboticsClient
from .tools import events, matches, teams, years

logger = logging.getLogger(__name__)

# stdout carries the stdio transport, so logs go to stderr
LOG_FORMAT = "%(asctime)s [MCP] %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def register_tools(mcp: FastMCP, client: StatboticsClient) -> None:
    """Attach all fourteen tools to *mcp*, bound to *client*."""
    teams.register(mcp, client)
    years.register(mcp, client)
    events.register(mcp, client)
    matches.register(mcp, client)


def create_server(client: Optional[StatboticsClient] = None) -> FastMCP:
    """Build a FastMCP server.  Tests pass a client with a mock transport."""
    client = client or StatboticsClient()
    mcp = FastMCP(MCP_SERVER_NAME)
    register_tools(mcp, client)
    logger.debug("MCP server %r ready against %s", MCP_SERVER_NAME, client.base_url)
    return mcp

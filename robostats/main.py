"""Robostats — FastAPI application hosting the Statbotics MCP server."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .server import create_server, setup_logging
from .services.statbotics_client import StatboticsClient

setup_logging()

client = StatboticsClient()
mcp = create_server(client)

# ── MCP streamable HTTP transport ───────────────────────────
mcp_app = mcp.http_app(path="/mcp")

# The MCP session manager must run inside the app's lifespan
app = FastAPI(title="Robostats", version="1.0.0", lifespan=mcp_app.lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["mcp-session-id"],
)


@app.get("/api/health")
async def health_check():
    return {"status": "ok"}


@app.get("/api/status")
async def api_status():
    """Check connectivity to the Statbotics API."""
    return {"statbotics": await client.ping()}


# Mounted last so the /api routes above take precedence
app.mount("/", mcp_app)

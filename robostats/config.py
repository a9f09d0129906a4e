# config.py

import os
from dotenv import load_dotenv

load_dotenv()

# Statbotics API Configuration
# The public v3 API needs no key; requests identify themselves with a User-Agent.
STATBOTICS_API_BASE = os.environ.get("STATBOTICS_API_BASE", "https://api.statbotics.io").rstrip("/")
STATBOTICS_USER_AGENT = os.environ.get("STATBOTICS_USER_AGENT", "statbotics-app/1.0")

# MCP server identity, as reported to connecting clients
MCP_SERVER_NAME = os.environ.get("MCP_SERVER_NAME", "robostats")

# HTTP server bind (used by run.py)
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

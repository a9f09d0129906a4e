#!/usr/bin/env python3
"""Start the Robostats MCP server.

    python run.py            # HTTP, MCP endpoint at /mcp
    python run.py --stdio    # stdio transport for desktop MCP clients
"""
import argparse

import uvicorn

from robostats.config import HOST, PORT

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Statbotics MCP server")
    parser.add_argument("--stdio", action="store_true", help="serve MCP over stdin/stdout")
    parser.add_argument("--reload", action="store_true", help="reload on code changes")
    args = parser.parse_args()

    if args.stdio:
        from robostats.server import create_server, setup_logging

        setup_logging()
        create_server().run()
    else:
        uvicorn.run(
            "robostats.main:app",
            host=HOST,
            port=PORT,
            reload=args.reload,
        )

"""SalesRank MCP Server - Main Entry Point."""

import asyncio
import logging
import sys

from mcp.server.stdio import stdio_server

from salesrank.config import settings
from salesrank.intelligence import get_engine
from salesrank.mcp import create_mcp_server

logger = logging.getLogger(__name__)


def configure_logging():
    """Send logs to stderr; stdout carries the MCP transport."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


async def run_mcp_server():
    """Run the MCP server in stdio mode."""
    logger.info(f"Starting SalesRank MCP v{settings.mcp_server_version}")

    # Load calibration up front so bad data fails at startup
    engine = get_engine()
    logger.info(f"Serving {len(engine.categories())} categories")

    server = create_mcp_server()

    async with stdio_server() as streams:
        await server.run(
            streams[0],
            streams[1],
            server.create_initialization_options(),
        )


def main():
    """Main entry point."""
    configure_logging()
    try:
        asyncio.run(run_mcp_server())
    except KeyboardInterrupt:
        print("\nShutting down...", file=sys.stderr)


if __name__ == "__main__":
    main()

"""MCP Server setup for SalesRank."""

import logging

from mcp.server import Server
from mcp.types import Tool, TextContent

from salesrank.config import settings
from .tools import (
    estimate_sales_handler,
    list_categories_handler,
)

logger = logging.getLogger(__name__)

TOOL_HANDLERS = {
    "estimate_sales": estimate_sales_handler,
    "list_categories": list_categories_handler,
}


def create_mcp_server() -> Server:
    """Create and configure the MCP server."""
    server = Server(settings.mcp_server_name)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available MCP tools."""
        return [
            Tool(
                name="estimate_sales",
                description="""Estimate monthly unit sales and revenue from an Amazon Best Seller Rank.

Returns:
- Estimated monthly and daily unit sales (monthly rounded to 30-unit steps)
- Monthly, daily and annual revenue when a price is given
- The calculation method used (interpolation, extrapolation or power_law)

Example: estimate_sales("Electronics", 1500, 29.99)""",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "category": {
                            "type": "string",
                            "description": "Amazon product category (see list_categories)",
                        },
                        "rank": {
                            "type": ["integer", "string"],
                            "description": "Best Seller Rank, e.g. 1500 or \"1,500\"",
                        },
                        "price": {
                            "type": "number",
                            "description": "Product price in USD (optional)",
                        },
                    },
                    "required": ["category", "rank"],
                },
            ),
            Tool(
                name="list_categories",
                description="List the product categories with calibrated BSR data.",
                inputSchema={
                    "type": "object",
                    "properties": {},
                },
            ),
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        """Handle tool calls."""
        handler = TOOL_HANDLERS.get(name)
        if not handler:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]

        try:
            result = await handler(arguments or {})
            return [TextContent(type="text", text=result)]
        except Exception as e:
            logger.exception(f"Tool {name} failed")
            return [TextContent(type="text", text=f"Error: {str(e)}")]

    return server

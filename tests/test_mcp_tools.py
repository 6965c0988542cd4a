"""Tests for the MCP tool handlers."""

import pytest
from mcp.types import CallToolRequest, CallToolRequestParams, ListToolsRequest

from salesrank.mcp import create_mcp_server
from salesrank.mcp.tools import estimate_sales_handler, list_categories_handler


class TestEstimateSalesTool:
    """Tests for estimate_sales against the built-in calibration."""

    @pytest.mark.asyncio
    async def test_estimate_with_price(self):
        result = await estimate_sales_handler(
            {"category": "Electronics", "rank": "1,000", "price": 25}
        )

        # Electronics anchor at BSR 1,000 is 1,650 units/month
        assert "1,650 units/month" in result
        assert "55 units/day" in result
        assert "$41,250" in result
        assert "interpolation" in result

    @pytest.mark.asyncio
    async def test_estimate_without_price(self):
        result = await estimate_sales_handler({"category": "Electronics", "rank": 2_000_000})

        assert "power_law" in result
        assert "Monthly Revenue" not in result

    @pytest.mark.asyncio
    async def test_validation_error(self):
        result = await estimate_sales_handler({"category": "Electronics", "rank": 0})

        assert result.startswith("Error:")
        assert "Best Seller Rank" in result

    @pytest.mark.asyncio
    async def test_missing_category(self):
        result = await estimate_sales_handler({"rank": 100})

        assert result == "Error: Please select a product category."

    @pytest.mark.asyncio
    async def test_unknown_category(self):
        result = await estimate_sales_handler({"category": "Garden Gnomes", "rank": 100})

        assert result.startswith("Error: Unknown category: Garden Gnomes")
        assert "list_categories" in result


class TestListCategoriesTool:
    """Tests for list_categories."""

    @pytest.mark.asyncio
    async def test_lists_builtin_categories(self):
        result = await list_categories_handler({})

        assert "- Electronics" in result
        assert "- Books" in result


async def call_registered_tool(server, name: str, arguments: dict) -> str:
    """Dispatch a tool call through the server's registered request handler."""
    handler = server.request_handlers[CallToolRequest]
    request = CallToolRequest(
        method="tools/call",
        params=CallToolRequestParams(name=name, arguments=arguments),
    )
    result = await handler(request)
    return result.root.content[0].text


class TestMcpServer:
    """Tests for the registered MCP tools."""

    def setup_method(self):
        """Set up test fixtures."""
        self.server = create_mcp_server()

    def test_create_server(self):
        assert self.server.name == "salesrank"
        assert CallToolRequest in self.server.request_handlers
        assert ListToolsRequest in self.server.request_handlers

    @pytest.mark.asyncio
    async def test_list_tools(self):
        handler = self.server.request_handlers[ListToolsRequest]

        result = await handler(ListToolsRequest(method="tools/list"))

        names = {tool.name for tool in result.root.tools}
        assert names == {"estimate_sales", "list_categories"}

    @pytest.mark.asyncio
    async def test_call_estimate_sales(self):
        text = await call_registered_tool(
            self.server, "estimate_sales", {"category": "Electronics", "rank": 1000, "price": 25}
        )

        assert "1,650 units/month" in text
        assert "$41,250" in text

    @pytest.mark.asyncio
    async def test_call_list_categories(self):
        text = await call_registered_tool(self.server, "list_categories", {})

        assert "- Electronics" in text

    @pytest.mark.asyncio
    async def test_call_unknown_tool(self):
        text = await call_registered_tool(self.server, "forecast_demand", {})

        assert text == "Unknown tool: forecast_demand"

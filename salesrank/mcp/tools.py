"""MCP Tool handlers for SalesRank."""

import logging

from salesrank.errors import InvalidInput, UnknownCategory
from salesrank.intelligence import EstimateFormatter, get_engine

logger = logging.getLogger(__name__)


async def estimate_sales_handler(arguments: dict) -> str:
    """Handle estimate_sales tool call."""
    engine = get_engine()
    formatter = EstimateFormatter()

    try:
        output = engine.run(
            arguments.get("category"),
            arguments.get("rank"),
            arguments.get("price"),
        )
    except InvalidInput as e:
        return f"Error: {e.message}"
    except UnknownCategory as e:
        logger.warning(f"estimate_sales called with {e}")
        return f"Error: {e}. Use list_categories to see supported categories."

    return formatter.format_estimate(output)


async def list_categories_handler(arguments: dict) -> str:
    """Handle list_categories tool call."""
    engine = get_engine()
    formatter = EstimateFormatter()
    return formatter.format_categories(engine.categories())

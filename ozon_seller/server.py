"""MCP server for the Ozon Seller API — tool registration."""

from __future__ import annotations

from fastmcp import FastMCP

from .resources import (
    auth as auth_tools,
    prices,
    products,
    stock,
)
from .utils.logging import setup_logging

setup_logging()


def create_mcp_server():
    """Create and configure the FastMCP server with all Ozon tools."""
    mcp = FastMCP("ozon-seller")

    # -- Tools: status ------------------------------------------------------
    mcp.tool()(auth_tools.ozon_status)

    # -- Tools: products ----------------------------------------------------
    mcp.tool()(products.ozon_products)

    # -- Tools: prices ------------------------------------------------------
    mcp.tool()(prices.ozon_prices)
    mcp.tool()(prices.ozon_update_prices)

    # -- Tools: stock -------------------------------------------------------
    mcp.tool()(stock.ozon_update_stock)

    return mcp


# Default server instance for stdio transport
server = create_mcp_server()

"""Stdio transport server for local MCP clients.

Usage:
    python -m ozon_seller.stdio_server

Environment Variables (production):
    OZON_CLIENT_ID - Ozon seller Client-Id
    OZON_API_KEY - Ozon seller Api-Key

Environment Variables (optional):
    OZON_USE_TEST_API - switch to the test API profile
    OZON_TEST_CLIENT_ID / OZON_TEST_API_KEY / OZON_TEST_BASE_URL - test profile
    OZON_LOG_LEVEL - Logging level (default: INFO)
    OZON_LOG_FILE - Log file path with rotation
"""

from .server import server


def main():
    """Run the MCP server using stdio transport."""
    server.run(transport="stdio")


if __name__ == "__main__":
    main()

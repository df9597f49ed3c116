"""MCP server, tool registry and tool implementations."""

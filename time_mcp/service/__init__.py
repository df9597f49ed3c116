"""HTTP host for the MCP transport and the JSON tool routes."""

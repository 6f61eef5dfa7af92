"""MCP tools for flight plan files."""

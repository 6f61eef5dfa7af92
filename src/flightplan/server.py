"""FastMCP server for flight plan conversion."""

from mcp.server.fastmcp import FastMCP

from flightplan.tools import convert, plan

# Create FastMCP server
mcp = FastMCP("flightplan-mcp")


# Register tools from modules
plan.register(mcp)
convert.register(mcp)


def main():
    """Run the MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()

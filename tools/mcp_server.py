# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the MCP tools an agent can call to pull Statistics Canada data.
#   Each tool is a thin wrapper around a core/retrieval.py handler.  It
#   validates input, logs the call, and turns the handler's ToolReply into
#   an MCP result (text summary + structured Table payload).
#
# THE TOOLS:
#   - browse_catalogue  → list the 8 curated datasets (no network)
#   - get_statcan_data  → data for a catalogue topic (live, else sample)
#   - search_statcan    → data for any table ID (live only)
#   All tools are read-only and idempotent.
#
# INPUT VALIDATION:
#   `topic` is a Literal and `max_rows` carries ge/le bounds, so FastMCP
#   (via pydantic) rejects an unknown topic or a row count outside 5..50
#   BEFORE our code runs.  The handlers never see bad input from here.
#
# RUNNING THIS SERVER:
#   a) stdio (what the console agent uses):  python -m tools.mcp_server
#   b) HTTP for hosted clients:              MCP_TRANSPORT=http python -m tools.mcp_server
#      Serves the MCP endpoint at /mcp, a health check at /, and answers
#      CORS preflights.  Stateless mode: every request gets a fresh session,
#      so nothing leaks between callers.
# =============================================================================

import json
import logging
import os
import sys
from pathlib import Path
from typing import Annotated, Literal

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from core.models import ToolReply
from core.retrieval import browse_catalogue as _browse_catalogue
from core.retrieval import get_table_data, get_topic_data

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because in stdio mode the MCP server talks to the agent
# over STDOUT.  Logging to stdout would corrupt the JSON-RPC stream.
#
#   - CYAN for incoming requests (tool name + parameters)
#   - GREEN for response JSON
#   - YELLOW for intermediate status/progress messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


def _to_result(tool_name: str, reply: ToolReply) -> ToolResult:
    """Turn a handler reply into text content + structured Table content."""
    _log_status(reply.summary)
    payload = _log_response(tool_name, reply.table.to_dict())
    return ToolResult(content=reply.summary, structured_content=payload)


# =============================================================================
# Constants shared with the hosting layer
# =============================================================================
MCP_PATH = "/mcp"
WIDGET_URI = "ui://widget/statcan-table.html"
WIDGET_HTML = (Path(__file__).parent / "static" / "statcan-widget.html").read_text(encoding="utf-8")

# Must match core.catalogue.TOPICS (tests/test_mcp_server.py checks this).
Topic = Literal["population", "labour", "cpi", "gdp", "housing", "trade", "crime", "education"]

mcp = FastMCP("statcan-agent")


# =============================================================================
# RESOURCE: the table widget
# =============================================================================
# Chat clients that support HTML widgets render tool results with this page.
# It has nothing to do with the data logic; it just draws a Table.
# =============================================================================
@mcp.resource(
    WIDGET_URI,
    name="statcan-widget",
    mime_type="text/html+skybridge",
    meta={"openai/widgetPrefersBorder": True},
)
def statcan_widget() -> str:
    """HTML widget that renders a Statistics Canada table."""
    return WIDGET_HTML


# =============================================================================
# TOOL 1: browse_catalogue
# =============================================================================
@mcp.tool()
def browse_catalogue() -> ToolResult:
    """Use this when the user wants to see what Statistics Canada datasets are
    available, or wants to explore topics like population, labour, prices,
    housing, GDP, trade, crime, or education.

    Returns:
        A table with one row per dataset: theme, title, table ID, description.
        The summary text lists the topic keys accepted by get_statcan_data.
    """
    _log_request("browse_catalogue")
    return _to_result("browse_catalogue", _browse_catalogue())


# =============================================================================
# TOOL 2: get_statcan_data
# =============================================================================
# If the live WDS call fails the tool still answers, with a sample table.
# The table's title and notes tell the agent which one it got.
# =============================================================================
@mcp.tool()
def get_statcan_data(
    topic: Annotated[Topic, Field(description="The statistical topic to retrieve")],
    max_rows: Annotated[int, Field(ge=5, le=50, description="Max rows to return")] = 15,
) -> ToolResult:
    """Use this when the user asks for specific Canadian statistics or data.
    Retrieves and displays data tables from Statistics Canada for topics like
    population, labour force, CPI/inflation, housing starts, GDP, or trade.

    Args:
        topic: One of population, labour, cpi, gdp, housing, trade, crime, education.
        max_rows: Maximum number of rows to return (5-50, default 15).

    Returns:
        A table with title, source, columns, rows and notes (reference period,
        table ID, geography when known).
    """
    _log_request("get_statcan_data", topic=topic, max_rows=max_rows)
    return _to_result("get_statcan_data", get_topic_data(topic, max_rows))


# =============================================================================
# TOOL 3: search_statcan
# =============================================================================
@mcp.tool()
def search_statcan(
    table_id: Annotated[str, Field(description="Statistics Canada table ID, e.g. 17-10-0005-01")],
    max_rows: Annotated[int, Field(ge=5, le=50, description="Max rows to return")] = 20,
) -> ToolResult:
    """Use this when the user provides a specific Statistics Canada table ID
    (e.g. 17-10-0005-01) and wants to retrieve its data directly.

    Args:
        table_id: The StatCan table ID.
        max_rows: Maximum number of rows to return (5-50, default 20).

    Returns:
        The table's leading rows.  If StatCan can't be reached the table comes
        back empty and the summary says the table could not be retrieved.
    """
    _log_request("search_statcan", table_id=table_id, max_rows=max_rows)
    return _to_result("search_statcan", get_table_data(table_id, max_rows))


# =============================================================================
# HTTP hosting: health check + CORS
# =============================================================================
@mcp.custom_route("/", methods=["GET"])
async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def create_http_app():
    """Build the Starlette app for the streamable HTTP transport."""
    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["POST", "GET", "DELETE", "OPTIONS"],
            allow_headers=["content-type", "mcp-session-id"],
            expose_headers=["Mcp-Session-Id"],
        ),
    ]
    return mcp.http_app(
        path=MCP_PATH,
        middleware=middleware,
        stateless_http=True,
        json_response=True,
    )


def run_http() -> None:
    """Serve over HTTP on $HOST:$PORT (default 0.0.0.0:8787)."""
    import uvicorn

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8787"))
    logging.info(f"Statistics Canada agent running at http://localhost:{port}{MCP_PATH}")
    logging.info("Topics: population, labour, cpi, housing, gdp, trade, crime, education")
    uvicorn.run(create_http_app(), host=host, port=port)


# =============================================================================
# Server entry point
# =============================================================================
# stdio by default, so the console agent can spawn this file directly.
# =============================================================================
if __name__ == "__main__":
    load_dotenv()
    if os.environ.get("MCP_TRANSPORT", "stdio").lower() == "http":
        run_http()
    else:
        mcp.run()

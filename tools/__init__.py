# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP clients and core/.  It:
#     1. Declares the tool contracts (names, typed + bounded parameters,
#        docstrings the calling LLM reads to decide WHEN to call a tool)
#     2. Calls the matching core/retrieval.py handler
#     3. Serializes the Table (dataclass → dict) as structured content
#     4. Hosts the HTTP surface: /mcp, the / health check, CORS, the widget
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT fetch or reshape data (that's in core/)
#   - They do NOT know about Google ADK (any MCP client can call them)
# =============================================================================

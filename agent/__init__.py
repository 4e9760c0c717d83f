# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK console agent.
#
# ARCHITECTURAL ROLE:
#   The agent is one possible MCP client for tools/mcp_server.py.  It:
#     1. Receives a question ("How fast is Alberta growing?")
#     2. Decides which StatCan tool answers it
#     3. Calls the tool over MCP (stdio)
#     4. Explains the returned table in plain language
#
# The agent holds no data logic.  Hosted chat clients can skip it entirely
# and talk to the HTTP server instead.
# =============================================================================

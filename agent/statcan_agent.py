# =============================================================================
# agent/statcan_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures and creates the Google ADK agent, the coordinator that
#   receives user questions, calls the StatCan MCP tools, and explains the
#   tables it gets back.
#
# ADK + LITELLM:
#   Google ADK is the agent framework (orchestration, tool calling, sessions).
#   The LLM is whatever LiteLlm model string STATCAN_AGENT_MODEL names;
#   the default routes GPT-4o through OpenRouter, which reads
#   OPENROUTER_API_KEY from the environment.
#
# MCP CONNECTION:
#   The agent spawns tools/mcp_server.py as a subprocess and talks to it
#   over stdio.  The server defaults to stdio transport, so no extra
#   environment is needed for the child process.
#
#   ┌──────────────────────┐   stdio/MCP   ┌──────────────────────────┐
#   │  ADK Agent (LiteLlm) │ ────────────▶ │  tools/mcp_server.py     │
#   └──────────────────────┘               │  browse_catalogue        │
#                                          │  get_statcan_data        │
#                                          │  search_statcan          │
#                                          └────────────┬─────────────┘
#                                                       ▼
#                                          core/ → StatCan WDS API
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_statcan_advisor_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent() -> Agent:
    """Create and configure the Statistics Canada data agent.

    Returns:
        A configured Google ADK Agent instance.
    """

    # =========================================================================
    # Step 1: Configure the MCP tool connection
    # =========================================================================
    # "uv run" makes the subprocess use the project's .venv, so fastmcp and
    # core/ are importable without activating anything by hand.
    # =========================================================================
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=project_root,
        ),
    )

    # =========================================================================
    # Step 2: Create the ADK Agent
    # =========================================================================
    model = os.environ.get("STATCAN_AGENT_MODEL", DEFAULT_MODEL)

    return Agent(
        name="statcan_data_agent",
        model=LiteLlm(model=model),
        instruction=get_statcan_advisor_prompt(),
        tools=[mcp_tools],
    )

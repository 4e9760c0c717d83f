# =============================================================================
# main.py  —  Console entry point for the Statistics Canada data agent
# =============================================================================
#
#   uv run python main.py                                  # console agent
#   MCP_TRANSPORT=http uv run python -m tools.mcp_server   # hosted MCP server
#
# Each question goes to the ADK runner; tool calls are echoed as they happen
# and the last text part of the turn is printed as the answer.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads OPENROUTER_API_KEY when the agent is built, so .env must be
# loaded first.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.statcan_agent import create_agent

APP_NAME = "statcan_agent"
USER_ID = "console_user"
EXIT_WORDS = {"quit", "exit", "q"}


async def ask(runner: Runner, session_id: str, question: str) -> str:
    """Send one question and return the agent's final text ("" if none)."""
    message = types.Content(role="user", parts=[types.Part(text=question)])
    answer = ""
    async for event in runner.run_async(user_id=USER_ID, session_id=session_id, new_message=message):
        for part in (event.content.parts if event.content else None) or []:
            if part.function_call:
                print(f"  [tool] {part.function_call.name}")
            if part.text:
                answer = part.text
    return answer


async def run_agent():
    sessions = InMemorySessionService()
    runner = Runner(agent=create_agent(), app_name=APP_NAME, session_service=sessions)
    session = await sessions.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("Statistics Canada data agent. Ask about population, jobs, prices, housing...")
    print("Type 'quit' to exit.")

    while True:
        try:
            question = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if question.lower() in EXIT_WORDS:
            break
        if question:
            print(await ask(runner, session.id, question) or "(no response; see the server log)")


if __name__ == "__main__":
    asyncio.run(run_agent())

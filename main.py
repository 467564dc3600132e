# =============================================================================
# main.py  —  Interactive Console for the Logistics Desk Agent (demo host)
# =============================================================================
#
# HOW TO RUN:
#   python main.py          (or: hvdc-logistics-agent)
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/logistics_agent.py), which spawns
#      the logistics MCP server as a stdio subprocess
#   2. Sets up an in-memory session
#   3. Sends each question you type to the agent
#   4. Prints every tool the agent calls, then its final answer
#
# The MCP server can also run on its own without this console:
#   python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load environment variables (OPENROUTER_API_KEY, LOGISTICS__*) before the
# agent is created; LiteLlm reads the API key when it initializes.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.logistics_agent import create_agent

APP_NAME = "hvdc_logistics_desk"
USER_ID = "desk_user"
EXIT_WORDS = ("quit", "exit", "q")


async def run_agent():
    """Run the logistics desk agent interactively until the user quits."""
    print("=" * 70)
    print("  HVDC LOGISTICS DESK")
    print("  Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about invoices, containers, costs, ETAs or weather windows.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in EXIT_WORDS:
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is working...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


def cli():
    asyncio.run(run_agent())


if __name__ == "__main__":
    cli()

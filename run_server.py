"""
Chat Forms Server Entry Point.

Usage:
    python run_server.py
    python run_server.py --host 127.0.0.1 --port 9110

    # Use environment variables
    CHAT_FORMS_PORT=9110 python run_server.py
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from chat_forms.config import get_config
from chat_forms.orchestrator import ChatOrchestrator
from chat_forms.server import InMemoryChatStore, SessionStore, create_app, run_server

logger = logging.getLogger("chat-forms.server")


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="Chat Forms Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_server.py --port 9110
  python run_server.py --user demo

Environment Variables:
  CHAT_FORMS_HOST       Host to bind to (default: 0.0.0.0)
  CHAT_FORMS_PORT       Port to listen on (default: 9110)
  CHAT_FORMS_LOG_LEVEL  Log level (default: INFO)
  OPENAI_API_KEY        OpenAI API key for the chat model
  OPENAI_MODEL          Chat model name
        """,
    )

    parser.add_argument(
        "--host",
        default=config.server_host,
        help=f"Host to bind to (default: {config.server_host})",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=config.server_port,
        help=f"Port to listen on (default: {config.server_port})",
    )

    parser.add_argument(
        "--user",
        default="local",
        help="User id to open a session for (default: local)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = InMemoryChatStore()
    sessions = SessionStore()
    token = sessions.create(args.user)
    app = create_app(ChatOrchestrator(store), store, sessions)

    logger.info("Model: %s", config.default_model)

    print("=" * 60)
    print("Chat Forms Server")
    print("=" * 60)
    print(f"Listening on: http://{args.host}:{args.port}")
    print(f"Session token for '{args.user}': {token}")
    print("=" * 60)

    try:
        asyncio.run(run_server(app, host=args.host, port=args.port))
    except KeyboardInterrupt:
        logger.info("Server stopped.")


if __name__ == "__main__":
    main()

"""
Instagram Tools Server - Main Entry Point

Serves the Instagram messaging tools over stdio JSON-RPC (MCP).

Usage:
    uv run python main.py                   # Serve on stdin/stdout
    uv run python main.py --list-tools      # Print tool definitions and exit
    uv run python main.py --check-config    # Log configuration and mode, then exit
    uv run python main.py --log-level DEBUG # Override LOG_LEVEL
"""

import sys
import json
import argparse
import logging

from dotenv import load_dotenv

from mcp_servers.instagram_server import InstagramMCPServer, build_dispatcher, configure_logging

logger = logging.getLogger("InstagramTools")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Instagram messaging tools over MCP")
    parser.add_argument(
        "--list-tools", action="store_true",
        help="Print the tool definitions as JSON and exit"
    )
    parser.add_argument(
        "--check-config", action="store_true",
        help="Log the loaded configuration and selected mode, then exit"
    )
    parser.add_argument(
        "--log-level", type=str, default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override LOG_LEVEL (default INFO)"
    )
    args = parser.parse_args(argv)

    load_dotenv(override=True)
    configure_logging(args.log_level)

    dispatcher = build_dispatcher()
    try:
        if args.list_tools:
            print(json.dumps({"tools": dispatcher.list_tools()}, indent=2, ensure_ascii=False))
            return

        if args.check_config:
            mode = "simulation" if dispatcher.client.simulated else "live"
            logger.info(f"Configuration OK. Mode: {mode}")
            return

        InstagramMCPServer(dispatcher).serve(sys.stdin, sys.stdout)
    finally:
        dispatcher.client.close()


if __name__ == "__main__":
    main()

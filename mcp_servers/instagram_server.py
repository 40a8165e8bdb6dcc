"""
Instagram MCP Server - Exposes Instagram messaging tools via stdin/stdout JSON-RPC.

Tools:
    - send_dm: Send a direct message (text, link and/or media)
    - send_image: Send an image or GIF, with an optional caption
    - send_media: Send audio or video, with an optional caption
    - send_sticker: Send a heart sticker
    - share_post: Share an Instagram post

Without INSTAGRAM_USER_ID / INSTAGRAM_ACCESS_TOKEN every call is simulated.

Usage:
    python -m mcp_servers.instagram_server

Register it as a stdio server in your MCP client configuration.
"""

import os
import sys
import json
import logging

from dotenv import load_dotenv

from skills.instagram_client import create_client
from skills.instagram_config import load_config, log_config
from skills.instagram_tools import ToolDispatcher

logger = logging.getLogger("InstagramMCPServer")

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "instagram-tools-server"
SERVER_VERSION = "1.0.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601

# Older clients call listTools/callTool instead of tools/*.
METHOD_ALIASES = {
    "listTools": "tools/list",
    "callTool": "tools/call",
}


def _error(req_id, code: int, message: str) -> dict:
    return {"jsonrpc": "2.0", "id": req_id, "error": {"code": code, "message": message}}


def _result(req_id, result: dict) -> dict:
    return {"jsonrpc": "2.0", "id": req_id, "result": result}


class InstagramMCPServer:
    """Line-delimited JSON-RPC front end for a ToolDispatcher."""

    def __init__(self, dispatcher: ToolDispatcher):
        self.dispatcher = dispatcher

    def handle_request(self, request) -> dict | None:
        if not isinstance(request, dict):
            return _error(None, INVALID_REQUEST, "Invalid Request")

        req_id = request.get("id")
        method = request.get("method", "")
        if not isinstance(method, str):
            return _error(req_id, INVALID_REQUEST, "Invalid Request: method must be a string")
        params = request.get("params") or {}
        method = METHOD_ALIASES.get(method, method)
        is_notification = "id" not in request

        if method == "initialize":
            response = _result(req_id, {
                "protocolVersion": PROTOCOL_VERSION,
                "capabilities": {"tools": {}},
                "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
            })
        elif method.startswith("notifications/"):
            if is_notification:
                return None
            response = _result(req_id, {})
        elif method == "ping":
            response = _result(req_id, {})
        elif method == "tools/list":
            logger.info("Tool list requested by client")
            response = _result(req_id, {"tools": self.dispatcher.list_tools()})
        elif method == "tools/call":
            if not isinstance(params, dict):
                return _error(req_id, INVALID_REQUEST, "Invalid Request: params must be an object")
            tool_name = params.get("name", "")
            if not isinstance(tool_name, str):
                return _error(req_id, INVALID_REQUEST, "Invalid Request: params.name must be a string")
            logger.info(f"Calling tool {tool_name}")
            result = self.dispatcher.call_tool(tool_name, params.get("arguments"))
            response = _result(req_id, result.to_dict())
        else:
            response = _error(req_id, METHOD_NOT_FOUND, f"Method not found: {method}")

        return None if is_notification else response

    def handle_line(self, line: str) -> dict | None:
        line = line.strip()
        if not line:
            return None
        try:
            request = json.loads(line)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON: {e}")
            return _error(None, PARSE_ERROR, "Parse error")
        return self.handle_request(request)

    def serve(self, stdin=None, stdout=None):
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        logger.info("Instagram MCP Server running on stdio")
        for line in stdin:
            response = self.handle_line(line)
            if response is not None:
                stdout.write(json.dumps(response, ensure_ascii=False) + "\n")
                stdout.flush()
        logger.info("Instagram MCP Server stopped.")


def configure_logging(level: str | None = None):
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL") or "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,  # Log to stderr so stdout stays clean for JSON-RPC
    )


def build_dispatcher(environ: dict | None = None) -> ToolDispatcher:
    """Load configuration once and wire the matching client into a dispatcher."""
    config = load_config(environ)
    log_config(config)
    return ToolDispatcher(create_client(config))


def main():
    load_dotenv(override=True)
    configure_logging()
    dispatcher = build_dispatcher()
    try:
        InstagramMCPServer(dispatcher).serve()
    finally:
        dispatcher.client.close()


if __name__ == "__main__":
    main()

"""
Instagram tool registry and dispatcher.

TOOL_REGISTRY maps each tool name to its schema, its message builder and the
wording used in error reports. ToolDispatcher runs every call through the same
pipeline:

    validate arguments -> build MessagePlan -> send primary message
                       -> send caption (optional, failures only logged)

and always returns a ToolResult; tool failures never escape as exceptions.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Callable

from skills import message_builder
from skills.instagram_errors import InstagramToolError, ProviderError, UnknownToolError
from skills.message_builder import MessagePlan
from skills.tool_schema import (
    SEND_DM,
    SEND_IMAGE,
    SEND_MEDIA,
    SEND_STICKER,
    SHARE_POST,
    ToolDefinition,
)
from utils.degrade import graceful_degrade

logger = logging.getLogger("InstagramTools")

SIMULATION_PREFIX = "[SIMULATION] "


@dataclass
class ToolResult:
    content: list[dict] = field(default_factory=list)
    is_error: bool = False
    error_code: int | None = None

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(content=[{"type": "text", "text": text}])

    @classmethod
    def failure(cls, text: str, code: int) -> "ToolResult":
        return cls(content=[{"type": "text", "text": text}], is_error=True, error_code=code)

    @property
    def text(self) -> str:
        return "\n".join(block["text"] for block in self.content if block.get("type") == "text")

    def to_dict(self) -> dict:
        return {"content": self.content, "isError": self.is_error}


@dataclass(frozen=True)
class RegisteredTool:
    definition: ToolDefinition
    build: Callable[[dict], MessagePlan]
    action: str


TOOL_REGISTRY = {
    tool.definition.name: tool
    for tool in (
        RegisteredTool(SEND_DM, message_builder.build_send_dm, "sending message"),
        RegisteredTool(SEND_IMAGE, message_builder.build_send_image, "sending image"),
        RegisteredTool(SEND_MEDIA, message_builder.build_send_media, "sending media"),
        RegisteredTool(SEND_STICKER, message_builder.build_send_sticker, "sending sticker"),
        RegisteredTool(SHARE_POST, message_builder.build_share_post, "sharing post"),
    )
}


class ToolDispatcher:
    """Runs tool calls against an Instagram client (live or simulated)."""

    def __init__(self, client, registry: dict[str, RegisteredTool] | None = None):
        self.client = client
        self.registry = TOOL_REGISTRY if registry is None else registry

    def list_tools(self) -> list[dict]:
        return [tool.definition.to_dict() for tool in self.registry.values()]

    def call_tool(self, name: str, arguments: dict | None) -> ToolResult:
        tool = self.registry.get(name) if isinstance(name, str) else None
        if tool is None:
            err = UnknownToolError(name)
            logger.warning(err.message)
            return ToolResult.failure(err.message, err.code)

        try:
            args = tool.definition.validate(arguments)
            plan = tool.build(args)
            message_id = self._deliver(plan)
        except InstagramToolError as e:
            logger.error(f"Error {tool.action}: {e.message}")
            return ToolResult.failure(_error_text(tool.action, e), e.code)

        return ToolResult.success(self._success_text(plan, message_id))

    def _deliver(self, plan: MessagePlan) -> str:
        logger.info(f"Sending {plan.label.lower()} to {plan.recipient_id}")
        logger.info(f"Content: {json.dumps(plan.payload['message'], ensure_ascii=False)}")
        message_id = self.client.send(plan.payload)
        if plan.caption is not None:
            self._send_caption(plan.caption)
        return message_id

    @graceful_degrade(fallback_value=None)
    def _send_caption(self, payload: dict) -> str:
        message_id = self.client.send(payload)
        logger.info(f"Caption sent: message_id={message_id}")
        return message_id

    def _success_text(self, plan: MessagePlan, message_id: str) -> str:
        prefix = SIMULATION_PREFIX if getattr(self.client, "simulated", False) else ""
        lines = [
            f"{prefix}{plan.label} {plan.verb} successfully!",
            f"Message ID: {message_id}",
            f"Recipient ID: {plan.recipient_id}",
            *plan.details,
        ]
        return "\n".join(lines)


def _error_text(action: str, error: InstagramToolError) -> str:
    body = error.body if isinstance(error, ProviderError) and error.body is not None else {}
    details = json.dumps(body, indent=2, ensure_ascii=False)
    if isinstance(error, ProviderError) and error.status_code is not None:
        return f"Error {action}: {error.message}\nStatus: {error.status_code}\nDetails: {details}"
    return f"Error {action}: {error.message}\nDetails: {details}"

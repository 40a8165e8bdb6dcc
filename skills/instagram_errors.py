"""Errors raised while validating, building and delivering Instagram messages.

Every tool-level failure derives from InstagramToolError so the dispatcher can
turn it into an error tool result instead of letting it reach the transport.
"""

INVALID_PARAMS = -32602
METHOD_NOT_FOUND = -32601
TOOL_FAILURE = -32000


class InstagramToolError(Exception):
    """Base class for failures that become an error tool result."""

    code = TOOL_FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(InstagramToolError):
    """Arguments are missing, mistyped or outside their allowed values."""

    code = INVALID_PARAMS

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class ContentError(InstagramToolError):
    """Arguments are well-formed but the message breaks a content rule."""


class ProviderError(InstagramToolError):
    """The Graph API call failed or returned a non-2xx response."""

    def __init__(self, message: str, status_code: int | None = None, body=None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UnknownToolError(InstagramToolError):
    code = METHOD_NOT_FOUND

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name

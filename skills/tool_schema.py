"""
Declarative argument schemas for the Instagram tools.

Each ToolDefinition lists its string fields once. The same declaration is
rendered as the JSON Schema advertised by tools/list and used to validate
tools/call arguments before any message is built or sent.
"""

from dataclasses import dataclass, field

from skills.instagram_errors import ValidationError


@dataclass(frozen=True)
class FieldSpec:
    name: str
    description: str
    required: bool = False
    enum: tuple[str, ...] | None = None

    def json_schema(self) -> dict:
        schema = {"type": "string", "description": self.description}
        if self.enum:
            schema["enum"] = list(self.enum)
        return schema


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    fields: tuple[FieldSpec, ...] = field(default_factory=tuple)

    def input_schema(self) -> dict:
        return {
            "type": "object",
            "properties": {f.name: f.json_schema() for f in self.fields},
            "required": [f.name for f in self.fields if f.required],
        }

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }

    def validate(self, arguments) -> dict:
        """Return the declared fields of *arguments*, or raise ValidationError.

        Undeclared keys are dropped. An optional field set to None is treated
        as absent. Required fields must be non-empty strings.
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise ValidationError(f"Arguments for {self.name} must be an object")

        cleaned = {}
        for spec in self.fields:
            value = arguments.get(spec.name)
            if value is None:
                if spec.required:
                    raise ValidationError(f"Missing required field: {spec.name}", field=spec.name)
                continue
            if not isinstance(value, str):
                raise ValidationError(
                    f"Field '{spec.name}' must be a string, got {type(value).__name__}",
                    field=spec.name,
                )
            if spec.required and not value:
                raise ValidationError(f"Field '{spec.name}' must not be empty", field=spec.name)
            if spec.enum and value not in spec.enum:
                allowed = ", ".join(spec.enum)
                raise ValidationError(
                    f"Field '{spec.name}' must be one of: {allowed} (got {value!r})",
                    field=spec.name,
                )
            cleaned[spec.name] = value
        return cleaned


RECIPIENT = FieldSpec("recipientId", "Instagram-scoped ID (IGSID) of the recipient", required=True)

SEND_DM = ToolDefinition(
    name="send_dm",
    description="Send a direct message to an Instagram user.",
    fields=(
        RECIPIENT,
        FieldSpec("text", "Message text (optional, max 1000 bytes)"),
        FieldSpec("mediaUrl", "URL of the media to send (optional)"),
        FieldSpec("mediaType", "Media type (required with mediaUrl)", enum=("image", "video", "audio")),
        FieldSpec("link", "Link to include in the message (optional)"),
    ),
)

SEND_IMAGE = ToolDefinition(
    name="send_image",
    description="Send an image or GIF to an Instagram user.",
    fields=(
        RECIPIENT,
        FieldSpec("imageUrl", "URL of the image or GIF to send", required=True),
        FieldSpec("caption", "Optional text sent after the image"),
    ),
)

SEND_MEDIA = ToolDefinition(
    name="send_media",
    description="Send audio or video to an Instagram user.",
    fields=(
        RECIPIENT,
        FieldSpec("mediaUrl", "URL of the audio or video file", required=True),
        FieldSpec("mediaType", "Media type (audio or video)", required=True, enum=("audio", "video")),
        FieldSpec("caption", "Optional text sent after the media"),
    ),
)

SEND_STICKER = ToolDefinition(
    name="send_sticker",
    description="Send a heart sticker to an Instagram user.",
    fields=(RECIPIENT,),
)

SHARE_POST = ToolDefinition(
    name="share_post",
    description="Share an Instagram post with a user.",
    fields=(
        RECIPIENT,
        FieldSpec("postId", "ID of the post to share", required=True),
    ),
)

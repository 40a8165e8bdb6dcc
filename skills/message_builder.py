"""
Message builders for the Instagram Messaging API.

Each builder takes validated tool arguments and returns a MessagePlan: the
payload for POST /{ig-user-id}/messages, an optional caption payload sent as a
second message, and the wording used to report the delivery.

Payload shape:
    {"recipient": {"id": "<IGSID>"}, "message": {"text": ..., "attachment": ...}}
"""

from dataclasses import dataclass, field
from urllib.parse import urlparse

from skills.instagram_errors import ContentError, ValidationError
from skills.media_formats import check_media_format

MAX_TEXT_BYTES = 1000

DM_ATTACHMENT_TYPES = {"image": "image", "video": "video", "audio": "audio"}
STICKER_ATTACHMENT_TYPE = "like_heart"
SHARE_ATTACHMENT_TYPE = "MEDIA_SHARE"


@dataclass
class MessagePlan:
    payload: dict
    label: str
    verb: str = "sent"
    caption: dict | None = None
    details: list[str] = field(default_factory=list)

    @property
    def recipient_id(self) -> str:
        return self.payload["recipient"]["id"]


def is_valid_url(value: str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


def text_payload(recipient_id: str, text: str) -> dict:
    return {"recipient": {"id": recipient_id}, "message": {"text": text}}


def attachment_payload(recipient_id: str, attachment_type: str, payload: dict | None = None) -> dict:
    attachment = {"type": attachment_type}
    if payload is not None:
        attachment["payload"] = payload
    return {"recipient": {"id": recipient_id}, "message": {"attachment": attachment}}


def check_text_length(text: str) -> None:
    size = len(text.encode("utf-8"))
    if size > MAX_TEXT_BYTES:
        raise ContentError(f"Text exceeds the {MAX_TEXT_BYTES}-byte limit ({size} bytes)")


def build_send_dm(args: dict) -> MessagePlan:
    """Combine text, link and media into a single direct message.

    The link is appended to the text on a new line, or becomes the text when
    there is none. At least one of text, link or media must be present.
    """
    message = {}

    text = args.get("text")
    if text:
        check_text_length(text)
        message["text"] = text

    link = args.get("link")
    if link:
        if not is_valid_url(link):
            raise ValidationError("The link provided is not a valid URL", field="link")
        message["text"] = f"{message['text']}\n{link}" if message.get("text") else link

    media_url = args.get("mediaUrl")
    if media_url:
        media_type = args.get("mediaType")
        if not media_type:
            raise ValidationError("mediaType is required when mediaUrl is provided", field="mediaType")
        attachment_type = DM_ATTACHMENT_TYPES.get(media_type)
        if attachment_type is None:
            raise ValidationError("mediaType must be 'image', 'video' or 'audio'", field="mediaType")
        check_media_format(media_url, media_type)
        message["attachment"] = {"type": attachment_type, "payload": {"url": media_url}}

    if not message:
        raise ContentError("Provide text, a link or media to send")

    return MessagePlan(
        payload={"recipient": {"id": args["recipientId"]}, "message": message},
        label="Message",
    )


def _caption(recipient_id: str, caption: str | None) -> dict | None:
    return text_payload(recipient_id, caption) if caption else None


def build_send_image(args: dict) -> MessagePlan:
    image_url = args["imageUrl"]
    if not is_valid_url(image_url):
        raise ValidationError("Invalid image URL", field="imageUrl")
    check_media_format(image_url, "image")

    recipient_id = args["recipientId"]
    return MessagePlan(
        payload=attachment_payload(recipient_id, "image", {"url": image_url}),
        label="Image",
        caption=_caption(recipient_id, args.get("caption")),
    )


def build_send_media(args: dict) -> MessagePlan:
    media_url = args["mediaUrl"]
    media_type = args["mediaType"]
    if media_type not in ("audio", "video"):
        raise ValidationError("mediaType must be 'audio' or 'video'", field="mediaType")
    if not is_valid_url(media_url):
        raise ValidationError("Invalid media URL", field="mediaUrl")
    check_media_format(media_url, media_type)

    recipient_id = args["recipientId"]
    return MessagePlan(
        payload=attachment_payload(recipient_id, media_type, {"url": media_url}),
        label=media_type.capitalize(),
        caption=_caption(recipient_id, args.get("caption")),
    )


def build_send_sticker(args: dict) -> MessagePlan:
    return MessagePlan(
        payload=attachment_payload(args["recipientId"], STICKER_ATTACHMENT_TYPE),
        label="Sticker",
    )


def build_share_post(args: dict) -> MessagePlan:
    post_id = args["postId"]
    return MessagePlan(
        payload=attachment_payload(args["recipientId"], SHARE_ATTACHMENT_TYPE, {"id": post_id}),
        label="Post",
        verb="shared",
        details=[f"Post ID: {post_id}"],
    )

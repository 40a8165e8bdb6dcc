"""Tests for declarative argument validation."""

import pytest

from skills.instagram_errors import INVALID_PARAMS, ValidationError
from skills.tool_schema import SEND_DM, SEND_MEDIA, SEND_STICKER, SHARE_POST


class TestValidate:
    def test_valid_arguments_pass_through(self):
        args = SHARE_POST.validate({"recipientId": "R1", "postId": "P1"})
        assert args == {"recipientId": "R1", "postId": "P1"}

    def test_missing_required_field(self):
        with pytest.raises(ValidationError) as exc:
            SHARE_POST.validate({"recipientId": "R1"})
        assert exc.value.field == "postId"
        assert exc.value.code == INVALID_PARAMS

    def test_none_arguments_treated_as_empty(self):
        with pytest.raises(ValidationError) as exc:
            SEND_STICKER.validate(None)
        assert exc.value.field == "recipientId"

    def test_non_object_arguments_rejected(self):
        with pytest.raises(ValidationError):
            SEND_STICKER.validate(["R1"])

    def test_wrong_type_rejected(self):
        with pytest.raises(ValidationError) as exc:
            SEND_DM.validate({"recipientId": "R1", "text": 42})
        assert exc.value.field == "text"
        assert "int" in exc.value.message

    def test_empty_required_string_rejected(self):
        with pytest.raises(ValidationError):
            SEND_STICKER.validate({"recipientId": ""})

    def test_enum_outside_declared_set(self):
        with pytest.raises(ValidationError) as exc:
            SEND_MEDIA.validate({
                "recipientId": "R1",
                "mediaUrl": "https://cdn.example.com/a.png",
                "mediaType": "image",
            })
        assert exc.value.field == "mediaType"

    def test_optional_none_is_absent(self):
        args = SEND_DM.validate({"recipientId": "R1", "text": "hi", "link": None})
        assert args == {"recipientId": "R1", "text": "hi"}

    def test_undeclared_fields_dropped(self):
        args = SEND_STICKER.validate({"recipientId": "R1", "emoji": "heart"})
        assert args == {"recipientId": "R1"}


class TestInputSchema:
    def test_send_media_schema(self):
        schema = SEND_MEDIA.input_schema()
        assert schema["type"] == "object"
        assert schema["required"] == ["recipientId", "mediaUrl", "mediaType"]
        assert schema["properties"]["mediaType"]["enum"] == ["audio", "video"]
        assert schema["properties"]["caption"]["type"] == "string"

    def test_send_dm_only_requires_recipient(self):
        definition = SEND_DM.to_dict()
        assert definition["name"] == "send_dm"
        assert definition["inputSchema"]["required"] == ["recipientId"]
        assert set(definition["inputSchema"]["properties"]) == {
            "recipientId", "text", "mediaUrl", "mediaType", "link",
        }


class TestEnumEmptyString:
    def test_empty_enum_value_rejected(self):
        with pytest.raises(ValidationError) as exc:
            SEND_DM.validate({"recipientId": "R1", "text": "hi", "mediaType": ""})
        assert exc.value.field == "mediaType"

    def test_empty_plain_optional_passes_validation(self):
        args = SEND_DM.validate({"recipientId": "R1", "text": "hi", "link": ""})
        assert args["link"] == ""

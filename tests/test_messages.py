"""Tests for multimodal message content and chat payload assembly."""

import pytest

from providers.shared import (
    FileUrlPart,
    ImageUrlPart,
    Message,
    TextPart,
    VideoUrlPart,
    build_chat_payload,
    build_message_content,
    serialize_content,
    serialize_content_part,
)


class TestBuildMessageContent:
    def test_text_only_stays_plain_string(self):
        assert build_message_content("hello") == "hello"

    def test_media_precedes_text(self):
        content = build_message_content(
            "Summarize",
            video_url="https://v.example/a.mp4",
            file_url="https://f.example/report.pdf",
        )

        assert content == [
            VideoUrlPart("https://v.example/a.mp4"),
            FileUrlPart("https://f.example/report.pdf"),
            TextPart("Summarize"),
        ]

    def test_image_then_file_then_text(self):
        content = build_message_content(
            "What is this?",
            image_url="https://i.example/cat.png",
            file_url="https://f.example/notes.txt",
        )

        assert [type(part) for part in content] == [ImageUrlPart, FileUrlPart, TextPart]
        assert content[-1].text == "What is this?"

    def test_empty_urls_count_as_absent(self):
        assert build_message_content("hi", video_url="", image_url=None) == "hi"


class TestSerialization:
    def test_wire_format_for_each_part(self):
        assert serialize_content_part(TextPart("hi")) == {"type": "text", "text": "hi"}
        assert serialize_content_part(ImageUrlPart("u1")) == {"type": "image_url", "image_url": {"url": "u1"}}
        assert serialize_content_part(VideoUrlPart("u2")) == {"type": "video_url", "video_url": {"url": "u2"}}
        assert serialize_content_part(FileUrlPart("u3")) == {"type": "file_url", "file_url": {"url": "u3"}}

    def test_unknown_part_rejected(self):
        with pytest.raises(TypeError, match="Unsupported content part: dict"):
            serialize_content_part({"type": "audio"})

    def test_plain_string_content_passes_through(self):
        assert serialize_content("plain") == "plain"

    def test_message_to_dict(self):
        message = Message(role="user", content=[VideoUrlPart("https://v"), TextPart("describe")])

        assert message.to_dict() == {
            "role": "user",
            "content": [
                {"type": "video_url", "video_url": {"url": "https://v"}},
                {"type": "text", "text": "describe"},
            ],
        }

    def test_invalid_role(self):
        with pytest.raises(ValueError, match="Invalid message role 'tool'"):
            Message(role="tool", content="x")


class TestBuildChatPayload:
    def test_minimal_payload(self):
        payload = build_chat_payload("qwen-max-latest", [Message(role="user", content="hi")])

        assert payload == {
            "model": "qwen-max-latest",
            "messages": [{"role": "user", "content": "hi"}],
            "stream": False,
        }

    def test_web_search_adds_tool(self):
        payload = build_chat_payload("m", [Message(role="user", content="hi")], web_search=True)

        assert payload["tools"] == [{"type": "web_search"}]
        assert "enable_thinking" not in payload

    def test_thinking_adds_flag_and_budget(self):
        payload = build_chat_payload(
            "m",
            [Message(role="user", content="hi")],
            enable_thinking=True,
            thinking_budget=1234,
        )

        assert payload["enable_thinking"] is True
        assert payload["thinking_budget"] == 1234
        assert "tools" not in payload

    def test_budget_ignored_without_thinking(self):
        payload = build_chat_payload("m", [Message(role="user", content="hi")], thinking_budget=1234)

        assert "thinking_budget" not in payload

"""Tests for the rich text models."""

import pytest
from pydantic import ValidationError

from slackmd.models import (
    EmojiElement,
    LinkElement,
    RichTextDocument,
    RichTextList,
    RichTextSection,
    TextElement,
)


class TestElements:
    def test_text_without_style(self) -> None:
        el = TextElement.model_validate({"type": "text", "text": "hi"})
        assert el.style is None

    def test_text_style_defaults(self) -> None:
        el = TextElement.model_validate(
            {"type": "text", "text": "hi", "style": {"bold": True}}
        )
        assert el.style is not None
        assert el.style.bold
        assert not el.style.italic
        assert not el.style.strike
        assert not el.style.code

    def test_link_text_falls_back_to_url(self) -> None:
        el = LinkElement.model_validate(
            {"type": "link", "url": "https://example.com"}
        )
        assert el.text == "https://example.com"

    def test_emoji_without_unicode(self) -> None:
        el = EmojiElement.model_validate({"type": "emoji", "name": "smile"})
        assert el.unicode is None

    def test_emoji_with_only_unicode(self) -> None:
        el = EmojiElement.model_validate({"type": "emoji", "unicode": "1f600"})
        assert el.name is None
        assert el.unicode == "1f600"

    def test_emoji_needs_name_or_unicode(self) -> None:
        with pytest.raises(ValidationError, match="name"):
            EmojiElement.model_validate({"type": "emoji"})

    def test_extra_fields_ignored(self) -> None:
        el = EmojiElement.model_validate(
            {"type": "emoji", "name": "thumbsup", "skin_tone": 2}
        )
        assert el.name == "thumbsup"

    def test_models_are_frozen(self) -> None:
        el = TextElement.model_validate({"type": "text", "text": "hi"})
        with pytest.raises(ValidationError):
            el.text = "bye"  # type: ignore[misc]


class TestBlocks:
    def test_section_dispatches_elements(self) -> None:
        section = RichTextSection.model_validate(
            {
                "type": "rich_text_section",
                "elements": [
                    {"type": "text", "text": "a"},
                    {"type": "user", "user_id": "U1"},
                ],
            }
        )
        assert [el.type for el in section.elements] == ["text", "user"]

    def test_unknown_element_type(self) -> None:
        with pytest.raises(ValidationError):
            RichTextSection.model_validate(
                {"type": "rich_text_section", "elements": [{"type": "sparkle"}]}
            )

    def test_list_indent_defaults_to_zero(self) -> None:
        lst = RichTextList.model_validate(
            {"type": "rich_text_list", "style": "bullet", "elements": []}
        )
        assert lst.indent is None
        assert lst.indent_level == 0

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RichTextList.model_validate(
                {"type": "rich_text_list", "style": "bullet", "indent": -1}
            )

    def test_list_accepts_any_style_string(self) -> None:
        lst = RichTextList.model_validate(
            {"type": "rich_text_list", "style": "checkbox", "elements": []}
        )
        assert lst.style == "checkbox"

    def test_list_accepts_non_string_style(self) -> None:
        lst = RichTextList.model_validate(
            {"type": "rich_text_list", "style": 1, "elements": []}
        )
        assert lst.style == 1

    def test_nested_lists(self) -> None:
        doc = RichTextDocument.model_validate(
            {
                "type": "rich_text",
                "elements": [
                    {
                        "type": "rich_text_list",
                        "style": "bullet",
                        "elements": [
                            {
                                "type": "rich_text_list",
                                "style": "ordered",
                                "indent": 1,
                                "elements": [],
                            }
                        ],
                    }
                ],
            }
        )
        outer = doc.elements[0]
        assert isinstance(outer, RichTextList)
        assert isinstance(outer.elements[0], RichTextList)
        assert outer.elements[0].indent_level == 1

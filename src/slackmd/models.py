"""Data models for Slack rich text trees."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class TextStyle(_Node):
    """Formatting flags attached to text and link elements."""

    bold: bool = False
    italic: bool = False
    strike: bool = False
    code: bool = False


class TextElement(_Node):
    """A run of text with optional formatting."""

    type: Literal["text"]
    text: str
    style: TextStyle | None = None


class LinkElement(_Node):
    """A hyperlink; display text defaults to the URL."""

    type: Literal["link"]
    url: str
    text: str
    style: TextStyle | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_text(cls, data: Any) -> Any:
        # Slack omits the display text for bare pasted URLs
        if isinstance(data, dict) and not data.get("text"):
            data = {**data, "text": data.get("url", "")}
        return data


class EmojiElement(_Node):
    """An emoji, given as hex code point(s), a shortcode name, or both."""

    type: Literal["emoji"]
    name: str | None = None
    unicode: str | None = None

    @model_validator(mode="after")
    def _require_name_or_unicode(self) -> EmojiElement:
        if not self.name and not self.unicode:
            msg = "emoji needs a 'name' or a 'unicode' value"
            raise ValueError(msg)
        return self


class UserMention(_Node):
    """An @-mention of a user."""

    type: Literal["user"]
    user_id: str


class UsergroupMention(_Node):
    """An @-mention of a user group."""

    type: Literal["usergroup"]
    usergroup_id: str


class ChannelMention(_Node):
    """A #channel reference."""

    type: Literal["channel"]
    channel_id: str


class TeamMention(_Node):
    """A reference to a workspace."""

    type: Literal["team"]
    team_id: str


class BroadcastElement(_Node):
    """An @here / @channel / @everyone broadcast."""

    type: Literal["broadcast"]
    range: str


class ColorElement(_Node):
    """A color swatch; ``value`` is hex without the leading ``#``."""

    type: Literal["color"]
    value: str


class DateElement(_Node):
    """A date, as seconds since the epoch."""

    type: Literal["date"]
    timestamp: int


Element = Annotated[
    TextElement
    | LinkElement
    | EmojiElement
    | UserMention
    | UsergroupMention
    | ChannelMention
    | TeamMention
    | BroadcastElement
    | ColorElement
    | DateElement,
    Field(discriminator="type"),
]


class RichTextSection(_Node):
    """A paragraph of inline elements."""

    type: Literal["rich_text_section"]
    elements: list[Element] = []


class RichTextQuote(_Node):
    """A block quote of inline elements."""

    type: Literal["rich_text_quote"]
    elements: list[Element] = []


class RichTextPreformatted(_Node):
    """A code block."""

    type: Literal["rich_text_preformatted"]
    elements: list[Element] = []


class RichTextList(_Node):
    """A bullet or ordered list; each child block is one list item.

    ``style`` is accepted as any value so unknown styles surface as a
    rendering error rather than a validation error.
    """

    type: Literal["rich_text_list"]
    style: Any = None
    indent: NonNegativeInt | None = None
    elements: list[Block] = []

    @property
    def indent_level(self) -> int:
        return self.indent or 0


Block = Annotated[
    RichTextSection | RichTextList | RichTextQuote | RichTextPreformatted,
    Field(discriminator="type"),
]


class RichTextDocument(_Node):
    """Root of a rich text tree, as found in a message's ``blocks``."""

    type: Literal["rich_text"]
    elements: list[Block] = []


RichTextList.model_rebuild()
RichTextDocument.model_rebuild()

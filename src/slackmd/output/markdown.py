"""Markdown output renderer for rich text trees."""

from datetime import datetime
from typing import assert_never

from slackmd.errors import MalformedDocumentError, UnsupportedListStyleError
from slackmd.models import (
    Block,
    BroadcastElement,
    ChannelMention,
    ColorElement,
    DateElement,
    Element,
    EmojiElement,
    LinkElement,
    RichTextDocument,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    TeamMention,
    TextElement,
    TextStyle,
    UsergroupMention,
    UserMention,
)

_LIST_STYLES = ("bullet", "ordered")


def _backticks(text: str) -> str:
    return f"`{text}`"


def apply_style(text: str, style: TextStyle | None) -> str:
    """Wrap text in Markdown delimiters for each set style flag.

    Delimiters always nest code, bold, italic, strike from the inside out,
    so bold + italic on ``x`` gives ``***x***`` and all four flags give
    ``~~***`x`***~~``.
    """
    if style is None:
        return text

    output = text
    if style.code:
        output = f"`{output}`"
    if style.bold:
        output = f"**{output}**"
    if style.italic:
        output = f"*{output}*"
    if style.strike:
        output = f"~~{output}~~"
    return output


def _decode_emoji(unicode: str) -> str:
    # Skin tone and ZWJ sequences arrive as hyphen-joined code points
    try:
        return "".join(chr(int(point, 16)) for point in unicode.split("-"))
    except ValueError as e:
        msg = f"Invalid emoji code point {unicode!r}"
        raise MalformedDocumentError(msg) from e


def _format_date(timestamp: int) -> str:
    try:
        return datetime.fromtimestamp(timestamp).strftime("%x")
    except (OverflowError, OSError, ValueError) as e:
        msg = f"Date timestamp out of range: {timestamp}"
        raise MalformedDocumentError(msg) from e


def render_element(el: Element) -> str:
    """Render a single inline element as a Markdown fragment."""
    if isinstance(el, BroadcastElement):
        return _backticks(el.range)
    elif isinstance(el, ColorElement):
        return _backticks(f"#{el.value}")
    elif isinstance(el, ChannelMention):
        return _backticks(el.channel_id)
    elif isinstance(el, DateElement):
        return _format_date(el.timestamp)
    elif isinstance(el, EmojiElement):
        if el.unicode:
            return _decode_emoji(el.unicode)
        return _backticks(f":{el.name}:")
    elif isinstance(el, LinkElement):
        return apply_style(f"[{el.text}]({el.url})", el.style)
    elif isinstance(el, TeamMention):
        return _backticks(el.team_id)
    elif isinstance(el, TextElement):
        return apply_style(el.text, el.style)
    elif isinstance(el, UserMention):
        return _backticks(el.user_id)
    elif isinstance(el, UsergroupMention):
        return _backticks(el.usergroup_id)
    else:
        assert_never(el)


def _render_list(lst: RichTextList) -> str:
    if lst.style not in _LIST_STYLES:
        raise UnsupportedListStyleError(lst.style)

    # Ordered lists render with bullets too; numbering is not computed
    prefix = "  " * lst.indent_level + "- "
    return "\n".join(prefix + render_block(item) for item in lst.elements)


def render_block(block: Block) -> str:
    """Render one block, recursing into nested lists."""
    if isinstance(block, RichTextSection):
        return " ".join(render_element(el) for el in block.elements)
    elif isinstance(block, RichTextList):
        return _render_list(block)
    elif isinstance(block, RichTextQuote):
        return "> " + "".join(render_element(el) for el in block.elements)
    elif isinstance(block, RichTextPreformatted):
        body = "".join(render_element(el) for el in block.elements)
        return f"```\n{body}\n```"
    else:
        assert_never(block)


def _leading_separator(block: Block) -> str:
    # Indented lists continue the list above them, so no blank line
    if isinstance(block, RichTextList) and block.indent_level > 0:
        return ""
    return "\n"


def render(document: RichTextDocument) -> str:
    """Render a RichTextDocument as Markdown."""
    parts = [
        _leading_separator(block) + render_block(block)
        for block in document.elements
    ]
    return "\n".join(parts).strip()

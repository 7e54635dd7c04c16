"""Convert Slack rich text blocks to Markdown."""

from slackmd.converter import convert, convert_message
from slackmd.errors import (
    InvalidRootError,
    MalformedDocumentError,
    RichTextError,
    UnsupportedListStyleError,
)

__all__ = [
    "InvalidRootError",
    "MalformedDocumentError",
    "RichTextError",
    "UnsupportedListStyleError",
    "convert",
    "convert_message",
]

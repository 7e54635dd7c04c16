"""Exceptions raised while converting rich text."""


class RichTextError(ValueError):
    """Base class for conversion failures."""


class InvalidRootError(RichTextError):
    """The input is not a ``rich_text`` document."""

    def __init__(self, found: object) -> None:
        self.found = found
        super().__init__(
            f"Expected a 'rich_text' document, got type {found!r}"
        )


class UnsupportedListStyleError(RichTextError):
    """A list uses a style other than ``bullet`` or ``ordered``."""

    def __init__(self, style: object) -> None:
        self.style = style
        super().__init__(f"Unsupported list style: {style!r}")


class MalformedDocumentError(RichTextError):
    """The document does not match any known block or element shape."""

"""Public conversion entry points."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from slackmd.errors import InvalidRootError, MalformedDocumentError
from slackmd.models import RichTextDocument
from slackmd.output.markdown import render

logger = logging.getLogger(__name__)

ROOT_TYPE = "rich_text"


def parse_document(document: Mapping[str, Any]) -> RichTextDocument:
    """Validate a decoded rich text block into a RichTextDocument.

    Raises:
        InvalidRootError: If the root ``type`` is not ``rich_text``.
        MalformedDocumentError: If any node has an unknown type or is
            missing a required field.
    """
    if not isinstance(document, Mapping):
        raise InvalidRootError(type(document).__name__)
    root_type = document.get("type")
    if root_type != ROOT_TYPE:
        raise InvalidRootError(root_type)

    try:
        parsed = RichTextDocument.model_validate(dict(document))
    except ValidationError as e:
        raise MalformedDocumentError(str(e)) from e

    logger.debug("Parsed rich text document with %d blocks", len(parsed.elements))
    return parsed


def convert(document: RichTextDocument | Mapping[str, Any]) -> str:
    """Convert a Slack rich text block to Markdown.

    Accepts either the decoded JSON object or an already-built
    RichTextDocument. Nothing is returned if any part of the tree fails.
    """
    if not isinstance(document, RichTextDocument):
        document = parse_document(document)
    return render(document)


def convert_message(message: Mapping[str, Any]) -> str:
    """Convert every rich text block of a Slack message to Markdown.

    Blocks of other types (sections, dividers, ...) are skipped. Messages
    without rich text fall back to their plain ``text`` field.
    """
    if not isinstance(message, Mapping):
        raise InvalidRootError(type(message).__name__)

    blocks = message.get("blocks") or []
    if not isinstance(blocks, list):
        msg = f"Message blocks must be a list, got {type(blocks).__name__}"
        raise MalformedDocumentError(msg)

    rendered: list[str] = []
    for block in blocks:
        if not isinstance(block, Mapping):
            msg = f"Message block must be an object, got {type(block).__name__}"
            raise MalformedDocumentError(msg)
        if block.get("type") != ROOT_TYPE:
            logger.debug("Skipping non rich text block of type %s", block.get("type"))
            continue
        rendered.append(convert(block))

    if not rendered:
        return str(message.get("text") or "")
    return "\n\n".join(rendered)


def load_document(path: Path) -> dict[str, Any]:
    """Read a JSON document from disk."""
    logger.info("Loading document from %s", path)
    with open(path, encoding="utf-8") as f:
        data: dict[str, Any] = json.load(f)
    return data

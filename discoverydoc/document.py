"""Reading whole Discovery documents from YAML or JSON text."""

from __future__ import annotations

import yaml

from .api import Document
from .reader import CompilerError, Context


def version() -> str:
    """Return the name of the document format handled here."""
    return "discovery_v1"


def parse_document(data: bytes | str | None) -> Document:
    """Read a Discovery description from its YAML or JSON representation."""
    if data is None:
        text = ""
    elif isinstance(data, bytes):
        text = data.decode("utf-8")
    else:
        text = data
    try:
        node = yaml.compose(text, Loader=yaml.SafeLoader)
        if node is None:
            raise CompilerError(None, "document has no content")
        root = yaml.safe_load(text)
    except yaml.YAMLError as error:
        raise CompilerError(None, str(error)) from error
    return Document.from_node(root, Context("$root"))
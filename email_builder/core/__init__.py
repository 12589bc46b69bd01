"""Core: document, thème, registry, éditions, session."""
from .theme import ThemeParameters, CONTENT_WIDTH_RANGE, BORDER_RADIUS_RANGE, DEFAULT_FONT_FAMILY
from .registry import (
    BLOCK_KINDS,
    BLOCK_LABELS,
    is_registered,
    block_class,
    attributes_class,
    default_attributes,
    attribute_schema,
    make_block,
)
from .document import Document, starter_document, load_document
from .edits import insert, update, move, duplicate, remove, set_theme
from .session import EditorSession

__all__ = [
    "ThemeParameters", "CONTENT_WIDTH_RANGE", "BORDER_RADIUS_RANGE", "DEFAULT_FONT_FAMILY",
    "BLOCK_KINDS", "BLOCK_LABELS",
    "is_registered", "block_class", "attributes_class",
    "default_attributes", "attribute_schema", "make_block",
    "Document", "starter_document", "load_document",
    "insert", "update", "move", "duplicate", "remove", "set_theme",
    "EditorSession",
]

"""
Email Builder v0.1: modèle de document + compilateur HTML pour templates email.

Usage :
    >>> from email_builder import Document, insert, update, finalize
    >>> doc = insert(Document(), "header")
    >>> doc = update(doc, doc.blocks[0].id, {"title": "Welcome {{name}}"})
    >>> compiled = finalize(doc)
    >>> [v.name for v in compiled.variables]
    ['name']

Usage (session d'édition, sélection + undo) :
    >>> from email_builder import EditorSession, starter_document, render
    >>> session = EditorSession(starter_document())
    >>> session.insert("spacer")
    >>> html = render(session.document)
"""
__version__ = "0.1.0"

# ── Blocs ────────────────────────────────────────────────────────────────────
from .blocks import (
    BaseBlock, BlockAttributes, BlockKind, BlockUnion,
    HeaderBlock, HeaderAttributes,
    HeadingBlock, HeadingAttributes,
    ParagraphBlock, ParagraphAttributes,
    ImageBlock, ImageAttributes,
    ButtonBlock, ButtonAttributes,
    DividerBlock, DividerAttributes,
    SpacerBlock, SpacerAttributes,
    ListBlock, ListAttributes,
    FooterBlock, FooterAttributes,
)

# ── Core ─────────────────────────────────────────────────────────────────────
from .core import (
    ThemeParameters,
    BLOCK_KINDS, BLOCK_LABELS,
    default_attributes, attribute_schema, make_block,
    Document, starter_document, load_document,
    insert, update, move, duplicate, remove, set_theme,
    EditorSession,
)

# ── Rendu + variables + agrégat ──────────────────────────────────────────────
from .renderer import render, render_block, render_text
from .variables import TemplateVariable, COMMON_VARIABLES, extract_variables, extract_variable_names
from .template import (
    CompiledTemplate, TemplateMetadata, EmailTemplateRecord,
    finalize, build_template_record,
)
from .errors import EmailBuilderError, BlockNotFound, UnknownBlockKind

__all__ = [
    # Blocs
    "BaseBlock", "BlockAttributes", "BlockKind", "BlockUnion",
    "HeaderBlock", "HeaderAttributes", "HeadingBlock", "HeadingAttributes",
    "ParagraphBlock", "ParagraphAttributes", "ImageBlock", "ImageAttributes",
    "ButtonBlock", "ButtonAttributes", "DividerBlock", "DividerAttributes",
    "SpacerBlock", "SpacerAttributes", "ListBlock", "ListAttributes",
    "FooterBlock", "FooterAttributes",
    # Core
    "ThemeParameters", "BLOCK_KINDS", "BLOCK_LABELS",
    "default_attributes", "attribute_schema", "make_block",
    "Document", "starter_document", "load_document",
    "insert", "update", "move", "duplicate", "remove", "set_theme",
    "EditorSession",
    # Rendu
    "render", "render_block", "render_text",
    "TemplateVariable", "COMMON_VARIABLES", "extract_variables", "extract_variable_names",
    "CompiledTemplate", "TemplateMetadata", "EmailTemplateRecord",
    "finalize", "build_template_record",
    # Erreurs
    "EmailBuilderError", "BlockNotFound", "UnknownBlockKind",
]

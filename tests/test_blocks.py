"""Tests blocs: valeurs par défaut, format fil, union discriminée, registry."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from pydantic import TypeAdapter, ValidationError

from email_builder.blocks import (
    BaseBlock, BlockUnion,
    HeaderBlock, ParagraphBlock, ParagraphAttributes,
    ButtonBlock, SpacerBlock, ListBlock,
)
from email_builder.core.registry import (
    BLOCK_KINDS, BLOCK_LABELS, attribute_schema, block_class, default_attributes, make_block,
)
from email_builder.errors import UnknownBlockKind


# ── Registry ─────────────────────────────────────────────────────────────────

def test_block_kinds_closed_set():
    assert BLOCK_KINDS == (
        "header", "heading", "paragraph", "image", "button",
        "divider", "spacer", "list", "footer",
    )
    assert set(BLOCK_LABELS) == set(BLOCK_KINDS)


def test_block_class_lookup():
    assert block_class("header") is HeaderBlock
    assert block_class("list") is ListBlock


def test_block_class_unknown_kind():
    with pytest.raises(UnknownBlockKind):
        block_class("columns")


def test_unknown_kind_is_value_error():
    with pytest.raises(ValueError):
        make_block("columns")


# ── Attributs par défaut ─────────────────────────────────────────────────────

def test_paragraph_defaults():
    assert default_attributes("paragraph") == {
        "text": "Your text here...", "color": "#475569", "fontSize": 16,
    }


def test_heading_defaults():
    assert default_attributes("heading") == {"text": "Heading", "level": "h2", "color": "#1e293b"}


def test_image_defaults():
    assert default_attributes("image") == {"url": "", "alt": "Image", "width": "100%"}


def test_spacer_and_divider_defaults():
    assert default_attributes("spacer") == {"height": 32}
    assert default_attributes("divider") == {"color": "#e2e8f0", "margin": 24}


def test_list_defaults_are_fresh_copies():
    first = default_attributes("list")
    first["items"].append("Item 4")
    assert default_attributes("list")["items"] == ["Item 1", "Item 2", "Item 3"]


def test_footer_default_uses_company(monkeypatch):
    monkeypatch.setenv("EMAIL_BUILDER_COMPANY", "ACME")
    text = default_attributes("footer")["text"]
    assert text.startswith("© ")
    assert text.endswith("ACME")


def test_attribute_schema_uses_wire_keys():
    schema = attribute_schema("paragraph")
    assert "fontSize" in schema["properties"]


# ── make_block ───────────────────────────────────────────────────────────────

def test_make_block_assigns_prefixed_id():
    b = make_block("button")
    assert isinstance(b, ButtonBlock)
    assert b.id.startswith("button-")


def test_make_block_explicit_id_and_attributes():
    b = make_block("paragraph", {"text": "Bonjour"}, block_id="p-1")
    assert b.id == "p-1"
    assert b.attributes.text == "Bonjour"
    assert b.attributes.color == "#475569"


def test_make_block_ids_are_unique():
    ids = {make_block("spacer").id for _ in range(50)}
    assert len(ids) == 50


# ── Format fil / noms Python ─────────────────────────────────────────────────

def test_block_accepts_wire_and_python_names():
    wire = ParagraphBlock.model_validate({"content": {"fontSize": 18}})
    python = ParagraphBlock(attributes=ParagraphAttributes(font_size=18))
    assert wire.attributes.font_size == python.attributes.font_size == 18


def test_block_dump_uses_wire_keys():
    data = make_block("paragraph", block_id="p-1").model_dump(by_alias=True)
    assert data["type"] == "paragraph"
    assert data["content"]["fontSize"] == 16


def test_unknown_attributes_preserved():
    b = make_block("paragraph", {"text": "x", "align": "center"})
    assert b.attributes.model_dump(by_alias=True)["align"] == "center"


def test_block_is_frozen():
    b = make_block("heading")
    with pytest.raises(ValidationError):
        b.id = "autre"


# ── BlockUnion ───────────────────────────────────────────────────────────────

def test_block_union_discriminates_on_type():
    b = TypeAdapter(BlockUnion).validate_python({"id": "s-1", "type": "spacer", "content": {"height": 10}})
    assert isinstance(b, SpacerBlock)
    assert b.attributes.height == 10


def test_block_union_rejects_unknown_type():
    with pytest.raises(ValidationError):
        TypeAdapter(BlockUnion).validate_python({"id": "c-1", "type": "columns", "content": {}})


def test_base_block_keeps_arbitrary_type():
    b = BaseBlock(type="columns", id="c-1")
    assert b.type == "columns"

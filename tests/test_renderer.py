"""Tests renderer HTML: shell, ordre, arrondis, règles par kind, tolérance aux pannes."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging
import pytest

from email_builder.blocks import BaseBlock
from email_builder.config import DEFAULT_PLACEHOLDER_IMAGE
from email_builder.core import Document, ThemeParameters, make_block, starter_document
from email_builder.renderer import render, render_block, corner_radius, px

THEME = ThemeParameters()


def doc_of(*blocks, **theme):
    return Document(blocks=list(blocks), theme=ThemeParameters(**theme))


# ── Shell ─────────────────────────────────────────────────────────────────

def test_empty_document_shell():
    html = render(Document())
    assert html.startswith("<!DOCTYPE html>")
    assert "background: #f8fafc;" in html
    assert "max-width: 600px;" in html
    assert "background: #ffffff;" in html
    assert "border-radius: 16px;" in html
    assert '0.08);">\n\n</table>' in html
    assert html.endswith("</html>")


def test_shell_uses_theme():
    html = render(doc_of(background_color="#000001", content_background="#000002",
                         content_width=520, border_radius=8, font_family="Georgia, serif"))
    assert "background: #000001;" in html
    assert "background: #000002;" in html
    assert "max-width: 520px;" in html
    assert "border-radius: 8px;" in html
    assert "font-family: Georgia, serif;" in html


def test_title_in_head():
    assert "<title>Bienvenue {{name}}</title>" in render(Document(), title="Bienvenue {{name}}")


def test_render_is_deterministic():
    doc = starter_document(year=2026)
    assert render(doc) == render(doc)


def test_render_does_not_mutate_document():
    doc = starter_document(year=2026)
    snapshot = doc.model_dump()
    render(doc)
    assert doc.model_dump() == snapshot


# ── Ordre ─────────────────────────────────────────────────────────────────

def test_fragments_follow_block_order():
    doc = doc_of(
        make_block("paragraph", {"text": "premier"}),
        make_block("paragraph", {"text": "deuxième"}),
        make_block("paragraph", {"text": "troisième"}),
    )
    html = render(doc)
    positions = [html.index(t) for t in ("premier", "deuxième", "troisième")]
    assert positions == sorted(positions)


# ── Arrondis premier / dernier ────────────────────────────────────────────

def test_corner_radius_positions():
    assert corner_radius(0, 3, 16) == " border-radius: 16px 16px 0 0;"
    assert corner_radius(1, 3, 16) == ""
    assert corner_radius(2, 3, 16) == " border-radius: 0 0 16px 16px;"
    assert corner_radius(0, 1, 16) == " border-radius: 16px;"


def test_only_edges_are_rounded():
    blocks = [make_block("paragraph", {"text": f"p{i}"}) for i in range(3)]
    fragments = [render_block(b, THEME, i, 3) for i, b in enumerate(blocks)]
    assert "border-radius: 16px 16px 0 0;" in fragments[0]
    assert "border-radius" not in fragments[1]
    assert "border-radius: 0 0 16px 16px;" in fragments[2]
    assert "0 0 16px 16px" not in fragments[0]
    assert "16px 16px 0 0" not in fragments[2]


def test_single_block_gets_both_roundings():
    fragment = render_block(make_block("paragraph"), THEME, 0, 1)
    assert "border-radius: 16px;" in fragment


def test_edge_rounding_follows_position_not_kind():
    doc = doc_of(make_block("footer", {"text": "TexteDuHaut"}), make_block("header", {"title": "TitreDuBas"}))
    html = render(doc)
    footer_row = html[html.index("#f1f5f9"):html.index("TexteDuHaut")]
    assert "border-radius: 16px 16px 0 0;" in footer_row
    header_row = html[html.index("linear-gradient"):html.index("TitreDuBas")]
    assert "border-radius: 0 0 16px 16px;" in header_row


# ── Règles par kind ───────────────────────────────────────────────────────

def test_header_gradient_band():
    html = render_block(make_block("header", {"title": "Welcome {{name}}"}), THEME, 1, 3)
    assert "linear-gradient(135deg, #6366f1 0%, #8b5cf6 100%)" in html
    assert "Welcome {{name}}</h1>" in html
    assert "rgba(255,255,255,0.9)" not in html


def test_header_subtitle():
    html = render_block(make_block("header", {"title": "T", "subtitle": "Sous-titre"}), THEME, 1, 3)
    assert "rgba(255,255,255,0.9); font-size: 16px;\">Sous-titre</p>" in html


@pytest.mark.parametrize("level,size", [("h1", 28), ("h2", 22), ("h3", 18)])
def test_heading_sizes(level, size):
    html = render_block(make_block("heading", {"text": "Titre", "level": level}), THEME, 1, 3)
    assert f"<{level} style=\"margin: 0; color: #1e293b; font-size: {size}px;" in html
    assert f">Titre</{level}>" in html


def test_heading_unknown_level_falls_back_to_h2():
    html = render_block(make_block("heading", {"level": "h9"}), THEME, 1, 3)
    assert "<h2 " in html
    assert "font-size: 22px" in html
    assert "h9" not in html


def test_paragraph():
    html = render_block(make_block("paragraph", {"text": "{{content}}", "fontSize": 18, "color": "#111"}), THEME, 1, 3)
    assert '<p style="margin: 0; color: #111; font-size: 18px; line-height: 1.7;">{{content}}</p>' in html


def test_paragraph_string_font_size():
    html = render_block(make_block("paragraph", {"fontSize": "15"}), THEME, 1, 3)
    assert "font-size: 15px;" in html


def test_image_placeholder_when_url_empty():
    html = render_block(make_block("image"), THEME, 1, 3)
    assert f'src="{DEFAULT_PLACEHOLDER_IMAGE}"' in html
    assert 'alt="Image"' in html
    assert "width: 100%;" in html


def test_image_placeholder_from_env(monkeypatch):
    monkeypatch.setenv("EMAIL_BUILDER_PLACEHOLDER_IMAGE", "https://cdn.test/ph.png")
    html = render_block(make_block("image"), THEME, 1, 3)
    assert 'src="https://cdn.test/ph.png"' in html


def test_image_with_url_and_pixel_width():
    html = render_block(make_block("image", {"url": "https://x.test/a.png", "width": 300}), THEME, 1, 3)
    assert 'src="https://x.test/a.png"' in html
    assert "width: 300px;" in html


def test_button_pill_with_shadow():
    html = render_block(make_block("button", {"text": "Go", "url": "{{buttonLink}}", "color": "#ef4444"}), THEME, 1, 3)
    assert '<a href="{{buttonLink}}"' in html
    assert "background: #ef4444;" in html
    assert "box-shadow: 0 4px 14px #ef444440;" in html
    assert "text-align: center;" in html
    assert ">Go</a>" in html


def test_divider():
    html = render_block(make_block("divider", {"margin": 12, "color": "#ccc"}), THEME, 1, 3)
    assert 'style="padding: 12px 40px;"' in html
    assert "border-top: 1px solid #ccc;" in html


def test_spacer_is_empty_gap():
    html = render_block(make_block("spacer", {"height": 50}), THEME, 1, 3)
    assert html == '<tr><td style="height: 50px;"></td></tr>'


def test_list_items_in_order():
    html = render_block(make_block("list", {"items": ["un", "deux", "trois"]}), THEME, 1, 3)
    assert html.count("<li ") == 3
    assert html.index(">un<") < html.index(">deux<") < html.index(">trois<")


def test_empty_list():
    html = render_block(make_block("list", {"items": []}), THEME, 1, 3)
    assert "<ul" in html
    assert "<li" not in html


def test_footer_band():
    html = render_block(make_block("footer", {"text": "© ACME"}), ThemeParameters(footer_background="#eeeeee"), 1, 3)
    assert "background: #eeeeee;" in html
    assert "font-size: 14px;\">© ACME</p>" in html


def test_colors_pass_through_verbatim():
    html = render(doc_of(make_block("paragraph", {"color": "pas-une-couleur"}), primary_color="rgb(1,2,3)"))
    assert "color: pas-une-couleur;" in html


# ── Tolérance ─────────────────────────────────────────────────────────────

def test_unknown_kind_renders_inert_placeholder():
    assert render_block(BaseBlock(type="columns", id="c-1"), THEME) == "<!-- bloc ignoré : columns -->"


def test_broken_block_does_not_abort_document(monkeypatch, caplog):
    import email_builder.renderer.html as html_renderer

    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(html_renderer, "render_paragraph_block", boom)
    doc = doc_of(make_block("header", {"title": "Avant"}), make_block("paragraph"), make_block("footer", {"text": "Après"}))
    with caplog.at_level(logging.ERROR):
        html = render(doc)
    assert "Avant" in html
    assert "Après" in html
    assert "<!-- bloc ignoré : paragraph -->" in html
    assert "paragraph" in caplog.text


# ── px ────────────────────────────────────────────────────────────────────

def test_px():
    assert px(16) == "16px"
    assert px(1.5) == "1.5px"
    assert px("16") == "16px"
    assert px("100%") == "100%"

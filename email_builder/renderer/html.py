"""
Renderer HTML: compile un Document en un email HTML autonome.

Mise en page table (compatible clients mail) : une table 100% centre une
colonne de largeur `contentWidth` ; chaque bloc produit une ligne <tr><td>.
Le premier bloc reçoit l'arrondi haut du thème, le dernier l'arrondi bas,
de sorte que la colonne se lise comme une seule carte arrondie.

Aucun échappement : entrée opérateur de confiance, valeurs rendues telles quelles.
"""
import logging
from typing import Optional

from ..blocks import (
    BaseBlock,
    HeaderBlock, HeadingBlock, ParagraphBlock, ImageBlock, ButtonBlock,
    DividerBlock, SpacerBlock, ListBlock, FooterBlock,
    HEADING_SIZES, DEFAULT_HEADING_LEVEL, Pixels,
)
from ..config import placeholder_image_url
from ..core.document import Document
from ..core.theme import ThemeParameters

log = logging.getLogger(__name__)


# ── Point d'entrée public ───────────────────────────────────────────────────

def render(document: Document, title: str = "") -> str:
    """Génère le HTML complet d'un document. Déterministe, ne lève jamais."""
    theme = document.theme
    count = len(document.blocks)
    blocks_html = "\n".join(
        render_block(block, theme, position, count)
        for position, block in enumerate(document.blocks)
    )

    return f"""<!DOCTYPE html>
<html><head><meta charset="utf-8"><meta name="viewport" content="width=device-width, initial-scale=1.0"><title>{title}</title></head>
<body style="margin: 0; padding: 0; font-family: {theme.font_family}; background: {theme.background_color};">
<table role="presentation" style="width: 100%; border-collapse: collapse;"><tr><td align="center" style="padding: 40px 20px;">
<table role="presentation" style="width: 100%; max-width: {theme.content_width}px; border-collapse: collapse; background: {theme.content_background}; border-radius: {theme.border_radius}px; box-shadow: 0 4px 24px rgba(0,0,0,0.08);">
{blocks_html}
</table></td></tr></table></body></html>"""


def render_block(
    block: BaseBlock,
    theme: Optional[ThemeParameters] = None,
    position: int = 0,
    count: int = 1,
) -> str:
    """
    Rend un bloc isolé (ligne <tr>) à sa position dans le document.

    Un bloc qui échoue au rendu est remplacé par un commentaire inerte :
    le reste du document est toujours compilé.
    """
    theme = theme or ThemeParameters()
    corners = corner_radius(position, count, theme.border_radius)
    try:
        return _dispatch(block, theme, corners)
    except Exception:
        log.exception("render_block: échec du rendu de %s (%s)", block.id, block.type)
        return _placeholder(block)


# ── Dispatch bloc ────────────────────────────────────────────────────────────

def _dispatch(block: BaseBlock, theme: ThemeParameters, corners: str) -> str:
    if isinstance(block, HeaderBlock):    return render_header_block(block, theme, corners)
    if isinstance(block, HeadingBlock):   return render_heading_block(block, theme, corners)
    if isinstance(block, ParagraphBlock): return render_paragraph_block(block, theme, corners)
    if isinstance(block, ImageBlock):     return render_image_block(block, theme, corners)
    if isinstance(block, ButtonBlock):    return render_button_block(block, theme, corners)
    if isinstance(block, DividerBlock):   return render_divider_block(block, theme, corners)
    if isinstance(block, SpacerBlock):    return render_spacer_block(block, theme, corners)
    if isinstance(block, ListBlock):      return render_list_block(block, theme, corners)
    if isinstance(block, FooterBlock):    return render_footer_block(block, theme, corners)

    log.warning("render_block: type non géré %r", block.type)
    return _placeholder(block)


def _placeholder(block: BaseBlock) -> str:
    return f"<!-- bloc ignoré : {block.type} -->"


# ── Helpers ──────────────────────────────────────────────────────────────────

def corner_radius(position: int, count: int, radius: int) -> str:
    """Déclaration border-radius selon la position : haut (premier), bas (dernier), rien sinon."""
    first, last = position == 0, position == count - 1
    r = f"{radius}px"
    if first and last:
        return f" border-radius: {r};"
    if first:
        return f" border-radius: {r} {r} 0 0;"
    if last:
        return f" border-radius: 0 0 {r} {r};"
    return ""


def px(value: Pixels) -> str:
    """16 → "16px", "16" → "16px", "100%" → "100%"."""
    if isinstance(value, (int, float)):
        return f"{value}px"
    text = str(value).strip()
    try:
        float(text)
    except ValueError:
        return text
    return f"{text}px"


# ── Renderers par kind ──────────────────────────────────────────────────────

def render_header_block(b: HeaderBlock, theme: ThemeParameters, corners: str = "") -> str:
    a = b.attributes
    subtitle = (
        f'\n  <p style="margin: 12px 0 0; color: rgba(255,255,255,0.9); font-size: 16px;">{a.subtitle}</p>'
        if a.subtitle else ""
    )
    return f"""<tr><td style="background: linear-gradient(135deg, {theme.primary_color} 0%, {theme.secondary_color} 100%); padding: 48px 40px; text-align: center;{corners}">
  <h1 style="margin: 0; color: #fff; font-size: 28px; font-weight: 700; letter-spacing: -0.5px;">{a.title}</h1>{subtitle}
</td></tr>"""


def render_heading_block(b: HeadingBlock, theme: ThemeParameters, corners: str = "") -> str:
    a = b.attributes
    # Niveau inconnu → h2 : jamais de balise <h9> dans le HTML produit
    level = a.level if a.level in HEADING_SIZES else DEFAULT_HEADING_LEVEL
    size = HEADING_SIZES[level]
    return (
        f'<tr><td style="padding: 24px 40px 8px;{corners}">'
        f'<{level} style="margin: 0; color: {a.color}; font-size: {size}px; font-weight: 600;">{a.text}</{level}>'
        f'</td></tr>'
    )


def render_paragraph_block(b: ParagraphBlock, theme: ThemeParameters, corners: str = "") -> str:
    a = b.attributes
    return (
        f'<tr><td style="padding: 8px 40px;{corners}">'
        f'<p style="margin: 0; color: {a.color}; font-size: {px(a.font_size)}; line-height: 1.7;">{a.text}</p>'
        f'</td></tr>'
    )


def render_image_block(b: ImageBlock, theme: ThemeParameters, corners: str = "") -> str:
    a = b.attributes
    src = a.url or placeholder_image_url()
    return (
        f'<tr><td style="padding: 16px 40px; text-align: center;{corners}">'
        f'<img src="{src}" alt="{a.alt}" style="max-width: 100%; width: {px(a.width)}; height: auto; border-radius: 12px;">'
        f'</td></tr>'
    )


def render_button_block(b: ButtonBlock, theme: ThemeParameters, corners: str = "") -> str:
    a = b.attributes
    # Ombre = couleur du bouton + suffixe alpha "40" (~25 % en #RRGGBBAA)
    return (
        f'<tr><td style="padding: 24px 40px; text-align: center;{corners}">'
        f'<a href="{a.url}" style="display: inline-block; background: {a.color}; color: #fff; '
        f'text-decoration: none; padding: 16px 48px; border-radius: 12px; font-size: 16px; '
        f'font-weight: 600; box-shadow: 0 4px 14px {a.color}40;">{a.text}</a>'
        f'</td></tr>'
    )


def render_divider_block(b: DividerBlock, theme: ThemeParameters, corners: str = "") -> str:
    a = b.attributes
    return (
        f'<tr><td style="padding: {px(a.margin)} 40px;{corners}">'
        f'<hr style="border: none; border-top: 1px solid {a.color}; margin: 0;">'
        f'</td></tr>'
    )


def render_spacer_block(b: SpacerBlock, theme: ThemeParameters, corners: str = "") -> str:
    return f'<tr><td style="height: {px(b.attributes.height)};{corners}"></td></tr>'


def render_list_block(b: ListBlock, theme: ThemeParameters, corners: str = "") -> str:
    a = b.attributes
    items = "".join(f'<li style="margin-bottom: 8px;">{item}</li>' for item in a.items)
    return (
        f'<tr><td style="padding: 8px 40px;{corners}">'
        f'<ul style="margin: 0; padding-left: 20px; color: {a.color}; font-size: 16px; line-height: 1.6;">{items}</ul>'
        f'</td></tr>'
    )


def render_footer_block(b: FooterBlock, theme: ThemeParameters, corners: str = "") -> str:
    return (
        f'<tr><td style="background: {theme.footer_background}; padding: 32px 40px; text-align: center;{corners}">'
        f'<p style="margin: 0; color: #64748b; font-size: 14px;">{b.attributes.text}</p>'
        f'</td></tr>'
    )

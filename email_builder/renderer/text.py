"""
Renderer texte: version text/plain du template (champ `textContent`).
Les placeholders {{...}} sont conservés tels quels.
"""
import logging
from typing import Optional

from ..blocks import (
    BaseBlock,
    HeaderBlock, HeadingBlock, ParagraphBlock, ImageBlock, ButtonBlock,
    DividerBlock, SpacerBlock, ListBlock, FooterBlock,
)
from ..core.document import Document

log = logging.getLogger(__name__)

DIVIDER_LINE = "-" * 40


def render_text(document: Document) -> str:
    """Texte brut : un paragraphe par bloc, dans l'ordre du document."""
    parts = [render_block_text(block) for block in document.blocks]
    text = "\n\n".join(p for p in parts if p is not None).strip()
    return f"{text}\n" if text else ""


def render_block_text(block: BaseBlock) -> Optional[str]:
    """Texte d'un bloc ; None si le bloc n'a pas d'équivalent texte (spacer, image sans alt)."""
    if isinstance(block, HeaderBlock):
        a = block.attributes
        return f"{a.title}\n{a.subtitle}" if a.subtitle else a.title
    if isinstance(block, (HeadingBlock, ParagraphBlock, FooterBlock)):
        return block.attributes.text
    if isinstance(block, ImageBlock):
        return f"[{block.attributes.alt}]" if block.attributes.alt else None
    if isinstance(block, ButtonBlock):
        return f"{block.attributes.text}: {block.attributes.url}"
    if isinstance(block, DividerBlock):
        return DIVIDER_LINE
    if isinstance(block, SpacerBlock):
        return None
    if isinstance(block, ListBlock):
        return "\n".join(f"- {item}" for item in block.attributes.items)

    log.warning("render_block_text: type non géré %r", block.type)
    return None

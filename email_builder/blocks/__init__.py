"""
Blocs: exports publics + BlockUnion discriminé.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import BaseBlock, BlockAttributes, BlockKind, Pixels, new_block_id
from .header import HeaderBlock, HeaderAttributes
from .heading import HeadingBlock, HeadingAttributes, HEADING_SIZES, DEFAULT_HEADING_LEVEL
from .paragraph import ParagraphBlock, ParagraphAttributes
from .image import ImageBlock, ImageAttributes
from .button import ButtonBlock, ButtonAttributes
from .divider import DividerBlock, DividerAttributes
from .spacer import SpacerBlock, SpacerAttributes
from .list_block import ListBlock, ListAttributes
from .footer import FooterBlock, FooterAttributes, default_footer_text

# Union discriminée par `type`: ordre = ordre de la palette de l'éditeur
BlockUnion = Annotated[
    Union[
        HeaderBlock,
        HeadingBlock,
        ParagraphBlock,
        ImageBlock,
        ButtonBlock,
        DividerBlock,
        SpacerBlock,
        ListBlock,
        FooterBlock,
    ],
    Field(discriminator="type"),
]

__all__ = [
    # Base
    "BaseBlock", "BlockAttributes", "BlockKind", "Pixels", "new_block_id",
    # Kinds
    "HeaderBlock", "HeaderAttributes",
    "HeadingBlock", "HeadingAttributes", "HEADING_SIZES", "DEFAULT_HEADING_LEVEL",
    "ParagraphBlock", "ParagraphAttributes",
    "ImageBlock", "ImageAttributes",
    "ButtonBlock", "ButtonAttributes",
    "DividerBlock", "DividerAttributes",
    "SpacerBlock", "SpacerAttributes",
    "ListBlock", "ListAttributes",
    "FooterBlock", "FooterAttributes", "default_footer_text",
    # Union
    "BlockUnion",
]

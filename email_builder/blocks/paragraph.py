"""Bloc Paragraph: texte courant."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockAttributes, Pixels


class ParagraphAttributes(BlockAttributes):
    text: str = "Your text here..."
    color: str = "#475569"
    font_size: Pixels = 16


class ParagraphBlock(BaseBlock):
    type: Literal["paragraph"] = "paragraph"
    attributes: ParagraphAttributes = Field(default_factory=ParagraphAttributes, alias="content")

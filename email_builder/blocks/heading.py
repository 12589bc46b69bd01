"""Bloc Heading: titre h1/h2/h3."""
from typing import Dict, Literal
from pydantic import Field
from .base import BaseBlock, BlockAttributes

# Taille (px) par niveau: un niveau inconnu est rendu comme h2
HEADING_SIZES: Dict[str, int] = {"h1": 28, "h2": 22, "h3": 18}
DEFAULT_HEADING_LEVEL = "h2"


class HeadingAttributes(BlockAttributes):
    text: str = "Heading"
    level: str = DEFAULT_HEADING_LEVEL
    color: str = "#1e293b"


class HeadingBlock(BaseBlock):
    type: Literal["heading"] = "heading"
    attributes: HeadingAttributes = Field(default_factory=HeadingAttributes, alias="content")

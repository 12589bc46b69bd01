"""Bloc Divider: filet horizontal, marge verticale configurable."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockAttributes, Pixels


class DividerAttributes(BlockAttributes):
    color: str = "#e2e8f0"
    margin: Pixels = 24


class DividerBlock(BaseBlock):
    type: Literal["divider"] = "divider"
    attributes: DividerAttributes = Field(default_factory=DividerAttributes, alias="content")

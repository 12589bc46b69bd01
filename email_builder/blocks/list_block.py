"""Bloc List: liste à puces, un <li> par item."""
from typing import List, Literal
from pydantic import Field
from .base import BaseBlock, BlockAttributes


class ListAttributes(BlockAttributes):
    items: List[str] = Field(default_factory=lambda: ["Item 1", "Item 2", "Item 3"])
    color: str = "#475569"


class ListBlock(BaseBlock):
    type: Literal["list"] = "list"
    attributes: ListAttributes = Field(default_factory=ListAttributes, alias="content")

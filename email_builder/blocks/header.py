"""Bloc Header: bandeau dégradé (primaryColor → secondaryColor) avec titre."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockAttributes


class HeaderAttributes(BlockAttributes):
    title: str = "Email Title"
    subtitle: str = ""


class HeaderBlock(BaseBlock):
    type: Literal["header"] = "header"
    attributes: HeaderAttributes = Field(default_factory=HeaderAttributes, alias="content")

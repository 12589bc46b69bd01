"""Bloc Button: lien call-to-action en forme de pilule."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockAttributes


class ButtonAttributes(BlockAttributes):
    text: str = "Click Here"
    url: str = "#"
    color: str = "#6366f1"


class ButtonBlock(BaseBlock):
    type: Literal["button"] = "button"
    attributes: ButtonAttributes = Field(default_factory=ButtonAttributes, alias="content")

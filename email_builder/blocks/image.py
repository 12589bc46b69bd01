"""Bloc Image: image centrée, placeholder si `url` vide."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockAttributes, Pixels


class ImageAttributes(BlockAttributes):
    url: str = ""
    alt: str = "Image"
    width: Pixels = "100%"


class ImageBlock(BaseBlock):
    type: Literal["image"] = "image"
    attributes: ImageAttributes = Field(default_factory=ImageAttributes, alias="content")

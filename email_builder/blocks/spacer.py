"""Bloc Spacer: espace vertical vide."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockAttributes, Pixels


class SpacerAttributes(BlockAttributes):
    height: Pixels = 32


class SpacerBlock(BaseBlock):
    type: Literal["spacer"] = "spacer"
    attributes: SpacerAttributes = Field(default_factory=SpacerAttributes, alias="content")

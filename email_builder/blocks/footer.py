"""Bloc Footer: bandeau footerBackground, petit texte atténué."""
from datetime import date
from typing import Literal
from pydantic import Field
from ..config import company_name
from .base import BaseBlock, BlockAttributes


def default_footer_text() -> str:
    return f"© {date.today().year} {company_name()}"


class FooterAttributes(BlockAttributes):
    text: str = Field(default_factory=default_footer_text)


class FooterBlock(BaseBlock):
    type: Literal["footer"] = "footer"
    attributes: FooterAttributes = Field(default_factory=FooterAttributes, alias="content")

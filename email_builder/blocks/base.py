"""
Blocs de base pour email_builder.
Attributs typés par kind + BaseBlock discriminé par `type`.

Format fil (stockage / API) : {"id": "...", "type": "paragraph", "content": {"fontSize": 16, ...}}
Côté Python les noms snake_case restent utilisables (populate_by_name).
"""
import uuid
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

BlockKind = Literal[
    "header", "heading", "paragraph", "image", "button",
    "divider", "spacer", "list", "footer",
]

# Valeur en pixels : nombre, ou chaîne CSS déjà formée ("100%")
Pixels = Union[int, float, str]


def new_block_id(kind: str = "block") -> str:
    """Id opaque `<kind>-<12 hex>`: jamais réutilisé (uuid4)."""
    return f"{kind}-{uuid.uuid4().hex[:12]}"


class BlockAttributes(BaseModel):
    """Attributs d'un bloc. Clés inconnues conservées, ignorées au rendu."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )


class BaseBlock(BaseModel):
    """Bloc de base (classe parente des 9 kinds)."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = ""
    type: str
    attributes: BlockAttributes = Field(default_factory=BlockAttributes, alias="content")

    @model_validator(mode="before")
    @classmethod
    def _assign_id(cls, data):
        if isinstance(data, dict) and not data.get("id"):
            default = cls.model_fields["type"].default
            kind = data.get("type") or (default if isinstance(default, str) else "block")
            data = {**data, "id": new_block_id(kind)}
        return data

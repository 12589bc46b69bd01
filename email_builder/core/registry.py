"""
Registry des blocs: catalogue statique kind → classe, attributs par défaut, schéma.
"""
from typing import Any, Dict, Optional, Type

from ..blocks import (
    BaseBlock, BlockAttributes,
    HeaderBlock, HeadingBlock, ParagraphBlock, ImageBlock, ButtonBlock,
    DividerBlock, SpacerBlock, ListBlock, FooterBlock,
)
from ..errors import UnknownBlockKind

_BLOCK_REGISTRY: Dict[str, Type[BaseBlock]] = {
    "header":    HeaderBlock,
    "heading":   HeadingBlock,
    "paragraph": ParagraphBlock,
    "image":     ImageBlock,
    "button":    ButtonBlock,
    "divider":   DividerBlock,
    "spacer":    SpacerBlock,
    "list":      ListBlock,
    "footer":    FooterBlock,
}

BLOCK_KINDS = tuple(_BLOCK_REGISTRY)

# Libellés de la palette de l'éditeur
BLOCK_LABELS: Dict[str, str] = {
    "header":    "Header",
    "heading":   "Heading",
    "paragraph": "Text",
    "image":     "Image",
    "button":    "Button",
    "divider":   "Divider",
    "spacer":    "Spacer",
    "list":      "List",
    "footer":    "Footer",
}


def is_registered(kind: str) -> bool:
    return kind in _BLOCK_REGISTRY


def block_class(kind: str) -> Type[BaseBlock]:
    cls = _BLOCK_REGISTRY.get(kind)
    if cls is None:
        raise UnknownBlockKind(f"Bloc inconnu : {kind!r}. Registry : {list(_BLOCK_REGISTRY)}")
    return cls


def attributes_class(kind: str) -> Type[BlockAttributes]:
    return block_class(kind).model_fields["attributes"].annotation


def default_attributes(kind: str) -> Dict[str, Any]:
    """Attributs de départ d'un nouveau bloc (clés au format fil)."""
    return attributes_class(kind)().model_dump(by_alias=True)


def attribute_schema(kind: str) -> Dict[str, Any]:
    """JSON schema des attributs: indicatif, non imposé au rendu."""
    return attributes_class(kind).model_json_schema(by_alias=True)


def make_block(
    kind: str,
    attributes: Optional[Dict[str, Any]] = None,
    block_id: Optional[str] = None,
) -> BaseBlock:
    """Instancie un bloc typé ; attributs absents → valeurs par défaut du kind."""
    cls = block_class(kind)
    data: Dict[str, Any] = {"type": kind, "content": attributes or {}}
    if block_id:
        data["id"] = block_id
    return cls.model_validate(data)

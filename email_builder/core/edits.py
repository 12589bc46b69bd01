"""
Opérations d'édition: fonctions pures Document → Document.

Le document d'entrée n'est jamais modifié ; l'historique (undo) se construit
en conservant les snapshots précédents (voir core.session).

Politique aux bornes :
  update(id inconnu)        → BlockNotFound
  move(hors bornes)         → document d'entrée inchangé
  duplicate(index inconnu)  → BlockNotFound
  remove(id inconnu)        → document d'entrée inchangé
"""
import logging
from typing import Any, Dict, List, Mapping, Type

from pydantic import BaseModel

from ..blocks import BaseBlock, new_block_id
from ..errors import BlockNotFound
from .document import Document
from .registry import make_block

log = logging.getLogger(__name__)


def _with_blocks(document: Document, blocks: List[BaseBlock]) -> Document:
    return Document(blocks=blocks, theme=document.theme)


def _fresh_id(document: Document, kind: str) -> str:
    taken = set(document.block_ids)
    block_id = new_block_id(kind)
    while block_id in taken:
        block_id = new_block_id(kind)
    return block_id


def _wire_keys(attrs_cls: Type[BaseModel], partial: Mapping[str, Any]) -> Dict[str, Any]:
    """Noms Python (font_size) → clés fil (fontSize) ; clés inconnues inchangées."""
    fields = attrs_cls.model_fields
    return {
        (fields[key].alias or key) if key in fields else key: value
        for key, value in partial.items()
    }


def insert(document: Document, kind: str) -> Document:
    """Ajoute en fin de document un bloc `kind` avec ses attributs par défaut."""
    block = make_block(kind, block_id=_fresh_id(document, kind))
    log.debug("insert %s → index %d", block.id, len(document.blocks))
    return _with_blocks(document, [*document.blocks, block])


def update(document: Document, block_id: str, partial: Mapping[str, Any]) -> Document:
    """
    Fusion superficielle de `partial` dans les attributs du bloc `block_id`.

    Les clés fournies écrasent, les autres sont conservées. Une liste
    (ex. list.items) est remplacée en entier, jamais fusionnée élément par élément.
    """
    index = document.index_of(block_id)
    if index is None:
        raise BlockNotFound(f"Bloc introuvable : {block_id!r}")

    block = document.blocks[index]
    attrs_cls = type(block.attributes)
    merged = {**block.attributes.model_dump(by_alias=True), **_wire_keys(attrs_cls, partial)}
    updated = block.model_copy(update={"attributes": attrs_cls.model_validate(merged)})

    blocks = list(document.blocks)
    blocks[index] = updated
    log.debug("update %s (%s)", block_id, ", ".join(partial))
    return _with_blocks(document, blocks)


def move(document: Document, index: int, offset: int) -> Document:
    """Échange le bloc `index` avec le bloc `index + offset` ; no-op hors bornes."""
    target = index + offset
    size = len(document.blocks)
    if offset == 0 or not (0 <= index < size and 0 <= target < size):
        return document

    blocks = list(document.blocks)
    blocks[index], blocks[target] = blocks[target], blocks[index]
    log.debug("move %d → %d", index, target)
    return _with_blocks(document, blocks)


def duplicate(document: Document, index: int) -> Document:
    """Insère juste après `index` une copie profonde du bloc, avec un nouvel id."""
    if not 0 <= index < len(document.blocks):
        raise BlockNotFound(f"Index hors document : {index} (taille {len(document.blocks)})")

    source = document.blocks[index]
    copy = source.model_copy(update={"id": _fresh_id(document, source.type)}, deep=True)

    blocks = list(document.blocks)
    blocks.insert(index + 1, copy)
    log.debug("duplicate %s → %s", source.id, copy.id)
    return _with_blocks(document, blocks)


def remove(document: Document, block_id: str) -> Document:
    """Retire le bloc `block_id` ; no-op s'il est absent."""
    index = document.index_of(block_id)
    if index is None:
        return document

    log.debug("remove %s (index %d)", block_id, index)
    return _with_blocks(document, [b for b in document.blocks if b.id != block_id])


def set_theme(document: Document, **changes: Any) -> Document:
    """Modifie les paramètres de thème (noms Python ou clés fil)."""
    theme_cls = type(document.theme)
    merged = {**document.theme.model_dump(by_alias=True), **_wire_keys(theme_cls, changes)}
    return Document(blocks=list(document.blocks), theme=theme_cls.model_validate(merged))

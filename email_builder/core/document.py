"""
Document: liste ordonnée de blocs + thème. Unité de vérité d'un template.

Invariants : chaque bloc a un type du registry (garanti par BlockUnion),
aucun id en double. Le modèle est figé : toute modification passe par
core.edits et produit un nouveau Document.
"""
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..blocks import BaseBlock, BlockUnion, new_block_id
from ..config import company_name
from .registry import attributes_class, is_registered, make_block
from .theme import ThemeParameters

log = logging.getLogger(__name__)


class Document(BaseModel):
    """Template éditable (format fil : {"blocks": [...], "designSettings": {...}})."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    blocks: Tuple[BlockUnion, ...] = Field(default_factory=tuple)
    theme: ThemeParameters = Field(default_factory=ThemeParameters, alias="designSettings")

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "Document":
        seen = set()
        for block in self.blocks:
            if block.id in seen:
                raise ValueError(f"Id de bloc en double : {block.id!r}")
            seen.add(block.id)
        return self

    def index_of(self, block_id: str) -> Optional[int]:
        for i, block in enumerate(self.blocks):
            if block.id == block_id:
                return i
        return None

    def get_block(self, block_id: str) -> Optional[BaseBlock]:
        i = self.index_of(block_id)
        return None if i is None else self.blocks[i]

    @property
    def block_ids(self) -> List[str]:
        return [b.id for b in self.blocks]


def starter_document(theme: Optional[ThemeParameters] = None, year: Optional[int] = None) -> Document:
    """Jeu de blocs par défaut d'un nouveau template (variables usuelles pré-placées)."""
    year = year or date.today().year
    blocks = [
        make_block("header",    {"title": "{{title}}", "subtitle": ""}),
        make_block("heading",   {"text": "Hello {{name}} 👋", "level": "h2", "color": "#1e293b"}),
        make_block("paragraph", {"text": "{{content}}", "color": "#475569", "fontSize": 16}),
        make_block("button",    {"text": "{{buttonText}}", "url": "{{buttonLink}}", "color": "#6366f1"}),
        make_block("footer",    {"text": f"© {year} {company_name()}. All rights reserved."}),
    ]
    return Document(blocks=blocks, theme=theme or ThemeParameters())


def _salvage_attributes(kind: str, block_id: str, content: Any) -> Dict[str, Any]:
    """Garde les attributs valides d'un bloc stocké ; les autres reprennent leur défaut."""
    if not isinstance(content, dict):
        if content is not None:
            log.warning("load_document: contenu illisible pour %s, défauts appliqués", block_id)
        return {}
    attrs_cls = attributes_class(kind)
    kept = {}
    for key, value in content.items():
        if value is None:
            continue
        try:
            attrs_cls.model_validate({key: value})
        except ValidationError:
            log.warning("load_document: attribut %r invalide sur %s, défaut appliqué", key, block_id)
            continue
        kept[key] = value
    return kept


def load_document(data: Dict[str, Any]) -> Document:
    """
    Charge un document stocké.

    Les blocs d'un type hors registry (ex. ancien "columns") sont écartés
    avec un warning plutôt que de faire échouer tout le chargement.
    Un bloc stocké sans id, ou avec un id déjà vu, en reçoit un nouveau.
    Un attribut nul ou invalide reprend la valeur par défaut du kind.
    """
    raw_blocks = data.get("blocks") or []
    kept = []
    seen = set()
    for raw in raw_blocks:
        kind = raw.get("type") if isinstance(raw, dict) else None
        if not is_registered(kind or ""):
            log.warning("load_document: bloc ignoré (type %r)", kind)
            continue

        block_id = raw.get("id")
        if not block_id or block_id in seen:
            if block_id:
                log.warning("load_document: id en double %r, nouvel id attribué", block_id)
            block_id = new_block_id(kind)
            while block_id in seen:
                block_id = new_block_id(kind)
        seen.add(block_id)

        content = raw.get("content", raw.get("attributes"))
        kept.append({"id": block_id, "type": kind, "content": _salvage_attributes(kind, block_id, content)})

    theme = data.get("designSettings", data.get("theme")) or {}
    return Document.model_validate({"blocks": kept, "designSettings": theme})

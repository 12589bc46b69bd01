"""
Router FastAPI: endpoints email builder.

GET  /email-builder/catalog      → blocs disponibles + défauts + JSON schemas + variables usuelles
GET  /email-builder/starter      → document de départ
POST /email-builder/render       → Document → HTMLResponse
POST /email-builder/render/text  → Document → texte brut
POST /email-builder/variables    → Document → {"variables": [...]}
POST /email-builder/validate     → JSON brut → {"valid": bool, "error"?}
POST /email-builder/edit         → {document, operation} → {document, selectedIndex}
POST /email-builder/finalize     → {metadata, document} → enregistrement à persister
"""
import logging
from typing import Annotated, Any, Dict, Optional, Union, Literal

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .blocks import BlockKind
from .core import (
    BLOCK_KINDS, BLOCK_LABELS, CONTENT_WIDTH_RANGE, BORDER_RADIUS_RANGE,
    Document, EditorSession, ThemeParameters,
    attribute_schema, default_attributes, starter_document,
)
from .renderer import render, render_text
from .template import EmailTemplateRecord, TemplateMetadata, build_template_record
from .variables import COMMON_VARIABLES, extract_variables

log = logging.getLogger(__name__)
router = APIRouter(prefix="/email-builder", tags=["email_builder"])


# ── Opérations d'édition (union discriminée par `op`) ─────────────────────────

class _Operation(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InsertOperation(_Operation):
    op: Literal["insert"] = "insert"
    kind: BlockKind


class UpdateOperation(_Operation):
    op: Literal["update"] = "update"
    block_id: str
    attributes: Dict[str, Any] = Field(default_factory=dict)


class MoveOperation(_Operation):
    op: Literal["move"] = "move"
    index: int
    offset: int


class DuplicateOperation(_Operation):
    op: Literal["duplicate"] = "duplicate"
    index: int


class RemoveOperation(_Operation):
    op: Literal["remove"] = "remove"
    block_id: str


EditOperation = Annotated[
    Union[InsertOperation, UpdateOperation, MoveOperation, DuplicateOperation, RemoveOperation],
    Field(discriminator="op"),
]


class EditRequest(BaseModel):
    document: Document
    operation: EditOperation


class EditResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    document: Document
    selected_index: Optional[int] = None


class FinalizeRequest(BaseModel):
    metadata: TemplateMetadata
    document: Document


# ── Endpoints ────────────────────────────────────────────────────────────────

@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> dict:
    """Palette de l'éditeur : kinds, libellés, attributs par défaut, bornes du thème."""
    return {
        "blocks": [
            {
                "type":     kind,
                "label":    BLOCK_LABELS[kind],
                "defaults": default_attributes(kind),
                "schema":   attribute_schema(kind),
            }
            for kind in BLOCK_KINDS
        ],
        "variables": list(COMMON_VARIABLES),
        "theme": ThemeParameters().model_dump(by_alias=True),
        "limits": {
            "contentWidth": list(CONTENT_WIDTH_RANGE),
            "borderRadius": list(BORDER_RADIUS_RANGE),
        },
    }


@router.get("/starter", summary="Document de départ d'un nouveau template")
def starter() -> dict:
    return starter_document().model_dump(by_alias=True)


@router.post("/render", response_class=HTMLResponse, summary="Compile un document en HTML")
def render_html(document: Document, title: str = "") -> HTMLResponse:
    return HTMLResponse(content=render(document, title=title))


@router.post("/render/text", response_class=PlainTextResponse, summary="Version texte brut")
def render_plain(document: Document) -> PlainTextResponse:
    return PlainTextResponse(content=render_text(document))


@router.post("/variables", summary="Variables {{...}} du HTML compilé")
def variables(document: Document) -> dict:
    found = extract_variables(render(document))
    return {"variables": [v.model_dump(by_alias=True) for v in found]}


@router.post("/validate", summary="Valide un document sans le compiler")
def validate(payload: Dict[str, Any] = Body(...)) -> dict:
    """Valide la structure (types de blocs connus, ids uniques, attributs typés)."""
    try:
        Document.model_validate(payload)
        return {"valid": True}
    except ValidationError as e:
        return {"valid": False, "error": str(e)}


@router.post("/edit", response_model=EditResponse, summary="Applique une opération d'édition")
def edit(request: EditRequest) -> EditResponse:
    session = EditorSession(request.document)
    op = request.operation

    if isinstance(op, InsertOperation):
        session.insert(op.kind)
    elif isinstance(op, UpdateOperation):
        try:
            updated = session.update(op.block_id, op.attributes)
        except ValidationError as e:
            raise HTTPException(422, str(e))
        if not updated:
            raise HTTPException(404, f"Bloc introuvable : {op.block_id}")
        session.select(session.document.index_of(op.block_id))
    elif isinstance(op, MoveOperation):
        session.move(op.index, op.offset)
    elif isinstance(op, DuplicateOperation):
        if session.duplicate(op.index) is None:
            raise HTTPException(404, f"Index hors document : {op.index}")
    elif isinstance(op, RemoveOperation):
        session.remove(op.block_id)

    log.info("edit %s → %d blocs", op.op, len(session.document.blocks))
    return EditResponse(document=session.document, selected_index=session.selected_index)


@router.post("/finalize", response_model=EmailTemplateRecord, summary="Compile et prépare l'enregistrement")
def finalize_template(request: FinalizeRequest) -> EmailTemplateRecord:
    return build_template_record(request.metadata, request.document)

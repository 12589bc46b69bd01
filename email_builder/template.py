"""
Agrégat template: document + HTML compilé + variables.

finalize() est le seul endroit où render() et extract_variables() sont
composés ; le HTML est toujours recalculé depuis le document courant.
build_template_record() produit l'enregistrement remis à la persistance
(format des templates stockés : htmlContent, designSettings, blocks...).
"""
import logging
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .core.document import Document
from .core.theme import ThemeParameters
from .renderer.html import render
from .renderer.text import render_text
from .variables import TemplateVariable, extract_variables

log = logging.getLogger(__name__)

TemplateType = Literal[
    "verification", "welcome", "password_reset", "order_confirmation",
    "order_status", "shipping", "promotional", "newsletter", "custom",
]
TemplateCategory = Literal["transactional", "marketing", "notification", "custom"]


class CompiledTemplate(BaseModel):
    """Résultat dérivé d'un document: jamais édité à la main."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    document: Document
    html: str
    text: str = ""
    variables: List[TemplateVariable] = Field(default_factory=list)


class TemplateMetadata(BaseModel):
    """Métadonnées saisies par l'opérateur (nom et sujet obligatoires)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    type: TemplateType = "custom"
    category: TemplateCategory = "custom"
    is_active: bool = True
    is_default: bool = False


class EmailTemplateRecord(BaseModel):
    """Enregistrement persisté: transport et stockage hors de ce module."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    subject: str
    html_content: str
    text_content: str = ""
    type: TemplateType = "custom"
    category: TemplateCategory = "custom"
    variables: List[TemplateVariable] = Field(default_factory=list)
    is_active: bool = True
    is_default: bool = False
    blocks: List[dict] = Field(default_factory=list)
    design_settings: ThemeParameters = Field(default_factory=ThemeParameters)


def finalize(document: Document, title: str = "") -> CompiledTemplate:
    """Compile le document : HTML, texte brut, variables extraites du HTML."""
    html = render(document, title=title)
    variables = extract_variables(html)
    log.debug("finalize: %d blocs, variables=%s", len(document.blocks), [v.name for v in variables])
    return CompiledTemplate(
        document=document,
        html=html,
        text=render_text(document),
        variables=variables,
    )


def build_template_record(metadata: TemplateMetadata, document: Document) -> EmailTemplateRecord:
    """Compile avec le sujet comme <title> et assemble l'enregistrement à sauvegarder."""
    compiled = finalize(document, title=metadata.subject)
    dumped = document.model_dump(by_alias=True)
    log.info("template %r compilé (%d variables)", metadata.name, len(compiled.variables))
    return EmailTemplateRecord(
        name=metadata.name,
        subject=metadata.subject,
        html_content=compiled.html,
        text_content=compiled.text,
        type=metadata.type,
        category=metadata.category,
        variables=compiled.variables,
        is_active=metadata.is_active,
        is_default=metadata.is_default,
        blocks=dumped["blocks"],
        design_settings=document.theme,
    )

"""
Extraction des variables {{nom}} d'un HTML compilé.

Passe isolée, indépendante du renderer : seul le HTML final fait foi.
La substitution des valeurs est faite à l'envoi, hors de ce module.
"""
import re
from typing import List

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

# Même motif que l'éditeur : \w ASCII (lettres, chiffres, _)
VARIABLE_PATTERN = re.compile(r"\{\{(\w+)\}\}", re.ASCII)

# Variables proposées par la palette de l'éditeur
COMMON_VARIABLES = (
    "name", "email", "title", "content",
    "buttonText", "buttonLink", "orderNumber", "verificationLink",
)


class TemplateVariable(BaseModel):
    """Variable d'un template (format fil : name / placeholder / defaultValue)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    placeholder: str = ""
    default_value: str = ""
    description: str = ""

    @model_validator(mode="before")
    @classmethod
    def _default_placeholder(cls, data):
        if isinstance(data, dict) and not data.get("placeholder"):
            data = {**data, "placeholder": data.get("name", "")}
        return data


def extract_variable_names(html: str) -> List[str]:
    """Noms uniques, dans l'ordre de première apparition."""
    return list(dict.fromkeys(VARIABLE_PATTERN.findall(html or "")))


def extract_variables(html: str) -> List[TemplateVariable]:
    """Une TemplateVariable par nom unique ; liste vide si aucun placeholder."""
    return [TemplateVariable(name=name) for name in extract_variable_names(html)]

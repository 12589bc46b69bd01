"""
Paramètres de thème: partagés par tous les blocs d'un document.

Format fil : "designSettings": {"backgroundColor": "#f8fafc", "contentWidth": 600, ...}
contentWidth et borderRadius sont ramenés dans la plage de l'éditeur
(480–700 / 0–24) plutôt que rejetés : un template stocké hors plage reste chargeable.
"""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

CONTENT_WIDTH_RANGE: Tuple[int, int] = (480, 700)
BORDER_RADIUS_RANGE: Tuple[int, int] = (0, 24)

DEFAULT_FONT_FAMILY = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif"


def _clamp(value: int, bounds: Tuple[int, int]) -> int:
    low, high = bounds
    return min(max(value, low), high)


class ThemeParameters(BaseModel):
    """Couleurs, largeur de colonne et arrondi du template."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    background_color: str = "#f8fafc"
    content_background: str = "#ffffff"
    primary_color: str = "#6366f1"
    secondary_color: str = "#8b5cf6"
    footer_background: str = "#f1f5f9"
    content_width: int = 600
    border_radius: int = 16
    font_family: str = DEFAULT_FONT_FAMILY

    @field_validator("content_width")
    @classmethod
    def _clamp_content_width(cls, v: int) -> int:
        return _clamp(v, CONTENT_WIDTH_RANGE)

    @field_validator("border_radius")
    @classmethod
    def _clamp_border_radius(cls, v: int) -> int:
        return _clamp(v, BORDER_RADIUS_RANGE)

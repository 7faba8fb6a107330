"""
Schémas Pydantic du document email.
Structure récursive : EmailDocument → blocs → (conteneurs) → cellules → blocs
"""
from typing import Any, List, Mapping, Optional
from pydantic import Field

from ..blocks.base import CssValue, EmailModel


class EmailSettings(EmailModel):
    """Réglages globaux appliqués à tous les blocs."""
    font_family: str = Field(default="Arial, sans-serif")
    background_color: str = Field(default="#f3f4f6")
    content_width: CssValue = Field(default=600, description="Largeur max de la colonne centrale (px)")
    primary_color: str = Field(default="#3b82f6", description="Couleur de lien par défaut")


class EmailDocument(EmailModel):
    """Document complet produit par l'éditeur visuel."""
    settings: Optional[EmailSettings] = None
    blocks: Optional[List[Any]] = None


def coerce_document(raw: Any) -> Optional[EmailDocument]:
    """
    Normalise l'entrée du renderer en EmailDocument.
    None si le document, ses settings ou ses blocs sont absents.
    """
    if isinstance(raw, EmailDocument):
        doc = raw
    elif isinstance(raw, Mapping):
        settings_raw = raw.get("settings")
        blocks_raw = raw.get("blocks")
        if not isinstance(settings_raw, (Mapping, EmailSettings)) or not isinstance(blocks_raw, list):
            return None
        settings = (
            settings_raw if isinstance(settings_raw, EmailSettings)
            else EmailSettings.model_validate_lenient(settings_raw)
        )
        doc = EmailDocument(settings=settings, blocks=blocks_raw)
    else:
        return None

    if doc.settings is None or doc.blocks is None:
        return None
    return doc

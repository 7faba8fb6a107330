"""Bloc Unsubscribe — texte + lien de désinscription autonomes."""
from typing import Literal, Optional
from .base import BaseBlock, CssValue, EmailModel


class UnsubscribeColors(EmailModel):
    background: str = "transparent"
    text: str = "#6b7280"
    link: str = "#3b82f6"


class UnsubscribeBlock(BaseBlock):
    type: Literal["unsubscribe"] = "unsubscribe"
    text: str = ""
    url: str = "{{unsubscribe}}"
    link_text: str = "Unsubscribe"
    alignment: str = "center"
    font_size: Optional[CssValue] = None
    colors: UnsubscribeColors = UnsubscribeColors()

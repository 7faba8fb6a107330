"""Bloc Social — rangée d'icônes vers les réseaux sociaux."""
from typing import List, Literal
from .base import BaseBlock, EmailModel


class SocialLink(EmailModel):
    name: str = "Website"
    url: str = "#"


class SocialBlock(BaseBlock):
    type: Literal["social"] = "social"
    platforms: List[SocialLink] = []
    alignment: str = "center"

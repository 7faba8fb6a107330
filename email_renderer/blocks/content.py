"""Blocs de contenu simples — titre, texte, image, bouton, lien, vidéo…"""
from typing import Literal, Optional
from .base import BaseBlock, CssValue

Alignment = str  # "left" | "center" | "right", non contraint


class HeadingBlock(BaseBlock):
    type: Literal["heading"] = "heading"
    level: str = "h2"
    content: str = ""
    alignment: Alignment = "center"
    color: str = "#1f2937"


class TextBlock(BaseBlock):
    type: Literal["text"] = "text"
    content: str = ""
    alignment: Alignment = "left"


class ImageBlock(BaseBlock):
    type: Literal["image"] = "image"
    src: str = ""
    alt: str = ""
    width: Optional[str] = None
    alignment: Alignment = "center"


class ButtonBlock(BaseBlock):
    type: Literal["button"] = "button"
    label: str = ""
    url: str = "#"
    background_color: str = "#3b82f6"
    text_color: str = "#ffffff"
    border_radius: CssValue = 8
    alignment: Alignment = "center"


class SpacerBlock(BaseBlock):
    type: Literal["spacer"] = "spacer"
    height: CssValue = 32


class DividerBlock(BaseBlock):
    type: Literal["divider"] = "divider"
    style: str = "solid"
    color: str = "#e5e7eb"


class LinkBlock(BaseBlock):
    type: Literal["link"] = "link"
    text: str = ""
    url: str = "#"
    alignment: Alignment = "left"
    color: str = "#3b82f6"


class HtmlBlock(BaseBlock):
    """HTML brut, émis sans échappement."""
    type: Literal["html"] = "html"
    content: str = ""


class VideoBlock(BaseBlock):
    type: Literal["video"] = "video"
    url: str = "#"
    thumbnail: Optional[str] = None
    alt: str = ""
    alignment: Alignment = "center"

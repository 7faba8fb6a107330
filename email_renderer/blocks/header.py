"""Bloc Header — logo (ou nom de société), slogan, menu de navigation."""
from typing import List, Literal, Optional
from .base import BaseBlock, EmailModel


class NavLink(EmailModel):
    text: str = ""
    url: str = "#"


class HeaderColors(EmailModel):
    background: str = "#ffffff"
    company_name: str = "#1f2937"
    tagline: str = "#6b7280"
    menu: str = "#4b5563"


class HeaderBlock(BaseBlock):
    type: Literal["header"] = "header"
    logo_src: Optional[str] = None
    company_name: Optional[str] = None
    tagline: Optional[str] = None
    layout: Literal["stacked", "inline"] = "stacked"
    show_menu: bool = False
    nav_links: List[NavLink] = []
    colors: HeaderColors = HeaderColors()

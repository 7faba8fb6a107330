"""Bloc Footer — coordonnées société, icônes sociales, mentions légales."""
from typing import List, Literal, Optional
from .base import BaseBlock
from .social import SocialLink


class FooterBlock(BaseBlock):
    type: Literal["footer"] = "footer"
    background_color: str = "#f3f4f6"
    logo_url: Optional[str] = None
    company_name: Optional[str] = None
    address: Optional[str] = None
    company_email: Optional[str] = None
    phone: Optional[str] = None
    social_links: List[SocialLink] = []
    social_icon_size: Optional[str] = None    # small | medium | large
    social_icon_style: Optional[str] = None   # circle | square | rounded
    copyright_text: Optional[str] = None
    privacy_url: Optional[str] = None
    terms_url: Optional[str] = None
    unsubscribe_url: Optional[str] = None
    unsubscribe_text: Optional[str] = None

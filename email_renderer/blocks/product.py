"""Bloc Product — fiche produit (image, note, prix, remise, CTA)."""
from typing import Literal, Optional
from .base import BaseBlock, CssValue, EmailModel


class ProductColors(EmailModel):
    badge: str = "#ef4444"
    text: str = "#1f2937"
    price: str = "#1f2937"
    button_text: str = "#fff"


class ProductBlock(BaseBlock):
    type: Literal["product"] = "product"
    product_image: Optional[str] = None
    title: str = ""
    title_font_size: Optional[CssValue] = None
    badge: Optional[str] = None
    rating: Optional[int] = None
    review_count: Optional[int] = None
    price: str = ""
    original_price: Optional[str] = None
    discount: Optional[CssValue] = None
    description: str = ""
    url: str = "#"
    button_text: str = ""
    button_color: str = "#3b82f6"
    background_color: str = "#ffffff"
    in_stock: Optional[bool] = None
    colors: ProductColors = ProductColors()

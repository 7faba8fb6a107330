"""Blocs e-commerce — grille produits, coupon, relance panier, récap commande."""
from typing import List, Literal
from .base import BaseBlock, EmailModel


class GridProduct(EmailModel):
    id: str = ""
    image: str = ""
    title: str = ""
    price: str = ""
    url: str = "#"


class ProductGridBlock(BaseBlock):
    type: Literal["product-grid"] = "product-grid"
    products: List[GridProduct] = []
    background_color: str = "#ffffff"


class CouponBlock(BaseBlock):
    type: Literal["coupon"] = "coupon"
    code: str = ""
    discount: str = ""
    description: str = ""
    background_color: str = "#fef3c7"
    border_color: str = "#d97706"
    alignment: str = "center"


class CartReminderBlock(BaseBlock):
    type: Literal["cart-reminder"] = "cart-reminder"
    items_count: int = 0
    total_price: str = ""
    item_images: List[str] = []
    checkout_url: str = "#"


class OrderItem(EmailModel):
    name: str = ""
    qty: int = 1
    price: str = ""


class OrderSummaryBlock(BaseBlock):
    type: Literal["order-summary"] = "order-summary"
    order_id: str = ""
    items: List[OrderItem] = []
    total: str = ""
    shipping_address: str = ""

"""
Blocs email — exports publics, registry BlockType → modèle, BlockUnion discriminé.
"""
import logging
from typing import Annotated, Any, Dict, Mapping, Optional, Type, Union
from pydantic import Field

from .base import BaseBlock, BlockType, EmailModel
from .content import (
    HeadingBlock, TextBlock, ImageBlock, ButtonBlock, SpacerBlock,
    DividerBlock, LinkBlock, HtmlBlock, VideoBlock,
)
from .social import SocialBlock, SocialLink
from .header import HeaderBlock, HeaderColors, NavLink
from .footer import FooterBlock
from .product import ProductBlock, ProductColors
from .unsubscribe import UnsubscribeBlock, UnsubscribeColors
from .layout import ContainerBlock, Row2Block, Row3Block, Column2Block, Column3Block
from .commerce import (
    ProductGridBlock, GridProduct, CouponBlock, CartReminderBlock,
    OrderSummaryBlock, OrderItem,
)
from .listing import (
    PropertyCardBlock, PropertySpecs, FeaturesBlock, FeatureItem, LocationBlock,
    JobListingBlock, BenefitsBlock, BenefitItem,
)

log = logging.getLogger(__name__)

BLOCK_REGISTRY: Dict[BlockType, Type[BaseBlock]] = {
    BlockType.HEADING:       HeadingBlock,
    BlockType.TEXT:          TextBlock,
    BlockType.IMAGE:         ImageBlock,
    BlockType.BUTTON:        ButtonBlock,
    BlockType.SPACER:        SpacerBlock,
    BlockType.DIVIDER:       DividerBlock,
    BlockType.SOCIAL:        SocialBlock,
    BlockType.LINK:          LinkBlock,
    BlockType.HTML:          HtmlBlock,
    BlockType.VIDEO:         VideoBlock,
    BlockType.HEADER:        HeaderBlock,
    BlockType.FOOTER:        FooterBlock,
    BlockType.PRODUCT:       ProductBlock,
    BlockType.UNSUBSCRIBE:   UnsubscribeBlock,
    BlockType.ROW2:          Row2Block,
    BlockType.ROW3:          Row3Block,
    BlockType.COLUMN2:       Column2Block,
    BlockType.COLUMN3:       Column3Block,
    BlockType.PRODUCT_GRID:  ProductGridBlock,
    BlockType.COUPON:        CouponBlock,
    BlockType.CART_REMINDER: CartReminderBlock,
    BlockType.ORDER_SUMMARY: OrderSummaryBlock,
    BlockType.PROPERTY_CARD: PropertyCardBlock,
    BlockType.FEATURES:      FeaturesBlock,
    BlockType.LOCATION:      LocationBlock,
    BlockType.JOB_LISTING:   JobListingBlock,
    BlockType.BENEFITS:      BenefitsBlock,
}

# Union discriminée par type : validation stricte (TypeAdapter), sans repli sur les défauts
BlockUnion = Annotated[
    Union[tuple(BLOCK_REGISTRY.values())],
    Field(discriminator="type"),
]


def block_type_of(raw: Any) -> Optional[BlockType]:
    """Retourne le BlockType d'un bloc (modèle ou dict), None si inconnu."""
    tag = raw.type if isinstance(raw, BaseBlock) else raw.get("type") if isinstance(raw, Mapping) else None
    if not isinstance(tag, str):
        return None
    try:
        return BlockType(tag)
    except ValueError:
        return None


def coerce_block(raw: Any) -> Optional[BaseBlock]:
    """
    Convertit un bloc brut (dict JSON) en modèle typé.

    - modèle déjà typé → retourné tel quel
    - type inconnu / valeur non-dict → None (le bloc sera ignoré)
    - champs invalides → retirés, valeurs par défaut appliquées
    """
    block_type = block_type_of(raw)
    if block_type is None:
        tag = raw.get("type") if isinstance(raw, Mapping) else getattr(raw, "type", raw)
        log.debug("Bloc ignoré (type inconnu) : %r", tag)
        return None

    block_cls = BLOCK_REGISTRY[block_type]
    if isinstance(raw, block_cls):
        return raw
    if isinstance(raw, BaseBlock):
        raw = raw.model_dump(by_alias=True)
    return block_cls.model_validate_lenient(raw)


__all__ = [
    "BaseBlock", "BlockType", "EmailModel",
    "HeadingBlock", "TextBlock", "ImageBlock", "ButtonBlock", "SpacerBlock",
    "DividerBlock", "LinkBlock", "HtmlBlock", "VideoBlock",
    "SocialBlock", "SocialLink",
    "HeaderBlock", "HeaderColors", "NavLink",
    "FooterBlock",
    "ProductBlock", "ProductColors",
    "UnsubscribeBlock", "UnsubscribeColors",
    "ContainerBlock", "Row2Block", "Row3Block", "Column2Block", "Column3Block",
    "ProductGridBlock", "GridProduct", "CouponBlock", "CartReminderBlock",
    "OrderSummaryBlock", "OrderItem",
    "PropertyCardBlock", "PropertySpecs", "FeaturesBlock", "FeatureItem", "LocationBlock",
    "JobListingBlock", "BenefitsBlock", "BenefitItem",
    "BLOCK_REGISTRY", "BlockUnion", "block_type_of", "coerce_block",
]

"""
Email Renderer v1.0 — compile un document de blocs (éditeur visuel) en HTML email autonome.

Usage :
    >>> from email_renderer import render_document
    >>> html = render_document({
    ...     "settings": {"fontFamily": "Arial", "backgroundColor": "#fff", "contentWidth": 600, "primaryColor": "#000"},
    ...     "blocks": [{"type": "heading", "level": "h1", "content": "Hi", "alignment": "center", "color": "#111"}],
    ... })

Usage (builder) :
    >>> from email_renderer import EmailBuilder
    >>> builder = EmailBuilder()
    >>> html = builder.render(builder.create_document([builder.create_block("text")]))

Le renderer n'échappe AUCUN contenu (bloc html et champs texte recopiés tels quels) :
nettoyer le contenu non fiable avant de construire le document, ou utiliser escape_document.
"""

# ── Modèle ──────────────────────────────────────────────────────────────────
from .core.schemas import EmailSettings, EmailDocument
from .blocks import (
    BaseBlock, BlockType, BLOCK_REGISTRY, BlockUnion, coerce_block,
    HeadingBlock, TextBlock, ImageBlock, ButtonBlock, SpacerBlock,
    DividerBlock, LinkBlock, HtmlBlock, VideoBlock,
    SocialBlock, SocialLink, HeaderBlock, NavLink, FooterBlock,
    ProductBlock, UnsubscribeBlock,
    Row2Block, Row3Block, Column2Block, Column3Block,
    ProductGridBlock, CouponBlock, CartReminderBlock, OrderSummaryBlock,
    PropertyCardBlock, FeaturesBlock, LocationBlock, JobListingBlock, BenefitsBlock,
)

# ── Rendu ───────────────────────────────────────────────────────────────────
from .core.icons import resolve_icon
from .renderer import compile_block, compile_blocks, render_document

# ── Outils ──────────────────────────────────────────────────────────────────
from .builder import EmailBuilder, create_default_block, default_document, iter_blocks, find_block
from .core.merge_tags import resolve_merge_tags, personalize, tracking_pixel_url, inject_tracking_pixel
from .sanitize import escape_document, validate_document

__version__ = "1.0.0"

__all__ = [
    # modèle
    "EmailSettings", "EmailDocument",
    "BaseBlock", "BlockType", "BLOCK_REGISTRY", "BlockUnion", "coerce_block",
    "HeadingBlock", "TextBlock", "ImageBlock", "ButtonBlock", "SpacerBlock",
    "DividerBlock", "LinkBlock", "HtmlBlock", "VideoBlock",
    "SocialBlock", "SocialLink", "HeaderBlock", "NavLink", "FooterBlock",
    "ProductBlock", "UnsubscribeBlock",
    "Row2Block", "Row3Block", "Column2Block", "Column3Block",
    "ProductGridBlock", "CouponBlock", "CartReminderBlock", "OrderSummaryBlock",
    "PropertyCardBlock", "FeaturesBlock", "LocationBlock", "JobListingBlock", "BenefitsBlock",
    # rendu
    "resolve_icon", "compile_block", "compile_blocks", "render_document",
    # outils
    "EmailBuilder", "create_default_block", "default_document", "iter_blocks", "find_block",
    "resolve_merge_tags", "personalize", "tracking_pixel_url", "inject_tracking_pixel",
    "escape_document", "validate_document",
]

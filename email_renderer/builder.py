"""
API publique de construction d'emails — blocs par défaut de l'éditeur, document de départ,
parcours de l'arbre de blocs.
"""
import uuid
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional

from .blocks import BLOCK_REGISTRY, BaseBlock, BlockType, ContainerBlock
from .core.schemas import EmailDocument, EmailSettings
from .renderer.document import render_document

CONTAINER_TYPES = {BlockType.ROW2, BlockType.ROW3, BlockType.COLUMN2, BlockType.COLUMN3}

_HEADING_LABELS = {"h1": "Heading 1", "h2": "Heading 2", "h3": "Heading 3"}


def _default_fields(block_type: BlockType, level: Optional[str]) -> Dict[str, Any]:
    """Valeurs initiales de chaque bloc, telles que l'éditeur les crée."""
    if block_type is BlockType.HEADING:
        level = level or "h1"
        return {"content": _HEADING_LABELS.get(level, "Heading"), "level": level,
                "alignment": "center", "color": "#1f2937"}

    defaults: Dict[BlockType, Dict[str, Any]] = {
        BlockType.TEXT:    {"content": "Nhập nội dung...", "alignment": "left"},
        BlockType.IMAGE:   {"src": "", "alt": "Hình ảnh", "width": "full", "alignment": "center"},
        BlockType.BUTTON:  {"label": "Click", "url": "#", "backgroundColor": "#3b82f6",
                            "textColor": "#ffffff", "borderRadius": 8, "alignment": "center"},
        BlockType.SPACER:  {"height": 32},
        BlockType.DIVIDER: {"style": "solid", "color": "#e5e7eb"},
        BlockType.SOCIAL:  {"platforms": [{"name": "Facebook", "url": "#"}], "alignment": "center"},
        BlockType.LINK:    {"text": "Click here", "url": "#", "alignment": "left", "color": "#3b82f6"},
        BlockType.ROW2:    {"children": [[], []]},
        BlockType.ROW3:    {"children": [[], [], []]},
        BlockType.COLUMN2: {"children": [[], []]},
        BlockType.COLUMN3: {"children": [[], [], []]},
        BlockType.HTML:    {"content": '<p style="color:#3b82f6;font-weight:bold;">Custom HTML Content</p>'},
        BlockType.VIDEO:   {"url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ", "alt": "Video thumbnail",
                            "alignment": "center"},
        BlockType.HEADER:  {"logoSrc": "", "layout": "stacked", "showMenu": True,
                            "navLinks": [{"text": "Home", "url": "#"}, {"text": "Shop", "url": "#"},
                                         {"text": "Contact", "url": "#"}],
                            "colors": {"background": "#ffffff"}},
        BlockType.FOOTER:  {"copyrightText": "© 2024 Your Company. All rights reserved.",
                            "address": "123 Street, City, Country",
                            "socialLinks": [{"name": "Facebook", "url": "#"}, {"name": "Instagram", "url": "#"}],
                            "backgroundColor": "#f3f4f6"},
        BlockType.PRODUCT: {"productImage": "", "title": "Product Name", "price": "$99.00",
                            "description": "Amazing product description goes here.", "url": "#",
                            "buttonText": "Buy Now", "buttonColor": "#3b82f6", "backgroundColor": "#ffffff",
                            "inStock": True},
        BlockType.UNSUBSCRIBE: {"text": "No longer want to receive these emails?", "url": "{{unsubscribe}}",
                                "linkText": "Unsubscribe", "alignment": "center"},
        BlockType.PRODUCT_GRID: {"products": [{"id": "1", "image": "", "title": "Product 1", "price": "$50", "url": "#"},
                                              {"id": "2", "image": "", "title": "Product 2", "price": "$75", "url": "#"}],
                                 "backgroundColor": "#ffffff"},
        BlockType.COUPON: {"code": "SAVE20", "discount": "20% OFF",
                           "description": "Use this code at checkout for 20% off your entire order.",
                           "backgroundColor": "#fef3c7", "borderColor": "#d97706", "alignment": "center"},
        BlockType.CART_REMINDER: {"itemsCount": 2, "totalPrice": "$125.00", "itemImages": ["", ""],
                                  "checkoutUrl": "#"},
        BlockType.ORDER_SUMMARY: {"orderId": "#ORD-12345",
                                  "items": [{"name": "Product A", "qty": 1, "price": "$50"},
                                            {"name": "Product B", "qty": 1, "price": "$75"}],
                                  "total": "$125.00", "shippingAddress": "123 Main St, City, Country"},
        BlockType.PROPERTY_CARD: {"image": "", "title": "Modern Apartment", "price": "$250,000",
                                  "address": "123 Downtown Ave, City",
                                  "specs": {"beds": 2, "baths": 2, "area": "85m²"}, "url": "#"},
        BlockType.FEATURES: {"features": [{"icon": "check", "text": t}
                                          for t in ("Swimming Pool", "Gym", "Parking", "Security")],
                             "columns": 2},
        BlockType.LOCATION: {"mapImage": "", "address": "123 Downtown Ave, City, Country", "url": "#"},
        BlockType.JOB_LISTING: {"title": "Senior Marketing Manager", "department": "Marketing",
                                "location": "Remote / Ho Chi Minh", "salary": "$2000 - $3000", "url": "#",
                                "tags": ["Full-time", "Senior Level"]},
        BlockType.BENEFITS: {"benefits": [{"title": "Health Insurance", "description": "Full coverage for you and family"},
                                          {"title": "Remote Work", "description": "Work from anywhere"}]},
    }
    return defaults[block_type]


def generate_id() -> str:
    return uuid.uuid4().hex[:9]


def create_default_block(block_type: str, level: Optional[str] = None, block_id: Optional[str] = None) -> BaseBlock:
    """
    Crée un bloc avec les valeurs par défaut de l'éditeur.

    Raises:
        ValueError: type de bloc inconnu
    """
    try:
        bt = BlockType(block_type)
    except ValueError:
        raise ValueError(f"Bloc inconnu : {block_type!r}. Types : {[t.value for t in BlockType]}") from None

    data = {"id": block_id or generate_id(), "type": bt.value, **_default_fields(bt, level)}
    return BLOCK_REGISTRY[bt].model_validate(data)


def default_document() -> EmailDocument:
    """Document de départ de l'éditeur : titre, texte, bouton."""
    return EmailDocument(
        settings=EmailSettings(
            background_color="#f3f4f6",
            content_width=600,
            font_family="Arial, sans-serif",
            primary_color="#3b82f6",
        ),
        blocks=[
            BLOCK_REGISTRY[BlockType.HEADING].model_validate(
                {"id": "d1", "type": "heading", "content": "Chào mừng!", "level": "h1",
                 "alignment": "center", "color": "#1f2937"}),
            BLOCK_REGISTRY[BlockType.TEXT].model_validate(
                {"id": "d2", "type": "text", "content": "Kéo thả để xây dựng email.", "alignment": "center"}),
            BLOCK_REGISTRY[BlockType.BUTTON].model_validate(
                {"id": "d3", "type": "button", "label": "Bắt đầu", "url": "#", "backgroundColor": "#3b82f6",
                 "textColor": "#fff", "borderRadius": 8, "alignment": "center"}),
        ],
    )


# ── Parcours de l'arbre ─────────────────────────────────────────────────────

def _children(block: Any) -> list:
    if isinstance(block, ContainerBlock):
        return block.children
    if isinstance(block, Mapping) and block.get("type") in {t.value for t in CONTAINER_TYPES}:
        children = block.get("children")
        return children if isinstance(children, list) else []
    return []


def iter_blocks(blocks: Optional[Iterable[Any]]) -> Iterator[Any]:
    """Parcours en profondeur : chaque bloc, puis le contenu de ses cellules."""
    stack = list(reversed(list(blocks or [])))
    while stack:
        block = stack.pop()
        yield block
        for cell in reversed(_children(block)):
            if isinstance(cell, list):
                stack.extend(reversed(cell))


def find_block(blocks: Optional[Iterable[Any]], block_id: str) -> Optional[Any]:
    for block in iter_blocks(blocks):
        found_id = block.get("id") if isinstance(block, Mapping) else getattr(block, "id", None)
        if found_id == block_id:
            return block
    return None


class EmailBuilder:
    """
    Builder d'emails.

    Usage:
        >>> builder = EmailBuilder()
        >>> doc = builder.create_document([builder.create_block("heading", content="Bonjour")])
        >>> html = builder.render(doc)
    """

    def __init__(self, settings: EmailSettings | None = None):
        """
        Args:
            settings: Réglages globaux (défaut : ceux de l'éditeur)
        """
        self.settings = settings or EmailSettings()

    def create_block(self, block_type: str, level: str | None = None, **overrides) -> BaseBlock:
        """
        Crée un bloc par défaut puis applique les surcharges (noms de champs Python).

        Returns:
            Bloc typé
        """
        block = create_default_block(block_type, level=level)
        return block.model_copy(update=overrides) if overrides else block

    def create_document(self, blocks: list, settings: EmailSettings | None = None) -> EmailDocument:
        return EmailDocument(settings=settings or self.settings, blocks=list(blocks))

    def render(self, doc: EmailDocument, **kwargs) -> str:
        """
        Rend un document en HTML complet.

        Args:
            doc: Document à rendre
            **kwargs: title, extra_head, extra_body_end

        Returns:
            HTML complet (chaîne vide si document incomplet)
        """
        return render_document(doc, **kwargs)

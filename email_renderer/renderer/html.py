"""
Compilateur de blocs — chaque type de bloc → fragment HTML email-safe (styles inline).

Dispatch : table BlockType → règle de rendu, exhaustive (vérifiée à l'import).
Les conteneurs (row2/row3/column2/column3) sont déroulés par compile_blocks sur une pile explicite.

ATTENTION : aucun échappement. Le bloc `html` est recopié tel quel et les champs texte
sont interpolés bruts. Nettoyer le contenu non fiable AVANT de construire le document
(voir sanitize.escape_document).
"""
import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from ..blocks import (
    BlockType, coerce_block,
    HeadingBlock, TextBlock, ImageBlock, ButtonBlock, SpacerBlock, DividerBlock,
    LinkBlock, HtmlBlock, VideoBlock, SocialBlock, SocialLink, HeaderBlock, FooterBlock,
    ProductBlock, UnsubscribeBlock, ContainerBlock,
    ProductGridBlock, CouponBlock, CartReminderBlock, OrderSummaryBlock,
    PropertyCardBlock, FeaturesBlock, LocationBlock, JobListingBlock, BenefitsBlock,
)
from ..core.schemas import EmailSettings
from ..core.icons import ICON_SIZES, ICON_RADII, resolve_icon, glyph_size
from .. import config

log = logging.getLogger(__name__)

# Bloc social : conteneur fixe 32px, glyphe 16px
SOCIAL_ICON_PX = 32
SOCIAL_GLYPH_PX = 16

# Style commun des cellules de conteneurs
_CELL_STYLE = "padding:12px;background:#f9fafb;border:1px solid #e5e7eb;border-radius:8px;"


# ── Point d'entrée public ───────────────────────────────────────────────────

def compile_block(block: Any, settings: Any) -> str:
    """Rend un bloc (modèle ou dict JSON). Type inconnu → chaîne vide."""
    return compile_blocks([block], settings)


def compile_blocks(blocks: Optional[Iterable[Any]], settings: Any) -> str:
    """
    Concatène le rendu de chaque bloc, dans l'ordre, sans séparateur.

    Les conteneurs sont déroulés sur une pile explicite (pas de récursion Python) :
    la profondeur d'imbrication n'est pas limitée.
    """
    s = _as_settings(settings)
    out: List[str] = []
    # (True, fragment HTML) ou (False, bloc à compiler), dépilés dans l'ordre du document
    stack: List[Tuple[bool, Any]] = [(False, b) for b in reversed(list(blocks or []))]

    while stack:
        is_markup, item = stack.pop()
        if is_markup:
            out.append(item)
            continue

        typed = coerce_block(item)
        if typed is None:
            continue
        block_type = BlockType(typed.type)
        frame = _FRAMES.get(block_type)
        if frame is None:
            out.append(_RULES[block_type](typed, s))
            continue

        opening, cell_open, cell_close, closing = frame
        stack.append((True, closing))
        for cell in reversed(typed.children):
            stack.append((True, cell_close))
            stack.extend((False, child) for child in reversed(cell))
            stack.append((True, cell_open))
        stack.append((True, opening))

    return "".join(out)


def _as_settings(settings: Any) -> EmailSettings:
    if isinstance(settings, EmailSettings):
        return settings
    if isinstance(settings, Mapping):
        return EmailSettings.model_validate_lenient(settings) or EmailSettings()
    return EmailSettings()


# ── Contenu simple ──────────────────────────────────────────────────────────

def render_heading(b: HeadingBlock, s: EmailSettings) -> str:
    # Deux tailles seulement : h1 = 28px, tout le reste = 20px
    size = "28px" if b.level == "h1" else "20px"
    return (
        f'<{b.level} style="margin:0 0 16px;font-size:{size};font-weight:bold;'
        f'text-align:{b.alignment};color:{b.color};font-family:{s.font_family};">{b.content}</{b.level}>'
    )


def render_text(b: TextBlock, s: EmailSettings) -> str:
    return (
        f'<div style="margin:0 0 16px;text-align:{b.alignment};color:#4b5563;'
        f'font-family:{s.font_family};line-height:1.5;">{b.content}</div>'
    )


def render_image(b: ImageBlock, s: EmailSettings) -> str:
    return (
        f'<div style="text-align:{b.alignment};margin:16px 0;">'
        f'<img src="{b.src}" alt="{b.alt}" style="max-width:100%;border-radius:8px;" /></div>'
    )


def render_button(b: ButtonBlock, s: EmailSettings) -> str:
    return (
        f'<div style="text-align:{b.alignment};margin:24px 0;">'
        f'<a href="{b.url}" style="display:inline-block;background:{b.background_color};color:{b.text_color};'
        f'padding:12px 32px;border-radius:{b.border_radius}px;text-decoration:none;font-weight:bold;'
        f'font-family:{s.font_family};">{b.label}</a></div>'
    )


def render_spacer(b: SpacerBlock, s: EmailSettings) -> str:
    return f'<div style="height:{b.height}px;"></div>'


def render_divider(b: DividerBlock, s: EmailSettings) -> str:
    return f'<hr style="border:none;border-top:1px {b.style} {b.color};margin:24px 0;" />'


def render_link(b: LinkBlock, s: EmailSettings) -> str:
    return (
        f'<div style="text-align:{b.alignment};margin:16px 0;">'
        f'<a href="{b.url}" style="color:{b.color};text-decoration:underline;'
        f'font-family:{s.font_family};">{b.text}</a></div>'
    )


def render_html(b: HtmlBlock, s: EmailSettings) -> str:
    return b.content


def render_video(b: VideoBlock, s: EmailSettings) -> str:
    thumbnail = b.thumbnail or config.VIDEO_PLACEHOLDER_URL
    play = (
        '<div style="position:absolute;top:50%;left:50%;transform:translate(-50%,-50%);width:48px;height:48px;'
        'background:rgba(255,255,255,0.9);border-radius:50%;display:flex;align-items:center;'
        'justify-content:center;">▶</div>'
    )
    return (
        f'<div style="text-align:{b.alignment};margin:16px 0;"><a href="{b.url}" target="_blank">'
        f'<div style="position:relative;display:inline-block;">'
        f'<img src="{thumbnail}" alt="{b.alt}" style="max-width:100%;border-radius:8px;" />{play}'
        f'</div></a></div>'
    )


# ── Icônes sociales ─────────────────────────────────────────────────────────

def render_social_icon(link: SocialLink, size_px: int, radius: str, glyph_px: int) -> str:
    return f"""<a href="{link.url}" style="display:inline-block;width:{size_px}px;height:{size_px}px;line-height:{size_px}px;background:#e5e7eb;color:#4b5563;border-radius:{radius};text-align:center;text-decoration:none;margin:0 4px;">
  <svg viewBox="0 0 24 24" width="{glyph_px}" height="{glyph_px}" style="vertical-align:middle;" stroke="currentColor" stroke-width="2" fill="none" stroke-linecap="round" stroke-linejoin="round">{resolve_icon(link.name)}</svg>
</a>"""


def render_social(b: SocialBlock, s: EmailSettings) -> str:
    icons = "".join(
        render_social_icon(p, SOCIAL_ICON_PX, ICON_RADII["circle"], SOCIAL_GLYPH_PX)
        for p in b.platforms
    )
    return f'<div style="text-align:{b.alignment};margin:24px 0;">{icons}</div>'


# ── Header / Footer ─────────────────────────────────────────────────────────

def render_header(b: HeaderBlock, s: EmailSettings) -> str:
    stacked = b.layout == "stacked"
    c = b.colors

    if b.logo_src:
        brand = f'<img src="{b.logo_src}" alt="Logo" style="height:40px;display:block;margin-bottom:4px;" />'
    elif b.company_name:
        brand = f'<div style="font-size:24px;font-weight:bold;color:{c.company_name};line-height:1;">{b.company_name}</div>'
    else:
        brand = '<div style="background:#e5e7eb;color:#6b7280;font-size:12px;font-weight:bold;padding:4px 12px;border-radius:4px;">LOGO</div>'

    tagline = f'<div style="font-size:14px;color:{c.tagline};margin-top:4px;">{b.tagline}</div>' if b.tagline else ""

    menu = ""
    if b.show_menu:
        links = "".join(
            f'<a href="{lnk.url}" style="margin:0 10px;color:{c.menu};text-decoration:none;font-size:14px;font-weight:500;">{lnk.text}</a>'
            for lnk in b.nav_links
        )
        menu = (
            f'<div style="margin-top:{"16px" if stacked else "0"};'
            f'text-align:{"center" if stacked else "right"};">{links}</div>'
        )

    return f"""<div style="background:{c.background};padding:24px;display:flex;flex-direction:{"column" if stacked else "row"};align-items:center;justify-content:{"center" if stacked else "space-between"};gap:16px;font-family:{s.font_family};">
  <div style="display:flex;flex-direction:column;align-items:{"center" if stacked else "flex-start"};">
    {brand}
    {tagline}
  </div>
  {menu}
</div>"""


def format_copyright(text: Optional[str]) -> str:
    """Préfixe « © » sauf si déjà présent."""
    if not text:
        return ""
    return text if text.startswith("©") else f"© {text}"


def render_footer(b: FooterBlock, s: EmailSettings) -> str:
    logo = (
        f'<img src="{b.logo_url}" alt="Company Logo" style="height:32px;margin:0 auto 16px;display:block;" />'
        if b.logo_url else ""
    )
    company = f'<div style="font-weight:bold;color:#1f2937;margin-bottom:4px;">{b.company_name}</div>' if b.company_name else ""
    contact = "".join(f"<div>{v}</div>" for v in (b.address, b.company_email, b.phone) if v)

    social = ""
    if b.social_links:
        size_px = ICON_SIZES.get(b.social_icon_size or "medium", ICON_SIZES["medium"])
        radius = ICON_RADII.get(b.social_icon_style or "circle", ICON_RADII["circle"])
        icons = "".join(
            render_social_icon(link, size_px, radius, glyph_size(size_px))
            for link in b.social_links
        )
        social = f'<div style="margin-bottom:24px;">{icons}</div>'

    legal_style = "color:#6b7280;text-decoration:underline;margin:0 8px;"
    legal = ""
    if b.privacy_url:
        legal += f'<a href="{b.privacy_url}" style="{legal_style}">Privacy Policy</a>'
    if b.terms_url:
        legal += f'<a href="{b.terms_url}" style="{legal_style}">Terms of Service</a>'
    if b.unsubscribe_url:
        legal += f'<a href="{b.unsubscribe_url}" style="{legal_style}">{b.unsubscribe_text or "Unsubscribe"}</a>'

    return f"""<div style="background:{b.background_color};padding:32px 24px;text-align:center;font-family:{s.font_family};">
  {logo}
  <div style="margin-bottom:24px;">
    {company}
    <div style="font-size:12px;color:#6b7280;line-height:1.5;">{contact}</div>
  </div>
  {social}
  <div style="border-top:1px solid #e5e7eb;padding-top:24px;">
    <div style="font-size:12px;color:#9ca3af;margin-bottom:12px;">{format_copyright(b.copyright_text)}</div>
    <div style="font-size:12px;color:#9ca3af;">{legal}</div>
  </div>
</div>"""


# ── Produit / désinscription ────────────────────────────────────────────────

def star_rating(rating: int) -> str:
    """★ × rating puis ☆ × (5 - rating), sans borne."""
    return "★" * rating + "☆" * (5 - rating)


def has_rating(b: ProductBlock) -> bool:
    # 5 étoiles sans aucun avis = pas de vraie note
    if b.rating is None:
        return False
    return not (b.rating == 5 and not b.review_count)


def render_product(b: ProductBlock, s: EmailSettings) -> str:
    c = b.colors

    badge = ""
    if b.badge:
        badge = (
            f'<div style="position:absolute;top:16px;left:16px;background:{c.badge};color:#fff;font-size:12px;'
            f'font-weight:bold;padding:4px 12px;border-radius:999px;z-index:10;">{b.badge}</div>'
        )

    if b.product_image:
        image = f'<img src="{b.product_image}" alt="{b.title}" style="width:100%;height:224px;object-fit:cover;display:block;" />'
    else:
        image = '<div style="width:100%;height:224px;background:#f3f4f6;display:flex;align-items:center;justify-content:center;color:#9ca3af;">Product Image</div>'

    # Bandeau superposé : l'image reste dans le HTML
    out_of_stock = ""
    if b.in_stock is False:
        out_of_stock = (
            '<div style="position:absolute;top:0;left:0;right:0;bottom:0;background:rgba(255,255,255,0.6);'
            'display:flex;align-items:center;justify-content:center;font-weight:bold;color:#6b7280;'
            'text-transform:uppercase;letter-spacing:1px;">Out of Stock</div>'
        )

    rating = ""
    if has_rating(b):
        reviews = f'<span style="font-size:12px;color:#9ca3af;">({b.review_count} reviews)</span>' if b.review_count else ""
        rating = (
            f'<div style="display:flex;align-items:center;justify-content:center;gap:4px;margin-bottom:12px;">'
            f'<span style="color:#facc15;font-size:14px;">{star_rating(b.rating)}</span>{reviews}</div>'
        )

    discount = ""
    if b.discount:
        discount = (
            f'<span style="font-size:12px;font-weight:bold;color:#ef4444;background:#fef2f2;'
            f'padding:2px 6px;border-radius:4px;">-{b.discount}%</span>'
        )

    return f"""<div style="background:{b.background_color};border:1px solid #e5e7eb;border-radius:12px;overflow:hidden;text-align:center;position:relative;font-family:{s.font_family};">
  {badge}
  <div style="position:relative;">
    {image}
    {out_of_stock}
  </div>
  <div style="padding:24px;">
    <h3 style="margin:0 0 8px;font-size:{b.title_font_size or 20}px;color:{c.text};font-weight:bold;line-height:1.25;">{b.title}</h3>
    {rating}
    <div style="display:flex;align-items:center;justify-content:center;gap:8px;margin-bottom:16px;">
      <span style="font-size:18px;font-weight:bold;color:{c.price};">{b.price}</span>
      <span style="font-size:14px;color:#9ca3af;text-decoration:line-through;">{b.original_price or ""}</span>
      {discount}
    </div>
    <p style="color:#6b7280;font-size:14px;margin-bottom:16px;line-height:1.5;">{b.description}</p>
    <a href="{b.url}" style="display:block;width:100%;background:{b.button_color};color:{c.button_text};padding:12px 24px;border-radius:8px;text-decoration:none;font-weight:bold;text-align:center;">{b.button_text}</a>
  </div>
</div>"""


def render_unsubscribe(b: UnsubscribeBlock, s: EmailSettings) -> str:
    c = b.colors
    font_size = b.font_size or 12
    return f"""<div style="background:{c.background};text-align:{b.alignment};padding:16px;font-family:{s.font_family};">
  <div style="font-size:{font_size}px;color:{c.text};margin-bottom:8px;">{b.text}</div>
  <a href="{b.url}" style="display:inline-block;font-size:{font_size}px;color:{c.link};text-decoration:none;font-weight:500;">{b.link_text}</a>
</div>"""


# ── Conteneurs (tables) ─────────────────────────────────────────────────────

# Enveloppe de chaque conteneur : (ouverture, début de cellule, fin de cellule, fermeture)
ContainerFrame = Tuple[str, str, str, str]

# row2/row3 : une <tr> par cellule, blocs empilés dans une carte unique
_ROWS_FRAME: ContainerFrame = (
    '<table width="100%" cellpadding="0" cellspacing="0" style="margin:16px 0;">',
    f'<tr><td style="{_CELL_STYLE}">',
    "</td></tr>",
    "</table>",
)


def _columns_frame(width: str) -> ContainerFrame:
    return (
        '<table width="100%" cellpadding="0" cellspacing="8" style="margin:16px 0;"><tr>',
        f'<td width="{width}" style="{_CELL_STYLE}vertical-align:top;">',
        "</td>",
        "</tr></table>",
    )


_FRAMES: Dict[BlockType, ContainerFrame] = {
    BlockType.ROW2:    _ROWS_FRAME,
    BlockType.ROW3:    _ROWS_FRAME,
    BlockType.COLUMN2: _columns_frame("50%"),
    BlockType.COLUMN3: _columns_frame("33%"),
}


def render_container(b: ContainerBlock, s: EmailSettings) -> str:
    return compile_blocks([b], s)


# ── E-commerce ──────────────────────────────────────────────────────────────

def render_product_grid(b: ProductGridBlock, s: EmailSettings) -> str:
    cells = [
        f'<td width="50%" style="background:#fff;border:1px solid #e5e7eb;border-radius:8px;overflow:hidden;vertical-align:top;">'
        f'<a href="{p.url}"><img src="{p.image}" alt="{p.title}" style="width:100%;height:auto;display:block;" /></a>'
        f'<div style="padding:12px;"><div style="font-weight:bold;font-size:14px;margin-bottom:4px;">{p.title}</div>'
        f'<div style="color:#2563eb;font-weight:bold;">{p.price}</div></div></td>'
        for p in b.products
    ]
    # Deux produits par ligne
    rows = "".join(f"<tr>{''.join(cells[i:i + 2])}</tr>" for i in range(0, len(cells), 2))
    return (
        f'<div style="background:{b.background_color};padding:16px;border-radius:8px;">'
        f'<table width="100%" cellpadding="0" cellspacing="8">{rows}</table></div>'
    )


def render_coupon(b: CouponBlock, s: EmailSettings) -> str:
    return f"""<div style="background:{b.background_color};border:2px dashed {b.border_color};border-radius:12px;padding:32px;text-align:{b.alignment};margin:16px 0;">
  <div style="font-size:14px;color:#6b7280;text-transform:uppercase;letter-spacing:1px;margin-bottom:8px;">{b.discount}</div>
  <div style="font-size:32px;font-weight:bold;color:#1f2937;letter-spacing:2px;margin-bottom:8px;font-family:monospace;">{b.code}</div>
  <div style="font-size:12px;color:#4b5563;">{b.description}</div>
</div>"""


def render_cart_reminder(b: CartReminderBlock, s: EmailSettings) -> str:
    images = "".join(
        f'<img src="{src}" alt="" style="width:64px;height:64px;border-radius:8px;object-fit:cover;border:1px solid #e5e7eb;" />'
        for src in b.item_images
    )
    return f"""<div style="background:#fff;border:1px solid #e5e7eb;border-radius:12px;padding:20px;margin:16px 0;font-family:{s.font_family};">
  <div style="border-bottom:1px solid #f3f4f6;padding-bottom:16px;margin-bottom:16px;display:flex;justify-content:space-between;align-items:center;">
    <strong>Your Cart ({b.items_count})</strong><span style="color:#2563eb;font-weight:bold;">Total: {b.total_price}</span>
  </div>
  <div style="margin-bottom:20px;display:flex;gap:12px;">{images}</div>
  <a href="{b.checkout_url}" style="display:block;background:#2563eb;color:#fff;text-align:center;padding:12px;border-radius:8px;text-decoration:none;font-weight:bold;">Checkout Now</a>
</div>"""


def render_order_summary(b: OrderSummaryBlock, s: EmailSettings) -> str:
    items = "".join(
        f'<div style="display:flex;justify-content:space-between;font-size:14px;margin-bottom:12px;'
        f'border-bottom:1px dashed #f3f4f6;padding-bottom:12px;">'
        f'<span style="color:#4b5563;">{item.qty}x {item.name}</span><span style="font-weight:500;">{item.price}</span></div>'
        for item in b.items
    )
    return f"""<div style="background:#fff;border:1px solid #e5e7eb;border-radius:12px;overflow:hidden;margin:16px 0;font-family:{s.font_family};">
  <div style="background:#f9fafb;padding:12px 16px;border-bottom:1px solid #e5e7eb;font-size:12px;font-weight:bold;color:#4b5563;display:flex;justify-content:space-between;">
    <span>Order {b.order_id}</span><span style="color:#047857;">CONFIRMED</span>
  </div>
  <div style="padding:20px;">
    {items}
    <div style="display:flex;justify-content:space-between;font-weight:bold;font-size:16px;margin-top:16px;"><span>Total</span><span>{b.total}</span></div>
  </div>
  <div style="background:#f9fafb;padding:12px 16px;border-top:1px solid #e5e7eb;font-size:12px;color:#6b7280;">Ship to: {b.shipping_address}</div>
</div>"""


# ── Immobilier / recrutement ────────────────────────────────────────────────

def render_property_card(b: PropertyCardBlock, s: EmailSettings) -> str:
    sp = b.specs
    return f"""<div style="background:#fff;border:1px solid #e5e7eb;border-radius:12px;overflow:hidden;margin:16px 0;font-family:{s.font_family};">
  <div style="position:relative;">
    <img src="{b.image}" alt="{b.title}" style="width:100%;height:auto;display:block;" />
    <div style="position:absolute;top:12px;right:12px;background:rgba(255,255,255,0.9);padding:4px 8px;border-radius:4px;font-size:12px;font-weight:bold;">FOR SALE</div>
  </div>
  <div style="padding:20px;">
    <div style="font-size:20px;font-weight:bold;color:#1f2937;margin-bottom:4px;">{b.price}</div>
    <div style="color:#4b5563;font-size:14px;margin-bottom:16px;">{b.title}</div>
    <div style="display:flex;gap:16px;font-size:12px;color:#6b7280;padding-bottom:16px;border-bottom:1px solid #f3f4f6;margin-bottom:16px;">
      <span>{sp.beds} Beds</span><span>{sp.baths} Baths</span><span>{sp.area}</span>
    </div>
    <div style="font-size:12px;color:#9ca3af;">{b.address}</div>
    <a href="{b.url}" style="display:block;margin-top:16px;text-align:center;color:#2563eb;text-decoration:none;font-weight:500;">View Details</a>
  </div>
</div>"""


def render_features(b: FeaturesBlock, s: EmailSettings) -> str:
    width = "33%" if b.columns == 3 else "50%"
    cells = "".join(
        f'<td width="{width}" style="text-align:center;padding:16px;background:#fff;border:1px solid #e5e7eb;border-radius:12px;">'
        f'<div style="display:inline-block;padding:8px;background:#eff6ff;border-radius:50%;color:#2563eb;margin-bottom:8px;">✓</div>'
        f'<div style="font-size:12px;font-weight:600;color:#374151;">{f.text}</div></td>'
        for f in b.features
    )
    return f'<table width="100%" cellpadding="0" cellspacing="8" style="margin:16px 0;"><tr>{cells}</tr></table>'


def render_location(b: LocationBlock, s: EmailSettings) -> str:
    return f"""<div style="background:#fff;border:1px solid #e5e7eb;border-radius:12px;overflow:hidden;margin:16px 0;font-family:{s.font_family};">
  <a href="{b.url}"><img src="{b.map_image}" alt="{b.address}" style="width:100%;height:auto;display:block;" /></a>
  <div style="padding:16px;display:flex;gap:12px;">
    <div style="font-size:14px;font-weight:bold;color:#1f2937;">Our Location</div>
    <div style="font-size:12px;color:#6b7280;">{b.address}</div>
  </div>
</div>"""


def render_job_listing(b: JobListingBlock, s: EmailSettings) -> str:
    tags = "".join(
        f'<span style="display:inline-block;background:#eff6ff;color:#1d4ed8;font-size:10px;padding:2px 6px;border-radius:4px;margin-right:4px;">{t}</span>'
        for t in b.tags
    )
    return f"""<div style="background:#fff;border:1px solid #e5e7eb;border-radius:12px;padding:20px;margin:16px 0;font-family:{s.font_family};">
  <div style="display:flex;justify-content:space-between;align-items:start;margin-bottom:12px;">
    <div>
      <h4 style="margin:0 0 4px;font-size:18px;color:#1f2937;"><a href="{b.url}" style="color:#1f2937;text-decoration:none;">{b.title}</a></h4>
      <div style="color:#2563eb;font-size:12px;font-weight:bold;text-transform:uppercase;">{b.department}</div>
    </div>
    <div style="background:#f3f4f6;padding:4px 8px;border-radius:4px;font-size:12px;font-weight:bold;color:#374151;">{b.salary}</div>
  </div>
  <div style="margin-bottom:16px;">{tags}</div>
  <div style="border-top:1px solid #f3f4f6;padding-top:12px;font-size:12px;color:#9ca3af;">{b.location}</div>
</div>"""


def render_benefits(b: BenefitsBlock, s: EmailSettings) -> str:
    items = "".join(
        f'<div style="display:flex;gap:16px;padding:16px;background:#fff;border:1px solid #e5e7eb;border-radius:12px;margin-bottom:12px;">'
        f'<div style="font-weight:bold;color:#1f2937;">{item.title}</div>'
        f'<div style="font-size:12px;color:#6b7280;">{item.description}</div></div>'
        for item in b.benefits
    )
    return f'<div style="margin:16px 0;font-family:{s.font_family};">{items}</div>'


# ── Table de dispatch ───────────────────────────────────────────────────────

_RULES: Dict[BlockType, Callable[[Any, EmailSettings], str]] = {
    BlockType.HEADING:       render_heading,
    BlockType.TEXT:          render_text,
    BlockType.IMAGE:         render_image,
    BlockType.BUTTON:        render_button,
    BlockType.SPACER:        render_spacer,
    BlockType.DIVIDER:       render_divider,
    BlockType.SOCIAL:        render_social,
    BlockType.LINK:          render_link,
    BlockType.HTML:          render_html,
    BlockType.VIDEO:         render_video,
    BlockType.HEADER:        render_header,
    BlockType.FOOTER:        render_footer,
    BlockType.PRODUCT:       render_product,
    BlockType.UNSUBSCRIBE:   render_unsubscribe,
    BlockType.ROW2:          render_container,
    BlockType.ROW3:          render_container,
    BlockType.COLUMN2:       render_container,
    BlockType.COLUMN3:       render_container,
    BlockType.PRODUCT_GRID:  render_product_grid,
    BlockType.COUPON:        render_coupon,
    BlockType.CART_REMINDER: render_cart_reminder,
    BlockType.ORDER_SUMMARY: render_order_summary,
    BlockType.PROPERTY_CARD: render_property_card,
    BlockType.FEATURES:      render_features,
    BlockType.LOCATION:      render_location,
    BlockType.JOB_LISTING:   render_job_listing,
    BlockType.BENEFITS:      render_benefits,
}

_missing = set(BlockType) - set(_RULES)
if _missing:
    raise RuntimeError(f"Règles de rendu manquantes : {sorted(t.value for t in _missing)}")


def rule_for(block_type: BlockType) -> Callable[[Any, EmailSettings], str]:
    return _RULES[block_type]

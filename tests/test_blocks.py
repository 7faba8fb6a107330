"""Tests blocs — rendu HTML de chaque type + règles non triviales (titres, footer, produit…)."""
import pytest
from email_renderer.blocks import (
    BlockType,
    HeadingBlock, TextBlock, ImageBlock, ButtonBlock, SpacerBlock, DividerBlock,
    LinkBlock, HtmlBlock, VideoBlock, SocialBlock, SocialLink, HeaderBlock, NavLink,
    FooterBlock, ProductBlock, UnsubscribeBlock,
)
from email_renderer.core.icons import ICON_PATHS
from email_renderer.core.schemas import EmailSettings
from email_renderer.renderer.html import (
    compile_block, compile_blocks, format_copyright, star_rating, has_rating, rule_for,
)
from email_renderer import config

S = EmailSettings(font_family="Verdana", background_color="#fff", content_width=600, primary_color="#000")


# ── Dispatch ─────────────────────────────────────────────────────────────────

def test_every_block_type_has_a_rule():
    for block_type in BlockType:
        assert callable(rule_for(block_type))


@pytest.mark.parametrize("block", [
    {"type": "carousel", "content": "x"},
    {"type": "HEADING", "content": "x"},
    {"type": None},
    {"content": "no type"},
    {},
])
def test_unknown_type_renders_empty(block):
    assert compile_block(block, S) == ""


def test_compile_block_accepts_dict_settings():
    html = compile_block({"type": "text", "content": "Hi"}, {"fontFamily": "Courier"})
    assert "font-family:Courier" in html


def test_compile_block_without_settings_uses_defaults():
    html = compile_block({"type": "text", "content": "Hi"}, None)
    assert "font-family:Arial, sans-serif" in html


# ── Heading ──────────────────────────────────────────────────────────────────

def test_heading_h1_is_28px():
    html = compile_block(HeadingBlock(level="h1", content="Hello", color="#111"), S)
    assert html.startswith("<h1 ")
    assert html.endswith("</h1>")
    assert "font-size:28px" in html
    assert "color:#111" in html
    assert "font-family:Verdana" in html


@pytest.mark.parametrize("level", ["h2", "h3", "h4", "h6"])
def test_other_headings_collapse_to_20px(level):
    html = compile_block({"type": "heading", "level": level, "content": "Sub"}, S)
    assert f"<{level} " in html
    assert "font-size:20px" in html
    assert "font-size:28px" not in html


def test_heading_without_level_is_not_h1():
    html = compile_block({"type": "heading", "content": "Untitled"}, S)
    assert html.startswith("<h2 ")
    assert "font-size:20px" in html


# ── Scalaires ────────────────────────────────────────────────────────────────

def test_text_block():
    html = compile_block(TextBlock(content="Hello <b>world</b>", alignment="right"), S)
    assert "text-align:right" in html
    assert "Hello <b>world</b>" in html


def test_image_block():
    html = compile_block(ImageBlock(src="/img/a.png", alt="A picture"), S)
    assert '<img src="/img/a.png" alt="A picture"' in html
    assert "max-width:100%" in html


def test_button_radius_passthrough():
    html = compile_block(ButtonBlock(label="Buy", url="https://x.test", border_radius=999,
                                     background_color="#f00", text_color="#fff"), S)
    assert "border-radius:999px" in html
    assert 'href="https://x.test"' in html
    assert "background:#f00" in html
    assert ">Buy</a>" in html


def test_button_radius_unit_not_validated():
    html = compile_block({"type": "button", "label": "Go", "borderRadius": "50%"}, S)
    assert "border-radius:50%px" in html
    assert "border-radius:8px" not in html


def test_spacer_height_verbatim():
    assert compile_block(SpacerBlock(height=48), S) == '<div style="height:48px;"></div>'
    assert "height:-5px" in compile_block({"type": "spacer", "height": -5}, S)
    assert compile_block({"type": "spacer", "height": "2em"}, S) == '<div style="height:2empx;"></div>'


def test_numeric_text_content_rendered():
    assert ">123</div>" in compile_block({"type": "text", "content": 123}, S)


def test_divider():
    html = compile_block(DividerBlock(style="dashed", color="#ccc"), S)
    assert "border-top:1px dashed #ccc" in html


def test_link_block():
    html = compile_block(LinkBlock(text="Read more", url="/blog", color="#00f"), S)
    assert 'href="/blog"' in html
    assert "color:#00f" in html
    assert "Read more" in html


def test_html_block_passthrough_unescaped():
    raw = '<script>alert("x")</script><p onclick="evil()">hi</p>'
    assert compile_block(HtmlBlock(content=raw), S) == raw


def test_video_uses_thumbnail():
    html = compile_block(VideoBlock(url="https://v.test", thumbnail="/thumb.jpg", alt="Clip"), S)
    assert 'href="https://v.test"' in html
    assert 'src="/thumb.jpg"' in html
    assert "▶" in html


def test_video_placeholder_when_no_thumbnail(monkeypatch):
    monkeypatch.setattr(config, "VIDEO_PLACEHOLDER_URL", "https://placeholder.test/play.png")
    html = compile_block({"type": "video", "url": "https://v.test"}, S)
    assert 'src="https://placeholder.test/play.png"' in html


# ── Social ───────────────────────────────────────────────────────────────────

def test_social_block_fixed_32px():
    html = compile_block(SocialBlock(platforms=[SocialLink(name="Facebook", url="https://fb.test")]), S)
    assert "width:32px;height:32px" in html
    assert "border-radius:50%" in html
    assert 'width="16" height="16"' in html
    assert ICON_PATHS["Facebook"] in html
    assert 'href="https://fb.test"' in html


def test_social_unknown_platform_uses_website_icon():
    html = compile_block({"type": "social", "platforms": [{"name": "Mastodon", "url": "#"}]}, S)
    assert ICON_PATHS["Website"] in html


def test_social_platform_order_preserved():
    html = compile_block({"type": "social", "platforms": [
        {"name": "TikTok", "url": "#t"}, {"name": "YouTube", "url": "#y"},
    ]}, S)
    assert html.index('href="#t"') < html.index('href="#y"')


# ── Header ───────────────────────────────────────────────────────────────────

def test_header_logo_wins_over_company_name():
    html = compile_block(HeaderBlock(logo_src="/logo.png", company_name="Acme"), S)
    assert 'src="/logo.png"' in html
    assert "Acme" not in html


def test_header_company_name_fallback():
    html = compile_block({"type": "header", "companyName": "Acme", "colors": {"companyName": "#123"}}, S)
    assert "Acme" in html
    assert "color:#123" in html


def test_header_logo_placeholder():
    html = compile_block(HeaderBlock(), S)
    assert ">LOGO<" in html


def test_header_tagline_omitted_when_missing():
    assert "font-size:14px" not in compile_block(HeaderBlock(company_name="A"), S)
    assert "Since 1990" in compile_block(HeaderBlock(company_name="A", tagline="Since 1990"), S)


def test_header_menu_only_when_enabled():
    links = [NavLink(text="Shop", url="/shop")]
    assert "Shop" not in compile_block(HeaderBlock(nav_links=links), S)
    html = compile_block(HeaderBlock(nav_links=links, show_menu=True), S)
    assert 'href="/shop"' in html


def test_header_layouts():
    stacked = compile_block(HeaderBlock(layout="stacked"), S)
    inline = compile_block(HeaderBlock(layout="inline"), S)
    assert "flex-direction:column" in stacked
    assert "justify-content:center" in stacked
    assert "flex-direction:row" in inline
    assert "justify-content:space-between" in inline


# ── Footer ───────────────────────────────────────────────────────────────────

def test_copyright_prefix_added():
    html = compile_block(FooterBlock(copyright_text="2024 Acme"), S)
    assert "© 2024 Acme" in html


def test_copyright_not_double_prefixed():
    html = compile_block(FooterBlock(copyright_text="© 2024 Acme"), S)
    assert "© 2024 Acme" in html
    assert "© ©" not in html
    assert html.count("©") == 1


def test_format_copyright():
    assert format_copyright(None) == ""
    assert format_copyright("") == ""
    assert format_copyright("2024 Acme") == "© 2024 Acme"
    assert format_copyright("©2024 Acme") == "©2024 Acme"


@pytest.mark.parametrize("size,container,glyph", [
    ("small", 24, 12), ("medium", 32, 20), ("large", 40, 28), (None, 32, 20), ("huge", 32, 20),
])
def test_footer_icon_sizes(size, container, glyph):
    b = FooterBlock(social_links=[SocialLink(name="Instagram", url="#")], social_icon_size=size)
    html = compile_block(b, S)
    assert f"width:{container}px;height:{container}px" in html
    assert f'width="{glyph}" height="{glyph}"' in html


@pytest.mark.parametrize("style,radius", [
    ("circle", "50%"), ("square", "0"), ("rounded", "8px"), (None, "50%"), ("blob", "50%"),
])
def test_footer_icon_shapes(style, radius):
    b = FooterBlock(social_links=[SocialLink(name="LinkedIn", url="#")], social_icon_style=style)
    assert f"border-radius:{radius};" in compile_block(b, S)


def test_footer_without_social_links_has_no_icons():
    assert "<svg" not in compile_block(FooterBlock(), S)


def test_footer_optional_parts():
    html = compile_block(FooterBlock(address="1 Main St", phone="+84 123"), S)
    assert "<div>1 Main St</div>" in html
    assert "<div>+84 123</div>" in html
    assert "Company Logo" not in html
    assert "Privacy Policy" not in html


def test_footer_legal_links():
    html = compile_block(FooterBlock(privacy_url="/p", terms_url="/t", unsubscribe_url="/u"), S)
    assert "Privacy Policy" in html
    assert "Terms of Service" in html
    assert ">Unsubscribe</a>" in html
    html = compile_block(FooterBlock(unsubscribe_url="/u", unsubscribe_text="Hủy đăng ký"), S)
    assert ">Hủy đăng ký</a>" in html


# ── Product ──────────────────────────────────────────────────────────────────

def test_star_rating():
    assert star_rating(3) == "★★★☆☆"
    assert star_rating(5) == "★★★★★"
    assert star_rating(7) == "★★★★★★★"


def test_rating_suppressed_for_five_without_reviews():
    html = compile_block(ProductBlock(title="Mug", rating=5, review_count=0), S)
    assert "★" not in html
    assert not has_rating(ProductBlock(rating=5))


def test_rating_shown_for_five_with_reviews():
    html = compile_block(ProductBlock(title="Mug", rating=5, review_count=12), S)
    assert "★★★★★" in html
    assert "(12 reviews)" in html


def test_rating_shown_below_five_without_reviews():
    html = compile_block(ProductBlock(title="Mug", rating=4), S)
    assert "★★★★☆" in html
    assert "reviews)" not in html


def test_no_rating_field_no_stars():
    assert "★" not in compile_block(ProductBlock(title="Mug"), S)


def test_out_of_stock_overlays_image():
    html = compile_block(ProductBlock(title="Mug", product_image="/mug.jpg", in_stock=False), S)
    assert "Out of Stock" in html
    assert 'src="/mug.jpg"' in html


@pytest.mark.parametrize("in_stock", [True, None])
def test_in_stock_has_no_banner(in_stock):
    assert "Out of Stock" not in compile_block(ProductBlock(title="Mug", in_stock=in_stock), S)


def test_product_image_placeholder():
    assert "Product Image" in compile_block(ProductBlock(title="Mug"), S)


def test_product_price_and_discount():
    html = compile_block(ProductBlock(price="$49", original_price="$69", discount=30), S)
    assert "$49" in html
    assert "$69" in html
    assert "-30%" in html
    assert "%</span>" not in compile_block(ProductBlock(price="$49"), S)


def test_product_colors_and_badge():
    html = compile_block({
        "type": "product", "badge": "SALE", "titleFontSize": 24,
        "colors": {"badge": "#0f0", "buttonText": "#000"},
    }, S)
    assert "SALE" in html
    assert "background:#0f0" in html
    assert "font-size:24px" in html
    assert "color:#000" in html


# ── Unsubscribe ──────────────────────────────────────────────────────────────

def test_unsubscribe_block():
    html = compile_block(UnsubscribeBlock(text="Bye?", url="/unsub", link_text="Leave", font_size=14), S)
    assert "font-size:14px" in html
    assert 'href="/unsub"' in html
    assert "Leave" in html
    assert "Bye?" in html


def test_unsubscribe_defaults():
    html = compile_block({"type": "unsubscribe", "text": "Bye?"}, S)
    assert "font-size:12px" in html
    assert "background:transparent" in html
    assert "color:#3b82f6" in html


# ── E-commerce ───────────────────────────────────────────────────────────────

def _grid(n):
    return {"type": "product-grid", "backgroundColor": "#fafafa", "products": [
        {"id": str(i), "image": f"/p{i}.jpg", "title": f"Item {i}", "price": f"${i}0", "url": f"/p/{i}"}
        for i in range(1, n + 1)
    ]}


def test_product_grid_two_per_row():
    html = compile_block(_grid(2), S)
    assert html.count("<tr>") == 1
    assert html.count('<td width="50%"') == 2
    assert "background:#fafafa" in html
    assert html.index("Item 1") < html.index("Item 2")
    assert 'href="/p/2"' in html
    assert "$20" in html


def test_product_grid_wraps_after_two():
    html = compile_block(_grid(5), S)
    assert html.count("<tr>") == 3
    assert html.count('<td width="50%"') == 5
    assert html.count("</td></tr>") == 3


def test_product_grid_empty():
    html = compile_block({"type": "product-grid"}, S)
    assert "<td" not in html
    assert '<table width="100%" cellpadding="0" cellspacing="8"></table>' in html


def test_coupon_block():
    html = compile_block({"type": "coupon", "code": "SPRING20", "discount": "20% OFF",
                          "description": "Until May", "borderColor": "#000", "alignment": "left"}, S)
    assert "border:2px dashed #000" in html
    assert "text-align:left" in html
    assert "font-family:monospace;\">SPRING20</div>" in html
    assert html.index("20% OFF") < html.index("SPRING20") < html.index("Until May")


def test_coupon_defaults():
    html = compile_block({"type": "coupon", "code": "X"}, S)
    assert "background:#fef3c7" in html
    assert "border:2px dashed #d97706" in html


def test_cart_reminder_block():
    html = compile_block({"type": "cart-reminder", "itemsCount": 3, "totalPrice": "$120",
                          "itemImages": ["/a.jpg", "/b.jpg"], "checkoutUrl": "/checkout"}, S)
    assert "Your Cart (3)" in html
    assert "Total: $120" in html
    assert html.count("width:64px;height:64px") == 2
    assert 'href="/checkout"' in html
    assert "Checkout Now" in html


def test_order_summary_block():
    html = compile_block({"type": "order-summary", "orderId": "#ORD-1", "total": "$125",
                          "shippingAddress": "1 Main St",
                          "items": [{"name": "Mug", "qty": 2, "price": "$20"}, {"name": "Tee", "price": "$85"}]}, S)
    assert "Order #ORD-1" in html
    assert "2x Mug" in html
    assert "1x Tee" in html
    assert html.index("Mug") < html.index("Tee")
    assert "<span>$125</span>" in html
    assert "Ship to: 1 Main St" in html


# ── Immobilier / recrutement ─────────────────────────────────────────────────

def test_property_card_block():
    html = compile_block({"type": "property-card", "image": "/house.jpg", "title": "Loft", "price": "$250,000",
                          "address": "12 Riverside", "url": "/listing/1",
                          "specs": {"beds": 3, "baths": 2, "area": "90m²"}}, S)
    assert '<img src="/house.jpg" alt="Loft"' in html
    assert "$250,000" in html
    assert "<span>3 Beds</span><span>2 Baths</span><span>90m²</span>" in html
    assert "12 Riverside" in html
    assert 'href="/listing/1"' in html


def test_property_card_default_specs():
    html = compile_block({"type": "property-card", "title": "Lot"}, S)
    assert "<span>0 Beds</span><span>0 Baths</span>" in html


@pytest.mark.parametrize("columns, width", [(2, "50%"), (3, "33%"), (4, "50%")])
def test_features_cell_width(columns, width):
    html = compile_block({"type": "features", "columns": columns,
                          "features": [{"text": "Pool"}, {"text": "Gym"}, {"text": "Parking"}]}, S)
    assert html.count(f'<td width="{width}"') == 3
    assert html.index("Pool") < html.index("Gym") < html.index("Parking")


def test_features_default_two_columns():
    html = compile_block({"type": "features", "features": [{"text": "Pool"}]}, S)
    assert '<td width="50%"' in html
    assert "✓" in html


def test_location_block():
    html = compile_block({"type": "location", "mapImage": "/map.png", "address": "5 Harbour Rd", "url": "/maps"}, S)
    assert '<a href="/maps"><img src="/map.png" alt="5 Harbour Rd"' in html
    assert "Our Location" in html


def test_job_listing_block():
    html = compile_block({"type": "job-listing", "title": "Designer", "department": "Product",
                          "location": "Remote", "salary": "$3000", "url": "/jobs/7",
                          "tags": ["Full-time", "Senior"]}, S)
    assert 'href="/jobs/7"' in html
    assert ">Designer</a></h4>" in html
    assert "Product" in html
    assert "$3000" in html
    assert html.count("display:inline-block;background:#eff6ff") == 2
    assert html.index("Full-time") < html.index("Senior") < html.index("Remote")


def test_job_listing_without_tags():
    html = compile_block({"type": "job-listing", "title": "Intern"}, S)
    assert "background:#eff6ff;color:#1d4ed8" not in html


def test_benefits_block():
    html = compile_block({"type": "benefits", "benefits": [
        {"title": "Health", "description": "Full coverage"},
        {"title": "Remote", "description": "Anywhere"},
    ]}, S)
    assert html.count("border-radius:12px;margin-bottom:12px;") == 2
    assert html.index("Health") < html.index("Full coverage") < html.index("Remote")
    assert "font-family:Verdana" in html


def test_benefits_empty():
    assert compile_block({"type": "benefits"}, S) == '<div style="margin:16px 0;font-family:Verdana;"></div>'


# ── compile_blocks ───────────────────────────────────────────────────────────

def test_compile_blocks_is_ordered_concatenation():
    blocks = [
        {"type": "heading", "content": "A"},
        {"type": "unknown"},
        {"type": "text", "content": "B"},
        SpacerBlock(height=10),
    ]
    assert compile_blocks(blocks, S) == "".join(compile_block(b, S) for b in blocks)


def test_compile_blocks_reordering_only_reorders():
    a, b = {"type": "text", "content": "A"}, {"type": "text", "content": "B"}
    assert compile_blocks([b, a], S) == compile_block(b, S) + compile_block(a, S)


def test_compile_blocks_empty():
    assert compile_blocks([], S) == ""
    assert compile_blocks(None, S) == ""


def test_input_not_mutated():
    block = {"type": "footer", "copyrightText": "2024 Acme", "socialLinks": [{"name": "X", "url": "#"}]}
    snapshot = {"type": "footer", "copyrightText": "2024 Acme", "socialLinks": [{"name": "X", "url": "#"}]}
    compile_block(block, S)
    assert block == snapshot

"""
Icônes des réseaux sociaux — tracés SVG inline (viewBox 24x24, sans couleur ni taille).
"""
from typing import Dict

ICON_PATHS: Dict[str, str] = {
    "Facebook": '<path d="M18 2h-3a5 5 0 00-5 5v3H7v4h3v8h4v-8h3l1-4h-4V7a1 1 0 011-1h3z"></path>',
    "Twitter": (
        '<path d="M23 3a10.9 10.9 0 01-3.14 1.53 4.48 4.48 0 00-7.86 3v1A10.66 10.66 0 013 4s-4 9 5 13'
        'a11.64 11.64 0 01-7 2c9 5 20 0 20-11.5a4.5 4.5 0 00-.08-.83A7.72 7.72 0 0023 3z"></path>'
    ),
    "Instagram": (
        '<rect x="2" y="2" width="20" height="20" rx="5" ry="5"></rect>'
        '<path d="M16 11.37A4 4 0 1112.63 8 4 4 0 0116 11.37z"></path>'
        '<line x1="17.5" y1="6.5" x2="17.51" y2="6.5"></line>'
    ),
    "LinkedIn": (
        '<path d="M16 8a6 6 0 016 6v7h-4v-7a2 2 0 00-2-2 2 2 0 00-2 2v7h-4v-7a6 6 0 016-6z"></path>'
        '<rect x="2" y="9" width="4" height="12"></rect><circle cx="4" cy="4" r="2"></circle>'
    ),
    "YouTube": (
        '<path d="M22.54 6.42a2.78 2.78 0 00-1.94-2C18.88 4 12 4 12 4s-6.88 0-8.6.46a2.78 2.78 0 00-1.94 2'
        'A29 29 0 001 11.75a29 29 0 00.46 5.33A2.78 2.78 0 003.4 19c1.72.46 8.6.46 8.6.46s6.88 0 8.6-.46'
        'a2.78 2.78 0 001.94-2 29 29 0 00.46-5.33 29 29 0 00-.46-5.33z"></path>'
        '<polygon points="9.75 15.02 15.5 11.75 9.75 8.48 9.75 15.02"></polygon>'
    ),
    "TikTok": '<path d="M9 12a4 4 0 1 0 4 4V4a5 5 0 0 0 5 5v4a9 9 0 0 1-9-9v17"></path>',
    "Website": (
        '<circle cx="12" cy="12" r="10"></circle><line x1="2" y1="12" x2="22" y2="12"></line>'
        '<path d="M12 2a15.3 15.3 0 0 1 4 10 15.3 15.3 0 0 1-4 10 15.3 15.3 0 0 1-4-10 15.3 15.3 0 0 1 4-10z"></path>'
    ),
}

# Conteneur d'icône (footer) : taille et forme
ICON_SIZES: Dict[str, int] = {"small": 24, "medium": 32, "large": 40}
ICON_RADII: Dict[str, str] = {"circle": "50%", "square": "0", "rounded": "8px"}

# Marge fixe entre le conteneur et le glyphe
GLYPH_INSET = 12


def resolve_icon(platform: str) -> str:
    """Tracé SVG de la plateforme ; globe (Website) pour tout nom inconnu."""
    return ICON_PATHS.get(platform, ICON_PATHS["Website"])


def glyph_size(container_px: int) -> int:
    return container_px - GLYPH_INSET

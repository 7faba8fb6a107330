"""
Merge tags — personnalisation du HTML rendu, par abonné.

Tags format "{{firstName}}" → valeur du contexte
Tags sans correspondance → laissés intacts
Pixel de suivi d'ouverture → inséré avant </body>
"""
import re
from typing import Any, Mapping, Optional

from .. import config

_TAG_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")

# Champs abonné toujours substitués (vides si absents)
SUBSCRIBER_FIELDS = ("firstName", "lastName", "email")


def resolve_merge_tags(text: str, context: Optional[Mapping[str, Any]] = None) -> str:
    """
    Remplace les tags {{key}} par les valeurs du contexte.
    Usage : resolve_merge_tags("Bonjour {{firstName}}", {"firstName": "Lan"})
    """
    if not context or not text:
        return text

    def replacer(match):
        key = match.group(1)
        if key not in context:
            return match.group(0)
        value = context[key]
        return "" if value is None else str(value)

    return _TAG_RE.sub(replacer, text)


def personalize(html: str, subscriber: Optional[Mapping[str, Any]] = None) -> str:
    """Applique les champs d'un abonné ; firstName/lastName/email vides si absents."""
    context = {field: None for field in SUBSCRIBER_FIELDS}
    context.update(subscriber or {})
    return resolve_merge_tags(html, context)


def tracking_pixel_url(campaign_id: str, subscriber_id: str, base_url: Optional[str] = None) -> str:
    base = (base_url or config.TRACKING_BASE_URL).rstrip("/")
    return f"{base}/api/track/open/{campaign_id}/{subscriber_id}"


def inject_tracking_pixel(html: str, pixel_url: str) -> str:
    """Insère un <img> 1x1 invisible avant le premier </body> (ou en fin de document)."""
    pixel = f'<img src="{pixel_url}" width="1" height="1" style="display:none" alt="" />'
    if "</body>" not in html:
        return html + pixel
    return html.replace("</body>", f"{pixel}</body>", 1)

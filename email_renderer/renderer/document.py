"""
Assembleur de document — enveloppe le HTML des blocs dans le squelette email-safe.

Squelette : doctype + meta (color-scheme clair), bloc conditionnel MSO (Outlook/Word),
table de centrage role="presentation", conteneur max-width = settings.content_width,
media query mobile < 600px.
"""
from typing import Any

from ..core.schemas import coerce_document
from .. import config
from .html import compile_blocks


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_document(
    doc: Any,
    title: str = "",
    extra_head: str = "",
    extra_body_end: str = "",
) -> str:
    """
    Génère le HTML complet d'un email.

    Document absent, sans `settings` ou sans `blocks` → chaîne vide (pas d'erreur).
    Le contenu des blocs n'est PAS échappé : voir sanitize.escape_document.
    """
    document = coerce_document(doc)
    if document is None:
        return ""

    s = document.settings
    content = compile_blocks(document.blocks, s)
    title_tag = f"<title>{title}</title>" if title else ""

    return f"""<!DOCTYPE html>
<html lang="{config.EMAIL_HTML_LANG}" xmlns:v="urn:schemas-microsoft-com:vml" xmlns:o="urn:schemas-microsoft-com:office:office">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="color-scheme" content="light">
  <meta name="supported-color-schemes" content="light">
  {title_tag}
  <!--[if gte mso 9]>
  <xml>
    <o:OfficeDocumentSettings>
      <o:AllowPNG/>
      <o:PixelsPerInch>96</o:PixelsPerInch>
    </o:OfficeDocumentSettings>
  </xml>
  <![endif]-->
  <style>
    :root {{ color-scheme: light; supported-color-schemes: light; }}
    body {{ margin: 0; padding: 0; width: 100% !important; -webkit-text-size-adjust: 100%; -ms-text-size-adjust: 100%; background-color: {s.background_color}; font-family: {s.font_family}; }}
    img {{ border: 0; outline: none; text-decoration: none; display: block; }}
    table {{ border-collapse: collapse; mso-table-lspace: 0pt; mso-table-rspace: 0pt; }}
    a {{ color: {s.primary_color}; text-decoration: underline; }}
    /* Mobile */
    @media only screen and (max-width: 600px) {{
      .container {{ width: 100% !important; padding: 15px !important; }}
      .mobile-padding {{ padding: 10px !important; }}
    }}
  </style>
  {extra_head}
</head>
<body style="margin: 0; padding: 0; background-color: {s.background_color};">
  <table role="presentation" border="0" cellpadding="0" cellspacing="0" width="100%" style="background-color: {s.background_color};">
    <tr>
      <td align="center" style="padding: 40px 0;" class="mobile-padding">
        <!--[if gte mso 9]>
        <table role="presentation" border="0" cellpadding="0" cellspacing="0" width="{s.content_width}"><tr><td valign="top">
        <![endif]-->
        <div style="width: 100%; max-width: {s.content_width}px; margin: 0 auto; background-color: #ffffff; border-radius: 12px; overflow: hidden; box-shadow: 0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -1px rgba(0, 0, 0, 0.06);">{content}</div>
        <!--[if gte mso 9]>
        </td></tr></table>
        <![endif]-->
      </td>
    </tr>
  </table>
  {extra_body_end}
</body>
</html>"""

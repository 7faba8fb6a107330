"""
Configuration du renderer email — variables d'environnement lues à l'import.
"""
import os

# Attribut lang du document HTML généré
EMAIL_HTML_LANG = os.getenv("EMAIL_HTML_LANG", "vi")

# Vignette utilisée par le bloc vidéo quand aucune miniature n'est fournie
VIDEO_PLACEHOLDER_URL = os.getenv(
    "VIDEO_PLACEHOLDER_URL", "https://placehold.co/600x337/333/FFF?text=PLAY+VIDEO"
)

# Base des URLs du pixel de suivi d'ouverture
TRACKING_BASE_URL = os.getenv("TRACKING_BASE_URL", "http://localhost:3001").rstrip("/")

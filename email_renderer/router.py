"""
Router FastAPI — endpoints du renderer email.

POST /email-renderer/render    → document JSON → HTMLResponse
POST /email-renderer/validate  → document JSON → {"valid": bool, "issues": [...]}
POST /email-renderer/preview   → {document, subscriber?, campaignId?} → HTML personnalisé
GET  /email-renderer/catalog   → liste des blocs disponibles + leurs JSON schemas
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body
from fastapi.responses import HTMLResponse, JSONResponse

from .blocks import BLOCK_REGISTRY
from .core.merge_tags import personalize, tracking_pixel_url, inject_tracking_pixel
from .renderer.document import render_document
from .sanitize import validate_document

log = logging.getLogger(__name__)

router = APIRouter(prefix="/email-renderer", tags=["email_renderer"])


@router.post("/render", response_class=HTMLResponse, summary="Rend un document email en HTML")
def render(document: Dict[str, Any] = Body(...)) -> HTMLResponse:
    """Reçoit le document JSON de l'éditeur, retourne le HTML complet (vide si incomplet)."""
    html = render_document(document)
    if not html:
        log.info("Document incomplet (settings/blocks absents) — rendu vide")
    return HTMLResponse(content=html)


@router.post("/validate", summary="Valide un document sans le rendre")
def validate(document: Dict[str, Any] = Body(...)) -> dict:
    issues = validate_document(document)
    return {"valid": not issues, "issues": issues}


@router.post("/preview", response_class=HTMLResponse, summary="Rend + personnalise pour un abonné")
def preview(
    document: Dict[str, Any] = Body(...),
    subscriber: Optional[Dict[str, Any]] = Body(default=None),
    campaign_id: Optional[str] = Body(default=None, alias="campaignId"),
) -> HTMLResponse:
    """Rendu, merge tags de l'abonné, puis pixel de suivi si campagne + abonné identifiés."""
    html = render_document(document)
    if not html:
        return HTMLResponse(content="")

    html = personalize(html, subscriber)
    subscriber_id = (subscriber or {}).get("id")
    if campaign_id and subscriber_id:
        html = inject_tracking_pixel(html, tracking_pixel_url(campaign_id, str(subscriber_id)))
    return HTMLResponse(content=html)


@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    """Retourne le catalogue des blocs avec leurs JSON schemas Pydantic."""
    catalog_data = [
        {"type": block_type.value, "schema": cls.model_json_schema(by_alias=True)}
        for block_type, cls in BLOCK_REGISTRY.items()
    ]
    return JSONResponse({"blocks": catalog_data})

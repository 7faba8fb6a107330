"""
Sécurité — le renderer n'échappe rien. Ce module propose, en option :
  - escape_document   : copie du document avec les champs texte des blocs échappés
  - validate_document : passe de validation défensive (liste de problèmes, jamais d'exception)
"""
import html
import logging
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ValidationError

from .blocks import BLOCK_REGISTRY, BaseBlock, ContainerBlock, HtmlBlock, block_type_of, coerce_block
from .core.schemas import EmailDocument, EmailSettings, coerce_document

log = logging.getLogger(__name__)


# ── Échappement ─────────────────────────────────────────────────────────────

def _escape_value(value: Any) -> Any:
    if isinstance(value, str):
        return html.escape(value)
    if isinstance(value, list):
        return [_escape_value(v) for v in value]
    if isinstance(value, BaseModel):
        return _escape_model(value)
    return value


def _escape_model(model: BaseModel) -> BaseModel:
    updates = {
        name: _escape_value(getattr(model, name))
        for name in type(model).model_fields
        if name != "type"
    }
    return model.model_copy(update=updates)


def escape_block(block: Any, include_html_blocks: bool = False) -> Optional[BaseBlock]:
    """Échappe un bloc (récursif pour les conteneurs). Type inconnu → None."""
    typed = coerce_block(block)
    if typed is None:
        return None
    if isinstance(typed, HtmlBlock) and not include_html_blocks:
        return typed
    if isinstance(typed, ContainerBlock):
        children = [
            [e for e in (escape_block(c, include_html_blocks) for c in cell) if e is not None]
            for cell in typed.children
        ]
        escaped = _escape_model(typed.model_copy(update={"children": []}))
        return escaped.model_copy(update={"children": children})
    return _escape_model(typed)


def escape_document(doc: Any, include_html_blocks: bool = False) -> Optional[EmailDocument]:
    """
    Retourne un NOUVEAU document dont les champs texte des blocs sont échappés.

    Les blocs `html` sont conservés bruts sauf include_html_blocks=True.
    Les settings ne sont pas touchés (ils sont aussi injectés dans le <style>).
    Les blocs de type inconnu sont retirés. Document incomplet → None.
    """
    document = coerce_document(doc)
    if document is None:
        return None
    blocks = [e for e in (escape_block(b, include_html_blocks) for b in document.blocks) if e is not None]
    return EmailDocument(settings=document.settings, blocks=blocks)


# ── Validation défensive ────────────────────────────────────────────────────

def _validate_blocks(blocks: Any, path: str, issues: List[str]) -> None:
    if not isinstance(blocks, list):
        issues.append(f"{path} : liste attendue")
        return

    for i, block in enumerate(blocks):
        where = f"{path}[{i}]"
        block_type = block_type_of(block)
        if block_type is None:
            tag = block.get("type") if isinstance(block, Mapping) else getattr(block, "type", None)
            issues.append(f"{where} : type de bloc inconnu {tag!r}")
            continue

        if isinstance(block, Mapping):
            try:
                BLOCK_REGISTRY[block_type].model_validate(block)
            except ValidationError as exc:
                for err in exc.errors():
                    loc = ".".join(str(p) for p in err["loc"])
                    issues.append(f"{where}.{loc} : {err['msg']}")

        children = block.get("children") if isinstance(block, Mapping) else getattr(block, "children", None)
        if isinstance(children, list):
            for j, cell in enumerate(children):
                _validate_blocks(cell, f"{where}.children[{j}]", issues)


def validate_document(payload: Any) -> List[str]:
    """
    Liste les problèmes d'un document sans le rendre. Liste vide = document valide.
    Le renderer reste permissif : ces problèmes dégradent le rendu, ils ne l'empêchent pas.
    """
    if isinstance(payload, EmailDocument):
        payload = payload.model_dump(by_alias=True)
    if not isinstance(payload, Mapping):
        return ["document : objet attendu"]

    issues: List[str] = []
    settings = payload.get("settings")
    if settings is None:
        issues.append("settings : absent (rendu vide)")
    elif isinstance(settings, Mapping):
        try:
            EmailSettings.model_validate(settings)
        except ValidationError as exc:
            for err in exc.errors():
                loc = ".".join(str(p) for p in err["loc"])
                issues.append(f"settings.{loc} : {err['msg']}")
    else:
        issues.append("settings : objet attendu")

    if payload.get("blocks") is None:
        issues.append("blocks : absent (rendu vide)")
    else:
        _validate_blocks(payload["blocks"], "blocks", issues)

    if issues:
        log.debug("Document invalide : %d problème(s)", len(issues))
    return issues

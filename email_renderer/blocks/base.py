"""
Blocs de base pour le renderer email.
Chaque bloc = un modèle Pydantic discriminé par `type` (noms JSON en camelCase).
"""
import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

log = logging.getLogger(__name__)

# Valeur de style recopiée telle quelle dans le CSS inline (8, 1.5, "50%"…)
CssValue = Union[int, float, str]


class BlockType(str, Enum):
    """Ensemble fermé des types de blocs connus."""
    HEADING       = "heading"
    TEXT          = "text"
    IMAGE         = "image"
    BUTTON        = "button"
    SPACER        = "spacer"
    DIVIDER       = "divider"
    SOCIAL        = "social"
    LINK          = "link"
    HTML          = "html"
    VIDEO         = "video"
    HEADER        = "header"
    FOOTER        = "footer"
    PRODUCT       = "product"
    UNSUBSCRIBE   = "unsubscribe"
    ROW2          = "row2"
    ROW3          = "row3"
    COLUMN2       = "column2"
    COLUMN3       = "column3"
    # E-commerce
    PRODUCT_GRID  = "product-grid"
    COUPON        = "coupon"
    CART_REMINDER = "cart-reminder"
    ORDER_SUMMARY = "order-summary"
    # Immobilier
    PROPERTY_CARD = "property-card"
    FEATURES      = "features"
    LOCATION      = "location"
    # Recrutement
    JOB_LISTING   = "job-listing"
    BENEFITS      = "benefits"


class EmailModel(BaseModel):
    """Modèle permissif : alias camelCase, clés inconnues tolérées, nombres acceptés dans les champs texte."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    @classmethod
    def model_validate_lenient(cls, data: Mapping[str, Any]):
        """
        Valide `data` ; en cas d'erreur, retire les champs fautifs et revalide
        pour que les valeurs par défaut s'appliquent. Dans une liste, seuls les
        éléments fautifs sont retirés. Retourne None si irrécupérable.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            cleaned, dropped = _prune_invalid(data, exc.errors())
            log.warning("%s : champs invalides ignorés %s", cls.__name__, dropped)

        try:
            return cls.model_validate(cleaned)
        except ValidationError as exc:
            # Second passage : la liste élaguée reste invalide → champ entier retiré
            bad = {err["loc"][0] for err in exc.errors() if err["loc"]}
            cleaned = {k: v for k, v in cleaned.items() if k not in bad}

        try:
            return cls.model_validate(cleaned)
        except ValidationError as exc:
            log.warning("%s irrécupérable : %d erreur(s)", cls.__name__, exc.error_count())
            return None


def _prune_invalid(data: Mapping[str, Any], errors: List[dict]) -> Tuple[dict, List[str]]:
    bad_fields = set()
    bad_items: Dict[Any, set] = {}
    for err in errors:
        loc = err["loc"]
        if not loc:
            continue
        key = loc[0]
        if len(loc) > 1 and isinstance(loc[1], int) and isinstance(data.get(key), list):
            bad_items.setdefault(key, set()).add(loc[1])
        else:
            bad_fields.add(key)

    cleaned = {}
    for key, value in data.items():
        if key in bad_fields:
            continue
        if key in bad_items:
            value = [item for i, item in enumerate(value) if i not in bad_items[key]]
        cleaned[key] = value

    dropped = sorted(map(str, bad_fields)) + sorted(
        f"{key}[{i}]" for key, indexes in bad_items.items() if key not in bad_fields for i in indexes
    )
    return cleaned, dropped


class BaseBlock(EmailModel):
    """Bloc de base (classe parente de tous les blocs)."""
    type: str
    id: Optional[str] = None

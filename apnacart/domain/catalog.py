# apnacart/domain/catalog.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from apnacart.domain.errors import InvalidCatalogItem, InvalidWeightToken


class WeightToken(str, Enum):
    """Fixed pack weights a vegetable can be sold in."""

    GRAMS_250 = "250g"
    GRAMS_500 = "500g"
    KILOGRAM_1 = "1kg"

    @property
    def grams(self) -> int:
        return _TOKEN_GRAMS[self]


# single conversion table for catalog tokens
_TOKEN_GRAMS = {
    WeightToken.GRAMS_250: 250,
    WeightToken.GRAMS_500: 500,
    WeightToken.KILOGRAM_1: 1000,
}


@dataclass(frozen=True)
class CatalogItem:
    id: int
    name: str
    fixed_weight: WeightToken
    image_ref: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogItem":
        """Build an item from an /api/vegetables row."""
        try:
            item_id = int(data["id"])
            name = data["name"]
            raw_weight = data["fixed_weight"]
        except KeyError as e:
            raise InvalidCatalogItem(data, f"missing {e}") from None
        except (TypeError, ValueError) as e:
            raise InvalidCatalogItem(data, str(e)) from None

        if not isinstance(name, str) or not name:
            raise InvalidCatalogItem(data, "name must be a non-empty string")

        try:
            fixed_weight = WeightToken(raw_weight)
        except ValueError:
            raise InvalidWeightToken(raw_weight) from None

        return cls(
            id=item_id,
            name=name,
            fixed_weight=fixed_weight,
            image_ref=data.get("image_url"),
        )

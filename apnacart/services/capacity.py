# apnacart/services/capacity.py
from decimal import Decimal
from enum import Enum
from typing import Optional


class CartSize(str, Enum):
    SMALL = "small"
    FAMILY = "family"


CAPACITY_KG = {
    CartSize.SMALL: Decimal("4.5"),
    CartSize.FAMILY: Decimal("7.0"),
}

CART_SIZE_LABELS = {
    CartSize.SMALL: "Small Cart",
    CartSize.FAMILY: "Family Cart",
}


def capacity_for(cart_size: Optional[CartSize]) -> Decimal:
    # no cart selected, nothing fits
    if cart_size is None:
        return Decimal("0")
    return CAPACITY_KG[CartSize(cart_size)]

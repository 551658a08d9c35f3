# apnacart/services/weights.py
"""
Weight tokens ("250g", "1kg") to grams/kilograms and back to display strings.

Kilograms are returned as Decimal so cart totals stay exact.
"""
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from apnacart.domain.catalog import WeightToken
from apnacart.domain.errors import InvalidWeightToken

Number = Union[int, float, Decimal]

_TOKEN_RE = re.compile(r"(\d+(?:\.\d+)?)(g|kg)", re.ASCII)


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def token_value(token: Union[str, WeightToken]) -> str:
    if isinstance(token, WeightToken):
        return token.value
    return str(token)


def parse_token(value: Union[str, WeightToken]) -> WeightToken:
    """Restrict a weight string to the catalog's pack sizes."""
    if isinstance(value, WeightToken):
        return value
    try:
        return WeightToken(value)
    except ValueError:
        raise InvalidWeightToken(value) from None


def to_grams(token: Union[str, WeightToken]) -> int:
    """Catalog pack sizes come from WeightToken, anything else is parsed."""
    text = token_value(token)
    try:
        return WeightToken(text).grams
    except ValueError:
        pass

    match = _TOKEN_RE.fullmatch(text)
    if not match:
        raise InvalidWeightToken(token)

    value, unit = match.groups()
    amount = Decimal(value)
    if unit == "kg":
        amount *= 1000
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def grams_to_kg(grams: int) -> Decimal:
    return Decimal(grams) / 1000


def to_kg(token: Union[str, WeightToken]) -> Decimal:
    return grams_to_kg(to_grams(token))


def _fixed(value: Decimal, decimals: int) -> str:
    quantum = Decimal(1).scaleb(-decimals)
    return f"{value.quantize(quantum, rounding=ROUND_HALF_UP):f}"


def _trim(text: str) -> str:
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_weight(kg: Number) -> str:
    """
    Display weight for a single pack or line:
    1000g and above in kilograms (2kg, 1.75kg), below that in grams (250g).
    """
    grams = int((to_decimal(kg) * 1000).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if grams >= 1000:
        return f"{_trim(_fixed(grams_to_kg(grams), 2))}kg"
    return f"{grams}g"


def format_weight_token(token: Union[str, WeightToken]) -> str:
    try:
        return format_weight(to_kg(token))
    except InvalidWeightToken:
        return token_value(token)


def format_total(kg: Number, max_decimals: int = 2, trim: bool = True) -> str:
    """Cart totals are always shown in kilograms, never in grams."""
    text = _fixed(to_decimal(kg), max_decimals)
    if trim:
        text = _trim(text)
    return f"{text}kg"

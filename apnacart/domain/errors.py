# apnacart/domain/errors.py
from decimal import Decimal


class CartError(Exception):
    """Base for rejected cart operations. The cart state is left unchanged."""


class NoCartSelected(CartError):
    def __init__(self):
        super().__init__("Select a cart size before adding items")


class CapacityExceeded(CartError):
    def __init__(self, requested_kg: Decimal, capacity_kg: Decimal):
        self.requested_kg = requested_kg
        self.capacity_kg = capacity_kg
        super().__init__(
            f"Cannot update cart - {requested_kg}kg would exceed the {capacity_kg}kg weight limit"
        )


class ItemNotInCart(CartError):
    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"Item {item_id} is not in the cart")


class CartEmpty(CartError):
    def __init__(self):
        super().__init__("Cannot place an order from an empty cart")


class CartNotFound(CartError):
    def __init__(self, cart_id: str):
        self.cart_id = cart_id
        super().__init__(f"Cart {cart_id} not found")


class InvalidWeightToken(ValueError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"Invalid weight: {token!r}")


class VegetableNotFound(LookupError):
    def __init__(self, vegetable_id: int):
        self.vegetable_id = vegetable_id
        super().__init__(f"Vegetable {vegetable_id} not found")


class InvalidCatalogItem(ValueError):
    """A catalog row that cannot be turned into a CatalogItem."""

    def __init__(self, data, reason: str):
        self.data = data
        super().__init__(f"Malformed catalog item {data!r}: {reason}")

# apnacart/services/cart_store.py
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Union

from apnacart.domain.catalog import CatalogItem, WeightToken
from apnacart.domain.errors import CapacityExceeded, ItemNotInCart, NoCartSelected
from apnacart.services.capacity import CartSize, capacity_for
from apnacart.services.weights import Number, format_total, to_decimal, to_kg, token_value
from apnacart.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CartLine:
    id: int
    item: CatalogItem
    weight_token: str
    unit_weight_kg: Decimal
    quantity: int = 1

    @property
    def line_weight_kg(self) -> Decimal:
        return self.unit_weight_kg * self.quantity


class CartStore:
    """
    Weight-budget cart for one customer session.

    commands (select_size, add_item, remove_item, update_quantity, clear)
    either commit or raise a CartError and leave the state untouched.
    queries never mutate.
    The total is always recomputed from the lines.

    Requests for one session run on worker threads, so every command holds
    `lock` from the capacity check to the commit. Callers that need several
    reads to agree (a response body, the order message) hold it too.
    """

    def __init__(self):
        self.cart_size: Optional[CartSize] = None
        self._lines: Dict[int, CartLine] = {}
        self.lock = threading.RLock()

    # =====================================================
    # QUERY
    # =====================================================
    @property
    def lines(self) -> List[CartLine]:
        """Lines in order of first add."""
        with self.lock:
            return list(self._lines.values())

    def get_line(self, item_id: int) -> Optional[CartLine]:
        with self.lock:
            return self._lines.get(item_id)

    @property
    def capacity_kg(self) -> Decimal:
        return capacity_for(self.cart_size)

    @property
    def total_weight_kg(self) -> Decimal:
        with self.lock:
            return sum((line.line_weight_kg for line in self._lines.values()), Decimal("0"))

    @property
    def item_count(self) -> int:
        with self.lock:
            return sum(line.quantity for line in self._lines.values())

    def can_add(self, weight_kg: Number) -> bool:
        with self.lock:
            if self.cart_size is None:
                return False
            return self.total_weight_kg + to_decimal(weight_kg) <= self.capacity_kg

    def would_exceed(self, weight_kg: Number) -> bool:
        with self.lock:
            # undetermined without a cart size
            if self.cart_size is None:
                return False
            return self.total_weight_kg + to_decimal(weight_kg) > self.capacity_kg

    def remaining_weight(self) -> str:
        with self.lock:
            if self.cart_size is None:
                return "0.00kg"
            return format_total(self.capacity_kg - self.total_weight_kg, trim=False)

    def is_at_capacity(self) -> bool:
        with self.lock:
            if self.cart_size is None:
                return False
            return self.total_weight_kg >= self.capacity_kg

    # =====================================================
    # COMMANDS
    # =====================================================
    def select_size(self, cart_size: Optional[CartSize]) -> None:
        """Pick a cart size. Always empties the cart, even for the current size."""
        size = CartSize(cart_size) if cart_size is not None else None
        with self.lock:
            self.cart_size = size
            self._lines = {}
        logger.info(f"Cart size set to {size.value if size else 'unset'}, cart cleared")

    def add_item(
        self,
        item: CatalogItem,
        weight_token: Union[str, WeightToken, None] = None,
        unit_weight_kg: Optional[Number] = None,
    ) -> CartLine:
        """
        Add one pack of item.

        Re-adding an item already in the cart bumps its quantity by one and
        takes the weight basis of this call for the whole line.
        """
        token = token_value(weight_token if weight_token is not None else item.fixed_weight)
        token_kg = to_kg(token)
        unit = to_decimal(unit_weight_kg) if unit_weight_kg is not None else token_kg
        if unit <= 0:
            raise ValueError("Unit weight must be > 0")

        with self.lock:
            self._require_size()

            existing = self._lines.get(item.id)
            if existing:
                quantity = existing.quantity + 1
                candidate = self.total_weight_kg - existing.line_weight_kg + unit * quantity
            else:
                quantity = 1
                candidate = self.total_weight_kg + unit

            self._check_capacity(candidate)

            if existing:
                logger.info(
                    f"Item {item.id} already in cart, quantity "
                    f"{existing.quantity} -> {quantity}"
                )
                existing.weight_token = token
                existing.unit_weight_kg = unit
                existing.quantity = quantity
                return existing

            line = CartLine(id=item.id, item=item, weight_token=token, unit_weight_kg=unit)
            self._lines[item.id] = line
            logger.info(f"Added {item.name} ({token}) to cart, total {self.total_weight_kg}kg")
            return line

    def remove_item(self, item_id: int) -> bool:
        with self.lock:
            if self._lines.pop(item_id, None) is None:
                return False
            logger.info(f"Removed item {item_id} from cart, total {self.total_weight_kg}kg")
            return True

    def update_quantity(self, item_id: int, quantity: int) -> Optional[CartLine]:
        """Set a line's quantity; zero or less removes the line and returns None."""
        with self.lock:
            line = self._lines.get(item_id)
            if not line:
                raise ItemNotInCart(item_id)

            if quantity <= 0:
                self.remove_item(item_id)
                return None

            candidate = self.total_weight_kg - line.line_weight_kg + line.unit_weight_kg * quantity
            self._check_capacity(candidate)

            line.quantity = quantity
            logger.info(f"Item {item_id} quantity set to {quantity}, total {self.total_weight_kg}kg")
            return line

    def clear(self) -> None:
        with self.lock:
            self._lines = {}
        logger.info("Cart cleared")

    def _require_size(self) -> None:
        if self.cart_size is None:
            raise NoCartSelected()

    def _check_capacity(self, candidate: Decimal) -> None:
        capacity = self.capacity_kg
        if candidate > capacity:
            logger.warning(f"Rejected cart change: {candidate}kg over {capacity}kg limit")
            raise CapacityExceeded(candidate, capacity)

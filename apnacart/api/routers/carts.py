#apnacart/api/routers/carts.py
from decimal import Decimal
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from requests import RequestException

from apnacart.api.deps import get_cart_registry, get_catalog
from apnacart.domain.errors import (
    CapacityExceeded,
    CartEmpty,
    CartNotFound,
    InvalidCatalogItem,
    InvalidWeightToken,
    ItemNotInCart,
    NoCartSelected,
    VegetableNotFound,
)
from apnacart.domain.schemas import (
    CapacityCheckOut,
    CartItemIn,
    CartOut,
    CartSizeIn,
    OrderOut,
    QuantityIn,
)
from apnacart.services.cart_registry import CartRegistry
from apnacart.services.cart_store import CartStore
from apnacart.services.order_message import render_order_message
from apnacart.services.weights import format_total, format_weight, format_weight_token
from apnacart.utils.settings import ORDER_PHONE, STORE_NAME
from apnacart.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/carts", tags=["carts"])


def cart_out(cart_id: str, store: CartStore) -> dict:
    with store.lock:
        return _cart_body(cart_id, store)


def _cart_body(cart_id: str, store: CartStore) -> dict:
    return {
        "cart_id": cart_id,
        "cart_size": store.cart_size,
        "capacity_kg": store.capacity_kg,
        "total_weight_kg": store.total_weight_kg,
        "total_weight": format_total(store.total_weight_kg),
        "remaining_weight": store.remaining_weight(),
        "is_at_capacity": store.is_at_capacity(),
        "item_count": store.item_count,
        "items": [
            {
                "vegetable_id": line.id,
                "name": line.item.name,
                "image_url": line.item.image_ref,
                "weight": format_weight_token(line.weight_token),
                "unit_weight_kg": line.unit_weight_kg,
                "quantity": line.quantity,
                "line_weight_kg": line.line_weight_kg,
                "line_weight": format_weight(line.line_weight_kg),
            }
            for line in store.lines
        ],
    }


def build_order_link(message: str, phone: str) -> str:
    return f"https://wa.me/{phone}?text={quote(message, safe='')}"


def get_store(registry: CartRegistry, cart_id: str) -> CartStore:
    try:
        return registry.get(cart_id)
    except CartNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=CartOut, status_code=201)
def create_cart(registry: CartRegistry = Depends(get_cart_registry)):
    cart_id, store = registry.create()
    return cart_out(cart_id, store)


@router.get("/{cart_id}", response_model=CartOut)
def get_cart(cart_id: str, registry: CartRegistry = Depends(get_cart_registry)):
    return cart_out(cart_id, get_store(registry, cart_id))


@router.delete("/{cart_id}", status_code=204)
def discard_cart(cart_id: str, registry: CartRegistry = Depends(get_cart_registry)):
    if not registry.discard(cart_id):
        raise HTTPException(status_code=404, detail=f"Cart {cart_id} not found")
    return Response(status_code=204)


@router.put("/{cart_id}/size", response_model=CartOut)
def select_size(
    cart_id: str,
    payload: CartSizeIn,
    registry: CartRegistry = Depends(get_cart_registry),
):
    store = get_store(registry, cart_id)
    store.select_size(payload.cart_size)
    return cart_out(cart_id, store)


@router.post("/{cart_id}/items", response_model=CartOut)
def add_item(
    cart_id: str,
    payload: CartItemIn,
    registry: CartRegistry = Depends(get_cart_registry),
    catalog=Depends(get_catalog),
):
    store = get_store(registry, cart_id)

    try:
        item = catalog.get_catalog_item(payload.vegetable_id)
    except VegetableNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidWeightToken as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (RequestException, InvalidCatalogItem) as e:
        logger.error(f"Catalog lookup for {payload.vegetable_id} failed: {e}")
        raise HTTPException(status_code=502, detail="Catalog unavailable")

    try:
        store.add_item(item, payload.weight)
    except (CapacityExceeded, NoCartSelected) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except InvalidWeightToken as e:
        raise HTTPException(status_code=400, detail=str(e))

    return cart_out(cart_id, store)


@router.patch("/{cart_id}/items/{vegetable_id}", response_model=CartOut)
def update_quantity(
    cart_id: str,
    vegetable_id: int,
    payload: QuantityIn,
    registry: CartRegistry = Depends(get_cart_registry),
):
    store = get_store(registry, cart_id)
    try:
        store.update_quantity(vegetable_id, payload.quantity)
    except ItemNotInCart as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CapacityExceeded as e:
        raise HTTPException(status_code=409, detail=str(e))
    return cart_out(cart_id, store)


@router.delete("/{cart_id}/items/{vegetable_id}", response_model=CartOut)
def remove_item(
    cart_id: str,
    vegetable_id: int,
    registry: CartRegistry = Depends(get_cart_registry),
):
    # missing line is a no-op
    store = get_store(registry, cart_id)
    store.remove_item(vegetable_id)
    return cart_out(cart_id, store)


@router.delete("/{cart_id}/items", response_model=CartOut)
def clear_cart(cart_id: str, registry: CartRegistry = Depends(get_cart_registry)):
    store = get_store(registry, cart_id)
    store.clear()
    return cart_out(cart_id, store)


@router.get("/{cart_id}/capacity", response_model=CapacityCheckOut)
def check_capacity(
    cart_id: str,
    weight_kg: Decimal = Query(..., ge=0),
    registry: CartRegistry = Depends(get_cart_registry),
):
    store = get_store(registry, cart_id)
    return {
        "weight_kg": weight_kg,
        "can_add": store.can_add(weight_kg),
        "would_exceed": store.would_exceed(weight_kg),
    }


@router.post("/{cart_id}/checkout", response_model=OrderOut)
def checkout(cart_id: str, registry: CartRegistry = Depends(get_cart_registry)):
    """
    Renders the order message and the messaging link for it.
    The cart itself is left as is.
    """
    store = get_store(registry, cart_id)
    with store.lock:
        try:
            message = render_order_message(store, STORE_NAME)
        except NoCartSelected as e:
            raise HTTPException(status_code=409, detail=str(e))
        except CartEmpty as e:
            raise HTTPException(status_code=400, detail=str(e))
        item_count, total = store.item_count, store.total_weight_kg

    logger.info(f"Order message rendered for cart {cart_id}: {item_count} items, {total}kg")
    return {"message": message, "order_url": build_order_link(message, ORDER_PHONE)}

# apnacart/services/order_message.py
from apnacart.domain.errors import CartEmpty, NoCartSelected
from apnacart.services.capacity import CART_SIZE_LABELS, CartSize, capacity_for
from apnacart.services.cart_store import CartStore
from apnacart.services.weights import format_total


def cart_size_label(cart_size: CartSize) -> str:
    return f"{CART_SIZE_LABELS[cart_size]} ({format_total(capacity_for(cart_size))})"


def render_order_message(cart: CartStore, store_name: str = "ApnaCart") -> str:
    """
    Order summary handed to the messaging channel.

    Lines follow the order in which items were first added.
    """
    if cart.cart_size is None:
        raise NoCartSelected()

    lines = cart.lines
    if not lines:
        raise CartEmpty()

    size_label = cart_size_label(cart.cart_size)
    total = format_total(cart.total_weight_kg)
    item_count = cart.item_count

    items_list = "\n".join(
        f"{line.item.name} – {line.weight_token} x{line.quantity} = {format_total(line.line_weight_kg, trim=False)}"
        for line in lines
    )

    return (
        f"🛒 *{store_name} Order*\n\n"
        f"*Cart Type:* {size_label}\n"
        f"*Total Weight:* {total}\n"
        f"*Items Count:* {item_count}\n\n"
        f"*Selected Vegetables:*\n{items_list}\n\n"
        f"*Order Summary:*\n"
        f"• Cart Type: {size_label}\n"
        f"• Total Weight: {total}\n"
        f"• Items: {len(lines)}\n"
        f"• Individual Items: {item_count}\n\n"
        f"Please confirm this order and provide delivery details."
    )

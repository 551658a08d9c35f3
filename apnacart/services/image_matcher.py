# apnacart/services/image_matcher.py
from typing import Optional

IMAGES_PREFIX = "/images/"
DEFAULT_IMAGE = "/images/default.jpeg"

# names that do not line up 1:1 with the image files
IMAGE_MAPPINGS = {
    "onion": "Onion.jpg",
    "tomato": "Tomato.jpeg",
    "potato": "Potato.jpeg",
    "carrot": "Carrot.webp",
    "cabbage": "Cabbage.jpg",
    "cauliflower": "Cauliflower.png",
    "capsicum": "Capsicum.png",
    "cucumber": "Cucumber.jpg",
    "garlic": "Garlic.jpeg",
    "ginger": "Ginger.jpg",
    "lemon": "Lemon.jpg",
    "bitter gourd": "Bitter Gourd.jpeg",
    "bottle gourd": "Bottle Gourd(Sorakaya).jpeg",
    "broad beans": "Broad Beans.jpeg",
    "brinjal": "Brinjal white.jpeg",
    "brinjal black": "Brinjal Black.jpeg",
    "nagpuri brinjal": "Nagpuri Brinjal.jpeg",
    "cluster beans": "Cluster Beans.jpeg",
    "combo": "Combo.png",
    "curry leaves + coriander + mint leaves": "Curry Leaves + Coriander + Mint Leaves.png",
    "curry leaves": "Curry Leaves + Coriander + Mint Leaves.png",
    "coriander": "Curry Leaves + Coriander + Mint Leaves.png",
    "mint leaves": "Curry Leaves + Coriander + Mint Leaves.png",
    "dondakaya": "Dondakaya.jpeg",
    "dosakaya": "Dosakaya(1-2 pieces).jpeg",
    "drumstick": "Drumstick.jpg",
    "french beans": "French Beans.jpeg",
    "green chilli": "Green Chilli.jpeg",
    "ladies finger": "Ladies Finger.jpg",
    "palakura leaves": "Palakura Leaves.jpeg",
    "raw banana": "Raw Banana(2 pieces).jpeg",
    "raw mango": "Raw Mango.jpeg",
    "sweet potato": "Sweet Potato.jpeg",
    "beerakaya": "Beerakaya.jpeg",
    "beetroot": "Beetroot.jpg",
    "chamagadda": "Chamagadda.png",
    "gongura leaves": "Gongura Leaves.jpeg",
    "brinjal vilote": "Brinjal Vilote.jpg",
    "green chilli dark": "Green Chilli Dark.jpeg",
}


def resolve_image(name: str) -> str:
    """
    Best static image for a vegetable name.

    Exact key first, then the longest key that contains or is contained in
    the name, so "Green Chilli Dark" does not fall back to "green chilli".
    """
    normalized = (name or "").lower().strip()
    if not normalized:
        return DEFAULT_IMAGE

    if normalized in IMAGE_MAPPINGS:
        return IMAGES_PREFIX + IMAGE_MAPPINGS[normalized]

    matches = [
        key for key in IMAGE_MAPPINGS
        if key in normalized or normalized in key
    ]
    if matches:
        best = max(matches, key=len)
        return IMAGES_PREFIX + IMAGE_MAPPINGS[best]

    return DEFAULT_IMAGE


def auto_link_image(name: str, custom_url: Optional[str] = None) -> str:
    if custom_url and custom_url.strip():
        return custom_url.strip()
    return resolve_image(name)


def normalize_image_path(path: Optional[str]) -> str:
    if not path:
        return DEFAULT_IMAGE

    if path.startswith(("http://", "https://", "/")):
        return path

    if "/" not in path:
        return IMAGES_PREFIX + path

    return path

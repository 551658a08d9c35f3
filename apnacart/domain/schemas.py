# apnacart/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from decimal import Decimal
from datetime import datetime

from apnacart.domain.catalog import WeightToken
from apnacart.services.capacity import CartSize


class VegetableIn(BaseModel):
    """Schema for adding a vegetable to the catalog."""

    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    fixed_weight: WeightToken = Field(WeightToken.GRAMS_500, description="Pack weight")
    image_url: Optional[str] = Field(None, description="Custom image, auto-linked when empty")


class VegetableUpdate(BaseModel):
    """Schema for editing a vegetable. Unset fields stay as they are."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    fixed_weight: Optional[WeightToken] = None
    image_url: Optional[str] = None


class VegetableOut(BaseModel):
    id: int
    name: str
    fixed_weight: str
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SetupOut(BaseModel):
    message: str
    count: int


class LinkImagesOut(BaseModel):
    updated: int


class CartSizeIn(BaseModel):
    """None puts the cart back into the unset state."""

    cart_size: Optional[CartSize] = None


class CartItemIn(BaseModel):
    vegetable_id: int = Field(..., gt=0, description="Catalog id (must be > 0)")
    weight: Optional[WeightToken] = Field(None, description="Defaults to the vegetable's fixed weight")


class QuantityIn(BaseModel):
    """Zero or less removes the line."""

    quantity: int


class CartLineOut(BaseModel):
    vegetable_id: int
    name: str
    image_url: Optional[str] = None
    weight: str
    unit_weight_kg: Decimal
    quantity: int
    line_weight_kg: Decimal
    line_weight: str


class CartOut(BaseModel):
    cart_id: str
    cart_size: Optional[CartSize] = None
    capacity_kg: Decimal
    total_weight_kg: Decimal
    total_weight: str
    remaining_weight: str
    is_at_capacity: bool
    item_count: int
    items: List[CartLineOut]


class CapacityCheckOut(BaseModel):
    weight_kg: Decimal
    can_add: bool
    would_exceed: bool


class OrderOut(BaseModel):
    message: str
    order_url: str

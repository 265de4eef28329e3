# shop/domain/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime

from shop.domain.models import Order, ProductCategory, ShoppingCart, User


class ProductOut(BaseModel):
    """Schema dla produktu (response)."""

    id: str
    name: str
    price: Decimal
    display_price: str
    category: ProductCategory

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


class CartItemOut(BaseModel):
    """Schema dla produktu w koszyku (response)."""

    product: ProductOut
    quantity: int
    subtotal: Decimal

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    items: List[CartItemOut]
    discount_code: str | None = None
    subtotal: Decimal
    discount_amount: Decimal
    total: Decimal
    item_count: int

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_cart(cls, cart: ShoppingCart) -> "CartOut":
        return cls.model_validate(cart)


class AddressOut(BaseModel):
    """Schema dla adresu wysylki (response)."""

    street: str
    city: str
    zip_code: str
    country: str
    formatted_address: str

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamówienia (response)."""

    order_id: str
    items: List[CartItemOut]
    subtotal: Decimal
    discount_amount: Decimal
    total: Decimal
    item_count: int
    timestamp: datetime
    shipping_address: AddressOut

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_order(cls, order: Order) -> "OrderOut":
        return cls.model_validate(order)


class UserOut(BaseModel):
    """Schema dla użytkownika (response)."""

    user_id: str
    name: str
    email: str
    order_count: int
    total_spent: Decimal

    @classmethod
    def from_user(cls, user: User) -> "UserOut":
        return cls(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            order_count=len(user.order_history),
            total_spent=user.total_spent,
        )

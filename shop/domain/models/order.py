# shop/domain/models/order.py
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from shop.domain.models.address import Address
from shop.domain.models.cart import ShoppingCart
from shop.domain.models.cart_item import CartItem
from shop.domain.models.product import Product
from shop.utils.ids import new_id, utcnow


class OrderItem(BaseModel):
    """Zamrozona kopia pozycji koszyka w chwili zamowienia."""

    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int

    @classmethod
    def from_cart_item(cls, item: CartItem) -> "OrderItem":
        return cls(product=item.product, quantity=item.quantity)

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


class Order(BaseModel):
    """
    Snapshot koszyka w danej chwili.

    Pozycje sa kopiowane przy tworzeniu zamowienia jako zamrozone OrderItem,
    wiec pozniejsze zmiany koszyka (add, remove, clear) nie sa tu widoczne,
    a samego zamowienia nie da sie zmienic.
    """

    model_config = ConfigDict(frozen=True)

    order_id: str = Field(default_factory=new_id)
    items: tuple[OrderItem, ...]
    subtotal: Decimal
    discount_amount: Decimal
    total: Decimal
    timestamp: datetime = Field(default_factory=utcnow)
    shipping_address: Address

    @classmethod
    def create(cls, cart: ShoppingCart, shipping_address: Address) -> "Order":
        return cls(
            items=tuple(OrderItem.from_cart_item(item) for item in cart.items),
            subtotal=cart.subtotal,
            discount_amount=cart.discount_amount,
            total=cart.total,
            shipping_address=shipping_address,
        )

    @property
    def item_count(self) -> int:
        return sum(i.quantity for i in self.items)

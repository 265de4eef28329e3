# shop/domain/models/cart.py
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field, model_validator

from shop.domain.models.cart_item import CartItem
from shop.domain.models.product import Product
from shop.utils.logging import get_logger

logger = get_logger(__name__)

#zamkniety zbior kodow, brak rejestracji nowych
DISCOUNT_RATES: dict[str, Decimal] = {
    "SAVE10": Decimal("0.10"),
    "SAVE20": Decimal("0.20"),
}
CENTS = Decimal("0.01")


class ShoppingCart(BaseModel):
    """
    Koszyk (mutowalny). Maksymalnie jedna pozycja na product id,
    kolejnosc dodawania zachowana.

    commands (add, remove, update, clear) zmieniaja items w miejscu,
    query (subtotal, total, ...) tylko odczyt.
    """

    items: list[CartItem] = Field(default_factory=list)
    discount_code: str | None = None

    @model_validator(mode="after")
    def _merge_duplicate_lines(self) -> "ShoppingCart":
        #ten sam produkt podany kilka razy w konstruktorze -> jedna pozycja
        merged: dict[str, CartItem] = {}
        for item in self.items:
            existing = merged.get(item.product.id)
            if existing is None:
                merged[item.product.id] = item.clone()
            else:
                existing.increase_quantity(item.quantity)
        self.items = list(merged.values())
        return self

    def find_item(self, product_id: str) -> CartItem | None:
        for item in self.items:
            if item.product.id == product_id:
                return item
        return None

    #commands
    def add_item(self, product: Product, quantity: int = 1) -> None:
        if quantity <= 0:
            return

        existing = self.find_item(product.id)

        if existing is not None:
            logger.debug(
                f"Product {product.id} already in cart, increasing quantity "
                f"from {existing.quantity} by {quantity}"
            )
            existing.increase_quantity(quantity)
        else:
            logger.debug(f"Adding product {product.id} x{quantity} to cart")
            self.items.append(CartItem(product=product, quantity=quantity))

    def remove_item(self, product_id: str) -> None:
        logger.debug(f"Removing product {product_id} from cart")
        self.items[:] = [i for i in self.items if i.product.id != product_id]

    def update_item_quantity(self, product_id: str, quantity: int) -> None:
        item = self.find_item(product_id)

        if item is None:
            return

        if quantity <= 0:
            self.remove_item(product_id)
        else:
            #update_quantity sam tez pilnuje <= 0
            item.update_quantity(quantity)

    def clear_cart(self) -> None:
        logger.debug(f"Clearing cart with {len(self.items)} line(s)")
        self.items.clear()

    #query
    @property
    def subtotal(self) -> Decimal:
        return sum((i.subtotal for i in self.items), Decimal("0.00"))

    @property
    def discount_amount(self) -> Decimal:
        rate = DISCOUNT_RATES.get(self.discount_code or "")
        if rate is None:
            return Decimal("0.00")
        return (self.subtotal * rate).quantize(CENTS, rounding=ROUND_HALF_UP)

    @property
    def total(self) -> Decimal:
        return max(Decimal("0.00"), self.subtotal - self.discount_amount)

    @property
    def item_count(self) -> int:
        return sum(i.quantity for i in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

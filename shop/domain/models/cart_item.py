# shop/domain/models/cart_item.py
from decimal import Decimal

from pydantic import BaseModel, field_validator

from shop.domain.models.product import Product


class CartItem(BaseModel):
    """
    Pozycja w koszyku: produkt + ilosc.
    Ilosc nigdy nie spada ponizej 1, niepoprawne zmiany sa ignorowane.
    """

    product: Product
    quantity: int = 1

    @field_validator("quantity")
    @classmethod
    def _clamp_quantity(cls, value: int) -> int:
        #ponizej 1 -> 1, nie odrzucamy
        return max(1, value)

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity

    def update_quantity(self, new_quantity: int) -> None:
        if new_quantity <= 0:
            return
        self.quantity = new_quantity

    def increase_quantity(self, amount: int) -> None:
        if amount <= 0:
            return
        self.quantity += amount

    def clone(self) -> "CartItem":
        #produkt jest frozen, mozna go wspoldzielic
        return self.model_copy()

# shop/domain/models/user.py
from decimal import Decimal

from pydantic import BaseModel, Field

from shop.domain.models.order import Order
from shop.utils.ids import new_id


class User(BaseModel):
    user_id: str = Field(default_factory=new_id)
    name: str
    email: str

    #tylko dopisywanie, zamowien sie nie usuwa
    order_history: list[Order] = Field(default_factory=list)

    def place_order(self, order: Order) -> None:
        self.order_history.append(order)

    @property
    def total_spent(self) -> Decimal:
        return sum((o.total for o in self.order_history), Decimal("0.00"))

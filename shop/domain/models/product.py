# shop/domain/models/product.py
from decimal import Decimal, InvalidOperation
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from shop.utils.ids import new_id
from shop.utils.settings import CURRENCY_SYMBOL


class ProductCategory(str, Enum):
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    FOOD = "food"
    BOOKS = "books"


class Product(BaseModel):
    """Produkt z katalogu. Po utworzeniu niezmienny."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    name: str
    price: Decimal = Field(..., gt=0)
    category: ProductCategory
    description: str = ""

    @classmethod
    def create(
        cls,
        name: str,
        price: Decimal | float | int | str,
        category: ProductCategory,
        description: str = "",
        id: str | None = None,
    ) -> "Product | None":
        """
        Fabryka, ktora zamiast wyjatku zwraca None gdy cena jest
        niepoprawna (<= 0, NaN, nieskonczonosc albo nie liczba).
        Nazwa i opis nie sa sprawdzane.
        """
        try:
            price = Decimal(str(price))
        except InvalidOperation:
            return None

        if not price.is_finite() or price <= 0:
            return None

        data = {"name": name, "price": price, "category": category, "description": description}
        if id is not None:
            data["id"] = id
        return cls(**data)

    @property
    def display_price(self) -> str:
        return f"{CURRENCY_SYMBOL}{self.price:.2f}"

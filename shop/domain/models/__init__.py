#wszystkie modele domenowe w jednym miejscu

from shop.domain.models.product import Product, ProductCategory
from shop.domain.models.cart_item import CartItem
from shop.domain.models.cart import ShoppingCart, DISCOUNT_RATES
from shop.domain.models.address import Address
from shop.domain.models.order import Order, OrderItem
from shop.domain.models.user import User

__all__ = [
    "Product",
    "ProductCategory",
    "CartItem",
    "ShoppingCart",
    "DISCOUNT_RATES",
    "Address",
    "Order",
    "OrderItem",
    "User",
]

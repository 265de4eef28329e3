from decimal import Decimal

import pytest

from shop.domain.models import Address, Product, ProductCategory, ShoppingCart, User


@pytest.fixture
def laptop() -> Product:
    return Product.create(
        name="Laptop",
        price=1200.00,
        category=ProductCategory.ELECTRONICS,
        description="High performance laptop",
    )


@pytest.fixture
def book() -> Product:
    return Product.create(name="Python Book", price=40.00, category=ProductCategory.BOOKS)


@pytest.fixture
def headphones() -> Product:
    return Product.create(name="Headphones", price=Decimal("80"), category=ProductCategory.ELECTRONICS)


@pytest.fixture
def cart() -> ShoppingCart:
    return ShoppingCart()


@pytest.fixture
def filled_cart(cart, laptop, book) -> ShoppingCart:
    cart.add_item(laptop, quantity=1)
    cart.add_item(book, quantity=2)
    return cart


@pytest.fixture
def address() -> Address:
    return Address(street="123 Main St", city="Almaty", zip_code="050000", country="Kazakhstan")


@pytest.fixture
def user() -> User:
    return User(name="Sasha", email="sasha@example.com")

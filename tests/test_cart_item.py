from decimal import Decimal

import pytest
from pydantic import ValidationError

from shop.domain.models import CartItem


def test_default_quantity_is_one(laptop):
    assert CartItem(product=laptop).quantity == 1


@pytest.mark.parametrize("quantity", [0, -1, -5])
def test_non_positive_quantity_is_clamped_to_one(laptop, quantity):
    assert CartItem(product=laptop, quantity=quantity).quantity == 1


def test_subtotal(book):
    item = CartItem(product=book, quantity=3)
    assert item.subtotal == Decimal("120")


def test_update_quantity(book):
    item = CartItem(product=book, quantity=2)
    item.update_quantity(7)
    assert item.quantity == 7


@pytest.mark.parametrize("quantity", [0, -3])
def test_update_quantity_ignores_non_positive(book, quantity):
    item = CartItem(product=book, quantity=2)
    item.update_quantity(quantity)
    assert item.quantity == 2


def test_increase_quantity(book):
    item = CartItem(product=book, quantity=2)
    item.increase_quantity(3)
    assert item.quantity == 5


@pytest.mark.parametrize("amount", [0, -2])
def test_increase_quantity_ignores_non_positive(book, amount):
    item = CartItem(product=book, quantity=2)
    item.increase_quantity(amount)
    assert item.quantity == 2


def test_clone_is_independent(laptop):
    item1 = CartItem(product=laptop, quantity=1)
    item2 = item1.clone()
    item2.update_quantity(5)

    assert item1.quantity == 1
    assert item2.quantity == 5
    assert item2.product is item1.product


def test_guard_rejection_is_silent(book, caplog):
    item = CartItem(product=book)
    with caplog.at_level("DEBUG"):
        item.update_quantity(0)
        item.increase_quantity(-1)
    assert caplog.records == []


def test_fractional_quantity_is_rejected(book):
    with pytest.raises(ValidationError):
        CartItem(product=book, quantity=2.7)


def test_integral_values_are_coerced_then_clamped(book):
    assert CartItem(product=book, quantity="3").quantity == 3
    assert CartItem(product=book, quantity=2.0).quantity == 2
    assert CartItem(product=book, quantity="-4").quantity == 1

import json
from decimal import Decimal

from shop.domain.models import Order
from shop.domain.schemas import CartOut, OrderOut, UserOut


def test_cart_out(filled_cart, laptop):
    filled_cart.discount_code = "SAVE20"
    out = CartOut.from_cart(filled_cart)

    assert out.item_count == 3
    assert out.subtotal == Decimal("1280")
    assert out.discount_code == "SAVE20"
    assert out.discount_amount == Decimal("256")
    assert out.total == Decimal("1024")
    assert out.items[0].product.id == laptop.id
    assert out.items[0].product.display_price == "$1200.00"
    assert out.items[0].product.category == "electronics"
    assert out.items[1].subtotal == Decimal("80")


def test_empty_cart_out(cart):
    out = CartOut.from_cart(cart)
    assert out.items == []
    assert out.total == Decimal("0")


def test_order_out(filled_cart, address):
    order = Order.create(filled_cart, address)
    out = OrderOut.from_order(order)

    assert out.order_id == order.order_id
    assert out.item_count == 3
    assert out.shipping_address.formatted_address == address.formatted_address
    assert len(out.items) == 2

    payload = json.loads(out.model_dump_json())
    assert payload["order_id"] == order.order_id
    assert payload["shipping_address"]["zip_code"] == "050000"


def test_user_out(user, filled_cart, address):
    user.place_order(Order.create(filled_cart, address))
    out = UserOut.from_user(user)

    assert out.order_count == 1
    assert out.total_spent == Decimal("1280")
    assert out.email == "sasha@example.com"

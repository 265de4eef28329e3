# shop/main.py
from shop.domain.models import (
    Address,
    CartItem,
    Product,
    ProductCategory,
    ShoppingCart,
    User,
)
from shop.services.checkout_service import CheckoutService
from shop.utils.logging import configure_logging, get_logger
from shop.utils.settings import DEMO_USER_EMAIL, DEMO_USER_NAME

logger = get_logger(__name__)


def _build_catalog() -> tuple[Product, Product, Product]:
    laptop = Product.create(
        name="Laptop",
        price=1200.00,
        category=ProductCategory.ELECTRONICS,
        description="High performance laptop",
    )
    book = Product.create(
        name="Python Book",
        price=40.00,
        category=ProductCategory.BOOKS,
        description="Learn Python programming",
    )
    headphones = Product.create(
        name="Headphones",
        price=80.00,
        category=ProductCategory.ELECTRONICS,
        description="Noise cancelling headphones",
    )

    if laptop is None or book is None or headphones is None:
        logger.error("Product catalog could not be built, price validation failed")
        raise SystemExit("Failed to create products (price must be positive)")

    return laptop, book, headphones


def modify_cart(cart: ShoppingCart, product: Product) -> None:
    #koszyk jest wspoldzielony, wywolujacy widzi zmiane
    cart.add_item(product, quantity=1)


def run_demo() -> User:
    print("=" * 80)
    print("SHOPPING CART SCENARIOS")
    print("=" * 80)

    laptop, book, headphones = _build_catalog()

    print("Products created:")
    for p in (laptop, book, headphones):
        print(f" - {p.name}: {p.display_price}")
    print()

    cart = ShoppingCart()
    cart.add_item(laptop, quantity=1)
    cart.add_item(book, quantity=2)

    print("After adding laptop x1 and book x2:")
    print(f"Subtotal: {cart.subtotal}")
    print(f"Item count: {cart.item_count}\n")

    cart.add_item(laptop, quantity=1)
    laptop_item = cart.find_item(laptop.id)
    if laptop_item is not None:
        print(f"Laptop quantity after adding one more: {laptop_item.quantity} (expected 2)")
    print(f"Subtotal: {cart.subtotal}")
    print(f"Item count: {cart.item_count}\n")

    cart.discount_code = "SAVE10"
    print(f"Discount code: {cart.discount_code}")
    print(f"Discount amount: {cart.discount_amount}")
    print(f"Total after discount: {cart.total}\n")

    cart.remove_item(book.id)
    print("After removing the book:")
    print(f"Subtotal: {cart.subtotal}")
    print(f"Item count: {cart.item_count}\n")

    modify_cart(cart, headphones)
    print("After modify_cart(cart):")
    print(f"Cart item count: {cart.item_count} (expected to grow)\n")

    item1 = CartItem(product=laptop, quantity=1)
    item2 = item1.clone()
    item2.update_quantity(5)
    print("Copy independence:")
    print(f"item1.quantity = {item1.quantity} (expected 1)")
    print(f"item2.quantity = {item2.quantity} (expected 5)\n")

    user = User(name=DEMO_USER_NAME, email=DEMO_USER_EMAIL)
    address = Address(street="123 Main St", city="Almaty", zip_code="050000", country="Kazakhstan")

    service = CheckoutService()
    order = service.checkout(cart, user, address)
    print(f"Order created with id: {order.order_id}")
    print(f"Order subtotal: {order.subtotal}, total: {order.total}, item count: {order.item_count}")
    print(f"Ship to:\n{order.shipping_address.formatted_address}\n")

    cart.clear_cart()
    print("After clearing the cart:")
    print(f"Cart item count: {cart.item_count} (expected 0)")
    print(f"Order item count: {order.item_count} (expected value from before clearing)\n")

    print(f"User {user.name} placed {len(user.order_history)} order(s)")
    print(f"Total spent by user: {user.total_spent}\n")

    print(service.order_summary(order).model_dump_json(indent=2))

    print("=" * 80)
    print("DONE")
    print("=" * 80)

    return user


def main() -> None:
    configure_logging()
    run_demo()


if __name__ == "__main__":
    main()

# shop/services/checkout_service.py
from shop.domain.models import Address, Order, ShoppingCart, User
from shop.domain.schemas import OrderOut
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class CheckoutService:
    """
    Serwis odpowiedzialny za zamowienia.
    Separacja od koszyka: koszyk nie wie nic o zamowieniach ani userach.
    """

    def checkout(self, cart: ShoppingCart, user: User, shipping_address: Address) -> Order:
        """
        Use Case: Tworzenie zamowienia z koszyka.

        1. Robi snapshot koszyka (kopie pozycji + sumy)
        2. Dopisuje zamowienie do historii usera
        Koszyk nie jest czyszczony, to decyzja wywolujacego.
        """
        order = Order.create(cart, shipping_address)
        user.place_order(order)

        logger.info(
            f"Order {order.order_id} placed by user {user.user_id}: "
            f"{order.item_count} item(s), total {order.total}"
        )

        return order

    def order_summary(self, order: Order) -> OrderOut:
        """
        Use Case: Podsumowanie zamowienia (Query).
        """
        return OrderOut.from_order(order)

from __future__ import annotations

from typing import Any, Optional

from apps.common import get_logger
from .cart import DEFAULT_SESSION_KEY, Cart
from .dtos import CartDTO
from .mappers import CartMapper
from .protocols import BuyableLookupProtocol
from .session import DjangoSessionStore

logger = get_logger(__name__).bind(component="carts", layer="service")


class BuyableNotFoundError(Exception):
    """Raised when a request names a buyable that does not exist or is disabled."""

    def __init__(self, buyable_type: str, buyable_id: Any):
        super().__init__(f"Buyable {buyable_type}-{buyable_id} not found")
        self.buyable_type = buyable_type
        self.buyable_id = buyable_id


class CartService:
    def __init__(
        self,
        buyables: BuyableLookupProtocol,
        cart_mapper: Optional[CartMapper] = None,
        session_key: str = DEFAULT_SESSION_KEY,
    ):
        self.buyables = buyables
        self.cart_mapper = cart_mapper or CartMapper()
        self.session_key = session_key
        self.logger = logger.bind(service="CartService")

    def open(self, session) -> Cart:
        """Cart for a request session. ``None`` gives a throwaway in-memory cart."""
        store = DjangoSessionStore(session) if session is not None else None
        if store is None:
            self.logger.debug("No session available; using in-memory cart")
        return Cart(store, self.buyables, session_key=self.session_key)

    def resolve(self, buyable_type: str, buyable_id: Any, *, enabled_only: bool = True):
        buyable = self.buyables.get(buyable_type, buyable_id, enabled_only=enabled_only)
        if buyable is None:
            self.logger.info(
                "Buyable lookup failed",
                buyable_type=buyable_type,
                buyable_id=buyable_id,
                enabled_only=enabled_only,
            )
            raise BuyableNotFoundError(buyable_type, buyable_id)
        return buyable

    def summary(self, session) -> CartDTO:
        return self.cart_mapper.to_dto(self.open(session))

    def add_item(self, session, buyable_type: str, buyable_id: Any, quantity: int = 1) -> CartDTO:
        buyable = self.resolve(buyable_type, buyable_id)
        cart = self.open(session)
        item = cart.add(buyable, quantity)
        self.logger.info("Added to cart", row_id=item.row_id, quantity=item.quantity, added=quantity)
        return self.cart_mapper.to_dto(cart)

    def set_item(self, session, buyable_type: str, buyable_id: Any, quantity: int) -> CartDTO:
        buyable = self.resolve(buyable_type, buyable_id)
        cart = self.open(session)
        item = cart.set(buyable, quantity)
        self.logger.info("Updated cart quantity", row_id=item.row_id, quantity=item.quantity)
        return self.cart_mapper.to_dto(cart)

    def remove_item(self, session, buyable_type: str, buyable_id: Any) -> CartDTO:
        cart = self.open(session)
        try:
            buyable = self.resolve(buyable_type, buyable_id, enabled_only=False)
        except BuyableNotFoundError:
            # Rows of deleted buyables never survive hydration, so nothing to remove
            return self.cart_mapper.to_dto(cart)
        cart.remove(buyable)
        self.logger.info("Removed from cart", buyable_type=buyable_type, buyable_id=buyable_id)
        return self.cart_mapper.to_dto(cart)

    def clear(self, session) -> CartDTO:
        cart = self.open(session)
        cart.clear()
        self.logger.info("Cart cleared")
        return self.cart_mapper.to_dto(cart)

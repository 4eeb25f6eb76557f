from __future__ import annotations

from django.conf import settings

from apps.catalog.registry import build_buyable_registry

from .cart import DEFAULT_SESSION_KEY
from .mappers import CartItemMapper, CartMapper
from .services import CartService


def build_cart_service() -> CartService:
    return CartService(
        buyables=build_buyable_registry(),
        cart_mapper=CartMapper(CartItemMapper()),
        session_key=getattr(settings, "SHOP_CART_SESSION_KEY", DEFAULT_SESSION_KEY),
    )

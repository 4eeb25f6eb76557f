from __future__ import annotations

from decimal import Decimal
from typing import Any

from apps.catalog.registry import type_value
from .records import CartRecord


def row_id_for(buyable: Any) -> str:
    """Row key of a buyable inside a cart, e.g. ``package-3``."""
    return f"{type_value(buyable.buyable_type)}-{buyable.id}"


class CartItem:
    """A buyable and how many of it the cart holds."""

    def __init__(self, buyable: Any, row_id: str, quantity: int):
        self._buyable = buyable
        self.row_id = row_id
        self.quantity = quantity

    @property
    def buyable(self) -> Any:
        return self._buyable

    @property
    def buyable_type(self) -> str:
        return type_value(self._buyable.buyable_type)

    @property
    def unit_price(self) -> Decimal:
        # Read from the entity on every call so price edits show up immediately
        return self._buyable.price

    def set_quantity(self, quantity: int) -> None:
        self.quantity = quantity

    def total(self) -> Decimal:
        return self.quantity * self.unit_price

    def to_record(self) -> CartRecord:
        return CartRecord(
            type=self.buyable_type,
            id=self._buyable.id,
            item_id=self.row_id,
            quantity=self.quantity,
        )

    def __repr__(self):
        return f"CartItem(row_id={self.row_id!r}, quantity={self.quantity})"

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from apps.common import get_logger
from .exceptions import EmptyCart, InvalidQuantity
from .items import CartItem, row_id_for
from .protocols import BuyableLookupProtocol, SessionStoreProtocol
from .records import CartRecord, dump_payload, load_payload

logger = get_logger(__name__).bind(component="carts", layer="cart")

DEFAULT_SESSION_KEY = "shop.cart"


def _validate_quantity(quantity: Any) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidQuantity(quantity)
    return quantity


class Cart:
    """
    Session backed shopping cart.

    Items are keyed by row id (see ``row_id_for``), so a buyable appears at
    most once. Every mutation writes the full item set back to the store. A
    cart built without a store lives in memory only.
    """

    def __init__(
        self,
        store: Optional[SessionStoreProtocol] = None,
        buyables: Optional[BuyableLookupProtocol] = None,
        *,
        session_key: str = DEFAULT_SESSION_KEY,
    ):
        self.store = store
        self.buyables = buyables
        self.session_key = session_key
        self.logger = logger.bind(session_key=session_key, persistent=store is not None)
        self.items: Dict[str, CartItem] = self._load() if store is not None else {}

    def add(self, buyable: Any, quantity: int = 1) -> CartItem:
        """Add ``quantity`` of a buyable, on top of what the cart already holds."""
        _validate_quantity(quantity)
        item = self.get(buyable)
        if item is None:
            return self.set(buyable, quantity)
        item.set_quantity(item.quantity + quantity)
        self.logger.debug("Incremented cart row", row_id=item.row_id, quantity=item.quantity)
        self._save()
        return item

    def set(self, buyable: Any, quantity: int = 1) -> CartItem:
        """Set the quantity of a buyable, replacing any previous quantity."""
        _validate_quantity(quantity)
        item = self.get(buyable)
        if item is not None:
            item.set_quantity(quantity)
        else:
            row_id = row_id_for(buyable)
            item = CartItem(buyable, row_id, quantity)
            self.items[row_id] = item
        self.logger.debug("Set cart row", row_id=item.row_id, quantity=quantity)
        self._save()
        return item

    def remove(self, buyable: Any) -> None:
        row_id = row_id_for(buyable)
        removed = self.items.pop(row_id, None)
        self.logger.debug("Removed cart row", row_id=row_id, existed=removed is not None)
        self._save()

    def get(self, buyable: Any) -> Optional[CartItem]:
        return self.items.get(row_id_for(buyable))

    def clear(self) -> None:
        self.items = {}
        self.logger.debug("Cleared cart")
        self._save()

    def is_empty(self) -> bool:
        return not self.items

    def content(self) -> List[CartItem]:
        return list(self.items.values())

    def count(self) -> int:
        """Number of units in the cart, not number of rows."""
        return sum(item.quantity for item in self.items.values())

    def total(self) -> Decimal:
        return sum((item.total() for item in self.items.values()), Decimal("0"))

    def type(self) -> str:
        """Uppercased discriminator of the first item, e.g. ``PACKAGE``."""
        for item in self.items.values():
            return item.buyable_type.upper()
        raise EmptyCart()

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.content())

    def _save(self) -> None:
        if self.store is None:
            return
        payload = dump_payload(item.to_record() for item in self.items.values())
        self.store.put(self.session_key, payload)

    def _load(self) -> Dict[str, CartItem]:
        records = load_payload(self.store.get(self.session_key, None))
        if not records:
            return {}
        if self.buyables is None:
            raise ValueError("A buyable lookup is required to restore a stored cart")

        ids_by_type: Dict[str, List[Any]] = {}
        for record in records:
            ids_by_type.setdefault(record.type, []).append(record.id)

        loaded: Dict[str, Dict[Any, Any]] = {}
        for buyable_type, ids in ids_by_type.items():
            if not self.buyables.has(buyable_type):
                self.logger.warning("Skipping cart rows of unknown type", buyable_type=buyable_type)
                continue
            loaded[buyable_type] = self.buyables.find_many(buyable_type, ids)

        items: Dict[str, CartItem] = {}
        for record in records:
            entity = loaded.get(record.type, {}).get(record.id)
            if entity is None:
                self._log_dropped(record)
                continue
            row_id = row_id_for(entity)
            items[row_id] = CartItem(entity, row_id, record.quantity)
        self.logger.debug("Restored cart from session", stored=len(records), restored=len(items))
        return items

    def _log_dropped(self, record: CartRecord) -> None:
        self.logger.info(
            "Dropped cart row for missing buyable",
            buyable_type=record.type,
            buyable_id=record.id,
        )

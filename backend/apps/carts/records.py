"""Session representation of a cart.

The session holds ``{"version": 1, "items": [record, ...]}`` where each record
is ``{"type", "id", "itemId", "quantity"}`` and ``type`` is a ``BuyableType``
value. Any other layout, including a bare list of records, is discarded.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from apps.common import get_logger

logger = get_logger(__name__).bind(component="carts", layer="records")

SESSION_SCHEMA_VERSION = 1
SUPPORTED_SCHEMA_VERSIONS = (SESSION_SCHEMA_VERSION,)


def _strict_int(value: Any) -> Optional[int]:
    """Return ``value`` as an int only if it is one, or a string of ASCII digits."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


@dataclass(frozen=True)
class CartRecord:
    type: str
    id: Any
    item_id: str
    quantity: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "id": self.id,
            "itemId": self.item_id,
            "quantity": self.quantity,
        }

    @staticmethod
    def from_raw(raw: Any) -> Optional["CartRecord"]:
        if not isinstance(raw, dict):
            return None
        buyable_type = raw.get("type")
        if not isinstance(buyable_type, str) or not buyable_type:
            return None
        buyable_id = _strict_int(raw.get("id"))
        quantity = _strict_int(raw.get("quantity"))
        if buyable_id is None or quantity is None or quantity <= 0:
            return None
        item_id = raw.get("itemId")
        if not isinstance(item_id, str) or not item_id:
            item_id = f"{buyable_type}-{buyable_id}"
        return CartRecord(
            type=buyable_type, id=buyable_id, item_id=item_id, quantity=quantity
        )


def dump_payload(records: Iterable[CartRecord]) -> Dict[str, Any]:
    return {
        "version": SESSION_SCHEMA_VERSION,
        "items": [record.to_dict() for record in records],
    }


def load_payload(raw: Any) -> List[CartRecord]:
    """
    Parse a stored payload into records. Unknown versions yield no records;
    malformed records are skipped. Neither case raises.
    """
    if not raw:
        return []
    if not isinstance(raw, dict):
        logger.warning("Discarding cart payload of unexpected shape", kind=type(raw).__name__)
        return []

    version, items = raw.get("version"), raw.get("items")
    if version not in SUPPORTED_SCHEMA_VERSIONS or not isinstance(items, list):
        logger.warning("Discarding cart payload with unsupported schema", version=version)
        return []

    records: List[CartRecord] = []
    for position, item in enumerate(items):
        record = CartRecord.from_raw(item)
        if record is None:
            logger.warning("Skipping malformed cart record", position=position, version=version)
            continue
        records.append(record)
    return records

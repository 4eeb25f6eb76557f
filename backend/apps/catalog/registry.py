from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from apps.common import get_logger
from .models import BuyableType
from .protocols import BuyableRepositoryProtocol
from .repositories import OfferRepository, PackageRepository

logger = get_logger(__name__).bind(component="catalog", layer="registry")


class UnknownBuyableType(Exception):
    """Raised when a buyable type has no registered repository."""

    def __init__(self, buyable_type: Any):
        super().__init__(f"Unknown buyable type: {buyable_type!r}")
        self.buyable_type = buyable_type


def type_value(buyable_type: Any) -> str:
    """Plain string form of a discriminator, enum member or raw value."""
    return str(getattr(buyable_type, "value", buyable_type))


class BuyableRegistry:
    """Maps buyable discriminators to the repository that loads them."""

    def __init__(self):
        self._repositories: Dict[str, BuyableRepositoryProtocol] = {}

    def register(self, buyable_type: Any, repository: BuyableRepositoryProtocol) -> None:
        self._repositories[type_value(buyable_type)] = repository

    def types(self) -> List[str]:
        return list(self._repositories)

    def has(self, buyable_type: Any) -> bool:
        return type_value(buyable_type) in self._repositories

    def repository_for(self, buyable_type: Any) -> BuyableRepositoryProtocol:
        try:
            return self._repositories[type_value(buyable_type)]
        except KeyError:
            raise UnknownBuyableType(buyable_type) from None

    def find_many(self, buyable_type: Any, ids: Iterable[Any]) -> Dict[Any, Any]:
        ids = list(ids)
        found = self.repository_for(buyable_type).find_many(ids)
        logger.debug(
            "Loaded buyables",
            buyable_type=type_value(buyable_type),
            requested=len(ids),
            found=len(found),
        )
        return found

    def get(self, buyable_type: Any, buyable_id: Any, *, enabled_only: bool = True) -> Optional[Any]:
        filters: Dict[str, Any] = {"id": buyable_id}
        if enabled_only:
            filters["is_enabled"] = True
        return self.repository_for(buyable_type).get(**filters)


def build_buyable_registry() -> BuyableRegistry:
    registry = BuyableRegistry()
    registry.register(BuyableType.PACKAGE, PackageRepository())
    registry.register(BuyableType.OFFER, OfferRepository())
    return registry

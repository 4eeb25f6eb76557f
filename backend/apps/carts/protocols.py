from __future__ import annotations

from typing import Any, Dict, Iterable, Protocol


class SessionStoreProtocol(Protocol):
    def get(self, key: str, default: Any = None) -> Any:
        ...

    def put(self, key: str, value: Any) -> None:
        ...


class BuyableLookupProtocol(Protocol):
    def has(self, buyable_type: Any) -> bool:
        ...

    def find_many(self, buyable_type: Any, ids: Iterable[Any]) -> Dict[Any, Any]:
        ...

    def get(self, buyable_type: Any, buyable_id: Any, *, enabled_only: bool = True) -> Any:
        ...

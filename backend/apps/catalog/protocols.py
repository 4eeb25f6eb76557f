from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Protocol


class BuyableRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional[Any]:
        ...

    def find_many(self, ids: Iterable[Any]) -> Dict[Any, Any]:
        ...

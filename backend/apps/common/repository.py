from typing import Any, Dict, Generic, Iterable, Optional, Type, TypeVar

from django.db import models

T = TypeVar('T', bound=models.Model)


class GenericRepository(Generic[T]):
    """Minimal ORM gateway shared by the app repositories."""

    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, **filters) -> Optional[T]:
        return self.model.objects.filter(**filters).first()

    def find_many(self, ids: Iterable[Any]) -> Dict[Any, T]:
        """Batch load rows by primary key in one query, keyed by id."""
        unique_ids = list(dict.fromkeys(ids))
        if not unique_ids:
            return {}
        return self.model.objects.in_bulk(unique_ids)

from typing import Any


class DjangoSessionStore:
    """Exposes a Django session through the cart's get/put store contract."""

    def __init__(self, session):
        self.session = session

    def get(self, key: str, default: Any = None) -> Any:
        return self.session.get(key, default)

    def put(self, key: str, value: Any) -> None:
        self.session[key] = value
        # Nested values are replaced wholesale; flag it so the backend saves
        self.session.modified = True

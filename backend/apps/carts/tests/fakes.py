from decimal import Decimal


class StubBuyable:
    def __init__(self, buyable_type, buyable_id, price, name="", is_enabled=True):
        self.buyable_type = buyable_type
        self.id = buyable_id
        self.price = Decimal(price)
        self.name = name or f"{buyable_type} {buyable_id}"
        self.is_enabled = is_enabled


class FakeSessionStore:
    def __init__(self, data=None):
        self.data = dict(data or {})
        self.puts = []

    def get(self, key, default=None):
        return self.data.get(key, default)

    def put(self, key, value):
        self.data[key] = value
        self.puts.append(key)


class FakeBuyableLookup:
    def __init__(self, *buyables, types=("package", "offer")):
        self.rows = {t: {} for t in types}
        for buyable in buyables:
            self.rows.setdefault(buyable.buyable_type, {})[buyable.id] = buyable
        self.find_many_calls = []

    def has(self, buyable_type):
        return buyable_type in self.rows

    def find_many(self, buyable_type, ids):
        ids = list(ids)
        self.find_many_calls.append((buyable_type, ids))
        rows = self.rows[buyable_type]
        return {i: rows[i] for i in ids if i in rows}

    def get(self, buyable_type, buyable_id, *, enabled_only=True):
        buyable = self.rows.get(buyable_type, {}).get(buyable_id)
        if buyable is not None and enabled_only and not buyable.is_enabled:
            return None
        return buyable

    def delete(self, buyable):
        self.rows[buyable.buyable_type].pop(buyable.id, None)

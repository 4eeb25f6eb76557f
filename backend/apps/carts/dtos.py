from dataclasses import dataclass
from typing import List, Optional


@dataclass
class CartItemDTO:
    row_id: str
    type: str
    id: int
    name: str
    quantity: int
    unit_price: str
    total: str


@dataclass
class CartDTO:
    items: List[CartItemDTO]
    count: int
    total: str
    type: Optional[str]

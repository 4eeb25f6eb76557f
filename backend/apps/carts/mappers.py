from typing import Iterable, List

from .cart import Cart
from .dtos import CartDTO, CartItemDTO
from .items import CartItem


class CartItemMapper:
    @staticmethod
    def to_dto(item: CartItem) -> CartItemDTO:
        buyable = item.buyable
        return CartItemDTO(
            row_id=item.row_id,
            type=item.buyable_type,
            id=buyable.id,
            name=str(getattr(buyable, "name", "")),
            quantity=item.quantity,
            unit_price=str(item.unit_price),
            total=str(item.total()),
        )

    @classmethod
    def many_to_dto(cls, items: Iterable[CartItem]) -> List[CartItemDTO]:
        return [cls.to_dto(i) for i in items]


class CartMapper:
    def __init__(self, item_mapper: CartItemMapper = None) -> None:
        self.item_mapper = item_mapper or CartItemMapper()

    def to_dto(self, cart: Cart) -> CartDTO:
        return CartDTO(
            items=self.item_mapper.many_to_dto(cart.content()),
            count=cart.count(),
            total=str(cart.total()),
            type=None if cart.is_empty() else cart.type(),
        )

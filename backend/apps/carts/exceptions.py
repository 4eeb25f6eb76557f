class CartError(Exception):
    """Base class for cart domain errors."""


class EmptyCart(CartError):
    """Raised when an operation needs at least one item in the cart."""

    def __init__(self, message: str = "The cart is empty"):
        super().__init__(message)


class InvalidQuantity(CartError):
    """Raised when a quantity is not an integer greater than zero."""

    def __init__(self, quantity):
        super().__init__(f"Quantity must be a positive integer, got {quantity!r}")
        self.quantity = quantity

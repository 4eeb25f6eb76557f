from typing import Protocol


class PaymentRepositoryProtocol(Protocol):
    def count_completed(self) -> int:
        ...

from apps.common.repository import GenericRepository
from .models import Payment


class PaymentRepository(GenericRepository[Payment]):
    def __init__(self):
        super().__init__(Payment)

    def count_completed(self) -> int:
        return self.model.objects.completed().count()

from typing import Dict, Optional

from django.utils.translation import gettext as _

from apps.common import get_logger
from apps.common.dashboard import (
    AdminDashboardCardComposer,
    Card,
    register_dashboard_composer,
)
from .protocols import PaymentRepositoryProtocol
from .repositories import PaymentRepository

logger = get_logger(__name__).bind(component="payments", layer="dashboard")


@register_dashboard_composer
class ShopAdminDashboardComposer(AdminDashboardCardComposer):
    def __init__(self, payments: Optional[PaymentRepositoryProtocol] = None):
        self.payments = payments or PaymentRepository()

    def get_cards(self) -> Dict[str, Card]:
        completed = self.payments.count_completed()
        logger.debug("Composed shop payments card", completed=completed)
        return {
            "shop_payments": {
                "color": "info",
                "name": _("Payments"),
                "value": completed,
                "icon": "fas fa-money-bill-wave",
            },
        }

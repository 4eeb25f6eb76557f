from apps.common.repository import GenericRepository
from .models import Offer, Package


class PackageRepository(GenericRepository[Package]):
    def __init__(self):
        super().__init__(Package)


class OfferRepository(GenericRepository[Offer]):
    def __init__(self):
        super().__init__(Offer)

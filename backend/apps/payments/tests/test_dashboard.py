import unittest
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APITestCase

from apps.catalog.models import Offer, Package
from apps.payments.dashboard import ShopAdminDashboardComposer
from apps.payments.models import Payment, PaymentStatus
from apps.payments.repositories import PaymentRepository


class FakePaymentRepository:
    def __init__(self, completed):
        self.completed = completed

    def count_completed(self):
        return self.completed


def make_payment(status_value, price="9.99"):
    return Payment.objects.create(
        price=Decimal(price), status=status_value, gateway_type="paypal"
    )


class ShopAdminDashboardComposerUnitTests(unittest.TestCase):
    def test_card_layout(self):
        cards = ShopAdminDashboardComposer(FakePaymentRepository(12)).get_cards()
        self.assertEqual(
            cards,
            {
                "shop_payments": {
                    "color": "info",
                    "name": "Payments",
                    "value": 12,
                    "icon": "fas fa-money-bill-wave",
                }
            },
        )


class PaymentQueryTests(TestCase):
    def test_completed_filter_and_count(self):
        make_payment(PaymentStatus.COMPLETED)
        make_payment(PaymentStatus.COMPLETED)
        make_payment(PaymentStatus.PENDING)
        make_payment(PaymentStatus.REFUNDED)
        self.assertEqual(Payment.objects.completed().count(), 2)
        self.assertEqual(Payment.objects.pending().count(), 1)
        self.assertEqual(PaymentRepository().count_completed(), 2)

    def test_composer_counts_completed_payments_in_database(self):
        make_payment(PaymentStatus.COMPLETED)
        make_payment(PaymentStatus.ERROR)
        cards = ShopAdminDashboardComposer().get_cards()
        self.assertEqual(cards["shop_payments"]["value"], 1)


class TestAdminDashboardApi(APITestCase):
    url = "/api/admin/dashboard/"

    def setUp(self):
        User = get_user_model()
        self.staff = User.objects.create_user(username="admin", password="TestPass123", is_staff=True)
        self.customer = User.objects.create_user(username="buyer", password="TestPass123")
        make_payment(PaymentStatus.COMPLETED)
        make_payment(PaymentStatus.COMPLETED)
        make_payment(PaymentStatus.CHARGEBACK)

    def test_staff_sees_payment_card(self):
        self.client.force_login(self.staff)
        res = self.client.get(self.url)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        card = next(c for c in res.data if c["key"] == "shop_payments")
        self.assertEqual(card["value"], 2)
        self.assertEqual(card["color"], "info")
        self.assertEqual(card["icon"], "fas fa-money-bill-wave")

    def test_customer_is_forbidden(self):
        self.client.force_login(self.customer)
        res = self.client.get(self.url)
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(res.data["error"]["code"], "FORBIDDEN")

    def test_anonymous_is_rejected(self):
        res = self.client.get(self.url)
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)


class SeedShopCommandTests(TestCase):
    def test_seed_creates_catalog_and_payments(self):
        call_command("seed_shop", verbosity=0)
        self.assertEqual(Package.objects.count(), 4)
        self.assertEqual(Offer.objects.count(), 2)
        self.assertEqual(Payment.objects.completed().count(), 2)

    def test_seed_is_idempotent(self):
        call_command("seed_shop", verbosity=0)
        call_command("seed_shop", verbosity=0)
        self.assertEqual(Package.objects.count(), 4)
        self.assertEqual(Payment.objects.count(), 4)

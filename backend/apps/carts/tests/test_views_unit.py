import unittest
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory

from apps.carts.dtos import CartDTO, CartItemDTO
from apps.carts.exceptions import InvalidQuantity
from apps.carts.services import BuyableNotFoundError
from apps.carts.views import CartItemDetailView, CartItemListView, CartView
from apps.catalog.registry import UnknownBuyableType


def make_cart_dto(quantity=2):
    if not quantity:
        return CartDTO(items=[], count=0, total="0", type=None)
    return CartDTO(
        items=[
            CartItemDTO(
                row_id="package-1",
                type="package",
                id=1,
                name="VIP",
                quantity=quantity,
                unit_price="9.99",
                total=str(quantity * 9.99),
            )
        ],
        count=quantity,
        total=str(quantity * 9.99),
        type="PACKAGE",
    )


class CartViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def test_get_cart_serializes_summary(self):
        service_mock = Mock()
        service_mock.summary.return_value = make_cart_dto()
        with patch.object(CartView, "service", service_mock):
            response = CartView.as_view()(self.factory.get("/api/cart/"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["count"], 2)
        self.assertEqual(response.data["type"], "PACKAGE")
        self.assertEqual(response.data["items"][0]["rowId"], "package-1")
        self.assertEqual(response.data["items"][0]["unitPrice"], "9.99")

    def test_clear_cart(self):
        service_mock = Mock()
        service_mock.clear.return_value = make_cart_dto(0)
        with patch.object(CartView, "service", service_mock):
            response = CartView.as_view()(self.factory.delete("/api/cart/"))
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.data["type"])
        service_mock.clear.assert_called_once()

    def test_add_item_returns_created(self):
        service_mock = Mock()
        service_mock.add_item.return_value = make_cart_dto(3)
        with patch.object(CartItemListView, "service", service_mock):
            request = self.factory.post(
                "/api/cart/items/", {"type": "package", "id": 1, "quantity": 3}, format="json"
            )
            response = CartItemListView.as_view()(request)
        self.assertEqual(response.status_code, 201)
        args = service_mock.add_item.call_args[0]
        self.assertEqual(args[1:], ("package", 1, 3))

    def test_add_item_defaults_quantity_to_one(self):
        service_mock = Mock()
        service_mock.add_item.return_value = make_cart_dto(1)
        with patch.object(CartItemListView, "service", service_mock):
            request = self.factory.post("/api/cart/items/", {"type": "offer", "id": 2}, format="json")
            CartItemListView.as_view()(request)
        self.assertEqual(service_mock.add_item.call_args[0][1:], ("offer", 2, 1))

    def test_add_item_rejects_bad_payload(self):
        service_mock = Mock()
        with patch.object(CartItemListView, "service", service_mock):
            request = self.factory.post(
                "/api/cart/items/", {"type": "voucher", "id": 1, "quantity": 0}, format="json"
            )
            response = CartItemListView.as_view()(request)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")
        self.assertIn("type", response.data["error"]["details"])
        self.assertIn("quantity", response.data["error"]["details"])
        service_mock.add_item.assert_not_called()

    def test_add_missing_buyable_returns_not_found(self):
        service_mock = Mock()
        service_mock.add_item.side_effect = BuyableNotFoundError("package", 42)
        with patch.object(CartItemListView, "service", service_mock):
            request = self.factory.post("/api/cart/items/", {"type": "package", "id": 42}, format="json")
            response = CartItemListView.as_view()(request)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"]["details"], {"type": "package", "id": "42"})

    def test_not_found_message_is_translated_at_response_time(self):
        service_mock = Mock()
        service_mock.add_item.side_effect = BuyableNotFoundError("package", 42)
        with patch.object(CartItemListView, "service", service_mock), patch(
            "django.utils.translation._trans.gettext", side_effect=lambda message: f"[fr] {message}"
        ):
            request = self.factory.post("/api/cart/items/", {"type": "package", "id": 42}, format="json")
            response = CartItemListView.as_view()(request)
        self.assertEqual(response.data["error"]["message"], "[fr] Buyable not found")

    def test_set_quantity(self):
        service_mock = Mock()
        service_mock.set_item.return_value = make_cart_dto(4)
        with patch.object(CartItemDetailView, "service", service_mock):
            request = self.factory.put("/api/cart/items/package/1/", {"quantity": 4}, format="json")
            response = CartItemDetailView.as_view()(request, buyable_type="package", buyable_id="1")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(service_mock.set_item.call_args[0][1:], ("package", 1, 4))

    def test_set_quantity_with_unknown_type(self):
        service_mock = Mock()
        service_mock.set_item.side_effect = UnknownBuyableType("voucher")
        with patch.object(CartItemDetailView, "service", service_mock):
            request = self.factory.put("/api/cart/items/voucher/1/", {"quantity": 1}, format="json")
            response = CartItemDetailView.as_view()(request, buyable_type="voucher", buyable_id="1")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["message"], "Unknown buyable type")

    def test_set_quantity_domain_validation(self):
        service_mock = Mock()
        service_mock.set_item.side_effect = InvalidQuantity(0)
        with patch.object(CartItemDetailView, "service", service_mock):
            request = self.factory.put("/api/cart/items/package/1/", {"quantity": 1}, format="json")
            response = CartItemDetailView.as_view()(request, buyable_type="package", buyable_id="1")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["details"], {"quantity": "0"})

    def test_remove_item(self):
        service_mock = Mock()
        service_mock.remove_item.return_value = make_cart_dto(0)
        with patch.object(CartItemDetailView, "service", service_mock):
            request = self.factory.delete("/api/cart/items/package/1/")
            response = CartItemDetailView.as_view()(request, buyable_type="package", buyable_id="1")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(service_mock.remove_item.call_args[0][1:], ("package", 1))

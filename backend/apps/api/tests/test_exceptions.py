from unittest.mock import patch

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIRequestFactory

from apps.api.exceptions import ApplicationError, global_exception_handler
from apps.carts.exceptions import EmptyCart, InvalidQuantity
from apps.catalog.registry import UnknownBuyableType

factory = APIRequestFactory()


class DummyView:
    pass


def _context(request):
    return {"request": request, "view": DummyView()}


def test_application_error_returns_structured_response():
    request = factory.get("/api/cart/")
    exc = ApplicationError(
        "CONFLICT",
        "Cart changed concurrently",
        status_code=status.HTTP_409_CONFLICT,
        details={"rowId": "package-1"},
    )
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_409_CONFLICT
    assert payload["code"] == "CONFLICT"
    assert payload["message"] == "Cart changed concurrently"
    assert payload["details"] == {"rowId": "package-1"}


def test_empty_cart_becomes_cart_empty_conflict():
    request = factory.get("/api/cart/")
    response = global_exception_handler(EmptyCart(), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_409_CONFLICT
    assert payload["code"] == "CART_EMPTY"
    assert payload["hint"]


def test_invalid_quantity_becomes_validation_error():
    request = factory.post("/api/cart/items/", data={})
    response = global_exception_handler(InvalidQuantity(0), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["details"] == {"quantity": "0"}


def test_unknown_buyable_type_becomes_validation_error():
    request = factory.post("/api/cart/items/", data={})
    response = global_exception_handler(UnknownBuyableType("voucher"), _context(request))
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data["error"]["details"] == {"type": "voucher"}


def test_validation_error_preserves_details():
    request = factory.post("/api/cart/items/", data={})
    exc = ValidationError({"quantity": ["Ensure this value is greater than or equal to 1."]})
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["message"] == "Validation failed"
    assert payload["details"] == {
        "quantity": ["Ensure this value is greater than or equal to 1."]
    }


def test_unhandled_exception_returns_generic_message():
    request = factory.get("/api/cart/")
    response = global_exception_handler(RuntimeError("boom"), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert payload["code"] == "SERVER_ERROR"
    assert payload["message"] == "Something went wrong"
    assert "details" not in payload


def _pseudo_french(message):
    return f"[fr] {message}"


def test_domain_error_messages_go_through_gettext():
    request = factory.get("/api/cart/")
    with patch("django.utils.translation._trans.gettext", side_effect=_pseudo_french):
        response = global_exception_handler(EmptyCart(), _context(request))
    payload = response.data["error"]
    assert payload["message"] == "[fr] The cart is empty"
    assert payload["hint"] == "[fr] Add an item before checking out."


def test_unhandled_error_message_goes_through_gettext():
    request = factory.get("/api/cart/")
    with patch("django.utils.translation._trans.gettext", side_effect=_pseudo_french):
        response = global_exception_handler(RuntimeError("boom"), _context(request))
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.data["error"]["message"] == "[fr] Something went wrong"

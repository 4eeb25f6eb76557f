from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response
from apps.catalog.registry import UnknownBuyableType
from apps.common import get_logger
from .container import build_cart_service
from .exceptions import InvalidQuantity
from .serializers import (
    CartItemAddSerializer,
    CartItemQuantitySerializer,
    CartReadSerializer,
)
from .services import BuyableNotFoundError

logger = get_logger(__name__).bind(component="carts", layer="view")

ITEM_PATH_PARAMETERS = [
    OpenApiParameter("buyable_type", str, OpenApiParameter.PATH),
    OpenApiParameter("buyable_id", int, OpenApiParameter.PATH),
]


def _session(request):
    return getattr(request, "session", None)


def _cart_error_response(exc: Exception):
    if isinstance(exc, BuyableNotFoundError):
        return error_response(
            "NOT_FOUND",
            _("Buyable not found"),
            {"type": exc.buyable_type, "id": str(exc.buyable_id)},
        )
    if isinstance(exc, UnknownBuyableType):
        return error_response(
            "VALIDATION_ERROR",
            _("Unknown buyable type"),
            {"type": str(exc.buyable_type)},
        )
    if isinstance(exc, InvalidQuantity):
        return error_response(
            "VALIDATION_ERROR",
            _("Quantity must be a positive integer"),
            {"quantity": str(exc.quantity)},
        )
    raise exc


class CartView(APIView):
    permission_classes = [AllowAny]
    service = build_cart_service()
    log = logger.bind(view="CartView")

    @extend_schema(summary="Get cart", responses={200: CartReadSerializer})
    def get(self, request):
        dto = self.service.summary(_session(request))
        return Response(CartReadSerializer(dto).data)

    @extend_schema(summary="Clear cart", responses={200: CartReadSerializer})
    def delete(self, request):
        dto = self.service.clear(_session(request))
        self.log.debug("Cart cleared via API")
        return Response(CartReadSerializer(dto).data)


class CartItemListView(APIView):
    permission_classes = [AllowAny]
    service = build_cart_service()
    log = logger.bind(view="CartItemListView")

    @extend_schema(
        summary="Add item to cart",
        description=(
            "Adds the buyable to the session cart. When the buyable is already in the cart "
            "the quantity is added to the existing one."
        ),
        request=CartItemAddSerializer,
        responses={
            201: CartReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CartItemAddSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            dto = self.service.add_item(
                _session(request), data["type"], data["id"], data["quantity"]
            )
        except (BuyableNotFoundError, UnknownBuyableType, InvalidQuantity) as exc:
            self.log.info("Add to cart rejected", error=exc.__class__.__name__)
            return _cart_error_response(exc)
        return Response(CartReadSerializer(dto).data, status=status.HTTP_201_CREATED)


class CartItemDetailView(APIView):
    permission_classes = [AllowAny]
    service = build_cart_service()
    log = logger.bind(view="CartItemDetailView")

    @extend_schema(
        summary="Set item quantity",
        parameters=ITEM_PATH_PARAMETERS,
        request=CartItemQuantitySerializer,
        responses={
            200: CartReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, buyable_type: str, buyable_id: str):
        serializer = CartItemQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            dto = self.service.set_item(
                _session(request),
                buyable_type,
                int(buyable_id),
                serializer.validated_data["quantity"],
            )
        except (BuyableNotFoundError, UnknownBuyableType, InvalidQuantity) as exc:
            self.log.info("Cart quantity update rejected", error=exc.__class__.__name__)
            return _cart_error_response(exc)
        return Response(CartReadSerializer(dto).data)

    @extend_schema(
        summary="Remove item from cart",
        parameters=ITEM_PATH_PARAMETERS,
        responses={
            200: CartReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, buyable_type: str, buyable_id: str):
        try:
            dto = self.service.remove_item(_session(request), buyable_type, int(buyable_id))
        except UnknownBuyableType as exc:
            return _cart_error_response(exc)
        return Response(CartReadSerializer(dto).data)

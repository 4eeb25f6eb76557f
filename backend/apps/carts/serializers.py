from rest_framework import serializers

from apps.catalog.models import BuyableType


class CartItemReadSerializer(serializers.Serializer):
    rowId = serializers.CharField(source="row_id")
    type = serializers.CharField()
    id = serializers.IntegerField()
    name = serializers.CharField()
    quantity = serializers.IntegerField()
    unitPrice = serializers.CharField(source="unit_price")
    total = serializers.CharField()


class CartReadSerializer(serializers.Serializer):
    items = CartItemReadSerializer(many=True)
    count = serializers.IntegerField()
    total = serializers.CharField()
    # Null while the cart is empty
    type = serializers.CharField(allow_null=True)


class CartItemAddSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=BuyableType.choices)
    id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, default=1)


class CartItemQuantitySerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1)

from rest_framework import serializers


class DashboardCardSerializer(serializers.Serializer):
    key = serializers.CharField()
    color = serializers.CharField()
    name = serializers.CharField()
    value = serializers.IntegerField()
    icon = serializers.CharField()

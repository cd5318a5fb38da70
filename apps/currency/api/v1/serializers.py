"""
Serializers for the currency API.
Currencies come from the rate table, not the database, so these are plain serializers.
"""

from rest_framework import serializers


class CurrencySerializer(serializers.Serializer):
    code = serializers.CharField()
    name = serializers.CharField(source="display_name")
    rate_to_base = serializers.DecimalField(max_digits=20, decimal_places=6)
    fraction_digits = serializers.IntegerField()
    locale = serializers.CharField()
    is_base = serializers.SerializerMethodField()

    def get_is_base(self, obj) -> bool:
        return obj.code == self.context["base"]

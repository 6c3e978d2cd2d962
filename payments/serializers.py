# -*- coding: utf-8 -*-
from decimal import Decimal

from rest_framework import serializers


class CreateOrderSerializer(serializers.Serializer):
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.01"),
        error_messages={
            "required": "The amount field is required.",
            "null": "The amount field is required.",
            "invalid": "The amount must be a number.",
            "min_value": "The amount must be at least 0.01.",
        },
    )
    description = serializers.CharField(
        max_length=255,
        allow_blank=False,
        error_messages={
            "required": "The description field is required.",
            "null": "The description field is required.",
            "blank": "The description field is required.",
            "max_length": "The description may not be greater than 255 characters.",
        },
    )


class StatusQuerySerializer(serializers.Serializer):
    order_id = serializers.CharField(
        error_messages={
            "required": "The order id field is required.",
            "blank": "The order id field is required.",
        },
    )


class OrderCreatedSerializer(serializers.Serializer):
    success = serializers.BooleanField(default=True)
    order_id = serializers.CharField()
    payment_url = serializers.CharField()

"""
Serializers for Bill and BillItem models.
"""
from decimal import Decimal
from rest_framework import serializers
from apps.core.fields import MoneyField
from apps.bills.models import Bill, BillItem


class BillItemSerializer(serializers.ModelSerializer):
    """Serializer for BillItem model."""
    product_id = serializers.IntegerField(read_only=True, allow_null=True)
    
    class Meta:
        model = BillItem
        fields = ['id', 'product_id', 'name', 'price', 'mrp', 'quantity']


class BillSerializer(serializers.ModelSerializer):
    """Serializer for Bill model with its items embedded."""
    items = BillItemSerializer(many=True, read_only=True)
    
    class Meta:
        model = Bill
        fields = ['id', 'total_amount', 'total_mrp', 'total_savings', 'created_by', 'created_at', 'items']
        read_only_fields = ['id', 'total_amount', 'total_mrp', 'total_savings', 'created_by', 'created_at']


class BillItemCreateSerializer(serializers.Serializer):
    """A line item as submitted by the point-of-sale client."""
    product_id = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(max_length=255)
    price = MoneyField()
    mrp = MoneyField()
    quantity = serializers.IntegerField(min_value=1)


class BillCreateSerializer(serializers.Serializer):
    """Serializer for creating a bill with its items."""
    items = BillItemCreateSerializer(many=True, allow_empty=False)
    total_amount = MoneyField(default=Decimal('0'))
    total_mrp = MoneyField(default=Decimal('0'))
    total_savings = MoneyField(default=Decimal('0'))
    created_by = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)

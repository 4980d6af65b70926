"""
Serializers for Product model.
"""
from rest_framework import serializers
from apps.core.fields import MoneyField
from apps.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for Product model."""
    
    class Meta:
        model = Product
        fields = ['id', 'name', 'price', 'mrp', 'image_url', 'sku', 'category', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']


class ProductCreateUpdateSerializer(serializers.ModelSerializer):
    """Serializer for creating/updating products."""
    price = MoneyField()
    mrp = MoneyField()
    
    class Meta:
        model = Product
        fields = ['name', 'price', 'mrp', 'image_url', 'sku', 'category']

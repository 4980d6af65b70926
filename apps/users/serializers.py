"""
Serializers for User model.
"""
from rest_framework import serializers
from apps.users.models import User


class UserSerializer(serializers.ModelSerializer):
    """Serializer for User model."""
    
    class Meta:
        model = User
        fields = [
            'id', 'name', 'shop_name', 'shop_address', 'phone', 'email',
            'gst', 'avatar_url', 'settings', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class UserUpdateSerializer(serializers.ModelSerializer):
    """Serializer for profile updates (always partial)."""
    
    class Meta:
        model = User
        fields = ['name', 'shop_name', 'shop_address', 'phone', 'email', 'gst', 'avatar_url', 'settings']

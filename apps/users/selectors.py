"""
Selectors for User read operations.
"""
from django.core.exceptions import ValidationError
from apps.users.models import User


def get_user_by_id(user_id):
    """Get a user by ID. Malformed IDs are treated as not found."""
    try:
        return User.objects.get(id=user_id)
    except (User.DoesNotExist, ValidationError, ValueError):
        return None


def list_users():
    """All users, oldest first."""
    return User.objects.all()

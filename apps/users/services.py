"""
Services for User write operations.
"""
from apps.core.updates import build_setters, apply_updates
from apps.users.selectors import get_user_by_id

USER_UPDATE_SETTERS = build_setters([
    'name', 'shop_name', 'shop_address', 'phone', 'email', 'gst', 'avatar_url', 'settings',
])


def update_user(user_id, **updates):
    """
    Update a user's profile from allowlisted fields.
    
    Returns:
        User instance or None if not found
    """
    user = get_user_by_id(user_id)
    if not user:
        return None
    
    return apply_updates(user, updates, USER_UPDATE_SETTERS)

"""
URL routing for User endpoints.
"""
from django.urls import path
from apps.users.api import UserDetailAPIView, UserProfileAPIView

app_name = 'users'

urlpatterns = [
    path('users/profile', UserProfileAPIView.as_view(), name='profile'),
    path('users/<uuid:user_id>', UserDetailAPIView.as_view(), name='detail'),
]

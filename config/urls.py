"""
URL configuration for the bill generator API.
"""
from django.contrib import admin
from django.urls import path, include
from apps.users.api import LegacyUserListAPIView

urlpatterns = [
    path('admin/', admin.site.urls),
    # API endpoints
    path('api/', include('apps.products.urls')),
    path('api/', include('apps.bills.urls')),
    path('api/', include('apps.sales.urls')),
    path('api/', include('apps.users.urls')),
    # Legacy endpoint kept for older clients
    path('users', LegacyUserListAPIView.as_view(), name='legacy-users'),
]

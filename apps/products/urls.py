"""
URL routing for Product endpoints.
"""
from django.urls import path
from apps.products.api import (
    ProductListCreateAPIView,
    ProductDetailAPIView,
)

app_name = 'products'

urlpatterns = [
    path('products', ProductListCreateAPIView.as_view(), name='list-create'),
    path('products/<int:product_id>', ProductDetailAPIView.as_view(), name='detail'),
]

"""
URL routing for sales reporting endpoints.
"""
from django.urls import path
from apps.sales.api import SalesSummaryAPIView

app_name = 'sales'

urlpatterns = [
    path('sales/summary', SalesSummaryAPIView.as_view(), name='summary'),
]

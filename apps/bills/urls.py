"""
URL routing for Bill endpoints.
"""
from django.urls import path
from apps.bills.api import BillListCreateAPIView, BillDetailAPIView

app_name = 'bills'

urlpatterns = [
    path('bills', BillListCreateAPIView.as_view(), name='list-create'),
    path('bills/<int:bill_id>', BillDetailAPIView.as_view(), name='detail'),
]

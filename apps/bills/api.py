"""
API views for Bill endpoints.
"""
import logging
from django.db import DatabaseError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from apps.core.params import get_body, get_pagination_params, get_date_range_params
from apps.bills.serializers import BillSerializer, BillCreateSerializer
from apps.bills.selectors import list_bills, get_bill_with_items
from apps.bills.services import create_bill, ITEMS_REQUIRED

logger = logging.getLogger(__name__)


class BillListCreateAPIView(APIView):
    """List bills or record a new bill."""
    
    def get(self, request):
        """List bills newest first, optionally within a date range."""
        page, limit, offset = get_pagination_params(request)
        try:
            start, end = get_date_range_params(request)
        except ValueError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        
        try:
            queryset, total_count = list_bills(start=start, end=end, offset=offset, limit=limit)
            items = BillSerializer(queryset, many=True).data
        except DatabaseError as e:
            logger.error(f"Error fetching bills: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        return Response({
            'items': items,
            'total': total_count,
            'page': page,
            'limit': limit
        })
    
    def post(self, request):
        """Record a bill and its items in one transaction."""
        items = get_body(request).get('items')
        if not items or not isinstance(items, list):
            return Response({'error': ITEMS_REQUIRED}, status=status.HTTP_400_BAD_REQUEST)
        
        serializer = BillCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        
        try:
            bill = create_bill(**serializer.validated_data)
        except DatabaseError as e:
            logger.error(f"Error creating bill: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        response_serializer = BillSerializer(bill)
        return Response(response_serializer.data, status=status.HTTP_201_CREATED)


class BillDetailAPIView(APIView):
    """Retrieve a bill with its items."""
    
    def get(self, request, bill_id):
        """Retrieve a bill by ID."""
        try:
            bill = get_bill_with_items(bill_id)
        except DatabaseError as e:
            logger.error(f"Error fetching bill {bill_id}: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        if not bill:
            return Response({'error': 'Bill not found'}, status=status.HTTP_404_NOT_FOUND)
        
        serializer = BillSerializer(bill)
        return Response(serializer.data)

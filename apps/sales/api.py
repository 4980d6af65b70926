"""
API views for sales reporting.
"""
import logging
from django.db import DatabaseError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from apps.core.params import get_date_range_params
from apps.sales.selectors import get_sales_summary

logger = logging.getLogger(__name__)


class SalesSummaryAPIView(APIView):
    """Aggregated sales figures and top products for a date range."""
    
    def get(self, request):
        """
        Return the sales summary.
        
        Query params: start, end (YYYY-MM-DD, inclusive). groupBy is accepted
        for client compatibility and ignored.
        """
        try:
            start, end = get_date_range_params(request)
        except ValueError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        
        try:
            summary = get_sales_summary(start=start, end=end)
        except DatabaseError as e:
            logger.error(f"Error fetching sales summary: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        return Response(summary)

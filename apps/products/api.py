"""
API views for Product endpoints.
These views handle request/response only and delegate to services/selectors.
"""
import logging
from django.db import DatabaseError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from apps.core.params import get_body, get_pagination_params
from apps.core.updates import NO_VALID_FIELDS, select_updates
from apps.products.serializers import ProductSerializer, ProductCreateUpdateSerializer
from apps.products.selectors import list_products, get_product_by_id
from apps.products.services import create_product, update_product, delete_product, PRODUCT_UPDATE_SETTERS

logger = logging.getLogger(__name__)

REQUIRED_CREATE_FIELDS = ('name', 'price', 'mrp')


class ProductListCreateAPIView(APIView):
    """List products or create a new product."""
    
    def get(self, request):
        """List products with search and pagination."""
        page, limit, offset = get_pagination_params(request)
        search = request.query_params.get('search', '')
        
        try:
            queryset, total_count = list_products(search=search, offset=offset, limit=limit)
            serializer = ProductSerializer(queryset, many=True)
            items = serializer.data
        except DatabaseError as e:
            logger.error(f"Error fetching products: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        return Response({
            'items': items,
            'total': total_count,
            'page': page,
            'limit': limit
        })
    
    def post(self, request):
        """Create a new product."""
        data = get_body(request)
        if not all(data.get(field) for field in REQUIRED_CREATE_FIELDS):
            return Response(
                {'error': 'Name, price, and MRP are required'},
                status=status.HTTP_400_BAD_REQUEST
            )
        
        serializer = ProductCreateUpdateSerializer(data=data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        
        try:
            product = create_product(**serializer.validated_data)
        except ValueError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DatabaseError as e:
            logger.error(f"Error creating product: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        response_serializer = ProductSerializer(product)
        return Response(response_serializer.data, status=status.HTTP_201_CREATED)


class ProductDetailAPIView(APIView):
    """Retrieve, update or delete a product."""
    
    def get(self, request, product_id):
        """Retrieve a product by ID."""
        try:
            product = get_product_by_id(product_id)
        except DatabaseError as e:
            logger.error(f"Error fetching product {product_id}: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        if not product:
            return Response({'error': 'Product not found'}, status=status.HTTP_404_NOT_FOUND)
        
        serializer = ProductSerializer(product)
        return Response({'product': serializer.data})
    
    def put(self, request, product_id):
        """Update the allowlisted fields present in the body."""
        updates = select_updates(get_body(request), PRODUCT_UPDATE_SETTERS)
        if not updates:
            return Response({'error': NO_VALID_FIELDS}, status=status.HTTP_400_BAD_REQUEST)
        
        serializer = ProductCreateUpdateSerializer(data=updates, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        
        try:
            product = update_product(product_id, **serializer.validated_data)
        except ValueError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DatabaseError as e:
            logger.error(f"Error updating product {product_id}: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        if not product:
            return Response({'error': 'Product not found'}, status=status.HTTP_404_NOT_FOUND)
        
        response_serializer = ProductSerializer(product)
        return Response(response_serializer.data)
    
    def delete(self, request, product_id):
        """Delete a product."""
        try:
            success = delete_product(product_id)
        except DatabaseError as e:
            logger.error(f"Error deleting product {product_id}: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        if not success:
            return Response({'error': 'Product not found'}, status=status.HTTP_404_NOT_FOUND)
        return Response({'message': 'Product deleted successfully'})

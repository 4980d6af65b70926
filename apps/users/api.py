"""
API views for User profile endpoints.
"""
import logging
from django.conf import settings
from django.db import DatabaseError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from apps.core.params import get_body
from apps.core.updates import NO_VALID_FIELDS, select_updates
from apps.users.serializers import UserSerializer, UserUpdateSerializer
from apps.users.selectors import get_user_by_id, list_users
from apps.users.services import update_user, USER_UPDATE_SETTERS

logger = logging.getLogger(__name__)


class UserDetailAPIView(APIView):
    """Retrieve or update a user profile."""
    
    def get(self, request, user_id):
        """Retrieve a user by ID."""
        try:
            user = get_user_by_id(user_id)
        except DatabaseError as e:
            logger.error(f"Error fetching user {user_id}: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        if not user:
            return Response({'error': 'User not found'}, status=status.HTTP_404_NOT_FOUND)
        
        serializer = UserSerializer(user)
        return Response(serializer.data)
    
    def put(self, request, user_id):
        """Update the allowlisted fields present in the body."""
        updates = select_updates(get_body(request), USER_UPDATE_SETTERS)
        if not updates:
            return Response({'error': NO_VALID_FIELDS}, status=status.HTTP_400_BAD_REQUEST)
        
        serializer = UserUpdateSerializer(data=updates, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        
        try:
            user = update_user(user_id, **serializer.validated_data)
        except DatabaseError as e:
            logger.error(f"Error updating user {user_id}: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        if not user:
            return Response({'error': 'User not found'}, status=status.HTTP_404_NOT_FOUND)
        
        response_serializer = UserSerializer(user)
        return Response(response_serializer.data)


class UserProfileAPIView(APIView):
    """Profile of the current user."""
    
    def get(self, request):
        """
        Return the configured placeholder user.
        There is no authentication yet, so DEFAULT_USER_ID stands in for the caller.
        """
        try:
            user = get_user_by_id(settings.DEFAULT_USER_ID)
        except DatabaseError as e:
            logger.error(f"Error fetching user profile: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        if not user:
            return Response({'error': 'User not found'}, status=status.HTTP_404_NOT_FOUND)
        
        serializer = UserSerializer(user)
        return Response(serializer.data)


class LegacyUserListAPIView(APIView):
    """Plain list of all users, served at /users for older clients."""
    
    def get(self, request):
        try:
            data = UserSerializer(list_users(), many=True).data
        except DatabaseError as e:
            logger.error(f"Error fetching users: {str(e)}", exc_info=True)
            return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(data)

from __future__ import annotations

import logging
import secrets

from django.conf import settings
from rest_framework import exceptions, permissions, status
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from apps.utils import api_error, api_success

from .authentication import MongoEngineJWTAuthentication, MongoEngineTokenObtainPairSerializer
from .mongo_serializers import AdminPasswordSerializer, RegisterSerializer, UserSerializer

logger = logging.getLogger(__name__)

class MongoEngineTokenObtainPairView(APIView):

    permission_classes = [permissions.AllowAny]
    authentication_classes: list = []

    def post(self, request, *args, **kwargs):
        serializer = MongoEngineTokenObtainPairSerializer()
        try:
            tokens = serializer.validate(request.data)
        except exceptions.APIException as e:
            return api_error(
                str(e.detail if not isinstance(e.detail, list) else e.detail[0]),
                status_code=status.HTTP_401_UNAUTHORIZED,
            )

        return api_success(
            {
                "tokens": tokens,
                "user": UserSerializer(serializer.user).data,
            },
        )

class RegisterView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes: list = []

    def post(self, request, *args, **kwargs):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Registered user %s", user.id)

        return api_success(
            {"user": UserSerializer(user).data},
            status_code=status.HTTP_201_CREATED,
        )

class VerifyAdminPasswordView(APIView):
    """Second-factor gate in front of the admin panel."""

    permission_classes = [permissions.AllowAny]
    authentication_classes: list = []

    def post(self, request, *args, **kwargs):
        serializer = AdminPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        password = serializer.validated_data["password"]
        expected = getattr(settings, "SUPER_ADMIN_PASSWORD", "")

        if not password or not expected:
            return api_error(None, status_code=status.HTTP_401_UNAUTHORIZED)

        # compare_digest only accepts ASCII str, so compare the encoded bytes.
        if not secrets.compare_digest(password.encode("utf-8"), expected.encode("utf-8")):
            return api_error(None, status_code=status.HTTP_401_UNAUTHORIZED)

        return api_success()

class MongoEngineTokenRefreshView(APIView):
    """Issue a new access token for a refresh token whose user is still active."""

    permission_classes = [permissions.AllowAny]
    authentication_classes: list = []

    def post(self, request, *args, **kwargs):
        raw_token = request.data.get("refresh")
        if not raw_token:
            return api_error("Refresh token is required.", status_code=status.HTTP_400_BAD_REQUEST)

        try:
            refresh = RefreshToken(raw_token)
            MongoEngineJWTAuthentication().get_user(refresh)
        except (TokenError, InvalidToken, exceptions.AuthenticationFailed) as e:
            return api_error(str(e), status_code=status.HTTP_401_UNAUTHORIZED)

        return api_success({"tokens": {"access": str(refresh.access_token)}})

from __future__ import annotations

from typing import Optional, Tuple

from rest_framework import exceptions
from rest_framework.request import Request
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import RefreshToken

from apps.utils import parse_object_id

from .mongo_models import User

class MongoEngineJWTAuthentication(JWTAuthentication):

    def authenticate(self, request: Request) -> Optional[Tuple[User, dict]]:

        auth_result = super().authenticate(request)
        if auth_result is not None:
            return auth_result

        raw_token = (
            request.query_params.get("token")
            or request.COOKIES.get("access_token")
        )

        if not raw_token:
            return None

        try:
            validated_token = self.get_validated_token(raw_token)
        except (InvalidToken, TokenError) as exc:
            raise exceptions.AuthenticationFailed(str(exc))

        return self.get_user(validated_token), validated_token

    def get_user(self, validated_token):
        try:
            user_id = validated_token[api_settings.USER_ID_CLAIM]
        except KeyError:
            raise InvalidToken("Token does not contain user_id")

        object_id = parse_object_id(user_id)
        user = User.objects(id=object_id).first() if object_id else None
        if user is None:
            raise exceptions.AuthenticationFailed("User does not exist")

        if not user.is_active:
            raise exceptions.AuthenticationFailed("User has been disabled")

        return user

class MongoEngineTokenObtainPairSerializer:

    username_field = "email"

    def __init__(self, *args, **kwargs):
        self.user: User | None = None

    def validate(self, attrs):
        email = attrs.get("email") or attrs.get("username")
        password = attrs.get("password")

        if not email or not password:
            raise exceptions.ValidationError("Email and password are required.")

        user = User.objects(email=email).first()
        if user is None or not user.check_password(password):
            raise exceptions.AuthenticationFailed("Email or password is incorrect.")

        if not user.is_active:
            raise exceptions.AuthenticationFailed("Account has been disabled.")

        self.user = user
        refresh = self.get_token(user)

        return {
            "refresh": str(refresh),
            "access": str(refresh.access_token),
        }

    def get_token(self, user):
        token = RefreshToken()
        token[api_settings.USER_ID_CLAIM] = str(user.id)
        token["email"] = user.email
        token["is_admin"] = user.is_admin
        return token

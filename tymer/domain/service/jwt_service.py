"""JWT token domain service."""

from uuid import UUID

import logfire

from tymer.config import AuthSettings
from tymer.domain.value import UserId
from tymer.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and checks the session tokens carried in the `auth_token` cookie."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            token = create_token(str(user_id), self.auth_settings)
            logfire.info("JWT token created", user_id=str(user_id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract user ID from JWT token without raising exceptions.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return UserId(UUID(payload.user_id))
        except (JWTError, ValueError) as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

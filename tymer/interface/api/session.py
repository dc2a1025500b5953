"""Session helpers shared by the routes."""

from tymer.domain.service import JWTService


def session_user_id(jwt_service: JWTService, auth_token: str | None) -> str | None:
    """User ID carried by the `auth_token` cookie, or None.

    Routes pass the result straight to the use case, which rejects a
    missing user before touching the store.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return str(user_id) if user_id else None

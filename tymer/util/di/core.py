"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from tymer.config import (
    AuthSettings,
    InvitationSettings,
    MomentSettings,
    NotificationSettings,
    Settings,
    StorageSettings,
    WindowSettings,
)
from tymer.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        return settings.invitations

    @provide
    def provide_window_settings(self, settings: Settings) -> WindowSettings:
        return settings.windows

    @provide
    def provide_notification_settings(self, settings: Settings) -> NotificationSettings:
        return settings.notifications

    @provide
    def provide_moment_settings(self, settings: Settings) -> MomentSettings:
        return settings.moments

    @provide
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        return settings.storage

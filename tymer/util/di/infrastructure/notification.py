"""Notification platform provider."""

from dishka import Scope, provide

from tymer.adapter.notification import LocalNotificationPlatform
from tymer.domain.service import NotificationPlatform
from tymer.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Provides the process-wide notification platform (concrete, not mocked)."""

    @provide(scope=Scope.APP)
    def get_notification_platform(self) -> NotificationPlatform:
        """Provide local notification platform."""
        return LocalNotificationPlatform()

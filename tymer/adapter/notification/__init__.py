"""Notification platform adapters."""

from .local import LocalNotificationPlatform

__all__ = ["LocalNotificationPlatform"]

"""Domain services."""

from .base import Service
from .capture_events import CaptureEventChannel, CaptureRequested
from .clock import Clock, FixedClock, SystemClock
from .friendship_service import FriendshipService
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .media_service import BlobStore, MediaService
from .moment_gate import MomentGate
from .moment_service import MomentService
from .notification_scheduler import (
    AuthorizationStatus,
    DailyFireSpec,
    NotificationAction,
    NotificationContent,
    NotificationPlatform,
    NotificationScheduler,
    WindowTrigger,
)
from .profile_service import ProfileService
from .time_window import TimeWindowPolicy
from .window_service import WindowCatalog, WindowService, WindowStatus

__all__ = [
    "AuthorizationStatus",
    "BlobStore",
    "CaptureEventChannel",
    "CaptureRequested",
    "Clock",
    "DailyFireSpec",
    "FixedClock",
    "FriendshipService",
    "InvitationService",
    "JWTService",
    "MediaService",
    "MomentGate",
    "MomentService",
    "NotificationAction",
    "NotificationContent",
    "NotificationPlatform",
    "NotificationScheduler",
    "ProfileService",
    "Service",
    "SystemClock",
    "TimeWindowPolicy",
    "WindowCatalog",
    "WindowService",
    "WindowStatus",
    "WindowTrigger",
]

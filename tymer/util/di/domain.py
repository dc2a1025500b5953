"""Domain layer DI providers."""

from dishka import Scope, provide

from tymer.config import (
    AuthSettings,
    InvitationSettings,
    MomentSettings,
    NotificationSettings,
    StorageSettings,
    WindowSettings,
)
from tymer.domain.repository import (
    FriendshipRepository,
    InvitationRepository,
    MomentRepository,
    ProfileRepository,
    ReactionRepository,
    WindowRepository,
)
from tymer.domain.service import (
    BlobStore,
    CaptureEventChannel,
    Clock,
    FriendshipService,
    InvitationService,
    JWTService,
    MediaService,
    MomentGate,
    MomentService,
    NotificationPlatform,
    NotificationScheduler,
    ProfileService,
    TimeWindowPolicy,
    WindowCatalog,
    WindowService,
)
from tymer.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    Process-wide state (window cache, capture events) is APP-scoped.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_window_catalog(self) -> WindowCatalog:
        """Provide the process-wide window cache."""
        return WindowCatalog()

    @provide(scope=Scope.APP)
    def get_capture_event_channel(self) -> CaptureEventChannel:
        """Provide the process-wide capture event channel."""
        return CaptureEventChannel()

    @provide(scope=Scope.APP)
    def get_time_window_policy(self) -> TimeWindowPolicy:
        return TimeWindowPolicy()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_moment_gate(
        self,
        time_window_policy: TimeWindowPolicy,
        clock: Clock,
        window_settings: WindowSettings,
    ) -> MomentGate:
        """Provide moment gate."""
        return MomentGate(
            time_window_policy=time_window_policy,
            clock=clock,
            always_open=window_settings.always_open,
        )

    @provide
    def get_window_service(
        self,
        window_repository: WindowRepository,
        catalog: WindowCatalog,
        time_window_policy: TimeWindowPolicy,
        window_settings: WindowSettings,
    ) -> WindowService:
        """Provide window configuration service."""
        return WindowService(
            window_repository=window_repository,
            catalog=catalog,
            time_window_policy=time_window_policy,
            settings=window_settings,
        )

    @provide
    def get_notification_scheduler(
        self,
        platform: NotificationPlatform,
        notification_settings: NotificationSettings,
        capture_events: CaptureEventChannel,
        clock: Clock,
    ) -> NotificationScheduler:
        """Provide window reminder scheduler."""
        return NotificationScheduler(
            platform=platform,
            settings=notification_settings,
            capture_events=capture_events,
            clock=clock,
        )

    @provide
    def get_media_service(
        self, blob_store: BlobStore, storage_settings: StorageSettings
    ) -> MediaService:
        """Provide media domain service."""
        return MediaService(blob_store=blob_store, settings=storage_settings)

    @provide
    def get_friendship_service(
        self,
        friendship_repository: FriendshipRepository,
        profile_repository: ProfileRepository,
        clock: Clock,
    ) -> FriendshipService:
        """Provide friendship domain service."""
        return FriendshipService(
            friendship_repository=friendship_repository,
            profile_repository=profile_repository,
            clock=clock,
        )

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        profile_repository: ProfileRepository,
        friendship_service: FriendshipService,
        clock: Clock,
        invitation_settings: InvitationSettings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            profile_repository=profile_repository,
            friendship_service=friendship_service,
            clock=clock,
            settings=invitation_settings,
        )

    @provide
    def get_moment_service(
        self,
        moment_repository: MomentRepository,
        reaction_repository: ReactionRepository,
        window_service: WindowService,
        friendship_service: FriendshipService,
        media_service: MediaService,
        moment_gate: MomentGate,
        clock: Clock,
        moment_settings: MomentSettings,
    ) -> MomentService:
        """Provide moment domain service."""
        return MomentService(
            moment_repository=moment_repository,
            reaction_repository=reaction_repository,
            window_service=window_service,
            friendship_service=friendship_service,
            media_service=media_service,
            moment_gate=moment_gate,
            clock=clock,
            settings=moment_settings,
        )

    @provide
    def get_profile_service(
        self,
        profile_repository: ProfileRepository,
        media_service: MediaService,
        clock: Clock,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository,
            media_service=media_service,
            clock=clock,
        )

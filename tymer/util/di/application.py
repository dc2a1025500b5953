"""Application layer DI providers."""

from dishka import Scope, provide

from tymer.application.usecase.friendship import (
    AcceptFriendRequestUseCase,
    ListFriendRequestsUseCase,
    ListFriendsUseCase,
    RemoveFriendUseCase,
    SendFriendRequestUseCase,
)
from tymer.application.usecase.invitation import (
    AcceptInvitationUseCase,
    GetOrCreateInvitationUseCase,
    ValidateInvitationUseCase,
)
from tymer.application.usecase.moment import (
    AddTextReactionUseCase,
    AddVoiceReactionUseCase,
    CreateMomentUseCase,
    DeleteMomentUseCase,
    GetFeedUseCase,
    GetMyMomentsUseCase,
)
from tymer.application.usecase.profile import (
    GetProfileUseCase,
    UpdateProfileUseCase,
    UploadAvatarUseCase,
)
from tymer.application.usecase.window import (
    CancelRemindersUseCase,
    GetWindowStatusUseCase,
    HandleNotificationResponseUseCase,
    RouteCaptureRequestUseCase,
    ScheduleRemindersUseCase,
)
from tymer.domain.repository import ProfileRepository
from tymer.domain.service import (
    Clock,
    FriendshipService,
    InvitationService,
    MediaService,
    MomentGate,
    MomentService,
    NotificationScheduler,
    ProfileService,
    WindowService,
)
from tymer.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_get_or_create_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> GetOrCreateInvitationUseCase:
        """Provide get or create invitation use case."""
        return GetOrCreateInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_validate_invitation_use_case(
        self,
        invitation_service: InvitationService,
        profile_repository: ProfileRepository,
    ) -> ValidateInvitationUseCase:
        """Provide validate invitation use case."""
        return ValidateInvitationUseCase(
            invitation_service=invitation_service,
            profile_repository=profile_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> AcceptInvitationUseCase:
        """Provide accept invitation use case."""
        return AcceptInvitationUseCase(invitation_service=invitation_service)

    # Friendship use cases
    @provide(scope=Scope.REQUEST)
    def get_list_friends_use_case(
        self, friendship_service: FriendshipService
    ) -> ListFriendsUseCase:
        """Provide list friends use case."""
        return ListFriendsUseCase(friendship_service=friendship_service)

    @provide(scope=Scope.REQUEST)
    def get_list_friend_requests_use_case(
        self,
        friendship_service: FriendshipService,
        profile_repository: ProfileRepository,
    ) -> ListFriendRequestsUseCase:
        """Provide list friend requests use case."""
        return ListFriendRequestsUseCase(
            friendship_service=friendship_service,
            profile_repository=profile_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_send_friend_request_use_case(
        self, friendship_service: FriendshipService
    ) -> SendFriendRequestUseCase:
        """Provide send friend request use case."""
        return SendFriendRequestUseCase(friendship_service=friendship_service)

    @provide(scope=Scope.REQUEST)
    def get_accept_friend_request_use_case(
        self, friendship_service: FriendshipService
    ) -> AcceptFriendRequestUseCase:
        """Provide accept friend request use case."""
        return AcceptFriendRequestUseCase(friendship_service=friendship_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_friend_use_case(
        self, friendship_service: FriendshipService
    ) -> RemoveFriendUseCase:
        """Provide remove friend use case."""
        return RemoveFriendUseCase(friendship_service=friendship_service)

    # Moment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_moment_use_case(
        self, moment_service: MomentService, media_service: MediaService
    ) -> CreateMomentUseCase:
        """Provide create moment use case."""
        return CreateMomentUseCase(
            moment_service=moment_service, media_service=media_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_feed_use_case(
        self, moment_service: MomentService, media_service: MediaService
    ) -> GetFeedUseCase:
        """Provide get feed use case."""
        return GetFeedUseCase(moment_service=moment_service, media_service=media_service)

    @provide(scope=Scope.REQUEST)
    def get_get_my_moments_use_case(
        self, moment_service: MomentService, media_service: MediaService
    ) -> GetMyMomentsUseCase:
        """Provide get my moments use case."""
        return GetMyMomentsUseCase(
            moment_service=moment_service, media_service=media_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_moment_use_case(
        self, moment_service: MomentService
    ) -> DeleteMomentUseCase:
        """Provide delete moment use case."""
        return DeleteMomentUseCase(moment_service=moment_service)

    @provide(scope=Scope.REQUEST)
    def get_add_text_reaction_use_case(
        self, moment_service: MomentService, media_service: MediaService
    ) -> AddTextReactionUseCase:
        """Provide add text reaction use case."""
        return AddTextReactionUseCase(
            moment_service=moment_service, media_service=media_service
        )

    @provide(scope=Scope.REQUEST)
    def get_add_voice_reaction_use_case(
        self, moment_service: MomentService, media_service: MediaService
    ) -> AddVoiceReactionUseCase:
        """Provide add voice reaction use case."""
        return AddVoiceReactionUseCase(
            moment_service=moment_service, media_service=media_service
        )

    # Window use cases
    @provide(scope=Scope.REQUEST)
    def get_get_window_status_use_case(
        self,
        window_service: WindowService,
        moment_service: MomentService,
        clock: Clock,
    ) -> GetWindowStatusUseCase:
        """Provide get window status use case."""
        return GetWindowStatusUseCase(
            window_service=window_service, moment_service=moment_service, clock=clock
        )

    @provide(scope=Scope.REQUEST)
    def get_schedule_reminders_use_case(
        self,
        window_service: WindowService,
        notification_scheduler: NotificationScheduler,
    ) -> ScheduleRemindersUseCase:
        """Provide schedule reminders use case."""
        return ScheduleRemindersUseCase(
            window_service=window_service,
            notification_scheduler=notification_scheduler,
        )

    @provide(scope=Scope.REQUEST)
    def get_cancel_reminders_use_case(
        self, notification_scheduler: NotificationScheduler
    ) -> CancelRemindersUseCase:
        """Provide cancel reminders use case."""
        return CancelRemindersUseCase(notification_scheduler=notification_scheduler)

    @provide(scope=Scope.REQUEST)
    def get_handle_notification_response_use_case(
        self, notification_scheduler: NotificationScheduler
    ) -> HandleNotificationResponseUseCase:
        """Provide handle notification response use case."""
        return HandleNotificationResponseUseCase(
            notification_scheduler=notification_scheduler
        )

    @provide(scope=Scope.REQUEST)
    def get_route_capture_request_use_case(
        self, moment_gate: MomentGate, clock: Clock
    ) -> RouteCaptureRequestUseCase:
        """Provide route capture request use case."""
        return RouteCaptureRequestUseCase(moment_gate=moment_gate, clock=clock)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_upload_avatar_use_case(
        self, profile_service: ProfileService
    ) -> UploadAvatarUseCase:
        """Provide upload avatar use case."""
        return UploadAvatarUseCase(profile_service=profile_service)

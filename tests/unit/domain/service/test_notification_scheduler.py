"""Unit tests for NotificationScheduler."""

import pytest

from tymer.adapter.notification import LocalNotificationPlatform
from tymer.config import NotificationSettings
from tymer.domain.model import TimeWindow
from tymer.domain.service import (
    AuthorizationStatus,
    CaptureEventChannel,
    DailyFireSpec,
    FixedClock,
    NotificationAction,
    NotificationContent,
    NotificationScheduler,
)
from tests.di import TEST_NOW

MATIN = TimeWindow(label="Matin", start=8, end=9)
SOIR = TimeWindow(label="Soir", start=19, end=20)


def make_scheduler(
    status: AuthorizationStatus = AuthorizationStatus.AUTHORIZED,
) -> tuple[NotificationScheduler, LocalNotificationPlatform, CaptureEventChannel]:
    platform = LocalNotificationPlatform(status=status)
    channel = CaptureEventChannel()
    scheduler = NotificationScheduler(
        platform, NotificationSettings(), channel, FixedClock(TEST_NOW)
    )
    return scheduler, platform, channel


class TestSchedule:
    """Tests for schedule and cancel_all."""

    @pytest.mark.asyncio
    async def test_one_daily_trigger_per_window(self):
        scheduler, platform, _ = make_scheduler()

        scheduled = await scheduler.schedule([MATIN, SOIR])

        assert scheduled == 2
        assert sorted(platform.pending) == ["tymer_window_19_20", "tymer_window_8_9"]
        trigger = platform.pending["tymer_window_8_9"]
        assert trigger.fire.hour == 8
        assert trigger.fire.minute == 0
        assert trigger.fire.repeats is True
        assert trigger.content.category == "WINDOW_OPEN"
        assert trigger.content.title == "🔓 Fenêtre ouverte !"
        assert trigger.content.payload == {
            "window_label": "Matin",
            "window_start": 8,
            "window_end": 9,
        }

    @pytest.mark.asyncio
    async def test_scheduling_twice_is_idempotent(self):
        scheduler, platform, _ = make_scheduler()

        await scheduler.schedule([MATIN, SOIR])
        first = dict(platform.pending)
        await scheduler.schedule([MATIN, SOIR])

        assert platform.pending == first

    @pytest.mark.asyncio
    async def test_removed_window_leaves_no_stale_trigger(self):
        scheduler, platform, _ = make_scheduler()

        await scheduler.schedule([MATIN, SOIR])
        await scheduler.schedule([SOIR])

        assert list(platform.pending) == ["tymer_window_19_20"]

    @pytest.mark.asyncio
    async def test_empty_window_list_clears_owned_triggers(self):
        scheduler, platform, _ = make_scheduler()

        await scheduler.schedule([MATIN])
        scheduled = await scheduler.schedule([])

        assert scheduled == 0
        assert platform.pending == {}

    @pytest.mark.asyncio
    async def test_unrelated_triggers_are_kept(self):
        scheduler, platform, _ = make_scheduler()
        await platform.install(
            "streak_reminder",
            DailyFireSpec(hour=21),
            NotificationContent(title="Streak", body="...", category="STREAK"),
        )

        await scheduler.schedule([MATIN])
        cancelled = await scheduler.cancel_all()

        assert cancelled == 1
        assert list(platform.pending) == ["streak_reminder"]

    @pytest.mark.asyncio
    async def test_duplicate_windows_share_one_trigger(self):
        scheduler, platform, _ = make_scheduler()
        twin = TimeWindow(label="Réveil", start=8, end=9)

        scheduled = await scheduler.schedule([MATIN, twin])

        assert scheduled == 1
        assert platform.pending["tymer_window_8_9"].content.payload["window_label"] == "Matin"

    @pytest.mark.asyncio
    async def test_unauthorized_schedules_nothing(self):
        scheduler, platform, _ = make_scheduler(AuthorizationStatus.DENIED)

        scheduled = await scheduler.schedule([MATIN, SOIR])

        assert scheduled == 0
        assert platform.pending == {}

    @pytest.mark.asyncio
    async def test_request_authorization_is_asked_once(self):
        scheduler, platform, _ = make_scheduler(AuthorizationStatus.NOT_DETERMINED)
        platform.grant_on_request = False

        assert await scheduler.request_authorization() is False
        platform.grant_on_request = True
        assert await scheduler.request_authorization() is False
        assert platform.status == AuthorizationStatus.DENIED


class TestMessages:
    """Tests for reminder copy."""

    def test_message_depends_on_start_hour(self):
        scheduler, _, _ = make_scheduler()
        messages = NotificationSettings().messages

        # 8 % 5 == 3, 19 % 5 == 4
        assert scheduler.message_for(MATIN) == messages[3]
        assert scheduler.message_for(SOIR) == messages[4]

    def test_label_is_lower_cased_in_message(self):
        scheduler, _, _ = make_scheduler()
        window = TimeWindow(label="Goûter", start=16, end=17)  # 16 % 5 == 1

        assert scheduler.message_for(window) == "Ta fenêtre goûter est ouverte ! 📸"


class TestHandleResponse:
    """Tests for handle_response."""

    @pytest.mark.asyncio
    async def test_capture_action_publishes_event(self):
        scheduler, _, channel = make_scheduler()
        trigger = scheduler.build_trigger(SOIR)

        async with channel.subscription() as queue:
            event = await scheduler.handle_response(
                NotificationAction.CAPTURE.value, trigger.content.payload
            )
            received = queue.get_nowait()

        assert event is not None
        assert received == event
        assert event.window == SOIR
        assert event.action == "CAPTURE_ACTION"
        assert event.requested_at == TEST_NOW

    @pytest.mark.asyncio
    async def test_plain_tap_publishes_event(self):
        scheduler, _, channel = make_scheduler()
        payload = scheduler.build_trigger(MATIN).content.payload

        async with channel.subscription() as queue:
            await scheduler.handle_response(NotificationAction.DEFAULT.value, payload)
            assert queue.qsize() == 1

    @pytest.mark.asyncio
    async def test_dismiss_clears_badge(self):
        scheduler, platform, channel = make_scheduler()
        platform.badge = 1

        async with channel.subscription() as queue:
            event = await scheduler.handle_response(
                NotificationAction.DISMISS.value, {}
            )
            assert queue.empty()

        assert event is None
        assert platform.badge == 0

    @pytest.mark.asyncio
    async def test_malformed_payload_is_ignored(self):
        scheduler, _, _ = make_scheduler()

        event = await scheduler.handle_response(
            NotificationAction.CAPTURE.value, {"window_label": "Matin"}
        )

        assert event is None

    @pytest.mark.asyncio
    async def test_unknown_action_is_ignored(self):
        scheduler, _, _ = make_scheduler()
        payload = scheduler.build_trigger(MATIN).content.payload

        assert await scheduler.handle_response("SNOOZE_ACTION", payload) is None

"""Unit tests for CaptureEventChannel."""

import pytest

from tymer.domain.model import TimeWindow
from tymer.domain.service import CaptureEventChannel, CaptureRequested
from tests.di import TEST_NOW

MIDI = TimeWindow(label="Midi", start=12, end=13)


def make_event() -> CaptureRequested:
    return CaptureRequested(window=MIDI, action="CAPTURE_ACTION", requested_at=TEST_NOW)


@pytest.mark.asyncio
async def test_every_subscriber_receives_event():
    channel = CaptureEventChannel()
    first = channel.subscribe()
    second = channel.subscribe()

    delivered = channel.publish(make_event())

    assert delivered == 2
    assert (await first.get()).window == MIDI
    assert (await second.get()).window == MIDI


def test_publish_without_subscribers():
    assert CaptureEventChannel().publish(make_event()) == 0


def test_late_subscriber_misses_earlier_events():
    channel = CaptureEventChannel()
    channel.publish(make_event())

    queue = channel.subscribe()

    assert queue.empty()


@pytest.mark.asyncio
async def test_subscription_ends_with_block():
    channel = CaptureEventChannel()

    async with channel.subscription():
        assert channel.subscriber_count == 1

    assert channel.subscriber_count == 0


def test_full_queue_drops_event_for_that_subscriber_only():
    channel = CaptureEventChannel(max_queue_size=1)
    slow = channel.subscribe()
    channel.publish(make_event())
    fast = channel.subscribe()

    delivered = channel.publish(make_event())

    assert delivered == 1
    assert slow.qsize() == 1
    assert fast.qsize() == 1

import pytest

from retrokit.haptics import HapticId, HapticQueue


def test_markers_match_source():
    queue = HapticQueue(True)
    assert queue.take() == -2
    queue.queue(HapticId.STOP)
    assert queue.take() == -1
    queue.queue(HapticId.ENGINE4_33)
    assert queue.take() == 123


@pytest.mark.parametrize("effect", [member for member in HapticId if member.value >= 0])
def test_every_effect_round_trips(effect):
    queue = HapticQueue(True)
    queue.queue(effect)
    assert queue.take() == effect
    assert queue.take() == HapticId.NONE


def test_ids_are_unique_and_contiguous():
    queue = HapticQueue(True)
    taken = []
    for member in HapticId:
        if member.value >= 0:
            queue.queue(member)
            taken.append(int(queue.take()))
    assert sorted(taken) == list(range(len(taken)))


def test_empty_queue_returns_none_marker():
    queue = HapticQueue(True)
    assert queue.take() == HapticId.NONE


def test_queue_and_take():
    queue = HapticQueue(True)
    queue.queue(HapticId.EXPLOSION3)
    assert queue.take() == HapticId.EXPLOSION3
    assert queue.take() == HapticId.NONE


def test_later_effect_replaces_earlier():
    queue = HapticQueue(True)
    queue.queue(HapticId.TICK_100)
    queue.queue(HapticId.WEAPON2)
    assert queue.take() == HapticId.WEAPON2


def test_disabled_queue_ignores_effects():
    queue = HapticQueue(False)
    queue.queue(HapticId.ALERT1)
    assert queue.take() == HapticId.NONE


def test_stop_can_be_queued():
    queue = HapticQueue(True)
    queue.queue(HapticId.STOP)
    assert queue.take() == HapticId.STOP
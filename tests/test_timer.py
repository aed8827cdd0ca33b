import pytest

from sponge_tcp.timer import RetransmissionTimer


def test_initial_rto_equals_given_timeout():
    timer = RetransmissionTimer(250)
    assert timer.rto() == 250
    assert timer.running() is False
    assert timer.expired() is False


def test_double_and_reset():
    timer = RetransmissionTimer(250)
    timer.double_rto()
    assert timer.rto() == 250 * 2
    timer.double_rto()
    assert timer.rto() == 250 * 4
    timer.reset_rto()
    assert timer.rto() == 250


def test_halve_rounds_down():
    timer = RetransmissionTimer(7)
    timer.halve_rto()
    assert timer.rto() == 7 // 2


def test_start_sets_running_and_clears_expiry():
    timer = RetransmissionTimer(10)
    timer.start()
    timer.elapse(10)
    assert timer.expired() is True
    timer.start()
    assert timer.running() is True
    assert timer.expired() is False


@pytest.mark.parametrize("initial", [1, 5, 100, 1000])
def test_expires_exactly_when_rto_used_up(initial):
    timer = RetransmissionTimer(initial)
    timer.start()
    timer.elapse(initial - 1)
    assert timer.expired() is False
    timer.elapse(1)
    assert timer.expired() is True


def test_elapse_accumulates():
    timer = RetransmissionTimer(30)
    timer.start()
    for _ in range(2):
        timer.elapse(10)
    assert timer.expired() is False
    timer.elapse(10)
    assert timer.expired() is True


def test_doubled_rto_applies_on_next_start():
    timer = RetransmissionTimer(50)
    timer.start()
    timer.double_rto()
    timer.elapse(50)
    assert timer.expired() is True
    timer.start()
    timer.elapse(99)
    assert timer.expired() is False
    timer.elapse(1)
    assert timer.expired() is True


def test_stop():
    timer = RetransmissionTimer(50)
    timer.start()
    timer.stop()
    assert timer.running() is False
import pytest

from motorwatch.tachometer import COUNTER_MAX, RpmTracker, elapsed_us


def test_elapsed_simple():
    assert elapsed_us(10, 5) == 5
    assert elapsed_us(7, 7) == 0


@pytest.mark.parametrize("last", [0, 1000, COUNTER_MAX - 3, COUNTER_MAX])
@pytest.mark.parametrize("delta", [0, 1, 4, 123456])
def test_elapsed_wraps(last, delta):
    now = (last + delta) % (COUNTER_MAX + 1)
    assert elapsed_us(now, last) == delta


def test_elapsed_rejects_out_of_range():
    with pytest.raises(ValueError):
        elapsed_us(COUNTER_MAX + 1, 0)
    with pytest.raises(ValueError):
        elapsed_us(0, -1)


def test_invalid_construction():
    with pytest.raises(ValueError):
        RpmTracker(pulses_per_rev=0)
    with pytest.raises(ValueError):
        RpmTracker(alpha=0)


def test_min_pulse_from_defaults():
    assert RpmTracker().min_pulse_us == 20000


def test_first_pulse_only_sets_reference():
    t = RpmTracker()
    assert t.pulse(1000) == 0.0
    assert t.rpm() == 0.0


def test_full_alpha_gives_instant_rpm():
    t = RpmTracker(alpha=1.0)
    t.pulse(1000)
    assert t.pulse(51000) == pytest.approx(1200.0)
    assert t.rpm() == pytest.approx(1200.0)


def test_smoothing_converges_without_overshoot():
    t = RpmTracker()
    now = 1
    t.pulse(now)
    previous = 0.0
    for _ in range(60):
        now += 50000
        value = t.pulse(now)
        assert previous < value <= 1200.0
        previous = value
    assert previous == pytest.approx(1200.0, rel=1e-3)


def test_over_rated_pulse_ignored_but_reference_moves():
    t = RpmTracker(alpha=1.0)
    t.pulse(1000)
    assert t.pulse(26000) == 0.0
    assert t.pulse(76000) == pytest.approx(1200.0)


def test_noise_pulse_does_not_move_reference():
    t = RpmTracker(alpha=1.0)
    t.pulse(1000)
    assert t.pulse(6000) == 0.0
    assert t.pulse(51000) == pytest.approx(1200.0)


def test_too_slow_pulse_ignored():
    t = RpmTracker(alpha=1.0)
    t.pulse(1000)
    assert t.pulse(1_001_000) == 0.0
    assert t.pulse(1_051_000) == 0.0


def test_pulse_across_counter_wrap():
    a = RpmTracker(alpha=1.0)
    a.pulse(COUNTER_MAX - 9999)
    wrapped = a.pulse(40000)
    b = RpmTracker(alpha=1.0)
    b.pulse(1)
    assert wrapped == pytest.approx(b.pulse(50001))


def test_tick_no_decay_before_timeout():
    t = RpmTracker(alpha=1.0)
    t.pulse(1000)
    t.pulse(51000)
    before = t.rpm()
    assert t.tick(51000 + 3_000_000) == before


def test_tick_decays_then_stops():
    t = RpmTracker(alpha=1.0)
    t.pulse(1000)
    t.pulse(51000)
    now = 51000 + 3_000_001
    before = t.rpm()
    after = t.tick(now)
    assert 0.9 * before < after < before
    for _ in range(500):
        after = t.tick(now)
    assert after == 0.0
    # reference was cleared: the next pulse only re-arms the tracker
    assert t.pulse(now + 100) == 0.0
    assert t.pulse(now + 50100) == pytest.approx(before)


def test_tick_without_pulses_is_zero():
    t = RpmTracker()
    assert t.tick(10_000_000) == 0.0
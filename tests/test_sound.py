import pytest

from gorillas.sound import (
    FULL_ENVELOPE,
    SAMPLES_PER_CYCLE,
    Tone,
    explosion_tone,
    launch_tone,
    reload_value,
)


def test_reload_value_for_800_hz_matches_initial_timer_setup():
    assert reload_value(800) == 0xF940


def test_lower_frequency_has_lower_reload():
    assert reload_value(300) < reload_value(800)


@pytest.mark.parametrize("frequency", [0, -10])
def test_reload_value_rejects_non_positive(frequency):
    with pytest.raises(ValueError):
        reload_value(frequency)


@pytest.mark.parametrize("cycles", [0, 1, 5])
def test_sample_count(cycles):
    samples = list(Tone(800, cycles, FULL_ENVELOPE).samples())
    assert len(samples) == SAMPLES_PER_CYCLE * (cycles + 1)


def test_silent_envelope_sits_at_midpoint():
    assert set(Tone(440, 3, 0).samples()) == {128}


def test_samples_are_bytes():
    assert all(0 <= s <= 255 for s in Tone(800, 4, 2000).samples())


def test_envelope_decays():
    samples = list(Tone(300, 30, 20).samples())
    peaks = [
        max(samples[i:i + SAMPLES_PER_CYCLE])
        for i in range(0, len(samples), SAMPLES_PER_CYCLE)
    ]
    assert peaks == sorted(peaks, reverse=True)
    assert peaks[-1] < peaks[0]


def test_cycles_repeat_without_decay_when_envelope_large_steps_small():
    samples = list(Tone(800, 1, 0).samples())
    assert samples[:SAMPLES_PER_CYCLE] == samples[SAMPLES_PER_CYCLE:]


@pytest.mark.parametrize(
    "kwargs",
    [dict(frequency=0, cycles=1), dict(frequency=10, cycles=-1), dict(frequency=10, cycles=1, envelope=-1)],
)
def test_tone_rejects_bad_arguments(kwargs):
    with pytest.raises(ValueError):
        Tone(**kwargs)


def test_named_tones():
    assert launch_tone() == Tone(800, 20, FULL_ENVELOPE)
    assert explosion_tone() == Tone(300, 20, FULL_ENVELOPE)
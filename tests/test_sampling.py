import numpy as np
import pytest

from easekit.easing import Easing, ease_out_bounce
from easekit.sampling import is_monotonic, progress_steps, sample


def test_progress_steps():
    steps = progress_steps(5)
    assert steps.tolist() == [0.0, 0.25, 0.5, 0.75, 1.0]


def test_progress_steps_too_few():
    with pytest.raises(ValueError):
        progress_steps(1)


def test_sample_linear():
    values = sample("linear", 5)
    assert values.dtype == np.float64
    assert values.tolist() == [0.0, 0.25, 0.5, 0.75, 1.0]


def test_sample_matches_scalar():
    values = sample(Easing.EASE_OUT_BOUNCE, 21)
    expected = [ease_out_bounce(n) for n in np.linspace(0.0, 1.0, 21)]
    assert np.allclose(values, expected)


def test_sample_default_steps_from_settings(monkeypatch):
    monkeypatch.setenv("EASEKIT_SAMPLE_STEPS", "7")
    assert len(sample("ease_in_quad")) == 7


def test_sample_with_params():
    a = sample("ease_out_elastic", 11, amplitude=2.0, period=0.4)
    b = sample("ease_out_elastic", 11)
    assert a[0] == b[0] == 0.0
    assert a[-1] == b[-1] == 1.0
    assert not np.allclose(a, b)


def test_is_monotonic():
    assert is_monotonic(sample("ease_in_out_cubic", 101))
    assert not is_monotonic(sample("ease_out_bounce", 101))
    assert not is_monotonic(sample("ease_in_back", 101))

import pytest
import torch
import torch.testing

from torchfir.filter_analysis import step_view
from torchfir.filter_design import FilterSpec, design


def _reference_step(h, sampling_rate):
    dt = 1.0 / sampling_rate
    previous = 0.0
    y = 0.0
    result = []
    for value in h:
        y += previous + dt * 0.5 * (value + previous)
        previous = value
        result.append(y)
    return result


class TestStepView:
    """Tests for step_view."""

    def test_hand_computed(self):
        """y[n] = y[n-1] + h[n-1] + dt/2 (h[n] + h[n-1])."""
        h = torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)
        result = step_view(h, 2.0)
        assert torch.equal(
            result.x, torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)
        )
        assert torch.equal(
            result.y, torch.tensor([0.25, 2.0, 5.25], dtype=torch.float64)
        )

    def test_matches_running_sum(self):
        """Reproduces the sequential running sum including the h[n-1] term."""
        spec = FilterSpec(window_kind="hamming")
        h = design(spec).windowed
        result = step_view(h, spec.sampling_rate)
        expected = torch.tensor(
            _reference_step(h.tolist(), spec.sampling_rate),
            dtype=torch.float64,
        )
        torch.testing.assert_close(result.y, expected, rtol=1e-12, atol=1e-12)

    def test_not_a_plain_trapezoid(self):
        """The extra h[n-1] term makes it differ from cumulative trapezoid."""
        h = torch.ones(4, dtype=torch.float64)
        result = step_view(h, 10.0)
        trapezoid = torch.cumulative_trapezoid(h, dx=0.1)
        assert not torch.allclose(result.y[1:], trapezoid)

    def test_single_tap(self):
        result = step_view([8.0], 4.0)
        torch.testing.assert_close(
            result.y, torch.tensor([1.0], dtype=torch.float64)
        )

    def test_monotonic_for_non_negative_kernel(self):
        """Hann-windowed narrow low-pass has non-negative taps."""
        spec = FilterSpec(window_kind="hann", high_cut=10.0)
        h = design(spec).windowed
        assert bool(torch.all(h >= 0))
        result = step_view(h, spec.sampling_rate)
        assert bool(torch.all(result.y[1:] >= result.y[:-1]))

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            step_view([], 1000.0)

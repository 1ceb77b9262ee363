import hypothesis
import pytest
import torch
import torch.testing

import torchfir
from torchfir.filter_design import (
    FilterDesign,
    FilterSpec,
    design,
    filter_gain,
    filter_kernel,
)
from torchfir.testing.strategies import filter_specs
from torchfir.window_function import hann_window, window_function


class TestDesign:
    """Tests for the design pipeline."""

    def test_lowpass_hann_end_to_end(self):
        """LowPass, Hann, 64 taps, shift 32, 1000 Hz, 300 Hz cut."""
        spec = FilterSpec(
            filter_class="lowpass",
            window_kind="hann",
            tap_count=64,
            shift=32,
            sampling_rate=1000.0,
            high_cut=300.0,
        )
        result = design(spec)

        assert isinstance(result, FilterDesign)
        assert result.raw.shape == (64,)
        assert result.raw[32].item() == 600.0
        assert result.windowed[0].item() == pytest.approx(0.0, abs=1e-12)
        assert result.windowed[63].item() == pytest.approx(0.0, abs=1e-9)
        torch.testing.assert_close(result.window, hann_window(64))

    def test_windowed_uses_unnormalized_kernel(self):
        spec = FilterSpec(window_kind="blackman")
        result = design(spec)
        torch.testing.assert_close(
            result.windowed, result.raw * result.window, rtol=0, atol=0
        )
        assert result.windowed[32].item() != pytest.approx(
            result.normalized[32].item()
        )

    @pytest.mark.parametrize(
        "filter_class", ["lowpass", "highpass", "bandpass", "bandstop"]
    )
    def test_normalized(self, filter_class):
        spec = FilterSpec(filter_class=filter_class, window_kind="hamming")
        result = design(spec)
        raw = filter_kernel(spec)
        torch.testing.assert_close(
            result.normalized, raw / filter_gain(spec, raw)
        )

    def test_default_dtype(self):
        result = design(FilterSpec())
        for vector in result:
            assert vector.dtype == torch.float64

    def test_float32(self):
        result = design(FilterSpec(), dtype=torch.float32)
        for vector in result:
            assert vector.dtype == torch.float32

    def test_top_level_export(self):
        assert torchfir.design is design
        assert torchfir.FilterSpec is FilterSpec

    def test_recomputed_on_change(self):
        """A replaced spec designs from scratch."""
        spec = FilterSpec()
        first = design(spec)
        second = design(spec.replace(window_kind="welch"))
        torch.testing.assert_close(first.raw, second.raw)
        torch.testing.assert_close(
            second.window, window_function("welch", 64)
        )

    def test_zero_gain_design(self):
        """Degenerate gain leaves raw and windowed finite."""
        spec = FilterSpec(high_cut=0.0, window_kind="hann")
        with pytest.warns(RuntimeWarning):
            result = design(spec)
        assert bool(torch.isnan(result.normalized).all())
        assert bool(torch.isfinite(result.raw).all())
        assert bool(torch.isfinite(result.windowed).all())

    @hypothesis.settings(deadline=None, max_examples=50)
    @hypothesis.given(spec=filter_specs())
    def test_shapes(self, spec):
        result = design(spec)
        for vector in result:
            assert vector.shape == (spec.tap_count,)
        torch.testing.assert_close(
            result.windowed, result.raw * result.window
        )

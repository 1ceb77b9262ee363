import pytest
import torch
import torch.testing

from torchfir.filter_analysis import Curve, impulse_view


class TestImpulseView:
    """Tests for impulse_view."""

    def test_scaled_by_sample_period(self):
        h = torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)
        result = impulse_view(h, 2.0)
        assert isinstance(result, Curve)
        assert torch.equal(
            result.x, torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)
        )
        assert torch.equal(
            result.y, torch.tensor([0.5, 1.0, 1.5], dtype=torch.float64)
        )

    def test_area_of_dc_normalized_kernel(self):
        """A kernel with DC gain 1/dt has unit area."""
        h = torch.full((10,), 100.0, dtype=torch.float64)
        result = impulse_view(h, 1000.0)
        assert result.y.sum().item() == pytest.approx(1.0)

    def test_stacked(self):
        result = impulse_view([4.0, 8.0], 4.0)
        torch.testing.assert_close(
            result.stacked(),
            torch.tensor([[0.0, 1.0], [0.25, 2.0]], dtype=torch.float64),
        )

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            impulse_view(torch.empty(0), 1000.0)

    def test_two_dimensional_rejected(self):
        with pytest.raises(ValueError, match="1-D"):
            impulse_view(torch.ones(2, 3), 1000.0)

    def test_integer_input_promoted(self):
        result = impulse_view(torch.tensor([1, 2, 3]), 1.0)
        assert result.y.dtype == torch.float64

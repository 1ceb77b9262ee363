import pytest
import torch
import torch.testing

from torchfir.filter_design import (
    FilterDesignError,
    LengthMismatchError,
    apply_window,
)


class TestApplyWindow:
    """Tests for apply_window."""

    def test_elementwise_product(self):
        h = torch.tensor([1.0, 2.0, 3.0, 4.0], dtype=torch.float64)
        w = torch.tensor([0.0, 0.5, 0.5, 0.0], dtype=torch.float64)
        torch.testing.assert_close(
            apply_window(h, w),
            torch.tensor([0.0, 1.0, 1.5, 0.0], dtype=torch.float64),
        )

    def test_length_mismatch(self):
        """Lengths 4 and 5 fail instead of truncating or padding."""
        h = torch.ones(4, dtype=torch.float64)
        w = torch.ones(5, dtype=torch.float64)
        with pytest.raises(LengthMismatchError, match=r"\(4,\).*\(5,\)"):
            apply_window(h, w)

    def test_mismatch_is_design_error(self):
        with pytest.raises(FilterDesignError):
            apply_window(torch.ones(5), torch.ones(4))

    def test_no_broadcasting(self):
        """A scalar window is not broadcast."""
        with pytest.raises(LengthMismatchError):
            apply_window(torch.ones(4), torch.tensor(1.0))

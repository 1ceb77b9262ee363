import pytest
import torch
import torch.testing
from scipy.signal import windows as scipy_windows

import torchfir.window_function as wf


class TestHammingWindow:
    """Tests for hamming_window."""

    @pytest.mark.parametrize("n", [2, 5, 64, 101])
    def test_scipy_comparison(self, n):
        """Matches scipy general_hamming with alpha = 25/46."""
        result = wf.hamming_window(n)
        expected = torch.from_numpy(
            scipy_windows.general_hamming(n, 25.0 / 46.0, sym=True)
        )
        torch.testing.assert_close(result, expected, rtol=1e-10, atol=1e-12)

    def test_endpoints(self):
        """Endpoints are 4/46, not zero."""
        result = wf.hamming_window(64)
        torch.testing.assert_close(
            result[0], torch.tensor(4.0 / 46.0, dtype=torch.float64)
        )
        torch.testing.assert_close(
            result[-1], torch.tensor(4.0 / 46.0, dtype=torch.float64)
        )

    def test_differs_from_classic_hamming(self):
        """The 25/46 form is not the rounded 0.54/0.46 form."""
        result = wf.hamming_window(16)
        classic = torch.signal.windows.hamming(
            16, sym=True, dtype=torch.float64
        )
        assert not torch.allclose(result, classic, rtol=0, atol=1e-6)

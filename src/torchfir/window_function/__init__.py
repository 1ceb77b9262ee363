"""Window functions for windowed-sinc FIR design."""

from ._blackman_harris_window import blackman_harris_window
from ._blackman_nuttall_window import blackman_nuttall_window
from ._blackman_window import blackman_window
from ._cosine_sum_window import cosine_sum_window
from ._flat_top_window import flat_top_window
from ._hamming_window import hamming_window
from ._hann_window import hann_window
from ._nuttall_window import nuttall_window
from ._rectangular_window import rectangular_window
from ._sine_window import sine_window
from ._triangular_window import triangular_window
from ._welch_window import welch_window
from ._window import WINDOW_KINDS, WindowKind, window, window_function

__all__ = [
    # Dispatch
    "WINDOW_KINDS",
    "WindowKind",
    "window",
    "window_function",
    # Windows
    "blackman_harris_window",
    "blackman_nuttall_window",
    "blackman_window",
    "cosine_sum_window",
    "flat_top_window",
    "hamming_window",
    "hann_window",
    "nuttall_window",
    "rectangular_window",
    "sine_window",
    "triangular_window",
    "welch_window",
]

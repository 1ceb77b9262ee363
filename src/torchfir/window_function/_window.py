"""Window selection by kind."""

from typing import Literal, Optional, Union

import torch
from torch import Tensor

from ._blackman_harris_window import blackman_harris
from ._blackman_nuttall_window import blackman_nuttall
from ._blackman_window import blackman
from ._flat_top_window import flat_top
from ._hamming_window import hamming
from ._hann_window import hann
from ._nuttall_window import nuttall
from ._rectangular_window import rectangular
from ._sine_window import sine
from ._triangular_window import triangular
from ._welch_window import welch
from ._window_sampling import WindowFormula, evaluate_window, sample_window

WindowKind = Literal[
    "rectangular",
    "triangular",
    "welch",
    "sine",
    "hann",
    "hamming",
    "blackman",
    "nuttall",
    "blackman_nuttall",
    "blackman_harris",
    "flat_top",
]

_FORMULAS: dict[str, WindowFormula] = {
    "rectangular": rectangular,
    "triangular": triangular,
    "welch": welch,
    "sine": sine,
    "hann": hann,
    "hamming": hamming,
    "blackman": blackman,
    "nuttall": nuttall,
    "blackman_nuttall": blackman_nuttall,
    "blackman_harris": blackman_harris,
    "flat_top": flat_top,
}

WINDOW_KINDS: tuple[str, ...] = tuple(_FORMULAS)


def _formula(kind: str) -> WindowFormula:
    try:
        return _FORMULAS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown window kind: {kind!r}. "
            f"Expected one of {', '.join(WINDOW_KINDS)}"
        ) from None


def window(
    kind: WindowKind,
    n: Union[int, Tensor],
    length: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Evaluate a window of the given kind at sample index ``n``.

    Parameters
    ----------
    kind : str
        Window kind, one of ``WINDOW_KINDS``.
    n : int or Tensor
        Sample index or tensor of indices, ``0 <= n <= length``.
    length : int
        Window length parameter ``L``, the tap count minus one.
    dtype : torch.dtype, optional
        Output dtype. Defaults to the dtype of ``n`` when it is a floating
        point tensor, float64 otherwise.
    device : torch.device, optional
        Output device.

    Returns
    -------
    Tensor
        Window weights with the shape of ``n``. A zero ``length`` (single
        tap window) gives 1 for every kind.

    Examples
    --------
    >>> window("hann", 32, 64)
    tensor(1., dtype=torch.float64)
    """
    return evaluate_window(
        _formula(kind), n, length, dtype=dtype, device=device
    )


def window_function(
    kind: WindowKind,
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Window of the given kind over ``n = 0, ..., tap_count - 1``.

    Parameters
    ----------
    kind : str
        Window kind, one of ``WINDOW_KINDS``.
    tap_count : int
        Number of points in the output window. Must be non-negative.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Defaults to float64.
    device : torch.device, optional
        The desired device of the returned tensor.

    Returns
    -------
    Tensor
        A 1-D tensor of size (tap_count,).
    """
    return sample_window(
        _formula(kind), tap_count, dtype=dtype, device=device
    )

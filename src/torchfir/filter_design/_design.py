"""Windowed-sinc design pipeline."""

from typing import NamedTuple, Optional

import torch
from torch import Tensor

from torchfir.window_function import window_function

from ._apply_window import apply_window
from ._filter_spec import FilterSpec
from ._gain import filter_gain
from ._kernel import filter_kernel
from ._normalize_filter import normalize_filter


class FilterDesign(NamedTuple):
    """Coefficient vectors produced by ``design``.

    Parameters
    ----------
    raw : Tensor
        Ideal kernel truncated to ``tap_count`` taps, unnormalized.
    window : Tensor
        Window weights.
    windowed : Tensor
        ``raw * window``.
    normalized : Tensor
        ``raw`` divided by its passband gain.
    """

    raw: Tensor
    window: Tensor
    windowed: Tensor
    normalized: Tensor


def design(
    spec: FilterSpec,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> FilterDesign:
    """
    Design a windowed-sinc FIR filter.

    Parameters
    ----------
    spec : FilterSpec
        Design parameters.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.float64.
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    FilterDesign
        Raw kernel, window, windowed kernel and normalized kernel, each of
        shape ``(spec.tap_count,)``.

    Notes
    -----
    The windowed kernel is built from the unnormalized raw kernel, so its
    passband gain is not one. Use ``normalized`` when unity gain matters.

    Examples
    --------
    >>> spec = FilterSpec(window_kind="hann", high_cut=300.0)
    >>> result = design(spec)
    >>> result.raw[32].item()
    600.0
    """
    if dtype is None:
        dtype = torch.float64

    raw = filter_kernel(spec, dtype=dtype, device=device)
    window = window_function(
        spec.window_kind, spec.tap_count, dtype=dtype, device=device
    )
    normalized = normalize_filter(raw, filter_gain(spec, raw))
    windowed = apply_window(raw, window)

    return FilterDesign(
        raw=raw, window=window, windowed=windowed, normalized=normalized
    )

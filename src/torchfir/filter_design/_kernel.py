"""Kernel selection by filter class."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Optional, Union

import torch
from torch import Tensor

from ._bandpass_kernel import bandpass_kernel
from ._bandstop_kernel import bandstop_kernel
from ._highpass_kernel import highpass_kernel
from ._lowpass_kernel import lowpass_kernel

if TYPE_CHECKING:
    from ._filter_spec import FilterSpec

FilterClass = Literal["lowpass", "highpass", "bandpass", "bandstop"]

FILTER_CLASSES: tuple[str, ...] = (
    "lowpass",
    "highpass",
    "bandpass",
    "bandstop",
)


def kernel(
    filter_class: FilterClass,
    n: Union[int, Tensor],
    shift: int,
    dt: float,
    low_cut: float,
    high_cut: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Evaluate the ideal kernel of a filter class at tap index ``n``.

    Parameters
    ----------
    filter_class : str
        One of ``"lowpass"``, ``"highpass"``, ``"bandpass"``, ``"bandstop"``.
    n : int or Tensor
        Tap index or tensor of tap indices.
    shift : int
        Index of the kernel's time-zero sample.
    dt : float
        Sample period in seconds.
    low_cut, high_cut : float
        Cutoff frequencies in Hz. Low-pass reads only ``high_cut`` and
        high-pass only ``low_cut``.
    dtype : torch.dtype, optional
        Output dtype. Defaults to float64.
    device : torch.device, optional
        Output device.

    Returns
    -------
    Tensor
        Unnormalized taps with the shape of ``n``.
    """
    if filter_class == "lowpass":
        return lowpass_kernel(
            n, shift, dt, high_cut, dtype=dtype, device=device
        )
    elif filter_class == "highpass":
        return highpass_kernel(
            n, shift, dt, low_cut, dtype=dtype, device=device
        )
    elif filter_class == "bandpass":
        return bandpass_kernel(
            n, shift, dt, low_cut, high_cut, dtype=dtype, device=device
        )
    elif filter_class == "bandstop":
        return bandstop_kernel(
            n, shift, dt, low_cut, high_cut, dtype=dtype, device=device
        )
    else:
        raise ValueError(
            f"Unknown filter class: {filter_class!r}. "
            f"Expected one of {', '.join(FILTER_CLASSES)}"
        )


def filter_kernel(
    spec: FilterSpec,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Raw (unnormalized, unwindowed) kernel of ``spec`` over all taps."""
    n = torch.arange(
        spec.tap_count, dtype=dtype or torch.float64, device=device
    )

    return kernel(
        spec.filter_class,
        n,
        spec.shift,
        spec.sample_period,
        spec.low_cut,
        spec.high_cut,
    )

"""Time and frequency domain views of designed filters."""

from typing import NamedTuple, Sequence, Union

from torch import Tensor

from torchfir._constants import DFT_LENGTH
from torchfir.filter_design import FilterDesign

from ._curve import Curve
from ._impulse_view import impulse_view
from ._spectrum_view import spectrum_view
from ._step_view import step_view
from ._window_view import window_view


class FilterAnalysis(NamedTuple):
    """Impulse, step and magnitude spectrum views of one coefficient vector."""

    impulse: Curve
    step: Curve
    spectrum: Curve


class DesignAnalysis(NamedTuple):
    """Views of every vector of a ``FilterDesign``.

    Parameters
    ----------
    filter : FilterAnalysis
        Analysis of the raw kernel.
    windowed : FilterAnalysis
        Analysis of the windowed kernel.
    window : Curve
        Window weights against time.
    window_spectrum : Curve
        Magnitude spectrum of the window.
    """

    filter: FilterAnalysis
    windowed: FilterAnalysis
    window: Curve
    window_spectrum: Curve


def analyze(
    coefficients: Union[Tensor, Sequence[float]],
    sampling_rate: float,
    dft_length: int = DFT_LENGTH,
) -> FilterAnalysis:
    """
    Compute impulse, step and spectrum views of a coefficient vector.

    Parameters
    ----------
    coefficients : Tensor or sequence of float
        Non-empty 1-D coefficient vector.
    sampling_rate : float
        Sampling rate in Hz.
    dft_length : int, optional
        Transform length of the spectrum view. Default is 256.

    Returns
    -------
    FilterAnalysis
    """
    return FilterAnalysis(
        impulse=impulse_view(coefficients, sampling_rate),
        step=step_view(coefficients, sampling_rate),
        spectrum=spectrum_view(coefficients, sampling_rate, dft_length),
    )


def analyze_design(
    design: FilterDesign,
    sampling_rate: float,
    dft_length: int = DFT_LENGTH,
) -> DesignAnalysis:
    """
    Analyze the raw kernel, windowed kernel and window of a design.

    The raw and windowed kernels are analyzed unnormalized.

    Parameters
    ----------
    design : FilterDesign
        Output of ``torchfir.filter_design.design``.
    sampling_rate : float
        Sampling rate the design was made for, in Hz.
    dft_length : int, optional
        Transform length of the spectrum views. Default is 256.

    Returns
    -------
    DesignAnalysis
    """
    return DesignAnalysis(
        filter=analyze(design.raw, sampling_rate, dft_length),
        windowed=analyze(design.windowed, sampling_rate, dft_length),
        window=window_view(design.window, sampling_rate),
        window_spectrum=spectrum_view(
            design.window, sampling_rate, dft_length
        ),
    )

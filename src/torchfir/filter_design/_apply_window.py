from torch import Tensor

from ._exceptions import LengthMismatchError


def apply_window(coefficients: Tensor, window: Tensor) -> Tensor:
    """
    Elementwise product of a kernel and a window.

    Raises
    ------
    LengthMismatchError
        If the two vectors do not have the same shape.
    """
    if coefficients.shape != window.shape:
        raise LengthMismatchError(
            f"cannot window coefficients of shape {tuple(coefficients.shape)} "
            f"with a window of shape {tuple(window.shape)}"
        )

    return coefficients * window

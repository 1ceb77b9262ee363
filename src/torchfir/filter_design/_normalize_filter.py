import warnings
from typing import Union

import torch
from torch import Tensor


def normalize_filter(
    coefficients: Tensor, gain: Union[float, Tensor]
) -> Tensor:
    """
    Scale ``coefficients`` to unity gain.

    Every tap is divided by ``gain``. A zero or non-finite gain is not
    guarded against: the quotient is returned as computed (``inf``/``nan``
    for a zero gain) and a ``RuntimeWarning`` is issued.

    Parameters
    ----------
    coefficients : Tensor
        1-D coefficient vector.
    gain : float or Tensor
        Scalar gain, typically from ``filter_gain``.

    Returns
    -------
    Tensor
        ``coefficients / gain``.
    """
    gain = torch.as_tensor(
        gain, dtype=coefficients.dtype, device=coefficients.device
    )

    if not bool(torch.isfinite(gain).all()) or bool((gain == 0).any()):
        warnings.warn(
            f"Degenerate normalization gain {gain.item()!r}; "
            f"normalized coefficients are not meaningful",
            RuntimeWarning,
            stacklevel=2,
        )

    return coefficients / gain

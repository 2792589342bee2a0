from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import InvalidImage


@dataclass(frozen=True)
class DispersionStats:
    """Mean and population variance of a response grid."""

    mean: float
    variance: float


def dispersion(response: np.ndarray) -> DispersionStats:
    """Return the mean and population variance (divide by N) of ``response``.

    Sums are accumulated in float64 whatever the storage type of the grid.
    """
    count = response.size
    if count == 0:
        raise InvalidImage("cannot compute dispersion of an empty grid")

    values = np.asarray(response, dtype=np.float64)
    mean = float(values.sum(dtype=np.float64) / count)
    deviation = values - mean
    variance = float(np.square(deviation).sum(dtype=np.float64) / count)
    return DispersionStats(mean=mean, variance=max(variance, 0.0))

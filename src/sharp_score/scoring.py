from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .config import Settings

logger = logging.getLogger(__name__)

DEFAULT_VARIANCE_FLOOR = 1.0
# sqrt(variance) ~= 35 is a very sharp photo; 35 / 3.5 lands at the top of the scale.
DEFAULT_DIVISOR = 3.5
DEFAULT_CAP = 10.0


@dataclass(frozen=True)
class ScoreCalibration:
    """Constants that map Laplacian variance onto the 0-10 scale."""

    variance_floor: float = DEFAULT_VARIANCE_FLOOR
    divisor: float = DEFAULT_DIVISOR
    cap: float = DEFAULT_CAP

    def __post_init__(self) -> None:
        if self.variance_floor < 0:
            raise ValueError("variance_floor must be >= 0")
        if self.divisor <= 0:
            raise ValueError("divisor must be > 0")
        if self.cap <= 0:
            raise ValueError("cap must be > 0")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScoreCalibration":
        return cls(
            variance_floor=settings.VARIANCE_FLOOR,
            divisor=settings.SCORE_DIVISOR,
            cap=settings.SCORE_CAP,
        )


DEFAULT_CALIBRATION = ScoreCalibration()


def map_score(variance: float, calibration: ScoreCalibration = DEFAULT_CALIBRATION) -> float:
    """Map a Laplacian variance to a score in ``[0, calibration.cap]``.

    Variances below ``variance_floor`` (solid colour, heavy blur) score 0.0.
    Note the jump this creates: a variance exactly at the floor maps to
    ``sqrt(floor) / divisor`` (about 0.29 with the defaults), not to 0.
    """
    if math.isnan(variance) or variance < 0:
        raise ValueError(f"variance must be a non-negative number, got {variance!r}")

    if variance < calibration.variance_floor:
        logger.debug("Variance %.4f below floor %.4f; score 0.0", variance, calibration.variance_floor)
        return 0.0

    intensity = math.sqrt(variance)
    score = min(intensity / calibration.divisor, calibration.cap)
    return min(max(score, 0.0), calibration.cap)


def format_score(score: float) -> str:
    """表示用に小数点以下1桁で整形する。"""
    return f"{score:.1f}"

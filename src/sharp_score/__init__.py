"""Variance-of-Laplacian sharpness scoring."""

from .dispersion import DispersionStats, dispersion
from .errors import DecodeError, InvalidImage, NotFoundError, SharpScoreError, UsageError
from .laplacian import LAPLACIAN_KERNEL, laplacian_response
from .luminance import to_luminance
from .pipeline import SharpnessResult, score_file, score_image, sharpness_score
from .scoring import DEFAULT_CALIBRATION, ScoreCalibration, format_score, map_score

__all__ = [
    "DEFAULT_CALIBRATION",
    "DecodeError",
    "DispersionStats",
    "InvalidImage",
    "LAPLACIAN_KERNEL",
    "NotFoundError",
    "ScoreCalibration",
    "SharpScoreError",
    "SharpnessResult",
    "UsageError",
    "dispersion",
    "format_score",
    "laplacian_response",
    "map_score",
    "score_file",
    "score_image",
    "sharpness_score",
    "to_luminance",
]

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from .config import settings
from .decoder import decode_image
from .dispersion import dispersion
from .errors import NotFoundError
from .laplacian import laplacian_response
from .luminance import to_luminance
from .scoring import ScoreCalibration, map_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SharpnessResult:
    """Score of one image together with the statistics it was derived from."""

    score: float
    mean: float
    variance: float
    width: int
    height: int


def _resolve(calibration: Optional[ScoreCalibration], workers: Optional[int]) -> tuple[ScoreCalibration, Optional[int]]:
    if calibration is None:
        calibration = ScoreCalibration.from_settings(settings)
    if workers is None:
        workers = settings.LAPLACIAN_WORKERS
    return calibration, workers


def score_image(
    image: np.ndarray,
    color_order: str = "RGB",
    calibration: Optional[ScoreCalibration] = None,
    workers: Optional[int] = None,
) -> SharpnessResult:
    """Run the full pipeline on a decoded image.

    Parameters
    ----------
    image:
        Decoded image, grayscale or 3/4 channel uint8.
    color_order:
        ``"RGB"`` for Pillow arrays, ``"BGR"`` for OpenCV arrays.
    calibration:
        Score constants. Defaults to the values from :mod:`sharp_score.config`.
    workers:
        Thread count for the Laplacian stage. Defaults to the configured value.
    """
    calibration, workers = _resolve(calibration, workers)

    luminance = to_luminance(image, color_order=color_order)
    response = laplacian_response(luminance, workers=workers)
    stats = dispersion(response)
    score = map_score(stats.variance, calibration)

    height, width = luminance.shape
    logger.debug(
        "mean=%.4f variance=%.4f score=%.4f (%dx%d)", stats.mean, stats.variance, score, width, height
    )
    return SharpnessResult(
        score=score,
        mean=stats.mean,
        variance=stats.variance,
        width=width,
        height=height,
    )


def sharpness_score(
    image: np.ndarray,
    color_order: str = "RGB",
    calibration: Optional[ScoreCalibration] = None,
    workers: Optional[int] = None,
) -> float:
    """Return only the 0-10 sharpness score of ``image``."""
    return score_image(image, color_order=color_order, calibration=calibration, workers=workers).score


def score_file(
    path: str | Path,
    calibration: Optional[ScoreCalibration] = None,
    workers: Optional[int] = None,
) -> SharpnessResult:
    """ファイルを読み込んでスコアを計算する。

    Raises ``NotFoundError``, ``DecodeError`` or ``InvalidImage``.
    """
    if not Path(path).exists():
        raise NotFoundError(str(path))

    image = decode_image(path)
    logger.info("Scoring %s", path)
    return score_image(image, color_order="RGB", calibration=calibration, workers=workers)

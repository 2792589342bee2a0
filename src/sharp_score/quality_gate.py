from __future__ import annotations

from typing import Optional

import numpy as np

from .config import settings
from .errors import InvalidImage
from .pipeline import sharpness_score
from .scoring import format_score


def check_sharpness(image: np.ndarray, threshold: Optional[float] = None, color_order: str = "RGB") -> bool:
    """画像の鮮明度を評価し、十分かどうかを返す。

    Parameters
    ----------
    image:
        RGB/BGR またはグレースケール画像。
    threshold:
        合格ラインの 0-10 スコア。None の場合は設定値 ``QUALITY_THRESHOLD``。
    """
    if image is None or image.size == 0:
        return False

    if threshold is None:
        threshold = settings.QUALITY_THRESHOLD
    return sharpness_score(image, color_order=color_order) >= threshold


def is_quality_sufficient(
    image: np.ndarray, threshold: Optional[float] = None, color_order: str = "RGB"
) -> tuple[bool, str]:
    """品質が十分かどうかの合否と理由を返す。

    Returns
    -------
    (ok, reason)
        ok が False の場合、reason には理由のメッセージが入る。
    """
    if image is None or image.size == 0:
        return False, "image is empty"

    if threshold is None:
        threshold = settings.QUALITY_THRESHOLD

    try:
        score = sharpness_score(image, color_order=color_order)
    except InvalidImage as exc:
        return False, f"invalid image: {exc}"

    if score < threshold:
        return False, f"image is blurry (score {format_score(score)} < {threshold})"

    return True, "OK"

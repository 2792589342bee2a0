from __future__ import annotations

import logging

import cv2
import numpy as np

from .errors import InvalidImage

logger = logging.getLogger(__name__)

_CONVERSIONS = {
    ("RGB", 3): cv2.COLOR_RGB2GRAY,
    ("RGB", 4): cv2.COLOR_RGBA2GRAY,
    ("BGR", 3): cv2.COLOR_BGR2GRAY,
    ("BGR", 4): cv2.COLOR_BGRA2GRAY,
}


def to_luminance(image: np.ndarray, color_order: str = "RGB") -> np.ndarray:
    """カラー画像（またはグレースケール画像）を輝度グリッドに変換する。

    Parameters
    ----------
    image:
        ``(H, W)``, ``(H, W, 1)``, ``(H, W, 3)`` or ``(H, W, 4)`` uint8 array.
    color_order:
        Channel order of 3/4-channel input, ``"RGB"`` (Pillow) or ``"BGR"``
        (OpenCV). Alpha is ignored.

    Returns
    -------
    np.ndarray
        ``(H, W)`` uint8 array with the same dimensions as ``image``.

    Raises
    ------
    InvalidImage
        If the image is missing, has zero area, or an unsupported layout.
    """
    if image is None:
        raise InvalidImage("no image data")

    if image.ndim not in (2, 3):
        raise InvalidImage(f"unsupported image shape {image.shape}")

    height, width = image.shape[:2]
    if width == 0 or height == 0:
        raise InvalidImage(f"image has zero area ({width}x{height})")

    if image.dtype != np.uint8:
        raise InvalidImage(f"expected 8-bit samples, got {image.dtype}")

    channels = 1 if image.ndim == 2 else image.shape[2]
    if channels == 1:
        gray = image.reshape(height, width).copy()
    else:
        order = color_order.upper()
        code = _CONVERSIONS.get((order, channels))
        if code is None:
            raise InvalidImage(
                f"unsupported channel layout: {channels} channels in {color_order!r} order"
            )
        gray = cv2.cvtColor(np.require(image, requirements=["C", "W"]), code)

    logger.debug("Luminance grid %dx%d from %d channel(s)", width, height, channels)
    return gray

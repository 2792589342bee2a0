"""Pillow-backed image decoding.

The decoder is the only place that touches the file contents. It returns a
uint8 array in RGB(A) order (or a 2D array for grayscale sources).
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import DecodeError

logger = logging.getLogger(__name__)

_PASSTHROUGH_MODES = {"L", "RGB", "RGBA"}
_ALPHA_MODES = {"LA", "La", "PA", "RGBa"}
# 16/32-bit gray is reduced to 8 bits the way 0..65535 maps onto 0..255.
_WIDE_GRAY_MODES = {"I", "I;16", "I;16B", "I;16L", "I;16N"}


def _normalize(img: Image.Image) -> np.ndarray:
    mode = img.mode
    if mode in _PASSTHROUGH_MODES:
        return np.array(img, dtype=np.uint8)

    if mode in _WIDE_GRAY_MODES:
        wide = np.array(img, dtype=np.float64)
        return np.clip(np.rint(wide / 257.0), 0, 255).astype(np.uint8)

    if mode == "F":
        return np.clip(np.rint(np.array(img, dtype=np.float64)), 0, 255).astype(np.uint8)

    if mode in _ALPHA_MODES or (mode == "P" and "transparency" in img.info):
        target = "RGBA"
    else:
        target = "RGB"
    logger.debug("Converting %s image to %s", mode, target)
    return np.array(img.convert(target), dtype=np.uint8)


def decode_image(path: str | Path) -> np.ndarray:
    """画像ファイルを読み込み、uint8 配列として返す。

    Raises
    ------
    DecodeError
        If the file cannot be read or is not a supported image.
    """
    p = Path(path)
    try:
        with Image.open(p) as img:
            img.load()
            array = _normalize(img)
    except (UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise DecodeError(str(exc)) from exc
    except (OSError, ValueError, SyntaxError) as exc:
        raise DecodeError(f"{type(exc).__name__}: {exc}") from exc

    logger.debug("Decoded %s: shape=%s dtype=%s", p, array.shape, array.dtype)
    return array

import io

import numpy as np
import pytest
from PIL import Image

from sharp_score.decoder import decode_image
from sharp_score.errors import DecodeError


def _save(tmp_path, image, name="img.png"):
    path = tmp_path / name
    image.save(path)
    return path


@pytest.mark.parametrize(
    "mode, shape",
    [("L", (6, 8)), ("RGB", (6, 8, 3)), ("RGBA", (6, 8, 4))],
)
def test_passthrough_modes(tmp_path, mode, shape):
    data = np.random.default_rng(0).integers(0, 256, size=shape, dtype=np.uint8)
    path = _save(tmp_path, Image.fromarray(data))
    decoded = decode_image(path)
    assert decoded.dtype == np.uint8
    assert np.array_equal(decoded, data)


def test_sixteen_bit_gray_is_scaled(tmp_path):
    wide = np.array([[0, 65535], [25700, 257]], dtype=np.uint16)
    path = _save(tmp_path, Image.fromarray(wide))
    decoded = decode_image(path)
    assert decoded.dtype == np.uint8
    assert decoded.tolist() == [[0, 255], [100, 1]]


def test_palette_image_is_converted_to_rgb(tmp_path):
    img = Image.new("RGB", (4, 4), (10, 20, 30)).convert("P")
    decoded = decode_image(_save(tmp_path, img))
    assert decoded.shape == (4, 4, 3)


def test_garbage_bytes_raise_decode_error(tmp_path):
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"\x00\x01not really a jpeg")
    with pytest.raises(DecodeError):
        decode_image(path)


def test_truncated_file_raises_decode_error(tmp_path):
    data = np.random.default_rng(1).integers(0, 256, size=(64, 64, 3), dtype=np.uint8)
    buf = io.BytesIO()
    Image.fromarray(data).save(buf, format="PNG")
    path = tmp_path / "truncated.png"
    path.write_bytes(buf.getvalue()[: len(buf.getvalue()) // 2])
    with pytest.raises(DecodeError):
        decode_image(path)


def test_directory_raises_decode_error(tmp_path):
    with pytest.raises(DecodeError):
        decode_image(tmp_path)

import pytest

from combiner.models.errors import DecodeError, IoError
from combiner.models.image_model import FormatTag
from combiner.services.image_service import ImageService


def test_decode_png_returns_rgba_and_format(solid_image, red):
    path = solid_image("a.png", (3, 2), red)
    image, fmt = ImageService().decode(path)

    assert fmt is FormatTag.PNG
    assert image.format is FormatTag.PNG
    assert image.size == (3, 2)
    assert image.pil_image.mode == "RGBA"
    assert image.pixels == bytes(red) * 6


def test_decode_jpeg_reports_jpeg(solid_image, red):
    path = solid_image("a.jpg", (4, 4), red, fmt="JPEG")
    image, fmt = ImageService().decode(str(path))
    assert fmt is FormatTag.JPEG
    assert len(image.pixels) == 4 * 4 * 4


def test_decode_format_comes_from_content_not_extension(solid_image, red):
    path = solid_image("looks_like.jpg", (2, 2), red, fmt="PNG")
    _, fmt = ImageService().decode(path)
    assert fmt is FormatTag.PNG


def test_decode_missing_file_is_io_error(tmp_path):
    with pytest.raises(IoError):
        ImageService().decode(tmp_path / "nope.png")


def test_decode_directory_is_io_error(tmp_path):
    with pytest.raises(IoError):
        ImageService().decode(tmp_path)


def test_decode_garbage_is_decode_error(tmp_path):
    path = tmp_path / "garbage.png"
    path.write_bytes(b"definitely not an image")
    with pytest.raises(DecodeError):
        ImageService().decode(path)


def test_decode_truncated_png_is_decode_error(random_image, tmp_path):
    src = random_image("full.png", (32, 32))
    data = src.read_bytes()
    broken = tmp_path / "broken.png"
    broken.write_bytes(data[: len(data) // 2])
    with pytest.raises(DecodeError):
        ImageService().decode(broken)


def test_format_tag_from_pil():
    assert FormatTag.from_pil("PNG") is FormatTag.PNG
    assert FormatTag.from_pil("jpeg") is FormatTag.JPEG
    assert FormatTag.from_pil("PSD") is None
    assert FormatTag.from_pil(None) is None
    assert not FormatTag.JPEG.supports_alpha
    assert FormatTag.PNG.supports_alpha

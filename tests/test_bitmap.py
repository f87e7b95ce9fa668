import pytest
from PIL import Image

from tinylove.bitmap import Bitmap, load_image


def _save(path, size, pixels, fmt="PNG"):
    img = Image.new("RGBA", size)
    for (x, y), value in pixels.items():
        img.putpixel((x, y), value)
    img.save(path, fmt)
    return path


def test_load_image_packs_argb(tmp_path):
    path = _save(tmp_path / "a.png", (2, 1), {(0, 0): (10, 20, 30, 255), (1, 0): (1, 2, 3, 0)})
    bmp = load_image(path)
    assert bmp.pixel(0, 0) == 0xFF0A141E
    assert bmp.pixel(1, 0) == 0x00010203


def test_load_image_dimensions_and_channels(tmp_path):
    pixels = {
        (x, y): (x * 40 + 1, y * 50 + 2, x + y + 3, 200 + x)
        for x in range(3)
        for y in range(2)
    }
    bmp = load_image(_save(tmp_path / "b.png", (3, 2), pixels))
    assert (bmp.width, bmp.height, bmp.stride) == (3, 2, 3)
    for (x, y), (r, g, b, a) in pixels.items():
        value = bmp.pixel(x, y)
        assert (value >> 24, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF) == (r, g, b, a)


def test_non_png_is_rejected(tmp_path):
    path = _save(tmp_path / "c.bmp", (2, 2), {}, fmt="BMP")
    with pytest.raises(ValueError):
        load_image(path)


def test_garbage_is_rejected(tmp_path):
    path = tmp_path / "junk.png"
    path.write_bytes(b"not an image at all")
    with pytest.raises(ValueError):
        load_image(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(tmp_path / "missing.png")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.png"
    path.write_bytes(b"")
    with pytest.raises(OSError):
        load_image(path)


def test_bitmap_defaults_to_zeroed_pixels():
    bmp = Bitmap(4, 3)
    assert bmp.stride == 4
    assert bmp.data == [0] * 12


def test_bitmap_pixel_uses_stride():
    bmp = Bitmap(2, 2, [1, 2, 99, 3, 4, 99], stride=3)
    assert [bmp.pixel(0, 1), bmp.pixel(1, 1)] == [3, 4]


def test_bitmap_pixel_out_of_range():
    bmp = Bitmap(2, 2)
    with pytest.raises(IndexError):
        bmp.pixel(2, 0)
    with pytest.raises(IndexError):
        bmp.pixel(0, -1)


def test_bitmap_rejects_short_data():
    with pytest.raises(ValueError):
        Bitmap(3, 3, [1, 2, 3])


def test_copy_is_independent():
    bmp = Bitmap(2, 1, [5, 6])
    dup = bmp.copy()
    dup.data[0] = 7
    assert bmp.data == [5, 6]
    assert dup.pixel(1, 0) == 6
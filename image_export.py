from __future__ import annotations

from PIL import Image


class RenderError(Exception):
    """The rendered image could not be written to its output target."""


def save_image(width: int, height: int, pixels: bytes, output_path: str) -> None:
    """Encode row-major 8-bit RGB bytes as an image file; the format follows the file extension."""
    if width <= 0 or height <= 0:
        raise ValueError(f"image dimensions must be positive, got {width}x{height}")
    expected_length = width * height * 3
    if len(pixels) != expected_length:
        raise ValueError(f"expected {expected_length} pixel bytes for {width}x{height} RGB, got {len(pixels)}")

    image = Image.frombytes("RGB", (width, height), bytes(pixels))
    try:
        image.save(output_path)
    except (OSError, ValueError) as err:
        raise RenderError(f"cannot write image to {output_path}: {err}") from err

"""Image scaling."""

from __future__ import annotations

from PIL import Image


def resize(image: Image.Image, width: int, height: int) -> Image.Image:
    """Return an RGBA copy of ``image`` scaled bilinearly to ``width`` x ``height``."""
    if width < 0 or height < 0:
        raise ValueError(f"size must not be negative, got {width}x{height}")
    if width == 0 or height == 0:
        return Image.new("RGBA", (width, height))
    return image.convert("RGBA").resize((width, height), Image.Resampling.BILINEAR)
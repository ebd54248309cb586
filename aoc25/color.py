"""Colour space conversion."""


def to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert 8-bit RGB components to hue, saturation and lightness in [0, 1]."""
    for component in (r, g, b):
        if not 0 <= component <= 255:
            raise ValueError(f"colour component out of range: {component}")

    rf, gf, bf = r / 255, g / 255, b / 255
    max_value = max(rf, gf, bf)
    min_value = min(rf, gf, bf)
    lightness = (max_value + min_value) / 2

    delta = max_value - min_value
    if delta == 0:
        return 0.0, 0.0, lightness

    if lightness < 0.5:
        saturation = delta / (max_value + min_value)
    else:
        saturation = delta / (2 - max_value - min_value)

    def scaled(channel: float) -> float:
        return ((max_value - channel) / 6 + delta / 2) / delta

    r2, g2, b2 = scaled(rf), scaled(gf), scaled(bf)
    if rf == max_value:
        hue = b2 - g2
    elif gf == max_value:
        hue = 1 / 3 + r2 - b2
    else:
        hue = 2 / 3 + g2 - r2

    if hue < 0:
        hue += 1
    elif hue > 1:
        hue -= 1

    return hue, saturation, lightness
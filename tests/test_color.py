import pytest

from aoc25.color import to_hsl


def test_pure_red():
    assert to_hsl(255, 0, 0) == pytest.approx((0.0, 1.0, 0.5))


def test_primary_hues():
    assert to_hsl(0, 0, 255)[0] == pytest.approx(2 / 3)
    assert to_hsl(0, 255, 0)[0] == pytest.approx(1 / 3)


def test_grey_has_no_hue_or_saturation():
    h, s, l = to_hsl(128, 128, 128)
    assert (h, s) == (0, 0)
    assert l == pytest.approx(128 / 255)


@pytest.mark.parametrize(
    "rgb", [(12, 200, 99), (255, 255, 0), (1, 2, 3), (250, 10, 240), (90, 90, 200)]
)
def test_components_stay_in_unit_range(rgb):
    assert all(0 <= value <= 1 for value in to_hsl(*rgb))


@pytest.mark.parametrize("rgb", [(12, 200, 99), (250, 10, 240)])
def test_lightness_is_mean_of_extremes(rgb):
    assert to_hsl(*rgb)[2] == pytest.approx((max(rgb) + min(rgb)) / 2 / 255)


def test_out_of_range_component_raises():
    with pytest.raises(ValueError):
        to_hsl(256, 0, 0)
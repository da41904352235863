import pytest

from gamebreaker.colors import Color, color_from_hex, hsv_to_rgb


def test_color_default_alpha_is_opaque():
    assert Color(1, 2, 3).a == 255


def test_color_iterates_as_rgba():
    assert tuple(Color(10, 20, 30, 40)) == (10, 20, 30, 40)


@pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 300), (0, 0, 0, -5)])
def test_color_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_with_alpha_keeps_rgb():
    base = Color(10, 20, 30)
    changed = base.with_alpha(7)
    assert changed == Color(10, 20, 30, 7)
    assert base.a == 255


def test_with_alpha_validates():
    with pytest.raises(ValueError):
        Color(1, 1, 1).with_alpha(999)


def test_hsv_red():
    assert hsv_to_rgb(0, 1, 255) == pytest.approx((255, 0, 0))


def test_hsv_green_and_blue():
    assert hsv_to_rgb(120, 1, 1) == pytest.approx((0, 1, 0))
    assert hsv_to_rgb(240, 1, 1) == pytest.approx((0, 0, 1))


@pytest.mark.parametrize("hue", [0, 45, 90, 200, 300, 359])
def test_hsv_zero_saturation_is_grey(hue):
    assert hsv_to_rgb(hue, 0, 0.5) == pytest.approx((0.5, 0.5, 0.5))


@pytest.mark.parametrize("hue", [10, 70, 130, 190, 250, 310])
def test_hsv_full_saturation_max_channel_is_value(hue):
    result = hsv_to_rgb(hue, 1, 200)
    assert max(result) == pytest.approx(200)
    assert min(result) == pytest.approx(0)


def test_hsv_wraps_full_turn():
    assert hsv_to_rgb(400, 0.7, 0.9) == pytest.approx(hsv_to_rgb(40, 0.7, 0.9))


def test_hsv_negative_hue_gives_grey_level():
    assert hsv_to_rgb(-30, 1, 1) == pytest.approx((0, 0, 0))


def test_color_from_hex_blue_is_low_byte():
    assert color_from_hex(0x56).b == 0x56


def test_color_from_hex_pins_source_layout():
    assert color_from_hex(0x0000FF) == Color(0, 15, 255)


def test_color_from_hex_alpha():
    assert color_from_hex(0, 128).a == 128
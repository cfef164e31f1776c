import pytest

from cycloid.control.config import DEFAULTS, TOOLTIPS, coerce_float


@pytest.mark.parametrize(
    "value, expected",
    [(3, 3.0), (2.5, 2.5), ("4.25", 4.25), (" 7 ", 7.0), (None, 1.5), ("abc", 1.5), ([1], 1.5)],
)
def test_coerce_float(value, expected):
    assert coerce_float(value, 1.5) == expected


def test_tooltips_belong_to_known_sections():
    for key in TOOLTIPS:
        section, _, name = key.partition(".")
        assert section in DEFAULTS
        assert name


def test_radius_limit():
    assert DEFAULTS["system"]["maxRadius"] == 200.0
    assert "minRadius" not in DEFAULTS["system"]

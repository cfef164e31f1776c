import pytest

from cycloid.host import RadiusValidationError, format_area_report, parse_radius


@pytest.mark.parametrize(
    "text, expected",
    [("50", 50.0), (" 12.5 ", 12.5), ("3,5", 3.5), ("200", 200.0), ("0.001", 0.001)],
)
def test_parse_radius_accepts_valid_input(text, expected):
    assert parse_radius(text) == expected


@pytest.mark.parametrize("text", ["", "   ", None, "abc", "0", "-1", "200.5", "nan", "inf"])
def test_parse_radius_rejects_invalid_input(text):
    with pytest.raises(RadiusValidationError) as info:
        parse_radius(text)
    assert isinstance(info.value, ValueError)
    assert info.value.message


def test_parse_radius_custom_limit():
    assert parse_radius("350", max_radius=400.0) == 350.0
    with pytest.raises(RadiusValidationError):
        parse_radius("350")


def test_area_report():
    report = format_area_report(50.0)
    assert "50.00" in report
    assert "23561.94" in report
    assert "3πa²" in report
    assert "3.141593" in report

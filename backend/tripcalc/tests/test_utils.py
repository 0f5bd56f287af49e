"""
Tests for utility functions.
"""
import pytest
from tripcalc.core.utils import to_cents, from_cents, country_flag, haversine_km, format_distance


def test_cents_conversion():
    assert to_cents(45.5) == 4550
    assert to_cents(0.1 + 0.2) == 30
    assert from_cents(4550) == 45.5


@pytest.mark.parametrize("code,flag", [
    ("ES", "\U0001F1EA\U0001F1F8"),
    ("jp", "\U0001F1EF\U0001F1F5"),
    ("", ""),
    ("ESP", ""),
    ("1A", ""),
])
def test_country_flag(code, flag):
    assert country_flag(code) == flag


def test_haversine_known_distance():
    """Barcelona to Madrid is about 505 km."""
    distance = haversine_km(41.3874, 2.1686, 40.4168, -3.7038)

    assert distance == pytest.approx(505, abs=5)
    assert haversine_km(41.3874, 2.1686, 41.3874, 2.1686) == 0


@pytest.mark.parametrize("km,label", [
    (0.35, "350 m"),
    (0.9996, "1000 m"),
    (1.0, "1.0 km"),
    (12.345, "12.3 km"),
])
def test_format_distance(km, label):
    assert format_distance(km) == label

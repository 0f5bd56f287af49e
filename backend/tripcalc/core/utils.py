"""
Utility functions for the application.
"""
import math


EARTH_RADIUS_KM = 6371.0


def to_cents(amount: float) -> int:
    """Convert a major-unit amount to integer cents."""
    return int(round(amount * 100))


def from_cents(cents: int) -> float:
    """Convert integer cents to a major-unit amount."""
    return cents / 100


def country_flag(country_code: str) -> str:
    """
    Build the flag emoji for a two-letter ISO 3166-1 country code.
    Returns an empty string when the code is not two ASCII letters.
    """
    if not country_code or len(country_code) != 2 or not country_code.isascii() or not country_code.isalpha():
        return ""
    # Regional indicator symbols start at U+1F1E6 for 'A'
    return "".join(chr(0x1F1E6 + ord(c) - ord("A")) for c in country_code.upper())


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two coordinates in kilometers."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def format_distance(km: float) -> str:
    """Format a distance as '350 m' below one kilometer, else '1.2 km'."""
    if km < 1:
        return f"{round(km * 1000)} m"
    return f"{km:.1f} km"

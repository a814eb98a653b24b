"""Geospatial helper functions for the route map.

Coordinates are synthesized from the address text rather than geocoded. They
only need to be stable between calls so markers keep their positions, not to
match the real street location.
"""

from __future__ import annotations

import math
from typing import Optional

from ..models.domain import Coordinate

EARTH_RADIUS_MILES = 3959.0

# Center of the service area.
BASE_LATITUDE = 40.7128
BASE_LONGITUDE = -74.0060

_VARIATION_BUCKETS = 200
_VARIATION_SCALE = 10000


def _to_int32(value: int) -> int:
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def _utf16_code_units(text: str) -> list[int]:
    """Return the UTF-16 code units of ``text`` (astral characters become surrogate pairs)."""

    units: list[int] = []
    for char in text:
        code_point = ord(char)
        if code_point > 0xFFFF:
            code_point -= 0x10000
            units.append(0xD800 + (code_point >> 10))
            units.append(0xDC00 + (code_point & 0x3FF))
        else:
            units.append(code_point)
    return units


def address_hash(address: Optional[str]) -> int:
    """32-bit signed string hash: ``hash = hash * 31 + unit`` with wraparound at each step."""

    value = 0
    for unit in _utf16_code_units(address or ""):
        value = _to_int32((value << 5) - value + unit)
    return value


def _truncated_remainder(value: int, divisor: int) -> int:
    # Remainder carries the sign of the dividend, so negative hashes land south/west of the base.
    return int(math.fmod(value, divisor))


def synthesize_coordinate(address: Optional[str]) -> Coordinate:
    """Derive a pseudo-position inside the service area from an address string."""

    value = address_hash(address)
    lat_variation = _truncated_remainder(value, _VARIATION_BUCKETS) / _VARIATION_SCALE
    lng_variation = _truncated_remainder(value >> 8, _VARIATION_BUCKETS) / _VARIATION_SCALE
    return Coordinate(
        latitude=BASE_LATITUDE + lat_variation,
        longitude=BASE_LONGITUDE + lng_variation,
    )


def haversine_miles(start: Coordinate, end: Coordinate) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(start.latitude), math.radians(end.latitude)
    d_phi = math.radians(end.latitude - start.latitude)
    d_lambda = math.radians(end.longitude - start.longitude)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c

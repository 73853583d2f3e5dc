# file: cams_aqi/geo.py

import math
from typing import Tuple

EARTH_RADIUS_M = 6378137
RADIUS_M = 5000

Coordinate = Tuple[float, float]
BoundingBox = Tuple[float, float, float, float]


def offset(coord: Coordinate, dn: float = 10, de: float = 10) -> Coordinate:
    """Shift a (long, lat) point by dn metres north and de metres east on a spherical Earth."""
    long, lat = coord
    d_lat = dn / EARTH_RADIUS_M
    # cosine of the original latitude, fine at a few kilometres
    d_lon = de / (EARTH_RADIUS_M * math.cos(math.pi * lat / 180))
    return long + d_lon * 180 / math.pi, lat + d_lat * 180 / math.pi


def bounding_box(coord: Coordinate, radius: float = RADIUS_M) -> BoundingBox:
    """Square box around coord as (lat_nw, long_nw, lat_se, long_se), the WMS 1.3.0 EPSG:4326 axis order."""
    long_nw, lat_nw = offset(coord, -radius, -radius)
    long_se, lat_se = offset(coord, radius, radius)
    return lat_nw, long_nw, lat_se, long_se

import pytest

from cams_aqi.geo import RADIUS_M, bounding_box, offset

# 5000 m of arc on the 6378137 m sphere, in degrees
ARC_DEG = 0.0449158


def test_offset_at_equator_moves_equally_in_both_axes():
    long, lat = offset((0.0, 0.0), RADIUS_M, RADIUS_M)
    assert lat == pytest.approx(ARC_DEG, abs=1e-6)
    assert long == pytest.approx(ARC_DEG, abs=1e-6)


def test_offset_longitude_stretches_with_latitude():
    long, lat = offset((18.0, 60.0), RADIUS_M, RADIUS_M)
    assert lat == pytest.approx(60.0 + ARC_DEG, abs=1e-6)
    # cos(60°) = 0.5
    assert long == pytest.approx(18.0 + 2 * ARC_DEG, abs=1e-6)


def test_offset_defaults_to_ten_metres():
    long, lat = offset((0.0, 0.0))
    assert lat == pytest.approx(ARC_DEG / 500, abs=1e-9)
    assert long == pytest.approx(ARC_DEG / 500, abs=1e-9)


def test_offset_uses_original_latitude_for_longitude_scale():
    north_only = offset((10.0, 45.0), 5000, 0)
    both = offset((10.0, 45.0), 5000, 5000)
    east_only = offset((10.0, 45.0), 0, 5000)
    assert north_only[0] == 10.0
    assert both[0] == east_only[0]


def test_bounding_box_at_equator():
    lat_nw, long_nw, lat_se, long_se = bounding_box((0.0, 0.0))
    assert lat_nw == pytest.approx(-ARC_DEG, abs=1e-6)
    assert long_nw == pytest.approx(-ARC_DEG, abs=1e-6)
    assert lat_se == pytest.approx(ARC_DEG, abs=1e-6)
    assert long_se == pytest.approx(ARC_DEG, abs=1e-6)


def test_bounding_box_at_high_latitude_is_lat_long_ordered():
    box = bounding_box((18.0, 60.0))
    assert box == pytest.approx((59.9550842, 17.9101685, 60.0449158, 18.0898315), abs=1e-6)


def test_bounding_box_matches_offset_corners():
    coord = (-3.7, 40.4)
    long_nw, lat_nw = offset(coord, -5000, -5000)
    long_se, lat_se = offset(coord, 5000, 5000)
    assert bounding_box(coord) == (lat_nw, long_nw, lat_se, long_se)

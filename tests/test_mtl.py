import io

from nightscan.utils.mtl import is_daytime, read_sun_elevation


def test_read_sun_elevation(mtl_factory):
    assert read_sun_elevation(io.BytesIO(mtl_factory(15.2))) == 15.2
    assert read_sun_elevation(io.BytesIO(mtl_factory(-3.7))) == -3.7
    assert read_sun_elevation(io.StringIO(mtl_factory(0).decode())) == 0.0


def test_read_sun_elevation_missing(mtl_factory):
    assert read_sun_elevation(io.BytesIO(mtl_factory(None))) is None
    assert read_sun_elevation(io.BytesIO(b'')) is None


def test_read_sun_elevation_first_match_wins():
    body = b'SUN_ELEVATION = -1.0\nSUN_ELEVATION = 5.0\n'
    assert read_sun_elevation(io.BytesIO(body)) == -1.0


def test_read_sun_elevation_unparsable(mtl_factory):
    assert read_sun_elevation(io.BytesIO(mtl_factory('n/a'))) == 0.0


def test_read_sun_elevation_ignores_similar_keys():
    body = b'    SUN_ELEVATION_ANGLE = -4.0\n    SUN_AZIMUTH = 120.0\n'
    assert read_sun_elevation(io.BytesIO(body)) is None


def test_is_daytime():
    assert is_daytime(15.2)
    assert is_daytime(0.0)
    assert not is_daytime(-3.7)
    assert not is_daytime(None)

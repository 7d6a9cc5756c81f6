"""Tests for base-32 geohash encoding."""

import pytest

from geocoordinate import GeoCoordinate, InvalidGeohashError, OutOfRangeError
from geocoordinate.geohash import BASE32, decode_geohash, encode_geohash, to_geohash
from geocoordinate.hashing import encode

REFERENCE_GEOHASHES = [
    (106.709437, -6.329094, "qqggupz6q57"),
    (106.710205, -6.330120, "qqggupxurup"),
    (106.800254, 0.177515, "w25cn23d471"),
]


class TestAlphabet:

    def test_alphabet(self):
        """32 distinct characters without a, i, l and o."""
        assert len(BASE32) == 32
        assert len(set(BASE32)) == 32
        for ch in "ailo":
            assert ch not in BASE32


class TestEncodeGeohash:
    """Coordinate to geohash."""

    @pytest.mark.parametrize("lon,lat,expected", REFERENCE_GEOHASHES)
    def test_reference_geohashes(self, lon, lat, expected):
        """Known 11-character geohashes."""
        assert encode_geohash(lon, lat, 11) == expected
        assert encode_geohash(lon, lat) == expected
        assert to_geohash(GeoCoordinate(lon, lat)) == expected

    def test_well_known_points(self):
        """Standard geohashes from public references."""
        assert encode_geohash(-5.6, 42.6, 5) == "ezs42"
        assert encode_geohash(10.40744, 57.64911, 11) == "u4pruydqqvj"

    def test_shorter_is_prefix(self, sample_point):
        """Every shorter geohash is a prefix of the longer one."""
        lon, lat = sample_point
        full = encode_geohash(lon, lat, 12)
        for length in range(1, 13):
            assert encode_geohash(lon, lat, length) == full[:length]

    def test_matches_integer_hash(self, sample_point):
        """Twelve characters carry exactly the 60-bit hash."""
        lon, lat = sample_point
        value = 0
        for ch in encode_geohash(lon, lat, 12):
            value = (value << 5) | BASE32.index(ch)
        assert value == encode(lon, lat, 60)

    def test_corners(self):
        """Range corners use the first and last alphabet characters."""
        assert encode_geohash(-180.0, -90.0, 12) == "0" * 12
        assert encode_geohash(180.0, 90.0, 12) == "z" * 12

    @pytest.mark.parametrize("length", [0, 13, -1])
    def test_invalid_length(self, jakarta, length):
        """Lengths outside 1-12 are rejected."""
        with pytest.raises(OutOfRangeError, match="length"):
            encode_geohash(106.709437, -6.329094, length)
        with pytest.raises(OutOfRangeError, match="length"):
            jakarta.to_geohash(length)

    def test_invalid_coordinate(self):
        """encode_geohash() validates its coordinates."""
        with pytest.raises(OutOfRangeError):
            encode_geohash(-181.0, 0.0)


class TestDecodeGeohash:
    """Geohash to coordinate."""

    @pytest.mark.parametrize("lon,lat,geohash", REFERENCE_GEOHASHES)
    def test_reference_geohashes(self, lon, lat, geohash):
        """Known geohashes decode within 1e-5 degrees."""
        coord = decode_geohash(geohash)
        assert coord.longitude == pytest.approx(lon, abs=1e-5)
        assert coord.latitude == pytest.approx(lat, abs=1e-5)

    def test_round_trip(self, sample_point):
        """An 11-character round trip stays within 1e-5 degrees."""
        lon, lat = sample_point
        coord = decode_geohash(encode_geohash(lon, lat, 11))
        assert abs(coord.longitude - lon) < 1e-5
        assert abs(coord.latitude - lat) < 1e-5

    def test_short_geohash(self):
        """A short geohash decodes to a point inside its cell."""
        coord = decode_geohash("qqggu")
        # 25 bits: 13 longitude bits, 12 latitude bits
        assert abs(coord.longitude - 106.709437) < 360.0 / 2 ** 13
        assert abs(coord.latitude - -6.329094) < 180.0 / 2 ** 12
        assert encode_geohash(*coord, 5) == "qqggu"

    def test_single_character(self):
        """One character narrows to a 45 x 45 degree cell."""
        coord = decode_geohash("s")
        assert 0.0 <= coord.longitude <= 45.0
        assert 0.0 <= coord.latitude <= 45.0

    @pytest.mark.parametrize("geohash", ["", "abcdef", "qqggupz6q5i", "QQGGU", "qq gg", "qqggupz6q57ab"])
    def test_invalid_geohash(self, geohash):
        """Empty, over-long and out-of-alphabet strings are rejected."""
        with pytest.raises(InvalidGeohashError):
            decode_geohash(geohash)

    def test_invalid_geohash_is_value_error(self):
        """Malformed input can be caught as ValueError."""
        with pytest.raises(ValueError, match="invalid character"):
            GeoCoordinate.from_geohash("abcdef")

    @pytest.mark.parametrize("geohash", [123, 12.5, None, b"qqggu"])
    def test_non_string_rejected(self, geohash):
        """Only str input is decoded."""
        with pytest.raises(InvalidGeohashError, match="must be a string"):
            decode_geohash(geohash)

    def test_empty_message(self):
        """The empty-string error says so."""
        with pytest.raises(InvalidGeohashError, match="0 characters"):
            decode_geohash("")

"""Pruebas de MeetingLocation y MeetingUrl."""

import pytest

from gestion_reuniones.domain.exceptions.meeting_error import MeetingError
from gestion_reuniones.domain.value_objects.meeting_location import MeetingLocation
from gestion_reuniones.domain.value_objects.meeting_url import MeetingUrl


# ── Dirección formateada ─────────────────────────────────────────────────────


def test_to_formatted_skips_missing_parts():
    assert MeetingLocation.to_formatted("US", None, "Austin", "Main St", "12", None) == "US, Austin, Main St 12"


def test_to_formatted_with_every_part():
    formatted = MeetingLocation.to_formatted("Rusia", "Moscú", "Moscú", "Tverskaya", "7", "15")
    assert formatted == "Rusia, Moscú, Moscú, Tverskaya 7, кв. 15"


@pytest.mark.parametrize("street, house, expected", [
    ("Main St", None, "US, Main St"),
    (None, "12", "US, 12"),
    ("   ", "  ", "US"),
])
def test_to_formatted_street_and_house_number(street, house, expected):
    assert MeetingLocation.to_formatted("US", None, None, street, house, None) == expected


def test_to_formatted_street_without_number_before_apartment():
    assert MeetingLocation.to_formatted("US", None, None, "Main St", None, "5") == "US, Main St, кв. 5"


def test_to_formatted_treats_whitespace_as_missing():
    assert MeetingLocation.to_formatted("US", "  ", "", None, None, " ") == "US"


def test_location_exposes_formatted_address():
    location = MeetingLocation.create("US", None, "Austin", "Main St", "12", None, 30.2672, -97.7431, "osm:123")
    assert location.formatted == "US, Austin, Main St 12"
    assert str(location) == "US, Austin, Main St 12"
    assert location.provider_id == "osm:123"


# ── Igualdad y orden ─────────────────────────────────────────────────────────


def test_locations_compare_structurally():
    a = MeetingLocation.create("US", None, "Austin", "Main St", "12", None, 30.0, -97.0)
    b = MeetingLocation.create("US", None, "Austin", "Main St", "12", None, 30.0, -97.0)
    moved = MeetingLocation.create("US", None, "Austin", "Main St", "12", None, 31.0, -97.0)

    assert a == b
    assert hash(a) == hash(b)
    assert a != moved


def test_locations_order_by_formatted_ignoring_case():
    lower = MeetingLocation(country="argentina", latitude=0, longitude=0)
    upper = MeetingLocation(country="Brasil", latitude=0, longitude=0)
    assert lower < upper
    assert sorted([upper, lower]) == [lower, upper]


# ── Validación ───────────────────────────────────────────────────────────────


@pytest.mark.parametrize("latitude, longitude", [(90.1, 0), (-91, 0), (0, 180.5), (0, -181)])
def test_location_rejects_out_of_range_coordinates(latitude, longitude):
    with pytest.raises(MeetingError):
        MeetingLocation(country="US", latitude=latitude, longitude=longitude)


def test_location_rejects_blank_country_and_non_numeric_coordinates():
    with pytest.raises(MeetingError, match="país"):
        MeetingLocation(country=" ", latitude=0, longitude=0)
    with pytest.raises(MeetingError, match="número"):
        MeetingLocation(country="US", latitude="40.1", longitude=0)


# ── URL ──────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("value", [
    "https://example.com",
    "http://meet.example.com/room/42?pwd=abc",
    "HTTPS://EXAMPLE.COM",
    "https://example.com/" + "a" * 5000,
])
def test_url_accepts_absolute_http_links(value):
    assert MeetingUrl.create(value).value == value


@pytest.mark.parametrize("value", [
    "not a url",
    "ftp://example.com",
    "example.com",
    "/relative/path",
    "http://",
    "mailto:someone@example.com",
    "https://exa mple.com",
    "http://:80",
    "https://example.com:abc/",
    "https://user@:443/room",
])
def test_url_rejects_non_http_or_relative(value):
    with pytest.raises(MeetingError, match="HTTP/HTTPS"):
        MeetingUrl.create(value)


@pytest.mark.parametrize("value", [None, "", "   "])
def test_url_rejects_blank(value):
    with pytest.raises(MeetingError, match="vacía"):
        MeetingUrl(value)


def test_urls_compare_by_value():
    assert MeetingUrl("https://a.example.com") == MeetingUrl("https://a.example.com")
    assert MeetingUrl("https://a.example.com") < MeetingUrl("https://b.example.com")

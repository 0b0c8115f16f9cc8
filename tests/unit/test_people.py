from __future__ import annotations

from flickr_api_client.people.models import User
from tests.shared.payloads import make_fail, make_ok, make_person
from tests.shared.transport import Response, SyncSequencedClient, build_client


def test_get_info_maps_user():
    transport = SyncSequencedClient([Response(200, make_person("12037949754@N01", count=42))])
    client = build_client(transport)

    user = client.people.get_info("12037949754@N01").unwrap()

    assert user == User(
        nsid="12037949754@N01",
        username="bees",
        realname="Cal Henderson",
        location="Bedford, UK",
        photos_url="http://www.flickr.com/photos/bees/",
        profile_url="http://www.flickr.com/people/bees/",
        photo_count=42,
        first_date="1071510391",
        first_date_taken="1900-09-02 09:11:24",
    )
    assert dict(transport.calls[0])["user_id"] == "12037949754@N01"


def test_find_by_email_resolves_then_loads_profile():
    transport = SyncSequencedClient(
        [
            Response(200, make_ok('<user id="1@N01" nsid="1@N01"><username>bees</username></user>')),
            Response(200, make_person("1@N01")),
        ]
    )
    client = build_client(transport)

    result = client.people.find_by_email("bees@example.com")

    assert result.unwrap().nsid == "1@N01"
    first, second = (dict(call) for call in transport.calls)
    assert first["method"] == "flickr.people.findByEmail"
    assert first["find_email"] == "bees@example.com"
    assert second["method"] == "flickr.people.getInfo"
    assert second["user_id"] == "1@N01"


def test_find_by_username_resolves_then_loads_profile():
    transport = SyncSequencedClient(
        [
            Response(200, make_ok('<user id="2@N01" nsid="2@N01"><username>cal</username></user>')),
            Response(200, make_person("2@N01", username="cal")),
        ]
    )
    client = build_client(transport)

    assert client.people.find_by_username("cal").unwrap().username == "cal"
    assert dict(transport.calls[0])["username"] == "cal"


def test_find_by_url_uses_id_attribute():
    transport = SyncSequencedClient(
        [
            Response(200, make_ok('<user id="3@N01"><username>x</username></user>')),
            Response(200, make_person("3@N01")),
        ]
    )
    client = build_client(transport)

    result = client.people.find_by_url("http://www.flickr.com/photos/x/123/")

    assert result.unwrap().nsid == "3@N01"
    assert dict(transport.calls[0])["method"] == "flickr.urls.lookupUser"


def test_failed_lookup_skips_profile_request():
    transport = SyncSequencedClient([Response(200, make_fail(1, "User not found"))])
    client = build_client(transport)

    result = client.people.find_by_username("nobody")

    assert result.ok is False
    assert result.error is not None
    assert result.error.operation == "find_user_by_username"
    assert len(transport.calls) == 1
    assert client.last_error == result.error


def test_person_without_nsid_is_a_protocol_failure():
    transport = SyncSequencedClient([Response(200, make_ok("<person><username>x</username></person>"))])
    client = build_client(transport)

    result = client.people.get_info("x")

    assert result.ok is False
    assert result.error is not None
    assert result.error.code is None

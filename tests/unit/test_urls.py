from __future__ import annotations

from flickr_api_client.photos.urls import build_photo_urls


def _urls():
    return build_photo_urls(
        "123",
        farm=1,
        server=2,
        secret="abc",
        original_secret="xyz",
        original_format="png",
    )


def test_build_photo_urls_for_every_size():
    urls = _urls()
    assert urls.small_square == "http://farm1.static.flickr.com/2/123_abc_s.jpg"
    assert urls.thumbnail == "http://farm1.static.flickr.com/2/123_abc_t.jpg"
    assert urls.small == "http://farm1.static.flickr.com/2/123_abc_m.jpg"
    assert urls.medium == "http://farm1.static.flickr.com/2/123_abc.jpg"
    assert urls.large == "http://farm1.static.flickr.com/2/123_abc_b.jpg"
    assert urls.original == "http://farm1.static.flickr.com/2/123_xyz_o.png"


def test_build_photo_urls_is_pure():
    assert _urls() == _urls()


def test_original_url_needs_original_secret_and_format():
    urls = build_photo_urls("123", farm=1, server=2, secret="abc", original_secret="xyz")
    assert urls.original is None
    assert urls.medium == "http://farm1.static.flickr.com/2/123_abc.jpg"

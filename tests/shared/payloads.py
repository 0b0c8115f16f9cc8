from __future__ import annotations

from collections.abc import Sequence
from xml.sax.saxutils import quoteattr


def _attrs(values: dict[str, object]) -> str:
    return "".join(f" {name}={quoteattr(str(value))}" for name, value in values.items())


def make_ok(inner: str = "", **attrs: object) -> str:
    return f'<?xml version="1.0" encoding="utf-8" ?>\n<rsp stat="ok"{_attrs(attrs)}>{inner}</rsp>'


def make_fail(code: int, message: str) -> str:
    return (
        '<?xml version="1.0" encoding="utf-8" ?>\n'
        f'<rsp stat="fail"><err code="{code}" msg={quoteattr(message)} /></rsp>'
    )


def make_photo(
    photo_id: str,
    *,
    secret: str = "abc",
    server: str = "2",
    farm: str = "1",
    title: str | None = None,
    **extras: object,
) -> str:
    attrs: dict[str, object] = {
        "id": photo_id,
        "owner": "12037949754@N01",
        "secret": secret,
        "server": server,
        "farm": farm,
        "title": title if title is not None else f"photo {photo_id}",
        "ispublic": 1,
        "isfriend": 0,
        "isfamily": 0,
    }
    attrs.update(extras)
    return f"<photo{_attrs(attrs)} />"


def make_photo_page(
    photo_ids: Sequence[str],
    *,
    page: int = 1,
    pages: int = 1,
    per_page: int = 100,
    total: int | None = None,
) -> str:
    photos = "".join(make_photo(photo_id) for photo_id in photo_ids)
    counters = _attrs(
        {
            "page": page,
            "pages": pages,
            "perpage": per_page,
            "total": total if total is not None else len(photo_ids),
        }
    )
    return make_ok(f"<photos{counters}>{photos}</photos>")


def make_person(nsid: str, *, username: str = "bees", count: int = 42) -> str:
    return make_ok(
        f'<person id="{nsid}" nsid="{nsid}" ispro="0">'
        f"<username>{username}</username>"
        "<realname>Cal Henderson</realname>"
        "<location>Bedford, UK</location>"
        f"<photosurl>http://www.flickr.com/photos/{username}/</photosurl>"
        f"<profileurl>http://www.flickr.com/people/{username}/</profileurl>"
        "<photos><firstdate>1071510391</firstdate>"
        "<firstdatetaken>1900-09-02 09:11:24</firstdatetaken>"
        f"<count>{count}</count></photos>"
        "</person>"
    )


def make_auth(token: str, *, perms: str = "read", nsid: str = "51035555243@N01") -> str:
    return make_ok(
        f"<auth><token>{token}</token><perms>{perms}</perms>"
        f'<user nsid="{nsid}" username="Bees" fullname="Cal H" /></auth>'
    )

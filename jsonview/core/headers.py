import hashlib
from datetime import datetime
from email.utils import format_datetime, parsedate_to_datetime

from jsonview.core.helpers.utils import as_utc
from jsonview.core.serializer import Serializer


def etag(serializer: Serializer) -> str | None:
    key = serializer.cache_key()
    if key is None:
        return None
    digest = hashlib.sha1(key.encode("utf-8")).hexdigest()
    return f'W/"{digest}"'


def http_date(stamp: datetime) -> str:
    return format_datetime(as_utc(stamp), usegmt=True)


def response_headers(serializer: Serializer, body: str) -> dict[str, str]:
    """
    Compute the HTTP headers describing a rendered body.

    Content-Type and Content-Length are always present. Last-Modified and
    ETag only appear when the serializer reports last_modified() or
    cache_key() respectively.
    """
    headers = {
        "Content-Type": f"{serializer.mime_type()}; charset=utf-8",
        "Content-Length": str(len(body.encode("utf-8"))),
    }

    stamp = serializer.last_modified()
    if stamp is not None:
        headers["Last-Modified"] = http_date(stamp)

    tag = etag(serializer)
    if tag is not None:
        headers["ETag"] = tag

    return headers


def is_fresh(
    serializer: Serializer,
    if_none_match: str | None = None,
    if_modified_since: str | None = None
) -> bool:
    """
    Tell whether a client's cached copy is still valid.

    If-None-Match wins over If-Modified-Since when both are sent, the same
    way HTTP caches evaluate them.
    """
    if if_none_match is not None:
        tag = etag(serializer)
        if tag is None:
            return False
        if if_none_match.strip() == "*":
            return True
        candidates = {candidate.strip() for candidate in if_none_match.split(",")}
        # Weak comparison: W/"x" matches "x".
        return _strip_weak(tag) in {_strip_weak(c) for c in candidates}

    if if_modified_since is not None:
        stamp = serializer.last_modified()
        if stamp is None:
            return False
        try:
            since = parsedate_to_datetime(if_modified_since)
        except (TypeError, ValueError):
            return False
        return as_utc(stamp).replace(microsecond=0) <= as_utc(since)

    return False


def _strip_weak(tag: str) -> str:
    return tag[2:] if tag.startswith("W/") else tag

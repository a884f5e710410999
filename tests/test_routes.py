"""
Tests for the shared dispatch core used by both servers.
"""
import json
from datetime import datetime, timedelta, timezone

import pytest

from static_router.core import ROUTES, build_api_data, dispatch, iso_timestamp, match_route
from static_router.core.pages import ABOUT_PAGE, HOME_PAGE, NOT_FOUND_PAGE


def fixed_clock(moment):
    return lambda: moment


class TestMatchRoute:
    def test_route_order(self):
        assert [route.path for route in ROUTES] == ["/", "/about", "/api/data"]

    @pytest.mark.parametrize("url", ["/", "/about", "/api/data"])
    def test_exact_match(self, url):
        assert match_route(url).path == url

    @pytest.mark.parametrize("url", ["", "/?x=1", "/ABOUT", "/about/", "//", "/api", "/api/data/", "about"])
    def test_no_match(self, url):
        assert match_route(url) is None


class TestDispatch:
    def test_home(self):
        reply = dispatch("/")
        assert (reply.status, reply.content_type) == (200, "text/html")
        assert reply.body == HOME_PAGE

    def test_about(self):
        reply = dispatch("/about")
        assert (reply.status, reply.content_type) == (200, "text/html")
        assert reply.body == ABOUT_PAGE

    def test_api_data(self):
        moment = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
        reply = dispatch("/api/data", fixed_clock(moment))
        assert (reply.status, reply.content_type) == (200, "application/json")
        assert json.loads(reply.body) == {
            "message": "This is JSON data",
            "timestamp": "2024-01-02T03:04:05.678Z",
            "endpoints": ["/about", "/", "/api/data"],
        }

    def test_fallback(self):
        reply = dispatch("/nonexistent")
        assert (reply.status, reply.content_type) == (404, "text/html")
        assert reply.body == NOT_FOUND_PAGE

    def test_encoded_body(self):
        assert dispatch("/about").encoded() == ABOUT_PAGE.encode("utf-8")


class TestApiData:
    def test_fresh_per_call(self):
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        moments = iter([start, start + timedelta(milliseconds=5)])
        clock = lambda: next(moments)
        first = build_api_data(clock)
        second = build_api_data(clock)
        assert first["timestamp"] == "2024-01-01T00:00:00.000Z"
        assert second["timestamp"] == "2024-01-01T00:00:00.005Z"

    def test_endpoints_not_shared(self):
        """Mutating one payload never leaks into the next"""
        first = build_api_data()
        first["endpoints"].append("/extra")
        assert build_api_data()["endpoints"] == ["/about", "/", "/api/data"]

    def test_default_clock_is_utc_now(self):
        before = datetime.now(timezone.utc).replace(microsecond=0)
        stamp = build_api_data()["timestamp"]
        parsed = datetime.strptime(stamp, "%Y-%m-%dT%H:%M:%S.%fZ").replace(tzinfo=timezone.utc)
        assert parsed >= before
        assert stamp.endswith("Z")


class TestIsoTimestamp:
    def test_converts_to_utc(self):
        offset = timezone(timedelta(hours=2))
        moment = datetime(2024, 6, 1, 14, 30, 0, tzinfo=offset)
        assert iso_timestamp(moment) == "2024-06-01T12:30:00.000Z"

    def test_truncates_to_milliseconds(self):
        moment = datetime(2024, 6, 1, 0, 0, 0, 999999, tzinfo=timezone.utc)
        assert iso_timestamp(moment) == "2024-06-01T00:00:00.999Z"

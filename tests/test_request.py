"""Tests for the request builder."""
import datetime
from urllib.parse import urlsplit

import pytest

from pxvapi import endpoints
from pxvapi.enums import (
    Duration, HTTPMethod, Publicity, RankingMode, SearchMode, SearchOrder,
    SearchPeriod, SearchSort, SearchTarget
)
from pxvapi.errors import BuilderConsumedError, RequestBuildError
from pxvapi.request import (
    PixivRequestBuilder, comma_delimited, merge_query, unsigned
)

BASE = "https://public-api.secure.pixiv.net/v1/works.json"


def make_builder(params=None):
    return PixivRequestBuilder(HTTPMethod.GET, BASE, params)


class TestHelpers:

    def test_comma_delimited_keeps_order(self):
        assert comma_delimited(["c", "a", "b"]) == "c,a,b"

    def test_comma_delimited_empty(self):
        assert comma_delimited([]) == ""

    def test_comma_delimited_generator_and_ints(self):
        assert comma_delimited(i for i in (1, 2, 3)) == "1,2,3"

    def test_comma_delimited_bare_string(self):
        assert comma_delimited("large") == "large"

    def test_unsigned(self):
        assert unsigned("page", 0) == "0"
        assert unsigned("page", 12) == "12"

    @pytest.mark.parametrize("value", [True, 1.0, "1", None])
    def test_unsigned_rejects_non_int(self, value):
        with pytest.raises(TypeError):
            unsigned("page", value)

    def test_unsigned_rejects_negative(self):
        with pytest.raises(ValueError):
            unsigned("page", -1)

    def test_merge_query_without_params(self):
        assert merge_query(BASE, {}) == BASE

    def test_merge_query_keeps_existing(self, decode_query):
        url = merge_query(BASE + "?a=1&page=9", {"page": "2"})
        assert urlsplit(url).path == "/v1/works.json"
        assert decode_query(url) == {"a": "1", "page": "2"}

    def test_merge_query_sorted(self):
        url = merge_query(BASE, {"b": "2", "a": "1"})
        assert url == BASE + "?a=1&b=2"

    def test_merge_query_encodes(self, decode_query):
        url = merge_query(BASE, {"q": "初音ミク & co", "ids": "1,2"})
        assert " " not in url
        assert "&co" not in url
        assert decode_query(url) == {"q": "初音ミク & co", "ids": "1,2"}

    @pytest.mark.parametrize("url", ["/v1/works.json", "works.json", ""])
    def test_merge_query_rejects_relative(self, url):
        with pytest.raises(RequestBuildError):
            merge_query(url, {"page": "1"})


class TestBuilder:

    def test_descriptor(self):
        request = make_builder().build()
        assert request.method is HTTPMethod.GET
        assert request.url == BASE
        assert dict(request.headers) == {"Referer": "http://spapi.pixiv.net/"}

    def test_headers_read_only(self):
        request = make_builder().build()
        with pytest.raises(TypeError):
            request.headers["Authorization"] = "Bearer x"

    def test_last_write_wins(self, decode_query):
        request = make_builder().page(1).page(2).build()
        assert decode_query(request.url) == {"page": "2"}
        assert request.url.count("page=") == 1

    def test_numbers(self, decode_query):
        request = make_builder().per_page(50).max_id(7).offset(30).build()
        assert decode_query(request.url) == {
            "per_page": "50", "max_id": "7", "offset": "30"
        }

    def test_numbers_reject_negative(self):
        with pytest.raises(ValueError):
            make_builder().page(-1)

    def test_image_sizes(self, decode_query):
        request = make_builder().image_sizes(["a", "b", "c"]).build()
        assert decode_query(request.url) == {"image_sizes": "a,b,c"}

    def test_image_sizes_empty_is_kept(self, decode_query):
        request = make_builder().image_sizes([]).build()
        assert decode_query(request.url) == {"image_sizes": ""}

    def test_profile_image_sizes_and_types(self, decode_query):
        request = (
            make_builder()
            .profile_image_sizes(("px_50x50",))
            .search_types(["manga", "ugoira"])
            .build()
        )
        assert decode_query(request.url) == {
            "profile_image_sizes": "px_50x50", "types": "manga,ugoira"
        }

    def test_flag_tokens(self, decode_query):
        on = make_builder().show_r18(True).include_stats(True) \
            .include_sanity_level(True).build()
        off = make_builder().show_r18(False).include_stats(False) \
            .include_sanity_level(False).build()
        assert decode_query(on.url) == {
            "show_r18": "1",
            "include_stats": "true",
            "include_sanity_level": "true",
        }
        assert decode_query(off.url) == {
            "show_r18": "0",
            "include_stats": "false",
            "include_sanity_level": "false",
        }

    def test_enum_setters(self, decode_query):
        request = (
            make_builder()
            .publicity(Publicity.PRIVATE)
            .search_period(SearchPeriod.WEEK)
            .search_order(SearchOrder.ASCENDING)
            .search_target(SearchTarget.TITLE_AND_CAPTION)
            .duration(Duration.LAST_MONTH)
            .build()
        )
        assert decode_query(request.url) == {
            "publicity": "private",
            "period": "week",
            "order": "asc",
            "search_target": "title_and_caption",
            "duration": "within_last_month",
        }

    def test_ranking_and_search_mode_share_key(self, decode_query):
        request = make_builder().ranking_mode(RankingMode.WEEKLY) \
            .search_mode(SearchMode.TAG).build()
        assert decode_query(request.url) == {"mode": "tag"}

    def test_enum_setter_accepts_token(self, decode_query):
        request = make_builder().publicity("public").build()
        assert decode_query(request.url) == {"publicity": "public"}

    def test_enum_setter_rejects_unknown(self):
        with pytest.raises(ValueError):
            make_builder().publicity("friends")

    def test_search_sort(self, decode_query):
        assert decode_query(make_builder().search_sort("popular").build().url) \
            == {"sort": "popular"}
        request = make_builder().search_sort(SearchSort.DATE_ASCENDING).build()
        assert decode_query(request.url) == {"sort": "date_asc"}

    def test_search_filter(self, decode_query):
        request = make_builder().search_filter("for_ios").build()
        assert decode_query(request.url) == {"filter": "for_ios"}

    def test_date(self, decode_query):
        request = make_builder().date("2018-2-22").build()
        assert decode_query(request.url) == {"date": "2018-2-22"}

    def test_date_from_date_object(self, decode_query):
        request = make_builder().date(datetime.date(2018, 2, 2)).build()
        assert decode_query(request.url) == {"date": "2018-2-2"}

    def test_invalid_date_fails_before_build(self):
        builder = make_builder({"page": "1"})
        with pytest.raises(ValueError):
            builder.date("not-a-date")
        assert builder.params == {"page": "1"}

    def test_raw_param(self, decode_query):
        request = make_builder().raw_param("include_profile", "1").build()
        assert decode_query(request.url) == {"include_profile": "1"}

    @pytest.mark.parametrize("key,value", [("page", 1), ("", "1"), (None, "1")])
    def test_raw_param_requires_strings(self, key, value):
        with pytest.raises(TypeError):
            make_builder().raw_param(key, value)

    def test_params_is_a_copy(self):
        builder = make_builder({"page": "1"})
        builder.params["page"] = "5"
        assert builder.params == {"page": "1"}

    def test_build_consumes(self):
        builder = make_builder()
        builder.build()
        assert builder.built
        with pytest.raises(BuilderConsumedError):
            builder.build()
        with pytest.raises(BuilderConsumedError):
            builder.page(2)

    def test_copy_is_independent(self, decode_query):
        builder = make_builder({"page": "1"})
        other = builder.copy().page(3)
        assert decode_query(builder.build().url) == {"page": "1"}
        assert decode_query(other.build().url) == {"page": "3"}

    def test_malformed_base_is_build_error(self):
        builder = PixivRequestBuilder("GET", "not a url", {"page": "1"})
        with pytest.raises(RequestBuildError):
            builder.build()
        assert not builder.built

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            PixivRequestBuilder("PATCH", BASE)

    def test_build_does_not_touch_catalog(self, decode_query):
        endpoints.work(1).image_sizes(["large"]).build()
        assert decode_query(endpoints.work(1).build().url)["image_sizes"] \
            == "px_128x128,small,medium,large,px_480mw"

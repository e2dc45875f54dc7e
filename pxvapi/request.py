import datetime
import types

from collections import namedtuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .constants import DEFAULT_HEADERS
from .dates import format_date, parse_date
from .enums import (
    Duration, HTTPMethod, Publicity, RankingMode, SearchMode, SearchOrder,
    SearchPeriod, SearchSort, SearchTarget, to_token
)
from .errors import BuilderConsumedError, RequestBuildError
from .log import pxlog


#---------------------------------------------------------------------------#
#   Request descriptor                                                      #
#---------------------------------------------------------------------------#

_request_fields = [
    "method",       #   HTTPMethod
    "url",          #   str *absolute, query included.
    "headers"       #   read-only mapping
]
PixivRequest = namedtuple(
    "PixivRequest", _request_fields
)

#   On/off tokens per flag, the service does not use one boolean encoding.
_FLAG_TOKENS = {
    "show_r18": ("1", "0"),
    "include_stats": ("true", "false"),
    "include_sanity_level": ("true", "false"),
}


#---------------------------------------------------------------------------#
#   Value encoding helpers                                                  #
#---------------------------------------------------------------------------#


def comma_delimited(values):
    """
    Join values with ",", keeping the given order.

    A bare string counts as one value; an empty iterable gives "".
    """
    if isinstance(values, str):
        return values
    return ",".join(str(v) for v in values)

def unsigned(name, value):
    """Check `value` is a non-negative int and render it as decimal."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{name} must be an unsigned integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValueError(f"{name} must be an unsigned integer, got {value}")
    return str(value)

def merge_query(url, params):
    """
    Merge `params` onto the query of `url`.

    Existing query pairs are kept unless `params` sets the same key. Keys are
    emitted sorted, each once.

    Raises:
        RequestBuildError
            `url` is not an absolute URL.
    """
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise RequestBuildError(f"Unable to parse URL {url!r}") from exc
    if not (parts.scheme and parts.netloc):
        raise RequestBuildError(f"Not an absolute URL: {url!r}")
    merged = dict(parse_qsl(parts.query, keep_blank_values=True))
    merged.update(params)
    query = urlencode(sorted(merged.items()))
    return urlunsplit(
        (parts.scheme, parts.netloc, parts.path, query, parts.fragment)
    )


#---------------------------------------------------------------------------#
#   Builder                                                                 #
#---------------------------------------------------------------------------#


class PixivRequestBuilder:
    """
    Accumulates query parameters of one request.

    Usually obtained from a constructor in `pxvapi.endpoints`, which seeds the
    endpoint defaults. Every setter returns the builder itself for chaining,
    setting a key again replaces the previous value. `build` consumes the
    builder; any later call raises `BuilderConsumedError`.
    """

    def __init__(self, method, url, params=None):
        self._method = HTTPMethod(method)
        self._url = url
        self._headers = dict(DEFAULT_HEADERS)
        self._params = dict()
        self._built = False
        for k, v in (params or {}).items():
            self.raw_param(k, v)

    def __repr__(self):
        return "<{} {} {} params={}>".format(
            type(self).__name__, self._method.value, self._url, self._params
        )

    @property
    def method(self):
        return self._method

    @property
    def url(self):
        return self._url

    @property
    def params(self):
        return dict(self._params)

    @property
    def headers(self):
        return dict(self._headers)

    @property
    def built(self):
        return self._built

    def copy(self):
        """Independent builder with the same state."""
        self._check_open()
        return type(self)(self._method, self._url, self._params)

    def raw_param(self, key, value):
        """Set any parameter. Both `key` and `value` must be strings."""
        self._check_open()
        if not isinstance(key, str) or not key:
            raise TypeError(f"Parameter key must be a non-empty str: {key!r}")
        if not isinstance(value, str):
            raise TypeError(
                f"Value of {key!r} must be a str, got {type(value).__name__}"
            )
        self._params[key] = value
        return self

    #   Numbers.

    def page(self, value):
        return self.raw_param("page", unsigned("page", value))

    def per_page(self, value):
        return self.raw_param("per_page", unsigned("per_page", value))

    def max_id(self, value):
        return self.raw_param("max_id", unsigned("max_id", value))

    def offset(self, value):
        return self.raw_param("offset", unsigned("offset", value))

    #   Lists.

    def image_sizes(self, values):
        """
        Available sizes: px_128x128, small, medium, large, px_480mw.
        """
        return self.raw_param("image_sizes", comma_delimited(values))

    def profile_image_sizes(self, values):
        """Available sizes: px_170x170, px_50x50."""
        return self.raw_param("profile_image_sizes", comma_delimited(values))

    def search_types(self, values):
        """Available types: illustration, manga, ugoira."""
        return self.raw_param("types", comma_delimited(values))

    #   Flags.

    def _flag(self, key, value):
        on, off = _FLAG_TOKENS[key]
        return self.raw_param(key, on if value else off)

    def show_r18(self, value):
        return self._flag("show_r18", value)

    def include_stats(self, value):
        return self._flag("include_stats", value)

    def include_sanity_level(self, value):
        return self._flag("include_sanity_level", value)

    #   Enums.

    def publicity(self, value):
        return self.raw_param("publicity", to_token(Publicity, value))

    def ranking_mode(self, value):
        return self.raw_param("mode", to_token(RankingMode, value))

    def search_period(self, value):
        return self.raw_param("period", to_token(SearchPeriod, value))

    def search_mode(self, value):
        return self.raw_param("mode", to_token(SearchMode, value))

    def search_order(self, value):
        return self.raw_param("order", to_token(SearchOrder, value))

    def search_target(self, value):
        return self.raw_param("search_target", to_token(SearchTarget, value))

    def duration(self, value):
        return self.raw_param("duration", to_token(Duration, value))

    #   Free-form.

    def search_sort(self, value):
        """`sort` takes any string, `SearchSort` lists the known ones."""
        if isinstance(value, SearchSort):
            value = value.value
        return self.raw_param("sort", value)

    def search_filter(self, value):
        return self.raw_param("filter", value)

    def date(self, value):
        """
        Set the `date` param.

        Args:
            value       string or datetime.date
                String in form of YYYY-M-D, e.g. "2018-2-22".

        Raises:
            ValueError
                Invalid date or format given.
        """
        self._check_open()
        if isinstance(value, datetime.date):
            value = format_date(value)
        else:
            parse_date(value)
        return self.raw_param("date", value)

    #   Terminal.

    def build(self):
        """
        Finish the request.

        Returns:
            `PixivRequest` carrying exactly the accumulated parameters.

        Raises:
            BuilderConsumedError
                The builder was already built.
            RequestBuildError
                The base URL is malformed.
        """
        self._check_open()
        url = merge_query(self._url, self._params)
        self._built = True
        request = PixivRequest(
            self._method, url, types.MappingProxyType(dict(self._headers))
        )
        pxlog.debug(f"Built {request.method.value} {request.url}")
        return request

    def _check_open(self):
        if self._built:
            raise BuilderConsumedError(
                "Builder already built, construct a new one per request."
            )

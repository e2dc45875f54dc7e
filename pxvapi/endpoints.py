import string
import types

from collections import namedtuple

from .constants import APP_API_URL, PUBLIC_API_URL
from .enums import HTTPMethod, RankingType, to_token
from .request import PixivRequestBuilder, comma_delimited, unsigned


#---------------------------------------------------------------------------#
#   Endpoint catalog                                                        #
#       identifier -> (url template, method, default params)                #
#       Default token spellings differ between endpoints ("1", "true",      #
#       "True", "px480mw"), each is kept as the endpoint expects it.        #
#---------------------------------------------------------------------------#

_formatter = string.Formatter()

Endpoint = namedtuple("Endpoint", ["template", "method", "defaults"])

_IMAGE_SIZES_FULL = "px_128x128,small,medium,large,px_480mw"
_IMAGE_SIZES_SHORT = "px_128x128,px480mw,large"
_PROFILE_IMAGE_SIZES = "px_170x170,px_50x50"

_FEED_DEFAULTS = {
    "relation": "all",
    "type": "touch_nottext",
    "show_r18": "1",
}
_LISTING_DEFAULTS = {
    "page": "1",
    "per_page": "30",
    "image_sizes": _IMAGE_SIZES_SHORT,
    "include_stats": "true",
    "include_sanity_level": "true",
}


def _endpoint(template, method=HTTPMethod.GET, **defaults):
    return Endpoint(template, method, types.MappingProxyType(defaults))


ENDPOINTS = types.MappingProxyType({
    "bad_words": _endpoint(
        PUBLIC_API_URL + "/v1.1/bad_words.json"
    ),
    "work": _endpoint(
        PUBLIC_API_URL + "/v1/works/{illust_id}.json",
        image_sizes=_IMAGE_SIZES_FULL,
        include_stats="true",
    ),
    "user": _endpoint(
        PUBLIC_API_URL + "/v1/users/{user_id}.json",
        profile_image_sizes=_PROFILE_IMAGE_SIZES,
        image_sizes=_IMAGE_SIZES_FULL,
        include_stats="1",
        include_profile="1",
        include_workspace="1",
        include_contacts="1",
    ),
    "feed": _endpoint(
        PUBLIC_API_URL + "/v1/me/feeds.json",
        **_FEED_DEFAULTS
    ),
    "favorite_works": _endpoint(
        PUBLIC_API_URL + "/v1/me/favorite_works.json",
        page="1",
        per_page="50",
        publicity="public",
        image_sizes="px_128x128,px_480mw,large",
    ),
    "favorite_work_add": _endpoint(
        PUBLIC_API_URL + "/v1/me/favorite_works.json",
        HTTPMethod.POST,
        publicity="public",
    ),
    "favorite_works_remove": _endpoint(
        PUBLIC_API_URL + "/v1/me/favorite_works.json",
        HTTPMethod.DELETE,
        publicity="public",
    ),
    "following_works": _endpoint(
        PUBLIC_API_URL + "/v1/me/following/works.json",
        **_LISTING_DEFAULTS
    ),
    "following": _endpoint(
        PUBLIC_API_URL + "/v1/me/following.json",
        page="1",
        per_page="30",
        publicity="public",
    ),
    "following_add": _endpoint(
        PUBLIC_API_URL + "/v1/me/favorite-users.json",
        HTTPMethod.POST,
        publicity="public",
    ),
    "following_remove": _endpoint(
        PUBLIC_API_URL + "/v1/me/favorite-users.json",
        HTTPMethod.DELETE,
        publicity="public",
    ),
    "user_works": _endpoint(
        PUBLIC_API_URL + "/v1/users/{user_id}/works.json",
        **_LISTING_DEFAULTS
    ),
    "user_favorite_works": _endpoint(
        PUBLIC_API_URL + "/v1/users/{user_id}/favorite_works.json",
        page="1",
        per_page="30",
        image_sizes=_IMAGE_SIZES_SHORT,
        include_sanity_level="true",
    ),
    "user_feed": _endpoint(
        PUBLIC_API_URL + "/v1/users/{user_id}/feeds.json",
        **_FEED_DEFAULTS
    ),
    "user_following": _endpoint(
        PUBLIC_API_URL + "/v1/users/{user_id}/following.json",
        page="1",
        per_page="30",
    ),
    "ranking": _endpoint(
        PUBLIC_API_URL + "/v1/ranking/{ranking_type}.json",
        mode="daily",
        page="1",
        per_page="50",
        include_stats="True",
        include_sanity_level="True",
        image_sizes=_IMAGE_SIZES_FULL,
        profile_image_sizes=_PROFILE_IMAGE_SIZES,
    ),
    "search_works": _endpoint(
        PUBLIC_API_URL + "/v1/search/works.json",
        page="1",
        per_page="30",
        mode="text",
        period="all",
        order="desc",
        sort="date",
        types="illustration,manga,ugoira",
        include_stats="true",
        include_sanity_level="true",
        image_sizes=_IMAGE_SIZES_SHORT,
    ),
    "latest_works": _endpoint(
        PUBLIC_API_URL + "/v1/works.json",
        page="1",
        per_page="30",
        include_stats="true",
        include_sanity_level="true",
        image_sizes=_IMAGE_SIZES_SHORT,
        profile_image_sizes=_PROFILE_IMAGE_SIZES,
    ),
    "illustration": _endpoint(
        APP_API_URL + "/v1/illust/detail"
    ),
    "search_illustration": _endpoint(
        APP_API_URL + "/v1/search/illust",
        search_target="partial_match_for_tags",
        sort="date_desc",
    ),
})


def from_catalog(name, **path_params):
    """
    Builder for a catalog entry, seeded with its defaults.

    Args:
        name            string
            Key of `ENDPOINTS`.
        path_params     int
            Values interpolated into the url template, e.g. `user_id=42`.
            Unsigned integers, except `ranking_type` which takes a
            `RankingType` or its token.

    Returns:
        `PixivRequestBuilder`

    Raises:
        KeyError
            Unknown endpoint or missing path parameter.
        TypeError
            Unexpected path parameter, or an id that is not an int.
        ValueError
            Negative id or unknown ranking type.
    """
    endpoint = ENDPOINTS[name]
    fields = {
        field for _, field, _, _ in _formatter.parse(endpoint.template)
        if field
    }
    unexpected = set(path_params) - fields
    if unexpected:
        raise TypeError(
            f"Unexpected path parameters for {name!r}: {sorted(unexpected)}"
        )
    missing = fields - set(path_params)
    if missing:
        raise KeyError(
            f"Missing path parameters for {name!r}: {sorted(missing)}"
        )
    converted = {
        k: _convert_path_param(k, v) for k, v in path_params.items()
    }
    url = endpoint.template.format(**converted)
    return PixivRequestBuilder(endpoint.method, url, endpoint.defaults)

def _convert_path_param(key, value):
    if key == "ranking_type":
        return to_token(RankingType, value)
    return unsigned(key, value)


#---------------------------------------------------------------------------#
#   Constructors                                                            #
#---------------------------------------------------------------------------#


def bad_words():
    """Retrieve `bad_words.json`. No transforms."""
    return from_catalog("bad_words")

def work(illust_id):
    """
    Retrieve information of a work.

    Transforms: image_sizes, include_stats.
    """
    return from_catalog("work", illust_id=illust_id)

def user(user_id):
    """
    Retrieve information of a user.

    Transforms: profile_image_sizes, image_sizes, include_stats.
    """
    return from_catalog("user", user_id=user_id)

def feed():
    """
    Retrieve your account's feed.

    Transforms: show_r18, max_id.
    """
    return from_catalog("feed")

def favorite_works():
    """
    Retrieve works favorited on your account.

    Transforms: page, per_page, publicity, image_sizes.
    """
    return from_catalog("favorite_works")

def favorite_work_add(work_id):
    """Favorite a work on your account. Transforms: publicity."""
    return from_catalog("favorite_work_add").raw_param(
        "work_id", unsigned("work_id", work_id)
    )

def favorite_works_remove(work_ids):
    """
    Remove favorited works from your account.

    Args:
        work_ids    iterable of int
            May be empty, rendered comma-delimited as `ids`.

    Transforms: publicity.
    """
    return from_catalog("favorite_works_remove").raw_param(
        "ids", _id_list("work_ids", work_ids)
    )

def following_works():
    """
    Retrieve newest works from whoever you follow.

    Transforms: page, per_page, image_sizes, include_stats,
    include_sanity_level.
    """
    return from_catalog("following_works")

def following():
    """Retrieve users you follow. Transforms: page, per_page, publicity."""
    return from_catalog("following")

def following_add(user_id):
    """Follow a user. Transforms: publicity."""
    return from_catalog("following_add").raw_param(
        "target_user_id", unsigned("user_id", user_id)
    )

def following_remove(user_ids):
    """Unfollow users, rendered comma-delimited as `delete_ids`."""
    return from_catalog("following_remove").raw_param(
        "delete_ids", _id_list("user_ids", user_ids)
    )

def user_works(user_id):
    """
    Retrieve works submitted by a user.

    Transforms: page, per_page, image_sizes, include_stats,
    include_sanity_level.
    """
    return from_catalog("user_works", user_id=user_id)

def user_favorite_works(user_id):
    """
    Retrieve works favorited by a user.

    Transforms: page, per_page, image_sizes, include_sanity_level.
    """
    return from_catalog(
        "user_favorite_works", user_id=user_id
    )

def user_feed(user_id):
    """Retrieve a user's feed. Transforms: show_r18."""
    return from_catalog("user_feed", user_id=user_id)

def user_following(user_id):
    """Retrieve users a user follows. Transforms: page, per_page, max_id."""
    return from_catalog(
        "user_following", user_id=user_id
    )

def ranking(ranking_type=RankingType.ALL):
    """
    Retrieve a ranking list.

    Args:
        ranking_type    `RankingType` or its token
            Path component of the url.

    Transforms: ranking_mode (default daily), date, page, per_page,
    include_stats, include_sanity_level, image_sizes, profile_image_sizes.
    """
    return from_catalog(
        "ranking", ranking_type=ranking_type
    )

def search_works(query):
    """
    Search works on a query.

    Transforms: page, per_page, date, search_mode, search_period,
    search_order, search_sort, search_types, include_stats,
    include_sanity_level, image_sizes.
    """
    return from_catalog("search_works").raw_param("q", query)

def latest_works():
    """
    Retrieve latest submitted works by everyone.

    Transforms: page, per_page, date, include_stats, include_sanity_level,
    image_sizes, profile_image_sizes.
    """
    return from_catalog("latest_works")

def illustration(illust_id):
    """Retrieve detail of an illust from the app api."""
    return from_catalog("illustration").raw_param(
        "illust_id", unsigned("illust_id", illust_id)
    )

def search_illustration(word):
    """
    Search illusts on the app api.

    Transforms: search_target, search_sort, duration, offset, search_filter.
    """
    return from_catalog("search_illustration").raw_param("word", word)

def _id_list(name, ids):
    return comma_delimited(unsigned(name, i) for i in ids)

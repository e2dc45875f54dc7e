#---------------------------------------------------------------------------#
#   pxvapi                                                                  #
#       Request builders for the pixiv API.                                 #
#       Build a request, inspect it, hand it to any transport.              #
#---------------------------------------------------------------------------#

from .dates import latest_ranking_date
from .endpoints import (
    ENDPOINTS, bad_words, favorite_work_add, favorite_works,
    favorite_works_remove, feed, following, following_add, following_remove,
    following_works, from_catalog, illustration, latest_works, ranking,
    search_illustration, search_works, user, user_favorite_works, user_feed,
    user_following, user_works, work
)
from .enums import (
    Duration, HTTPMethod, Publicity, RankingMode, RankingType, SearchMode,
    SearchOrder, SearchPeriod, SearchSort, SearchTarget, SearchType
)
from .errors import (
    AuthError, BuilderConsumedError, PixivError, RequestBuildError
)
from .log import add_file_handler, pxlog, remove_file_handler
from .request import PixivRequest, PixivRequestBuilder
from . import transport

__version__ = "0.1.0"

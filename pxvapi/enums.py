import enum


#---------------------------------------------------------------------------#
#   Option enums                                                            #
#       Every member's value is the exact token the API expects.            #
#       Members compare equal to their token, so either may be passed to    #
#       the builder setters.                                                #
#---------------------------------------------------------------------------#


class _StrEnum(str, enum.Enum):

    def __str__(self):
        return self.value


@enum.unique
class HTTPMethod(_StrEnum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


@enum.unique
class Publicity(_StrEnum):
    PUBLIC = "public"
    PRIVATE = "private"


@enum.unique
class RankingType(_StrEnum):
    ALL = "all"
    ILLUST = "illust"
    MANGA = "manga"
    UGOIRA = "ugoira"


@enum.unique
class RankingMode(_StrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ROOKIE = "rookie"
    ORIGINAL = "original"
    MALE = "male"
    FEMALE = "female"
    DAILY_R18 = "daily_r18"
    WEEKLY_R18 = "weekly_r18"
    MALE_R18 = "male_r18"
    FEMALE_R18 = "female_r18"
    R18G = "r18g"


@enum.unique
class SearchPeriod(_StrEnum):
    ALL = "all"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@enum.unique
class SearchMode(_StrEnum):
    TEXT = "text"
    TAG = "tag"
    EXACT_TAG = "exact_tag"
    CAPTION = "caption"


@enum.unique
class SearchOrder(_StrEnum):
    DESCENDING = "desc"
    ASCENDING = "asc"


@enum.unique
class SearchType(_StrEnum):
    ILLUSTRATION = "illustration"
    MANGA = "manga"
    UGOIRA = "ugoira"


#   app-api illust search.
@enum.unique
class SearchTarget(_StrEnum):
    TAGS_PARTIAL = "partial_match_for_tags"
    TAGS_EXACT = "exact_match_for_tags"
    TITLE_AND_CAPTION = "title_and_caption"


@enum.unique
class SearchSort(_StrEnum):
    DATE_DESCENDING = "date_desc"
    DATE_ASCENDING = "date_asc"
    POPULAR_DESCENDING = "popular_desc"


@enum.unique
class Duration(_StrEnum):
    LAST_DAY = "within_last_day"
    LAST_WEEK = "within_last_week"
    LAST_MONTH = "within_last_month"


def to_token(enum_cls, value):
    """
    Convert a member, or the token of one, to its wire token.

    Raises:
        ValueError
            `value` is not a token of `enum_cls`.
    """
    return enum_cls(value).value

#---------------------------------------------------------------------------#
#   Constants                                                               #
#       Hosts, fixed headers and tunables shared by the whole package.      #
#---------------------------------------------------------------------------#

PUBLIC_API_URL = "https://public-api.secure.pixiv.net"
APP_API_URL = "https://app-api.pixiv.net"

REFERER = "http://spapi.pixiv.net/"
DEFAULT_HEADERS = {
    "Referer": REFERER,
}

_USER_AGENT = (
    "PixivIOSApp/7.6.2 (iOS 12.2; iPhone9,1)"
)
CAMOUFLAGE_HEADERS = {
    "User-Agent": _USER_AGENT,
    "App-OS": "ios",
}

#   Too many concurrent connection may cause you cut from server.
#   This value is safe for now.
SEM_LIMIT = 5

TOKYO_TZ = "Asia/Tokyo"
#   Rankings of a day are published around noon, Tokyo time.
RANKING_PUBLISH_HOUR = 12

DATE_FMT = "%Y-%m-%d"

LOG_STRFMT = "{asctime}|{name}|{levelname:^7s}| {message}"
LOG_TIMEFMT = "%H:%M:%S"
LOG_FILETIMEFMT = "%Y-%m-%d %H:%M:%S"
LOG_FILE = "./pixiv.log"

import logging
import sys

from .constants import LOG_FILE, LOG_FILETIMEFMT, LOG_STRFMT, LOG_TIMEFMT


#---------------------------------------------------------------------------#
#   Logger                                                                  #
#       Console handler is always attached, file handler on demand.         #
#---------------------------------------------------------------------------#

_console_formatter = logging.Formatter(LOG_STRFMT, LOG_TIMEFMT, "{")
_file_formatter = logging.Formatter(LOG_STRFMT, LOG_FILETIMEFMT, "{")

_console_hdl = logging.StreamHandler(sys.stdout)
_console_hdl.setFormatter(_console_formatter)

_pxvroot = logging.getLogger("Pixiv")
_pxvroot.setLevel(logging.INFO)
_pxvroot.addHandler(_console_hdl)

pxlog = _pxvroot    #   Alias


def add_file_handler(path=LOG_FILE, level=logging.NOTSET):
    """
    Attach a file handler to the "Pixiv" logger.

    Args:
        path        string
            Log file, opened in append mode.
        level       int
            Handler level, defaults to pass everything the logger passes.

    Returns:
        the attached `logging.FileHandler`, keep it for removal.
    """
    hdl = logging.FileHandler(path, "a+", "utf-8")
    hdl.setFormatter(_file_formatter)
    hdl.setLevel(level)
    pxlog.addHandler(hdl)
    return hdl

def remove_file_handler(hdl):
    """Detach and close a handler returned by `add_file_handler`."""
    pxlog.removeHandler(hdl)
    hdl.close()

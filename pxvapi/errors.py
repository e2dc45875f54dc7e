class PixivError(Exception):
    """Base class of every error raised by pxvapi."""


class AuthError(PixivError):
    """
    Credential rejected by the service.

    Recoverable: a caller may retry with other credentials.
    """

    def __init__(self, reason):
        self.reason = reason
        super().__init__(f"Authentication failed: {reason}")


class RequestBuildError(PixivError):
    """Internal state could not be turned into a request, a bug in pxvapi."""


class BuilderConsumedError(RequestBuildError):
    """A builder was used again after `build()`."""

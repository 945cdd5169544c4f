"""Exception classes for the Telegraph API client."""


class TelegraphError(Exception):
    """Base Telegraph client exception."""

    def __init__(self, message: str, method: str | None = None):
        self.message = message
        self.method = method
        super().__init__(message)


class TelegraphRequestError(TelegraphError):
    """Transport failure, HTTP error status or unreadable response."""

    pass


class TelegraphApiError(TelegraphError):
    """The API answered with ok=false."""

    def __str__(self) -> str:
        if self.method:
            return f"{self.method}: {self.message}"
        return self.message


class AccountConfigError(TelegraphError):
    """Neither an access token nor a short name is available."""

    pass


class UploadError(TelegraphError):
    """File could not be read or uploaded."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        super().__init__(message, method="upload")

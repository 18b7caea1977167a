from typing import Optional

GENERIC_ERROR_MESSAGE = "An error occurred"


class LoadFailure(Exception):
    """Base for every way the country fetch can fail.

    All of them end up as the same ``Failed(reason)`` load state; the
    subclasses only exist so the logs can tell them apart.
    """

    def __init__(self, message: Optional[str] = None):
        self.message = message or GENERIC_ERROR_MESSAGE
        super().__init__(self.message)


class NetworkFailure(LoadFailure):
    pass


class HttpStatusFailure(LoadFailure):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


class ParseFailure(LoadFailure):
    pass


class BrowserNotReady(Exception):
    """Filters and selection only apply once the countries are loaded."""


class RecordNotVisible(LookupError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Country not found: {code}")

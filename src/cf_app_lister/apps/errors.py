"""Errors raised while listing applications."""


class ListAppsError(Exception):
    """Base class for failures that abort an apps listing."""

    pass


class UpstreamCallFailed(ListAppsError):
    """Raised when the cf CLI fails to resolve the endpoint or call the API."""

    pass


class MalformedResponse(ListAppsError):
    """Raised when a page payload cannot be decoded."""

    pass


class PaginationLimitExceeded(ListAppsError):
    """Raised when the listing is still paginating after the page cap."""

    def __init__(self, max_pages: int, next_path: str):
        self.max_pages = max_pages
        self.next_path = next_path
        super().__init__(
            f"Stopped after {max_pages} pages, next page was '{next_path}'"
        )

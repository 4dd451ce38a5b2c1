# search/errors.py


class SearchError(Exception):
    """Base class for engine failures. Not finding a route is not one of them."""


class SearchStateError(SearchError):
    """``advance`` was called with no active search (never begun, or already terminal)."""


class SearchResourceError(SearchError):
    """Memory ran out while growing the frontier, the visited set or a path."""

    def __init__(self, msg: str, *, retryable: bool):
        super().__init__(msg)
        self.retryable = retryable

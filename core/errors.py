"""
Error taxonomy for GIF Match.

None of these are fatal: callers catch them and keep the prior state.
Invalid selection ids and out-of-order game transitions are not errors;
they are declined with a False return or FlipOutcome.IGNORED.
"""


class GifMatchError(Exception):
    """Base class for all GIF Match errors."""


class SearchFailure(GifMatchError):
    """Transport, HTTP status or decode problem talking to the search provider."""


class StorageDecodeFailure(GifMatchError):
    """Stored data could not be decoded. Treated as absent."""


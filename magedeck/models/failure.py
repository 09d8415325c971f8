"""
Failure classification for MageDeck.

Every failure that reaches the user is either a KnownError subclass with
a plain descriptive message, or an unexpected exception that aborts the
invocation.

Expected empty results (no catalog row matches a name) and policy
declines (power in a paper-currency deck) are NOT errors and never
raise.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Upstream feed failures
    FEED_FORMAT = "feed_format"
    FEED_UNAVAILABLE = "feed_unavailable"

    # Storage failures
    STORAGE_UNAVAILABLE = "storage_unavailable"
    STORAGE_MIGRATION = "storage_migration"
    STORAGE_WRITE = "storage_write"

    # Input / precondition failures
    INVALID_INPUT = "invalid_input"
    NOT_INITIALISED = "not_initialised"


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)


class FeedFormatError(KnownError):
    """
    The upstream bulk feed broke its contract.

    Raised for unknown currency or marketplace keys and non-numeric price
    strings. The feed shape is assumed fixed, so this is never recovered.
    """

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.FEED_FORMAT,
            message=message,
            detail=detail,
            suggestion="The Scryfall feed format may have changed.",
            status_code=502,
        )


class FeedDownloadError(KnownError):
    """Raised when the bulk feed cannot be downloaded."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.FEED_UNAVAILABLE,
            message=message,
            detail=detail,
            suggestion="Check your network connection and try again.",
            status_code=502,
        )


class StorageError(KnownError):
    """Raised when the catalog database cannot be opened, migrated, or written."""

    def __init__(
        self,
        message: str,
        kind: FailureKind = FailureKind.STORAGE_UNAVAILABLE,
        detail: str | None = None,
    ):
        super().__init__(
            kind=kind,
            message=message,
            detail=detail,
            suggestion="Re-run `magedeck sync` to rebuild the catalog.",
            status_code=503,
        )


class ProjectNotInitialisedError(KnownError):
    """Raised when a command needs the project directory and it does not exist."""

    def __init__(self, project_dir: str):
        super().__init__(
            kind=FailureKind.NOT_INITIALISED,
            message="Project is not initialised!",
            detail=project_dir,
            suggestion="Run `magedeck init` first and try again.",
            status_code=409,
        )

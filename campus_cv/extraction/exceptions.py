class ExtractionError(Exception):
    """Base exception for all text extraction errors."""


class UnsupportedFileTypeError(ExtractionError):
    """Raised when the declared MIME type has no extractor."""


class FileTooLargeError(ExtractionError):
    """Raised when an uploaded document exceeds the configured size limit."""


class ExtractionInsufficientTextError(ExtractionError):
    """Raised when a strategy produced less text than the acceptance threshold.

    Recoverable: the orchestrator falls through to the next strategy.
    """


class ExtractionFailedError(ExtractionError):
    """Raised when every strategy for a format has been exhausted."""

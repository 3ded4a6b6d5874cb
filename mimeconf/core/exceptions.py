"""
Centralized Exception Hierarchy for mimeconf.

All exceptions inherit from MimeConfError for easy catching. Each one
carries:
- error_code: Unique identifier (e.g., "MC-SRC-001")
- why_it_happened: Explanation of the root cause
- how_to_fix: Actionable steps to resolve the issue

Exception Hierarchy
-------------------
    MimeConfError (base)
    ├── SourceUnavailableError
    └── ConfigValidationError

Malformed database lines and unresolved media-type conflicts are not
errors and never raise.
"""

from typing import List, Optional


class MimeConfError(Exception):
    """
    Base exception for all mimeconf errors.

    Example
    -------
        try:
            lines = open_source(path)
        except MimeConfError as e:
            typer.echo(f"{e.error_code}: {e}", err=True)
    """

    error_code: str = "MC-ERR-000"
    why_it_happened: str = "An unexpected error occurred"
    how_to_fix: List[str] = ["Check the error message for details"]

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        """Initialize MimeConfError with helpful information.

        Args:
            message: Human-readable error message
            error_code: Unique identifier (e.g., "MC-SRC-001")
            why_it_happened: Explanation of root cause
            how_to_fix: List of actionable fix suggestions
        """
        super().__init__(message)

        if error_code is not None:
            self.error_code = error_code
        if why_it_happened is not None:
            self.why_it_happened = why_it_happened
        if how_to_fix is not None:
            self.how_to_fix = how_to_fix


class SourceUnavailableError(MimeConfError):
    """
    Raised when the media-type database cannot be opened.

    The CLI treats this as a warning: lighttpd ships its own default
    mimetype.assign, so a missing database is not a failure.
    """

    error_code = "MC-SRC-001"
    why_it_happened = "The media-type database could not be opened"
    how_to_fix = [
        "Install the mime-support (or media-types) package",
        "Point MIMECONF_SOURCE at a readable mime.types file",
    ]

    def __init__(self, message: str, path: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.path = path


class ConfigValidationError(MimeConfError):
    """Raised when a configuration value is invalid."""

    error_code = "MC-CFG-001"
    why_it_happened = "A configuration value failed validation"
    how_to_fix = [
        "Check the MIMECONF_* environment variables",
        "Valid log levels: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    ]

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

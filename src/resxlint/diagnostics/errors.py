"""resxlint exception hierarchy.

Validation never raises: every finding about resource content travels
through a DiagnosticSink. Exceptions are reserved for input that cannot be
read at all; callers convert them into FILE_UNREADABLE diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ResxError(Exception):
    """Base exception for all resxlint errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ResxError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(str(message))
        else:
            self.diagnostic = None
            super().__init__(message)


class ResxFormatError(ResxError):
    """Resource file is not well-formed XML or cannot be decoded.

    Attributes:
        path: File (or "<source>") that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "<source>") -> None:
        """Initialize ResxFormatError.

        Args:
            message: Error message string OR Diagnostic object
            path: File that failed to parse
        """
        super().__init__(message)
        self.path = path


__all__ = ["ResxError", "ResxFormatError"]

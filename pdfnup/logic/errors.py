# PDFNup/pdfnup/logic/errors.py
"""
Error kinds raised by the PDF Nup logic layer.
All of them are terminal: nothing is retried and no output is written.
"""


class PdfNupError(Exception):
    """Base class for every error the tool reports to the user."""


class InvalidPath(PdfNupError):
    """Source file is missing or is not a PDF."""


class InvalidArgument(PdfNupError):
    """A user-supplied count is out of range (e.g. non-positive copies)."""


class InvalidDocument(PdfNupError):
    """Source PDF is unreadable, corrupt, empty, or has a zero-sized page."""


class InvalidConfiguration(PdfNupError):
    """Output sheet or arrangement settings are unusable."""


class OutputError(PdfNupError):
    """Result could not be written next to the source."""

"""Exceptions raised while turning an invoice file into a PDF."""


class InvoiceError(Exception):
    """Base exception for invoice generation errors."""


class InvoiceReadError(InvoiceError):
    """Raised when the input file cannot be read."""


class InvoiceParseError(InvoiceError):
    """Raised when the input is not a valid invoice description."""


class InvoiceWriteError(InvoiceError):
    """Raised when the output PDF path cannot be written."""


class RenderError(InvoiceError):
    """Raised when the browser process is missing or fails to print the PDF."""

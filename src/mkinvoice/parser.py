"""Loading invoice descriptions from TOML."""

import tomllib
from pathlib import Path

from pydantic import ValidationError

from mkinvoice.errors import InvoiceParseError, InvoiceReadError
from mkinvoice.models import Invoice


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic error into a single line.

    Each problem is reported as ``<dotted.field.path>: <message>``, e.g.
    ``labour.1.quantity: Input should be greater than or equal to 0``.
    """
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "invoice"
        problems.append(f"{location}: {detail['msg']}")
    return "; ".join(problems)


def parse_invoice(text: str) -> Invoice:
    """Parse TOML text into an Invoice.

    Args:
        text: Invoice description in TOML

    Returns:
        The validated, immutable Invoice

    Raises:
        InvoiceParseError: If the text is not valid TOML, or a field is
            missing, has the wrong type, or holds a malformed value
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise InvoiceParseError(f"TOML parse error: {e}") from e

    try:
        return Invoice.model_validate(data)
    except ValidationError as e:
        raise InvoiceParseError(
            f"Invalid invoice: {describe_validation_error(e)}"
        ) from e


def load_invoice(path: Path) -> Invoice:
    """Read and parse an invoice file.

    Raises:
        InvoiceReadError: If the file cannot be read
        InvoiceParseError: If its contents are not a valid invoice
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvoiceReadError(f"I/O error: {e}") from e
    return parse_invoice(text)

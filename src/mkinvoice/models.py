"""Data models for invoice descriptions."""

import re
from datetime import date, datetime
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _require_number(value: Any) -> Any:
    # Lax mode would otherwise accept "10" or true as numbers.
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError("Input should be a number")
    return value


def _require_whole_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("Input should be a whole number")
    return value


_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def _require_date(value: Any) -> Any:
    """Accept calendar dates and strings of the exact form YYYY-MM-DD.

    TOML datetimes, datetime strings and timestamps (numbers or numeric
    strings, which pydantic would otherwise read as epoch seconds) are
    refused.
    """
    if isinstance(value, datetime):
        raise ValueError("Input should be a date without a time")
    if isinstance(value, date):
        return value
    if isinstance(value, str) and _ISO_DATE.fullmatch(value):
        # fromisoformat rejects impossible dates such as 2024-13-01.
        return date.fromisoformat(value)
    raise ValueError("Input should be a date in YYYY-MM-DD form")


Number = Annotated[float, BeforeValidator(_require_number)]
Quantity = Annotated[int, BeforeValidator(_require_whole_number), Field(ge=0)]
CalendarDate = Annotated[date, BeforeValidator(_require_date)]


class Metadata(BaseModel):
    """Invoice header fields."""

    model_config = ConfigDict(frozen=True)

    invoice_id: str
    issue_date: CalendarDate
    payment_terms: str
    tax_rate: Number  # percentage, e.g. 10.0 means 10%
    currency: str


class Contact(BaseModel):
    """Issuer or recipient of an invoice. The email is not format-checked."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    company: str | None = None


class LineItem(BaseModel):
    """A single billable row.

    Subclasses only differ by ``kind``, which decides the table section the
    row is listed under.
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = "item"

    date: CalendarDate
    description: str
    unit_price: Number
    quantity: Quantity


class Labour(LineItem):
    kind: ClassVar[str] = "labour"


class Expense(LineItem):
    kind: ClassVar[str] = "expense"


class Payment(BaseModel):
    """Bank transfer details. All fields are free text."""

    model_config = ConfigDict(frozen=True)

    name: str
    bsb: str
    acct: str
    bank: str
    swift: str


class Invoice(BaseModel):
    """A complete invoice description.

    Omitted ``labour`` or ``expenses`` tables are read as empty.
    """

    model_config = ConfigDict(frozen=True)

    metadata: Metadata
    issuer: Contact
    recipient: Contact
    labour: tuple[Labour, ...] = ()
    expenses: tuple[Expense, ...] = ()
    payment: Payment

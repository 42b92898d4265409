"""Invoice arithmetic.

Amounts are plain floats and are never rounded here; rounding to two
decimals happens when they are formatted for display.
"""

from pydantic import BaseModel, ConfigDict

from mkinvoice.models import Invoice


class Totals(BaseModel):
    model_config = ConfigDict(frozen=True)

    subtotal: float
    tax_amount: float
    total: float


def item_total(unit_price: float, quantity: int) -> float:
    return unit_price * float(quantity)


def subtotal(invoice: Invoice) -> float:
    """Total cost of all labour and expense items, before tax."""
    labour_total = sum(
        (item_total(i.unit_price, i.quantity) for i in invoice.labour), 0.0
    )
    expenses_total = sum(
        (item_total(i.unit_price, i.quantity) for i in invoice.expenses), 0.0
    )
    return labour_total + expenses_total


def tax_amount(invoice: Invoice) -> float:
    return subtotal(invoice) * (invoice.metadata.tax_rate / 100.0)


def total(invoice: Invoice) -> float:
    """The balance due: subtotal plus tax."""
    return subtotal(invoice) + tax_amount(invoice)


def summarize(invoice: Invoice) -> Totals:
    return Totals(
        subtotal=subtotal(invoice),
        tax_amount=tax_amount(invoice),
        total=total(invoice),
    )

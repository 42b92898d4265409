"""HTML rendering of invoices using Jinja2 templates."""

from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from mkinvoice.calculator import item_total, summarize
from mkinvoice.models import Invoice

TEMPLATES_DIR = Path(__file__).parent / "templates"


def format_money(amount: float, currency: str) -> str:
    """Format an amount with two decimals and the currency code, e.g. ``1050.00 USD``."""
    return f"{amount:.2f} {currency}"


def format_percentage(rate: float) -> str:
    """Format a tax rate as a bare percentage: ``15%``, ``7.5%``, ``0.00001%``.

    Uses the shortest digits that round-trip, never scientific notation.
    """
    if rate.is_integer():
        return f"{int(rate)}%"
    return f"{Decimal(repr(rate)):f}%"


def _build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["money"] = format_money
    env.filters["percentage"] = format_percentage
    env.globals["item_total"] = item_total
    return env


_env = _build_environment()


def render_html(invoice: Invoice) -> str:
    """Render an invoice as a self-contained HTML document.

    Labour and expense rows are listed under their own headings; a heading
    is left out when its section has no items.
    """
    template = _env.get_template("invoice.html")
    return template.render(
        invoice=invoice,
        currency=invoice.metadata.currency,
        totals=summarize(invoice),
        groups=[("Labour", invoice.labour), ("Expenses", invoice.expenses)],
    )

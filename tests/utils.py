import re
from pathlib import Path

from mkinvoice.models import Invoice

SAMPLE_INVOICE_TOML = """\
[metadata]
invoice_id = "INV-0042"
issue_date = 2024-03-01
payment_terms = "Net 30"
tax_rate = 15.0
currency = "USD"

[issuer]
name = "Ada Lovelace"
email = "ada@example.com"

[recipient]
name = "Charles Babbage"
company = "Analytical Engines Ltd"
email = "charles@example.com"

[[labour]]
date = 2024-02-12
description = "Engine design"
unit_price = 100.0
quantity = 5

[[labour]]
date = "2024-02-13"
description = "Punch card review"
unit_price = 75.50
quantity = 4

[[expenses]]
date = 2024-02-14
description = "Brass gears"
unit_price = 25.0
quantity = 6

[[expenses]]
date = 2024-02-15
description = "Courier"
unit_price = 50.25
quantity = 2

[payment]
name = "Ada Lovelace"
bsb = "062-000"
acct = "12345678"
bank = "Commonwealth Bank"
swift = "CTBAAU2S"
"""


def write_invoice(directory: Path, text: str = SAMPLE_INVOICE_TOML) -> Path:
    """Write invoice TOML to ``directory/invoice.toml`` and return the path."""
    path = directory / "invoice.toml"
    path.write_text(text, encoding="utf-8")
    return path


def clean_cli_output(output: str) -> str:
    """
    Remove ANSI escape codes, Rich formatting characters, whitespace, and newlines
    from CLI output to make assertions robust against terminal wrapping.
    """
    ansi_escape = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
    output = ansi_escape.sub("", output)
    return re.sub(r"[\s│╭╮╰╯─]", "", output)


def make_invoice(
    labour: list[tuple[float, int]] | None = None,
    expenses: list[tuple[float, int]] | None = None,
    tax_rate: float = 10.0,
    currency: str = "USD",
) -> Invoice:
    """Build an Invoice from (unit_price, quantity) pairs."""
    def rows(pairs, label):
        return [
            {
                "date": "2024-01-15",
                "description": f"{label} {index}",
                "unit_price": price,
                "quantity": quantity,
            }
            for index, (price, quantity) in enumerate(pairs or [], start=1)
        ]

    return Invoice.model_validate(
        {
            "metadata": {
                "invoice_id": "INV-1",
                "issue_date": "2024-01-31",
                "payment_terms": "Net 14",
                "tax_rate": tax_rate,
                "currency": currency,
            },
            "issuer": {"name": "Issuer", "email": "issuer@example.com"},
            "recipient": {
                "name": "Recipient",
                "company": "Recipient Co",
                "email": "recipient@example.com",
            },
            "labour": rows(labour, "Labour"),
            "expenses": rows(expenses, "Expense"),
            "payment": {
                "name": "Issuer",
                "bsb": "000-000",
                "acct": "0000",
                "bank": "Bank",
                "swift": "BANKXX",
            },
        }
    )

import os
from pathlib import Path

import typer
from dotenv import load_dotenv

from mkinvoice import __version__
from mkinvoice.calculator import total
from mkinvoice.errors import InvoiceError
from mkinvoice.parser import load_invoice
from mkinvoice.pdf import DEFAULT_BROWSER, generate_pdf
from mkinvoice.render import format_money

load_dotenv()

app = typer.Typer(add_completion=False)


def version_callback(value: bool):
    if value:
        typer.echo(f"mkinvoice {__version__}")
        raise typer.Exit()


def cli_progress(event_type: str, message: str):
    """Callback to handle progress events and output to CLI."""
    typer.echo(message)


@app.command()
def generate(
    input_path: Path = typer.Argument(
        ...,
        metavar="INPUT",
        help="Path to the input TOML file containing invoice data.",
    ),
    output_path: Path = typer.Argument(
        ..., metavar="OUTPUT", help="Path to the output PDF file."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """Generate PDF invoices from TOML files."""
    browser = os.getenv("MKINVOICE_BROWSER") or DEFAULT_BROWSER

    try:
        invoice = load_invoice(input_path)
        generate_pdf(invoice, output_path, browser=browser, on_progress=cli_progress)
    except InvoiceError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e

    balance = format_money(total(invoice), invoice.metadata.currency)
    typer.echo(f"Invoice {invoice.metadata.invoice_id}: balance due {balance}")


def main():
    app()


if __name__ == "__main__":
    main()

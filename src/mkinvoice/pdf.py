"""PDF export through a headless Chromium process."""

import subprocess
import tempfile
from collections.abc import Callable
from pathlib import Path

from mkinvoice.errors import InvoiceWriteError, RenderError
from mkinvoice.models import Invoice
from mkinvoice.render import render_html

DEFAULT_BROWSER = "chromium"


def chromium_command(browser: str, html_path: Path, output_path: Path) -> list[str]:
    """Build the command line that prints ``html_path`` to ``output_path``."""
    return [
        browser,
        "--headless",
        "--run-all-compositor-stages-before-draw",
        f"--print-to-pdf={output_path}",
        "--no-pdf-header-footer",
        str(html_path),
    ]


def generate_pdf(
    invoice: Invoice,
    output_path: Path,
    browser: str = DEFAULT_BROWSER,
    on_progress: Callable[[str, str], None] | None = None,
) -> None:
    """Render an invoice to HTML and print it to a PDF file.

    The HTML is written to a fresh temporary directory, which is removed
    once the browser exits, whether or not it succeeded. The call blocks
    until the browser process terminates.

    Args:
        invoice: The invoice to render
        output_path: Where to write the PDF; existing content is overwritten,
            and the file is removed again if printing fails
        browser: Name or path of the Chromium executable
        on_progress: Optional callback for progress updates (event_type, message)

    Raises:
        InvoiceWriteError: If the output path cannot be written
        RenderError: If the browser is missing or exits with a non-zero status
    """
    output_path = output_path.absolute()

    # Surface permission and missing-directory errors before starting the
    # browser, which tends to exit 0 even when it could not write the file.
    # Truncating here also means a stale PDF can never pass for a new one.
    try:
        with output_path.open("wb"):
            pass
    except OSError as e:
        raise InvoiceWriteError(f"I/O error: {e}") from e

    try:
        with tempfile.TemporaryDirectory(prefix="mkinvoice-") as tmp_dir:
            html_path = Path(tmp_dir).resolve() / "invoice.html"
            try:
                html_path.write_text(render_html(invoice), encoding="utf-8")
            except OSError as e:
                raise InvoiceWriteError(f"I/O error: {e}") from e
            if on_progress:
                on_progress("html_written", f"Rendered HTML to {html_path}")

            command = chromium_command(browser, html_path, output_path)
            try:
                completed = subprocess.run(command, capture_output=True, check=False)
            except FileNotFoundError as e:
                raise RenderError(f"Chromium not found: {e}") from e
            except OSError as e:
                raise RenderError(f"Could not start Chromium: {e}") from e

            if completed.returncode != 0:
                stderr = completed.stderr.decode("utf-8", errors="replace")
                raise RenderError(f"Chromium failed: {stderr}")
            if not output_path.exists() or output_path.stat().st_size == 0:
                raise RenderError(f"Chromium did not write a PDF to {output_path}")
    except BaseException:
        output_path.unlink(missing_ok=True)
        raise

    if on_progress:
        on_progress("pdf_written", f"Wrote PDF to {output_path}")

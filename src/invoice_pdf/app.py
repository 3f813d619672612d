from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from invoice_pdf.core.errors import InvoiceRenderError
from invoice_pdf.core.models.options import ALIGNMENTS, FooterOptions
from invoice_pdf.core.services.invoice import load_invoices
from invoice_pdf.core.services.options import load_options
from invoice_pdf.utils.pdf.backends.factory import BACKENDS
from invoice_pdf.utils.pdf.renderers.pdf_renderer import render_pdf

logger = logging.getLogger("invoice_pdf")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="invoice-pdf", description="Render JSON invoices into a bilingual PDF.")
    parser.add_argument("input", help="JSON file with one invoice or an array of invoices")
    parser.add_argument("output", help="PDF file to write")
    parser.add_argument("--options", help="JSON file with render options")
    parser.add_argument("--currency", help="currency code shown on the invoice (default PLN)")
    parser.add_argument("--footer-text", help="text printed at the bottom of every page")
    parser.add_argument("--footer-align", choices=ALIGNMENTS, default=None)
    parser.add_argument("--backend", choices=BACKENDS, default="reportlab")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = load_options(args.options)
        if args.currency:
            options = replace(options, currency=args.currency)
        if args.footer_text:
            options = replace(options, footer=FooterOptions(args.footer_text, args.footer_align or "center"))
        elif args.footer_align and options.footer is not None:
            options = replace(options, footer=replace(options.footer, align=args.footer_align))

        invoices = load_invoices(args.input)
        render_pdf(args.output, invoices, options, backend_name=args.backend)
    except (InvoiceRenderError, OSError) as exc:
        logger.error("Rendering failed: %s", exc)
        return 1

    logger.info("Saved invoice(s) from '%s' to '%s'", args.input, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

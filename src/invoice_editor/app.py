"""
Reflex application entry point for the Invoice Editor.

This module initializes the Reflex app and defines the editor page.
"""

import os

import reflex as rx

from invoice_editor.components import (
    client_section,
    company_section,
    footer_section,
    line_items_table,
    totals_panel,
)
from invoice_editor.lib import logs
from invoice_editor.state import APP_SUBTITLE, APP_TITLE, InvoiceEditorState

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("INVOICE_EDITOR_PORT", "8000"))
LOG.info("INVOICE_EDITOR_PORT: %s", APP_PORT)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"


def page_header() -> rx.Component:
    """Build the hero text area at the top of the page."""
    return rx.box(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        rx.text(APP_SUBTITLE, class_name="muted"),
        class_name="page-header",
    )


def index() -> rx.Component:
    """
    Build the editor page layout.

    Returns:
        The complete page component with header, form, line items and totals.
    """
    return rx.box(
        rx.box(
            page_header(),
            rx.box(
                company_section(),
                client_section(),
                line_items_table(),
                rx.box(totals_panel(), class_name="flex justify-end"),
                footer_section(),
                class_name="card invoice-wrapper",
            ),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[_FONT_URL],
)

# Add the index page
app.add_page(
    index,
    title=APP_TITLE,
    on_load=InvoiceEditorState.on_load,
)


def main() -> None:
    """Entrypoint used via `invoice-editor`; runs `reflex run` on APP_PORT."""
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--port", str(APP_PORT)])


if __name__ == "__main__":
    main()

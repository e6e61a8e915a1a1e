"""Reflex configuration for the Invoice Editor application."""

import os

import reflex as rx

# Get port from environment
APP_PORT = int(os.getenv("INVOICE_EDITOR_PORT", "8000"))

config = rx.Config(
    app_name="invoice_editor",
    # Use the src directory structure
    app_module_import="invoice_editor.app",
    frontend_port=APP_PORT,
)

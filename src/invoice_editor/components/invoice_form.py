"""
Invoice form sections for Reflex.

Builds the editable header, party, meta and footer sections. Every input
reads from InvoiceEditorState.text_fields and sends a set_text event.
"""

import reflex as rx

from invoice_editor.state import InvoiceEditorState


def text_input(
    field: str, placeholder: str | rx.Var = "", class_name: str = ""
) -> rx.Component:
    """Build a single-line input bound to a scalar invoice field."""
    return rx.input(
        value=InvoiceEditorState.text_fields[field],
        placeholder=placeholder,
        on_change=lambda value: InvoiceEditorState.set_text(field, value),
        class_name=f"editable {class_name}".strip(),
    )


def text_area(field: str, placeholder: str = "") -> rx.Component:
    """Build a multi-line input bound to a scalar invoice field."""
    return rx.text_area(
        value=InvoiceEditorState.text_fields[field],
        placeholder=placeholder,
        rows="2",
        on_change=lambda value: InvoiceEditorState.set_text(field, value),
        class_name="editable w-100",
    )


def company_section() -> rx.Component:
    """Build the logo, company details and document title."""
    return rx.box(
        rx.box(
            rx.cond(
                InvoiceEditorState.text_fields["logo"] != "",
                rx.image(
                    src=InvoiceEditorState.text_fields["logo"],
                    width=InvoiceEditorState.logo_width + "px",
                    class_name="logo",
                ),
            ),
            text_input("logo", "Logo URL"),
            rx.input(
                type="number",
                placeholder="Logo width",
                value=InvoiceEditorState.logo_width,
                on_change=InvoiceEditorState.set_logo_width,
                class_name="editable",
            ),
            text_input("company_name", "Your Company", "fs-20 bold"),
            text_input("name", "Your Name"),
            text_input("phone", "Phone"),
            text_input("mail", "Email"),
            text_input("company_address", "Company's Address"),
            text_input("company_address2", "City, Postal Code"),
            text_input("company_country", "State, Country"),
            class_name="w-50",
        ),
        rx.box(
            text_input("title", "Invoice", "fs-30 right bold"),
            class_name="w-50",
        ),
        class_name="flex",
    )


def client_section() -> rx.Component:
    """Build the bill-to block and the invoice meta block."""
    return rx.box(
        rx.box(
            text_input("bill_to", "", "bold"),
            text_input("client_name", "Client's Name"),
            text_input("client_phone", "Phone"),
            text_input("client_mail", "Email"),
            text_input("client_address", "Client's Address"),
            text_input("client_address2", "City, Postal Code"),
            text_input("client_country", "State, Country"),
            class_name="w-55",
        ),
        rx.box(
            _meta_row("invoice_title_label", text_input("invoice_title", "5152")),
            _meta_row(
                "invoice_gstin_label", text_input("invoice_gstin", "29GGGGG1314R9Z6")
            ),
            _meta_row(
                "invoice_date_label",
                text_input("invoice_date", InvoiceEditorState.invoice_date_display),
            ),
            _meta_row(
                "invoice_due_date_label",
                text_input("invoice_due_date", InvoiceEditorState.due_date_display),
            ),
            class_name="w-45",
        ),
        class_name="flex mt-40",
    )


def footer_section() -> rx.Component:
    """Build the payment details, notes and terms blocks."""
    return rx.box(
        _footer_block("pay_label", "pay", "Bank account details, UPI ID..."),
        _footer_block("notes_label", "notes", "It was great doing business with you."),
        _footer_block(
            "term_label", "term", "Please make the payment by the due date."
        ),
    )


def _meta_row(label_field: str, value: rx.Component) -> rx.Component:
    """Build a label/value row in the invoice meta block."""
    return rx.box(
        rx.box(text_input(label_field, "", "bold"), class_name="w-60"),
        rx.box(value, class_name="w-60"),
        class_name="flex mb-5",
    )


def _footer_block(label_field: str, field: str, placeholder: str) -> rx.Component:
    return rx.box(
        text_input(label_field, "", "bold w-100"),
        text_area(field, placeholder),
        class_name="mt-20",
    )

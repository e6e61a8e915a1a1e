"""
Edit intents accepted by the invoice controller.

Every change to a document is one of a closed set of operations, grouped by
the kind of field it touches. The presentation layer builds these and the
controller applies them; nothing edits an Invoice by arbitrary field name.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class TextField(str, Enum):
    """Scalar string fields of an Invoice."""

    LOGO = "logo"
    TITLE = "title"
    COMPANY_NAME = "company_name"
    NAME = "name"
    PHONE = "phone"
    MAIL = "mail"
    COMPANY_ADDRESS = "company_address"
    COMPANY_ADDRESS2 = "company_address2"
    COMPANY_COUNTRY = "company_country"
    BILL_TO = "bill_to"
    CLIENT_NAME = "client_name"
    CLIENT_PHONE = "client_phone"
    CLIENT_MAIL = "client_mail"
    CLIENT_ADDRESS = "client_address"
    CLIENT_ADDRESS2 = "client_address2"
    CLIENT_COUNTRY = "client_country"
    INVOICE_TITLE_LABEL = "invoice_title_label"
    INVOICE_TITLE = "invoice_title"
    INVOICE_GSTIN_LABEL = "invoice_gstin_label"
    INVOICE_GSTIN = "invoice_gstin"
    INVOICE_DATE_LABEL = "invoice_date_label"
    INVOICE_DATE = "invoice_date"
    INVOICE_DUE_DATE_LABEL = "invoice_due_date_label"
    INVOICE_DUE_DATE = "invoice_due_date"
    PRODUCT_LINE_DESCRIPTION = "product_line_description"
    PRODUCT_LINE_QUANTITY = "product_line_quantity"
    PRODUCT_LINE_QUANTITY_RATE = "product_line_quantity_rate"
    PRODUCT_LINE_QUANTITY_AMOUNT = "product_line_quantity_amount"
    PRODUCT_LINE_GST = "product_line_gst"
    SUB_TOTAL_LABEL = "sub_total_label"
    SGST_LABEL = "sgst_label"
    CGST_LABEL = "cgst_label"
    ROUND_LABEL = "round_label"
    TOTAL_LABEL = "total_label"
    CURRENCY = "currency"
    NOTES_LABEL = "notes_label"
    NOTES = "notes"
    TERM_LABEL = "term_label"
    TERM = "term"
    PAY_LABEL = "pay_label"
    PAY = "pay"


class WidthField(str, Enum):
    """Numeric width fields of an Invoice."""

    LOGO_WIDTH = "logo_width"


class LineItemField(str, Enum):
    """Editable fields of a LineItem."""

    DESCRIPTION = "description"
    QUANTITY = "quantity"
    RATE = "rate"
    TAX_PERCENT = "tax_percent"


@dataclass(frozen=True, slots=True)
class SetTextField:
    """Replace a scalar string field."""

    field: TextField
    value: str


@dataclass(frozen=True, slots=True)
class SetWidthField:
    """Replace a numeric width field."""

    field: WidthField
    value: int | float


@dataclass(frozen=True, slots=True)
class SetLineItemField:
    """Replace one field of the line item at index with normalized input."""

    index: int
    field: LineItemField
    value: str


@dataclass(frozen=True, slots=True)
class AddLineItem:
    """Append a blank line item."""


@dataclass(frozen=True, slots=True)
class RemoveLineItem:
    """Drop the line item at index, if there is one."""

    index: int


InvoiceEdit = Union[
    SetTextField, SetWidthField, SetLineItemField, AddLineItem, RemoveLineItem
]

LINE_ITEM_EDITS = (SetLineItemField, AddLineItem, RemoveLineItem)

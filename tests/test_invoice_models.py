"""Invoice models: tests for the document template and (de)serialization.

Invariants:
    - serialize -> deserialize reproduces every scalar field and the line items in order
    - Missing or mistyped fields fall back to the default template, never raise
    - Unreadable bytes load as None
    - Payloads saved by the original browser app (productLines / gst) still load
"""

import pytest

from invoice_editor.models.invoice import (
    BLANK_LINE_ITEM,
    TEXT_FIELDS,
    WIDTH_FIELDS,
    Invoice,
    LineItem,
    default_invoice,
    deserialize_invoice,
    invoice_from_bytes,
    invoice_to_bytes,
    serialize_invoice,
    wire_name,
)


# -- Template ------------------------------------------------------------------

def test_default_template_has_labels_and_blank_rows():
    invoice = default_invoice()
    assert invoice.title == "INVOICE"
    assert invoice.sub_total_label == "Sub Total"
    assert invoice.sgst_label == "SGST"
    assert invoice.cgst_label == "CGST"
    assert invoice.logo_width == 100
    assert invoice.line_items == (BLANK_LINE_ITEM, BLANK_LINE_ITEM)


def test_blank_line_item_is_zero_baseline():
    assert BLANK_LINE_ITEM == LineItem(
        description="", quantity="0", rate="0.00", tax_percent="0"
    )


def test_field_groups_cover_every_scalar_field():
    assert "line_items" not in TEXT_FIELDS
    assert WIDTH_FIELDS == {"logo_width"}
    assert "company_name" in TEXT_FIELDS
    assert "logo" in TEXT_FIELDS


def test_invoice_is_immutable():
    invoice = default_invoice()
    with pytest.raises(AttributeError):
        invoice.title = "Changed"


# -- Serialization -------------------------------------------------------------

def test_serialized_form_is_flat_camel_case(gst_invoice):
    data = serialize_invoice(gst_invoice)
    assert data["companyName"] == "Acme Traders"
    assert data["logoWidth"] == 100
    assert "invoiceGSTIN" in data
    assert "invoiceGSTINLabel" in data
    assert "productLineGST" in data
    assert data["lineItems"][0] == {
        "description": "Widget",
        "quantity": "2",
        "rate": "100.00",
        "taxPercent": "18",
    }


def test_wire_names():
    assert wire_name("company_address2") == "companyAddress2"
    assert wire_name("invoice_due_date_label") == "invoiceDueDateLabel"
    assert wire_name("tax_percent") == "taxPercent"
    assert wire_name("line_items") == "lineItems"


def test_roundtrip_preserves_fields_and_order(gst_invoice):
    restored = deserialize_invoice(serialize_invoice(gst_invoice))
    assert restored == gst_invoice
    assert [item.description for item in restored.line_items] == ["Widget", "Service"]


def test_bytes_roundtrip_keeps_in_progress_text_and_unicode():
    invoice = Invoice(
        logo_width=150.5,
        notes="നന്ദി",
        line_items=(
            LineItem(description="ചായ", quantity="3.", rate="12.50", tax_percent="5"),
            LineItem(),
            LineItem(description="ചായ", quantity="3.", rate="12.50", tax_percent="5"),
        ),
    )
    assert invoice_from_bytes(invoice_to_bytes(invoice)) == invoice


# -- Tolerant deserialization --------------------------------------------------

def test_missing_fields_come_from_template():
    invoice = deserialize_invoice({"companyName": "Acme"})
    template = default_invoice()
    assert invoice.company_name == "Acme"
    assert invoice.title == template.title
    assert invoice.line_items == template.line_items


def test_mistyped_fields_come_from_template():
    invoice = deserialize_invoice(
        {"companyName": 5, "logoWidth": "wide", "lineItems": "nope"}
    )
    template = default_invoice()
    assert invoice.company_name == template.company_name
    assert invoice.logo_width == template.logo_width
    assert invoice.line_items == template.line_items


def test_boolean_logo_width_is_rejected():
    assert deserialize_invoice({"logoWidth": True}).logo_width == 100


def test_empty_line_item_array_is_kept():
    assert deserialize_invoice({"lineItems": []}).line_items == ()


def test_non_object_line_items_are_skipped():
    invoice = deserialize_invoice({"lineItems": [{"description": "a"}, 3, None, "x"]})
    assert invoice.line_items == (LineItem(description="a"),)


def test_numeric_line_item_values_become_decimal_strings():
    invoice = deserialize_invoice(
        {"lineItems": [{"quantity": 2, "rate": 100.5, "taxPercent": False}]}
    )
    assert invoice.line_items == (LineItem(quantity="2", rate="100.5"),)


@pytest.mark.parametrize("data", [b"NaN", b"Infinity", b"-Infinity"])
def test_non_finite_line_item_numbers_fall_back_to_blank(data):
    invoice = invoice_from_bytes(
        b'{"logoWidth":' + data + b',"lineItems":[{"quantity":' + data + b',"rate":"1"}]}'
    )
    assert invoice.line_items == (LineItem(rate="1"),)
    assert invoice.logo_width == 100


def test_unknown_keys_are_ignored():
    invoice = deserialize_invoice({"foo.bar": 1, "title": "Bill"})
    assert invoice.title == "Bill"


def test_legacy_browser_payload_loads():
    invoice = deserialize_invoice(
        {
            "companyName": "Old Co",
            "invoiceGSTIN": "29GGGGG1314R9Z6",
            "productLines": [
                {"description": "Tea", "quantity": "2", "rate": "10", "gst": "18"}
            ],
        }
    )
    assert invoice.company_name == "Old Co"
    assert invoice.invoice_gstin == "29GGGGG1314R9Z6"
    assert invoice.line_items == (
        LineItem(description="Tea", quantity="2", rate="10", tax_percent="18"),
    )


# -- Bytes ---------------------------------------------------------------------

@pytest.mark.parametrize(
    "data",
    [None, b"", b"not json", b"\xff\xfe\x00", b"[1, 2]", b'"text"', b"42", b"null"],
)
def test_unreadable_bytes_load_as_none(data):
    assert invoice_from_bytes(data) is None


def test_empty_object_loads_as_template():
    assert invoice_from_bytes(b"{}") == default_invoice()

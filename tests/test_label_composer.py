"""
Label Composer Tests
====================

Tests that:
- Missing business/product names are reported before anything else.
- Price is only validated when it is shown on the label.
- Generation failures come back as values, never raised.
- A valid form produces the full label descriptor.
"""
import os
import sys
import unittest
from dataclasses import FrozenInstanceError

SRC_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "apps", "sku-labeler", "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from label_composer import (
    CodeType,
    ErrorKind,
    LabelComposer,
    LabelDescriptor,
    LabelError,
    LabelInput,
)


class FixedSKUGenerator:
    def __init__(self, sku="AC12345678"):
        self.sku = sku
        self.names = []

    def generate(self, business_name):
        self.names.append(business_name)
        return self.sku


class FailingSKUGenerator:
    def generate(self, business_name):
        raise RuntimeError("random source unavailable")


class TestValidation(unittest.TestCase):
    def setUp(self):
        self.generator = FixedSKUGenerator()
        self.composer = LabelComposer(sku_generator=self.generator)

    def test_missing_business_name(self):
        for name in ["", "   "]:
            result = self.composer.compose(LabelInput(business_name=name, product_name="Widget"))
            self.assertIsInstance(result, LabelError)
            self.assertEqual(result.kind, ErrorKind.MISSING_REQUIRED_FIELD)

    def test_missing_product_name(self):
        for name in ["", "\t "]:
            result = self.composer.compose(LabelInput(business_name="Acme", product_name=name))
            self.assertEqual(result.kind, ErrorKind.MISSING_REQUIRED_FIELD)

    def test_missing_field_wins_over_bad_price(self):
        result = self.composer.compose(LabelInput(
            business_name="",
            product_name="Widget",
            selling_price_text="abc",
            show_price=True,
        ))
        self.assertEqual(result.kind, ErrorKind.MISSING_REQUIRED_FIELD)
        self.assertEqual(self.generator.names, [])

    def test_invalid_prices(self):
        for text in ["", "abc", "-5", "0", "1_000", "\u0661\u0662"]:
            result = self.composer.compose(LabelInput(
                business_name="Acme",
                product_name="Widget",
                selling_price_text=text,
                show_price=True,
            ))
            self.assertIsInstance(result, LabelError, text)
            self.assertEqual(result.kind, ErrorKind.INVALID_PRICE)
        self.assertEqual(self.generator.names, [])

    def test_price_ignored_when_hidden(self):
        result = self.composer.compose(LabelInput(
            business_name="Acme",
            product_name="Widget",
            selling_price_text="abc",
            show_price=False,
        ))
        self.assertIsInstance(result, LabelDescriptor)
        self.assertIsNone(result.price_text)

    def test_error_messages(self):
        self.assertEqual(LabelError(ErrorKind.MISSING_REQUIRED_FIELD).message,
                         "Please fill business name and product name")
        self.assertEqual(LabelError(ErrorKind.INVALID_PRICE).message,
                         "Please enter a valid selling price")
        self.assertEqual(LabelError(ErrorKind.GENERATION_FAILED).message,
                         "Failed to generate SKU")


class TestCompose(unittest.TestCase):
    def test_valid_price_is_formatted(self):
        composer = LabelComposer(sku_generator=FixedSKUGenerator())
        result = composer.compose(LabelInput(
            business_name="Acme",
            product_name="Widget",
            selling_price_text="12.5",
            show_price=True,
        ))
        self.assertEqual(result.price_text, "$12.50")

    def test_injected_currency_formatter(self):
        seen = []

        def formatter(value):
            seen.append(value)
            return f"USD {value}"

        composer = LabelComposer(sku_generator=FixedSKUGenerator(), currency_formatter=formatter)
        result = composer.compose(LabelInput(
            business_name="Acme",
            product_name="Widget",
            selling_price_text="12.5",
            show_price=True,
        ))
        self.assertEqual(seen, [12.5])
        self.assertEqual(result.price_text, "USD 12.5")

    def test_title_is_uppercased_without_collapsing_whitespace(self):
        composer = LabelComposer(sku_generator=FixedSKUGenerator())
        result = composer.compose(LabelInput(business_name="Acme", product_name="blue  widget "))
        self.assertEqual(result.title_text, "BLUE  WIDGET ")

    def test_business_name_passed_to_generator(self):
        generator = FixedSKUGenerator()
        LabelComposer(sku_generator=generator).compose(LabelInput(business_name="Acme Traders", product_name="Widget"))
        self.assertEqual(generator.names, ["Acme Traders"])

    def test_code_type_passed_through(self):
        composer = LabelComposer(sku_generator=FixedSKUGenerator())
        for code_type in CodeType:
            result = composer.compose(LabelInput(business_name="Acme", product_name="Widget", code_type=code_type))
            self.assertIs(result.code_type, code_type)
            self.assertEqual(result.layout_mode, code_type.value)

    def test_generator_failure_is_returned(self):
        composer = LabelComposer(sku_generator=FailingSKUGenerator())
        result = composer.compose(LabelInput(business_name="Acme", product_name="Widget"))
        self.assertIsInstance(result, LabelError)
        self.assertEqual(result.kind, ErrorKind.GENERATION_FAILED)
        self.assertIn("random source unavailable", result.detail)

    def test_formatter_failure_is_returned(self):
        def formatter(value):
            raise ValueError("no locale")

        composer = LabelComposer(sku_generator=FixedSKUGenerator(), currency_formatter=formatter)
        result = composer.compose(LabelInput(
            business_name="Acme",
            product_name="Widget",
            selling_price_text="5",
            show_price=True,
        ))
        self.assertEqual(result.kind, ErrorKind.GENERATION_FAILED)

    def test_input_is_not_mutated(self):
        label_input = LabelInput(business_name="Acme", product_name="widget")
        LabelComposer(sku_generator=FixedSKUGenerator()).compose(label_input)
        self.assertEqual(label_input.product_name, "widget")
        with self.assertRaises(FrozenInstanceError):
            label_input.product_name = "other"

    def test_end_to_end_with_real_generator(self):
        result = LabelComposer().compose(LabelInput(
            business_name="Acme Traders",
            product_name="Widget",
            selling_price_text="19.99",
            show_price=True,
            code_type=CodeType.QR,
        ))
        self.assertIsInstance(result, LabelDescriptor)
        self.assertEqual(result.title_text, "WIDGET")
        self.assertEqual(result.price_text, "$19.99")
        self.assertRegex(result.sku, r"^AC\d{8,10}$")
        self.assertEqual(result.code_type, CodeType.QR)
        self.assertTrue(result.show_qr)
        self.assertFalse(result.show_barcode)
        self.assertEqual(result.document_title, f"SKU_{result.sku}")

    def test_each_call_is_a_fresh_draw(self):
        composer = LabelComposer()
        label_input = LabelInput(business_name="Acme", product_name="Widget")
        skus = {composer.compose(label_input).sku for _ in range(20)}
        self.assertGreater(len(skus), 1)


class TestDescriptor(unittest.TestCase):
    def test_both_shows_both_codes(self):
        descriptor = LabelDescriptor("WIDGET", None, "AC12345678", CodeType.BOTH)
        self.assertTrue(descriptor.show_barcode)
        self.assertTrue(descriptor.show_qr)

    def test_barcode_only(self):
        descriptor = LabelDescriptor("WIDGET", None, "AC12345678", CodeType.BARCODE)
        self.assertTrue(descriptor.show_barcode)
        self.assertFalse(descriptor.show_qr)

    def test_code_type_labels(self):
        self.assertEqual(CodeType.BARCODE.label, "Barcode (Code 128, Recommended)")
        self.assertEqual(CodeType.QR.label, "QR Code")


if __name__ == "__main__":
    unittest.main()

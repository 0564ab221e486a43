# label_composer.py
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from code_type import CodeType
from price_handler import PriceHandler
from sku_generator import SKUGenerator


class ErrorKind(Enum):
    MISSING_REQUIRED_FIELD = "missing_required_field"
    INVALID_PRICE = "invalid_price"
    GENERATION_FAILED = "generation_failed"


ERROR_MESSAGES = {
    ErrorKind.MISSING_REQUIRED_FIELD: "Please fill business name and product name",
    ErrorKind.INVALID_PRICE: "Please enter a valid selling price",
    ErrorKind.GENERATION_FAILED: "Failed to generate SKU",
}


@dataclass(frozen=True)
class LabelInput:
    business_name: str
    product_name: str
    selling_price_text: str = ""
    show_price: bool = False
    code_type: CodeType = CodeType.BARCODE


@dataclass(frozen=True)
class LabelDescriptor:
    title_text: str
    price_text: Optional[str]
    sku: str
    code_type: CodeType

    @property
    def layout_mode(self):
        return self.code_type.value

    @property
    def show_barcode(self):
        return self.code_type in (CodeType.BARCODE, CodeType.BOTH)

    @property
    def show_qr(self):
        return self.code_type in (CodeType.QR, CodeType.BOTH)

    @property
    def document_title(self):
        return f"SKU_{self.sku}"


@dataclass(frozen=True)
class LabelError:
    kind: ErrorKind
    detail: str = ""

    @property
    def message(self):
        return ERROR_MESSAGES[self.kind]


ComposeResult = Union[LabelDescriptor, LabelError]


class LabelComposer:
    """Validates label form input and assembles what goes on the label"""

    def __init__(self, sku_generator: Optional[SKUGenerator] = None,
                 currency_formatter: Optional[Callable[[float], str]] = None):
        self.price_handler = PriceHandler()
        self.sku_generator = sku_generator or SKUGenerator()
        self.currency_formatter = currency_formatter or self.price_handler.format_currency

    def compose(self, label_input: LabelInput) -> ComposeResult:
        """
        Validate input and build a LabelDescriptor.

        Failures come back as a LabelError value, checked in order: missing
        business/product name, then price (only when it is shown), then
        anything raised while generating. Nothing is raised to the caller.
        """
        if not (label_input.business_name or "").strip() or not (label_input.product_name or "").strip():
            return LabelError(ErrorKind.MISSING_REQUIRED_FIELD)

        price = None
        if label_input.show_price:
            price = self.price_handler.parse_price(label_input.selling_price_text)
            if price is None:
                return LabelError(ErrorKind.INVALID_PRICE, detail=str(label_input.selling_price_text))

        try:
            sku = self.sku_generator.generate(label_input.business_name)
            price_text = self.currency_formatter(price) if label_input.show_price else None

            return LabelDescriptor(
                title_text=label_input.product_name.upper(),
                price_text=price_text,
                sku=sku,
                code_type=label_input.code_type,
            )
        except Exception as e:
            return LabelError(ErrorKind.GENERATION_FAILED, detail=str(e))

from enum import Enum


class CodeType(Enum):
    BARCODE = "barcode"
    QR = "qr"
    BOTH = "both"

    @property
    def label(self):
        return CODE_TYPE_LABELS[self]


CODE_TYPE_LABELS = {
    CodeType.BARCODE: "Barcode (Code 128, Recommended)",
    CodeType.QR: "QR Code",
    CodeType.BOTH: "Barcode + QR Code",
}

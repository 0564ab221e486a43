import streamlit as st
import barcode
from barcode.writer import ImageWriter
import qrcode
from qrcode.constants import ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q, ERROR_CORRECT_H
import io

from config import PrintConfig

QR_ERROR_LEVELS = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}

MM_PER_INCH = 25.4


class BarcodeGenerator:
    """Generates scannable barcode and QR images for SKUs"""

    def __init__(self, config=None):
        self.config = config or PrintConfig()

    def generate_barcode_image(self, payload):
        """Generate a Code 128 barcode PNG for the given payload"""
        if not payload:
            raise ValueError("Barcode payload cannot be empty")

        # Bar sizes are configured in screen pixels, the writer wants mm
        dpi = self.config.get("preview_dpi")
        options = {
            "module_width": self.config.get("barcode_bar_width_px") * MM_PER_INCH / dpi,
            "module_height": self.config.get("barcode_height_px") * MM_PER_INCH / dpi,
            "quiet_zone": 0,
            "write_text": False,
            "dpi": dpi,
        }

        try:
            barcode_class = barcode.get_barcode_class('code128')
            barcode_obj = barcode_class(payload, writer=ImageWriter())

            # Save to bytes buffer
            buffer = io.BytesIO()
            barcode_obj.write(buffer, options=options)
            buffer.seek(0)
        except Exception as e:
            raise ValueError(f"Cannot encode {payload!r} as Code 128: {e}") from e

        return buffer

    def generate_qr_image(self, payload):
        """Generate a QR code PNG for the given payload"""
        if not payload:
            raise ValueError("QR payload cannot be empty")

        level = str(self.config.get("qr_error_correction")).upper()
        border = self.config.get("qr_border")

        qr = qrcode.QRCode(
            error_correction=QR_ERROR_LEVELS.get(level, ERROR_CORRECT_H),
            border=border,
        )
        qr.add_data(payload)
        qr.make(fit=True)

        # Pick the box size that gets closest to the configured pixel size
        total_modules = qr.modules_count + 2 * border
        qr.box_size = max(1, round(self.config.get("qr_size_px") / total_modules))

        img = qr.make_image(fill_color="black", back_color="white")
        buffer = io.BytesIO()
        img.save(buffer)
        buffer.seek(0)

        return buffer

    def display_barcode(self, payload):
        """Display barcode in Streamlit"""
        try:
            buffer = self.generate_barcode_image(payload)
            st.image(buffer)
            return buffer
        except Exception as e:
            st.error(f"Error generating barcode: {e}")
            return None

    def display_qr(self, payload):
        """Display QR code in Streamlit"""
        try:
            buffer = self.generate_qr_image(payload)
            st.image(buffer, width=self.config.get("qr_size_px"))
            return buffer
        except Exception as e:
            st.error(f"Error generating QR code: {e}")
            return None

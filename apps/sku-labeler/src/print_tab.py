import streamlit as st
from reportlab.pdfgen import canvas
from reportlab.lib.units import inch
from reportlab.graphics.barcode import code128
from reportlab.graphics.barcode.qr import QrCodeWidget
from reportlab.graphics.shapes import Drawing
from reportlab.graphics import renderPDF
import io

from config import PrintConfig
from barcode_generator import BarcodeGenerator


class PrintTab:
    def __init__(self, config=None, barcode_generator=None, debug_tab=None):
        self.config = config or PrintConfig()
        self.barcode_generator = barcode_generator or BarcodeGenerator(self.config)
        self.debug_tab = debug_tab
        self._update_dimensions_from_config()

    def _update_dimensions_from_config(self):
        """Update dimensions from configuration"""
        self.page_width = self.config.get("label_width_in") * inch
        self.page_height = self.config.get("label_height_in") * inch
        self.content_width = self.config.get("content_width_in") * inch
        self.content_height = self.config.get("content_height_in") * inch
        self.title_font_size = self.config.get("title_font_size")
        self.price_font_size = self.config.get("price_font_size")
        self.sku_font_size = self.config.get("sku_font_size")
        self.barcode_width = self.config.get("barcode_width_in") * inch
        self.barcode_height = self.config.get("barcode_height_in") * inch
        self.qr_size = self.config.get("qr_size_in") * inch
        self.qr_level = str(self.config.get("qr_error_correction")).upper()

    def render(self, descriptor):
        """Render the print preview and label download for a descriptor"""
        st.write("### Print Preview")

        with st.container(border=True):
            self._render_preview(descriptor)

        try:
            pdf_buffer = self.generate_label_pdf(descriptor)
            st.download_button(
                label="🖨️ Print Label",
                data=pdf_buffer.getvalue(),
                file_name=f"{descriptor.document_title}.pdf",
                mime="application/pdf",
                key="download_label_pdf",
                on_click=self._log_print,
                args=(descriptor,)
            )
        except Exception as e:
            st.error(f"Error generating label PDF: {e}")

    def _render_preview(self, descriptor):
        """Render the on-screen label preview"""
        st.markdown(f"**{descriptor.title_text}**")

        if descriptor.price_text:
            st.markdown(f"**{descriptor.price_text}**")

        if descriptor.show_qr and descriptor.show_barcode:
            col1, col2 = st.columns([1, 2])
            with col1:
                self.barcode_generator.display_qr(descriptor.sku)
            with col2:
                self.barcode_generator.display_barcode(descriptor.sku)
                st.caption(descriptor.sku)
        elif descriptor.show_qr:
            self.barcode_generator.display_qr(descriptor.sku)
        elif descriptor.show_barcode:
            self.barcode_generator.display_barcode(descriptor.sku)
            st.caption(descriptor.sku)

    def _log_print(self, descriptor):
        if self.debug_tab:
            self.debug_tab.add_log("PRINT", f"{descriptor.layout_mode} label printed", {"sku": descriptor.sku})

    def generate_label_pdf(self, descriptor):
        """Generate a single-label PDF sized to the physical label"""
        buffer = io.BytesIO()
        c = canvas.Canvas(buffer, pagesize=(self.page_width, self.page_height))
        c.setTitle(descriptor.document_title)

        self._draw_label_content(c, descriptor)

        c.showPage()
        c.save()
        buffer.seek(0)
        return buffer

    def _draw_label_content(self, c, descriptor):
        """Draw title, price and codes centred in the content box"""
        x = (self.page_width - self.content_width) / 2
        top = self.page_height - (self.page_height - self.content_height) / 2
        center_x = self.page_width / 2
        padding = 1
        content_width = self.content_width - (2 * padding)

        # Title
        y = top - self.title_font_size
        title = descriptor.title_text
        if c.stringWidth(title, "Helvetica-Bold", self.title_font_size) > content_width:
            title = self._truncate_text(c, title, content_width, self.title_font_size, "Helvetica-Bold")
        c.setFont("Helvetica-Bold", self.title_font_size)
        c.drawCentredString(center_x, y, title)

        # Price
        if descriptor.price_text:
            y -= self.price_font_size + 1
            c.setFont("Helvetica-Bold", self.price_font_size)
            c.drawCentredString(center_x, y, descriptor.price_text)

        code_top = y - 2
        bottom = top - self.content_height

        if descriptor.show_qr and descriptor.show_barcode:
            qr_size = min(self.qr_size, code_top - bottom)
            self._draw_qr(c, descriptor.sku, x + padding, code_top - qr_size, qr_size)
            barcode_x = x + padding + qr_size + 2
            barcode_width = min(self.barcode_width, x + self.content_width - padding - barcode_x)
            self._draw_barcode_with_text(c, descriptor.sku, barcode_x, code_top, barcode_width, bottom)
        elif descriptor.show_qr:
            qr_size = min(self.qr_size, code_top - bottom)
            self._draw_qr(c, descriptor.sku, center_x - qr_size / 2, code_top - qr_size, qr_size)
        elif descriptor.show_barcode:
            self._draw_barcode_with_text(c, descriptor.sku, center_x - self.barcode_width / 2,
                                         code_top, self.barcode_width, bottom)

    def _draw_barcode_with_text(self, c, sku, x, top, width, bottom):
        """Draw a Code 128 barcode with the SKU printed underneath"""
        text_space = self.sku_font_size + 1
        height = min(self.barcode_height, top - bottom - text_space)
        barcode_y = top - height

        try:
            # Scale bar width so the whole symbol spans the requested width
            natural_width = code128.Code128(sku, barWidth=1, quiet=0).width
            barcode_obj = code128.Code128(sku, barWidth=width / natural_width, barHeight=height, quiet=0)
            barcode_obj.drawOn(c, x, barcode_y)
        except Exception:
            c.setFont("Helvetica", self.sku_font_size)
            c.drawCentredString(x + width / 2, barcode_y + height / 2, f"#{sku}")

        c.setFont("Courier-Bold", self.sku_font_size)
        c.drawCentredString(x + width / 2, barcode_y - self.sku_font_size, sku)

    def _draw_qr(self, c, sku, x, y, size):
        """Draw a QR code of the given size with its lower-left corner at x, y"""
        widget = QrCodeWidget(sku, barLevel=self.qr_level)
        bounds = widget.getBounds()
        width = bounds[2] - bounds[0]
        height = bounds[3] - bounds[1]
        drawing = Drawing(size, size, transform=[size / width, 0, 0, size / height, 0, 0])
        drawing.add(widget)
        renderPDF.draw(drawing, c, x, y)

    def _truncate_text(self, c, text, max_width, font_size, font_name="Helvetica"):
        """Truncate text to fit within max width"""
        if c.stringWidth(text, font_name, font_size) <= max_width:
            return text

        low, high = 0, len(text)
        while low < high:
            mid = (low + high) // 2
            test_text = text[:mid] + "..."
            if c.stringWidth(test_text, font_name, font_size) <= max_width:
                low = mid + 1
            else:
                high = mid

        return text[:max(low - 1, 0)] + "..."

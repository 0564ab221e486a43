import streamlit as st
from dotenv import load_dotenv

from config import PrintConfig
from barcode_generator import BarcodeGenerator
from label_composer import LabelComposer
from price_handler import PriceHandler
from sku_generator import SKUGenerator
from generator_tab import GeneratorTab
from print_tab import PrintTab
from debug_tab import DebugTab


class SKULabelerUI:
    def __init__(self, config):
        self.config = config
        self.debug_tab = DebugTab()
        self.print_tab = PrintTab(config, BarcodeGenerator(config), self.debug_tab)
        composer = LabelComposer(SKUGenerator(), PriceHandler().format_currency)
        self.generator_tab = GeneratorTab(config, self.print_tab, self.debug_tab, composer)

    def render(self):
        tab1, tab2 = st.tabs(["🏷️ Generate", "🔧 Debug"])

        with tab1:
            self.generator_tab.render()

        with tab2:
            self.debug_tab.render()


def main():
    """Main function to run the Streamlit app"""
    # Set page config - this must be the first Streamlit command
    st.set_page_config(page_title="SKU Generator", page_icon="🏷️")

    # .env is optional, PRINT_CONFIG_FILE and CODE_TYPE_OPTIONS may come from it
    load_dotenv()

    if "print_config" not in st.session_state:
        st.session_state.print_config = PrintConfig()

    st.title("SKU Generator")

    ui = SKULabelerUI(st.session_state.print_config)
    ui.render()


if __name__ == "__main__":
    main()

import streamlit as st

from label_composer import LabelComposer, LabelInput, LabelError


class GeneratorTab:
    def __init__(self, config, print_tab, debug_tab, composer=None):
        self.config = config
        self.print_tab = print_tab
        self.debug_tab = debug_tab
        self.composer = composer or LabelComposer()

        if 'label_descriptor' not in st.session_state:
            st.session_state.label_descriptor = None
        if 'label_error' not in st.session_state:
            st.session_state.label_error = None
        # Survives while the price field is hidden
        if 'selling_price_text' not in st.session_state:
            st.session_state.selling_price_text = ""

    def render(self):
        """Render the SKU generator form and the generated label"""
        st.subheader("SKU Generator")

        business_name = st.text_input(
            "Business Name *",
            placeholder="Enter business name",
            key="business_name",
            on_change=self._clear_result
        )
        product_name = st.text_input(
            "Product Name *",
            placeholder="Enter product name",
            key="product_name",
            on_change=self._clear_result
        )

        show_price = st.checkbox(
            "Include price on label",
            key="show_price",
            on_change=self._clear_result
        )
        selling_price = ""
        if show_price:
            # Widget state is dropped while unrendered, restore the last typed price
            if 'selling_price' not in st.session_state:
                st.session_state.selling_price = st.session_state.selling_price_text
            selling_price = st.text_input(
                "Selling Price",
                placeholder="Enter selling price",
                key="selling_price",
                on_change=self._remember_price
            )

        code_types = self.config.get_code_types()
        default_code_type = self.config.get_default_code_type()
        code_type = st.radio(
            "Code Type",
            options=code_types,
            index=code_types.index(default_code_type),
            format_func=lambda option: option.label,
            key="code_type",
            on_change=self._clear_result
        )

        if st.button("Generate SKU", key="generate_sku", type="primary"):
            self._generate(LabelInput(
                business_name=business_name,
                product_name=product_name,
                selling_price_text=selling_price,
                show_price=show_price,
                code_type=code_type
            ))

        if st.session_state.label_error:
            st.error(st.session_state.label_error.message)

        descriptor = st.session_state.label_descriptor
        if descriptor:
            # Code block has a built-in copy button
            st.write("### Generated SKU")
            st.code(descriptor.sku, language=None)
            self.print_tab.render(descriptor)

    def _generate(self, label_input):
        """Run one generation attempt and store its outcome in session state"""
        self._clear_result()

        result = self.composer.compose(label_input)
        if isinstance(result, LabelError):
            st.session_state.label_error = result
            self.debug_tab.add_log("GENERATE", result.message, {"kind": result.kind.value, "detail": result.detail})
        else:
            st.session_state.label_descriptor = result
            self.debug_tab.add_log("GENERATE", f"Generated SKU {result.sku}", {
                "sku": result.sku,
                "title": result.title_text,
                "price": result.price_text,
                "code_type": result.layout_mode
            })

    def _remember_price(self):
        st.session_state.selling_price_text = st.session_state.selling_price
        self._clear_result()

    def _clear_result(self):
        st.session_state.label_error = None
        st.session_state.label_descriptor = None

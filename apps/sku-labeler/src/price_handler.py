import math
import re

# Plain ASCII decimal, optional sign and exponent
PRICE_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class PriceHandler:
    def __init__(self, currency_symbol="$"):
        self.currency_symbol = currency_symbol

    def parse_price(self, price_text):
        """
        Parse a selling price typed into the form.
        Returns the price as float, or None when it is blank, not a number,
        not finite, or not above zero.
        """
        if price_text is None:
            return None

        text = str(price_text).strip()
        if not text:
            return None

        if not PRICE_PATTERN.fullmatch(text):
            return None

        try:
            price = float(text)
        except (ValueError, TypeError):
            return None

        if not math.isfinite(price) or price <= 0:
            return None

        return price

    def format_currency(self, value):
        """Format a number as en-US dollars (1234.5 becomes $1,234.50)"""
        amount = float(value)
        sign = "-" if amount < 0 else ""
        return f"{sign}{self.currency_symbol}{abs(amount):,.2f}"

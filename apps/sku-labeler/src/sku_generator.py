# sku_generator.py
import random


class EmptyInputError(ValueError):
    """Raised when a SKU is requested for a blank business name"""


class SKUGenerator:
    def __init__(self, rng=None, min_digits=8, max_digits=10):
        self.rng = rng or random.Random()
        self.min_digits = min_digits
        self.max_digits = max_digits

    def generate(self, business_name):
        """
        Generate SKU from business name.

        SKU is the first two characters of the trimmed name, uppercased, followed
        by 8-10 random digits. Shorter names give a shorter prefix, no padding.
        Every call is an independent draw, there is no collision check.
        """
        name = (business_name or "").strip()
        if not name:
            raise EmptyInputError("Business name cannot be empty")

        prefix = name[:2].upper()
        digit_count = self.rng.randint(self.min_digits, self.max_digits)
        digits = "".join(str(self.rng.randint(0, 9)) for _ in range(digit_count))

        return f"{prefix}{digits}"

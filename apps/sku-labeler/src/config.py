import os
import json

from code_type import CodeType

DEFAULT_CODE_TYPES = [CodeType.BARCODE.value, CodeType.QR.value]


class PrintConfig:
    def __init__(self, config_file=None):
        self.config_file = config_file or os.getenv("PRINT_CONFIG_FILE", "print_config.json")
        self.defaults = {
            "label_width_in": 2.0,
            "label_height_in": 1.0,
            "content_width_in": 1.6,
            "content_height_in": 0.8,
            "title_font_size": 8,
            "price_font_size": 8,
            "sku_font_size": 6,
            "barcode_width_in": 1.0,
            "barcode_height_in": 0.4,
            "qr_size_in": 0.5,
            "barcode_bar_width_px": 2,
            "barcode_height_px": 38,
            "preview_dpi": 96,
            "qr_size_px": 48,
            "qr_error_correction": "H",
            "qr_border": 4,
            "code_types": list(DEFAULT_CODE_TYPES),
            "default_code_type": CodeType.BARCODE.value
        }
        self.config = self._load_config()

    def _load_config(self):
        """Load configuration from file or use defaults"""
        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, 'r') as f:
                    loaded_config = json.load(f)
                    # Merge with defaults to ensure all keys exist
                    config = self.defaults.copy()
                    config.update(loaded_config)
                    return config
            except Exception as e:
                print(f"Error loading config file: {e}. Using defaults.")
                return self.defaults.copy()
        else:
            # Create default config file
            self._save_config(self.defaults)
            return self.defaults.copy()

    def _save_config(self, config):
        """Save configuration to file"""
        try:
            with open(self.config_file, 'w') as f:
                json.dump(config, f, indent=2)
        except Exception as e:
            print(f"Error saving config file: {e}")

    def get(self, key, default=None):
        """Get a configuration value, null or missing values fall back to the default"""
        value = self.config.get(key)
        if value is None:
            return default if default is not None else self.defaults.get(key)
        return value

    def update(self, new_config):
        """Update configuration and save to file"""
        self.config.update(new_config)
        self._save_config(self.config)

    def get_all(self):
        """Get all configuration values"""
        return self.config.copy()

    def get_code_types(self):
        """
        Code types offered in the form, in display order.
        CODE_TYPE_OPTIONS (comma separated) overrides the config file.
        """
        env_options = os.getenv("CODE_TYPE_OPTIONS")
        if env_options:
            raw_options = [option.strip() for option in env_options.split(",")]
        else:
            raw_options = self.get("code_types") or []

        code_types = []
        for option in raw_options:
            try:
                code_type = CodeType(str(option).lower())
            except ValueError:
                print(f"Ignoring unknown code type: {option}")
                continue
            if code_type not in code_types:
                code_types.append(code_type)

        if not code_types:
            code_types = [CodeType(value) for value in DEFAULT_CODE_TYPES]
        return code_types

    def get_default_code_type(self):
        """Preselected code type, falls back to the first offered option"""
        code_types = self.get_code_types()
        try:
            default = CodeType(self.get("default_code_type"))
        except ValueError:
            return code_types[0]
        return default if default in code_types else code_types[0]

"""
Errors raised by jsonmaplayout.

Formatting itself never raises; only building a layout from invalid options
or loading an invalid configuration does.
"""


class LayoutConfigError(ValueError):
    """Invalid layout option or configuration value."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"Configuration key '{key}' {message}")

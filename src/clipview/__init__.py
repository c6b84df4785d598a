"""clipview - inspect every format on the clipboard."""

__version__ = "0.1.0"

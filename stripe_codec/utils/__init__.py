"""Form encoding helpers."""

from .form import FormValues, format_key, format_value

__all__ = ["FormValues", "format_key", "format_value"]

from .clipboard import write_clipboard

__all__ = [
    "write_clipboard",
]

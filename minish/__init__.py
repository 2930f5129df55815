"""An interactive shell prompt with a quote-aware tokenizer and string helpers."""

__version__ = "0.1.0"
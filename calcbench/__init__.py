"""An expression calculator with its tokenizer, and a small sorting and character-buffer benchmark."""

__version__ = "0.1.0"
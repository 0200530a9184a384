"""Command protocol: tokenizer and direction types."""

"""Aemy: a prefix-command WhatsApp bot."""

__version__ = "0.1.0"

"""Structured document generation on top of a chat-completion provider."""

__version__ = "0.1.0"

"""Textual adapters."""

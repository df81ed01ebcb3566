"""Text-file stock keeping for a small library: products, books, categories, suppliers, users and transactions."""

__version__ = "0.1.0"
"""Encrypted integer IDs: AES-encrypted numbers rendered in base 30 or 50, with a SQLite keystore."""

__version__ = "1.5.0"
"""Thread-safe containers, a delay queue, codecs, crypto helpers, i18n, zip archives, SQL value types and a Redis client."""

__version__ = "0.1.0"
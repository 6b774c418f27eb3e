"""Small stateless helpers: dates, files, ids, padding and guards."""

__version__ = "0.1.0"

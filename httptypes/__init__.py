"""HTTP protocol types: versions, dates, transfer encodings and connection upgrades."""

__version__ = "0.1.0"
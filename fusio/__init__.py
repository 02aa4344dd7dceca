"""Async file interfaces, an in-memory object-store backend and Parquet adaptors."""

__version__ = "0.1.0"

__all__ = ["buf", "errors", "fs", "objectstore", "options", "parquet", "roundtrip"]
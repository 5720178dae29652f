"""Terminal helpers, a rust-analyzer project generator and worked exercise solutions."""

__version__ = "5.5.1"
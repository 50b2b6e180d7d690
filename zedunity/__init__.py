"""Zed integration for Unity — project generation and editor launch."""

__version__ = "0.1.0"

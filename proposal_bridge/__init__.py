"""Proposal Bridge - receives proposal client records, scores them and forwards them downstream."""

__version__ = "1.0.0"

"""Utility helpers."""
from .importing import load_from_source

__all__ = ["load_from_source"]

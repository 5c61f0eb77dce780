# visuals/__init__.py
"""
Visual helpers: before/after comparison figures for the CLI.
"""
from .plots import compare_and_save

__all__ = ["compare_and_save"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/utils/__init__.py
"""Utility helpers: escaping, permalinks, front matter and text."""

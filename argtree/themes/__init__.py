"""
Argtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .colors import ColorsMeta, OneColors, get_argtree_theme

__all__ = [
    "OneColors",
    "get_argtree_theme",
    "ColorsMeta",
]

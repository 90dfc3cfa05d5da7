# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argtree CLI applications."""
from rich.console import Console

from argtree.themes import get_argtree_theme

console = Console(color_system="truecolor", theme=get_argtree_theme())

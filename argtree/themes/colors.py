# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palette and Rich theme used by the Argtree console.

`OneColors` holds the One Dark palette as hex strings. Appending `_b` to any
color name yields the bold variant, e.g. `OneColors.DARK_RED_b` is
`"bold #E06C75"`, so palette entries can be dropped straight into Rich markup:

    console.print(f"[{OneColors.DARK_RED_b}]error:[/] unknown command")
"""
from __future__ import annotations

from rich.theme import Theme


class ColorsMeta(type):
    """Resolves `<NAME>_b` attributes to the bold variant of `<NAME>`."""

    def __getattr__(cls, name: str) -> str:
        if name.endswith("_b"):
            base = name[:-2]
            try:
                value = type.__getattribute__(cls, base)
            except AttributeError:
                raise AttributeError(f"{cls.__name__} has no color '{base}'") from None
            return f"bold {value}"
        raise AttributeError(f"{cls.__name__} has no attribute '{name}'")


class OneColors(metaclass=ColorsMeta):
    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#E06C75"
    LIGHT_RED = "#BE5046"
    GREEN = "#98C379"
    DARK_YELLOW = "#E5C07B"
    LIGHT_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"


def get_argtree_theme() -> Theme:
    """Return the Rich theme with Argtree's named styles."""
    return Theme(
        {
            "argtree.error": f"bold {OneColors.DARK_RED}",
            "argtree.warning": OneColors.DARK_YELLOW,
            "argtree.hint": OneColors.COMMENT_GREY,
            "argtree.command": f"bold {OneColors.CYAN}",
            "argtree.flag": OneColors.BLUE,
            "argtree.value": OneColors.GREEN,
            "argtree.path": OneColors.MAGENTA,
            "repr.number": OneColors.LIGHT_YELLOW,
            "repr.str": OneColors.GREEN,
        }
    )

"""Visualization theme presets for island renderers.

Themes are frozen dataclasses that group all styling constants together.
Renderers accept a ``Theme`` instance instead of referencing hard-coded
module-level constants, so palettes can be swapped via ``--theme``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # Indexed by cell color: background, team A, team B
    cell_colors: tuple[str, ...] = ("white", "lightcoral", "lightblue")
    # Indexed by team value (1, 2); slot 0 unused
    agent_colors: tuple[str, ...] = ("black", "darkred", "darkblue")
    title_color: str = "black"
    figure_facecolor: str = "white"


DEFAULT_THEME = Theme()

DARK_THEME = Theme(
    cell_colors=("#1A1A1A", "#C0392B", "#2E86C1"),
    agent_colors=("#FFFFFF", "#FADBD8", "#D6EAF8"),
    title_color="#EEEEEE",
    figure_facecolor="#0D0D0D",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]

"""Visualization package: themes and snapshot rendering.

Only the themes are re-exported here so that resolving ``--theme`` does not
import pyplot. Renderers are imported from ``viz.render`` once a backend has
been selected.
"""

from turmite_islands.viz.theme import DARK_THEME, DEFAULT_THEME, REGISTERED_THEMES, Theme, get_theme

__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
]

"""
ui/
---
Presentation layer.

    from ui import render_bars
    from ui import config_panel, playback_controls, …
"""

from ui.canvas import CanvasConfig, render_bars

from ui.controls import (
    config_panel,
    playback_controls,
    pseudocode_viewer,
    stats_panel,
    summary_panel,
)

__all__ = [
    "CanvasConfig",
    "config_panel",
    "playback_controls",
    "pseudocode_viewer",
    "render_bars",
    "stats_panel",
    "summary_panel",
]

"""
canvas.py — SVG Bar Renderer
=============================
Pure rendering function: array snapshot + highlights → SVG string.

Design decisions:
  - NO mutation.  The caller passes in everything it needs and gets back
    a string.
  - One <rect> per element; height proportional to value / max value.
  - Highlighted bars (the indices of the last event) get the accent
    color; a completed sort turns every bar green.
"""

from typing import Dict, Sequence


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    width:   int = 900
    height:  int = 500
    bg:      str = "#0d1117"
    padding: int = 8
    gap:     int = 1          # pixels between bars

    bar_colors: Dict[str, str] = {
        "default":     "#0ea5e9",   # cyan blue
        "highlighted": "#f43f5e",   # rose — compared / moved
        "complete":    "#10b981",   # emerald — sorted
    }


CONFIG = CanvasConfig()


def render_bars(
    snapshot: Sequence[int],
    highlighted: Sequence[int] = (),
    is_complete: bool = False,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        snapshot    : Values to draw, left to right.
        highlighted : Indices to draw in the highlight color.
        is_complete : Draw every bar in the "complete" color.
        config      : Visual config.
    """
    svg_parts = [
        f'<svg width="100%" height="100%" '
        f'viewBox="0 0 {config.width} {config.height}" preserveAspectRatio="none" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    ]

    n = len(snapshot)
    if n:
        top       = max(snapshot) or 1
        usable_w  = config.width - 2 * config.padding
        usable_h  = config.height - 2 * config.padding
        slot      = usable_w / n
        bar_w     = max(slot - config.gap, 1)
        marked    = set(highlighted)

        for i, value in enumerate(snapshot):
            h = usable_h * value / top
            x = config.padding + i * slot
            y = config.padding + usable_h - h
            if is_complete:
                color = config.bar_colors["complete"]
            elif i in marked:
                color = config.bar_colors["highlighted"]
            else:
                color = config.bar_colors["default"]
            svg_parts.append(
                f'<rect x="{x:.2f}" y="{y:.2f}" width="{bar_w:.2f}" height="{h:.2f}" '
                f'fill="{color}" data-index="{i}" data-value="{value}"/>'
            )

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)

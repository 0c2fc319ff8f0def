"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • config_panel       – algorithm / distribution / size pickers + audio toggle
  • playback_controls  – start / pause / reset
  • stats_panel        – comparisons, elapsed time, run state
  • summary_panel      – Recorder metrics for the current setup
  • pseudocode_viewer  – the selected algorithm's outline

Design:
  - All panels are stateless render functions.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import List, Optional

from algorithms import AlgoInfo
from arrays import Distribution
from config import MAX_SIZE, MIN_SIZE
from engine import DriverState, RunMetrics, RunState


# ---------------------------------------------------------------------------
# Config Panel
# ---------------------------------------------------------------------------
def config_panel(
    algorithms: List[AlgoInfo],
    state: DriverState,
    audio_enabled: bool = True,
) -> str:
    locked = "disabled" if state.is_sorting else ""

    algo_options = []
    for algo in algorithms:
        sel  = "selected" if algo.algorithm is state.algorithm else ""
        note = " (placeholder)" if algo.placeholder else ""
        algo_options.append(
            f'<option value="{algo.key}" {sel}>{escape(algo.label)}{note} — {escape(algo.complexity_time)}</option>'
        )

    dist_options = []
    for dist in Distribution:
        sel = "selected" if dist is state.distribution else ""
        dist_options.append(f'<option value="{dist.name.lower()}" {sel}>{dist.label}</option>')

    return f"""
    <div class="panel config-panel">
      <h3>⚙ Configuration</h3>
      <label>Algorithm</label>
      <select id="algo-selector" {locked}>{''.join(algo_options)}</select>
      <label>Distribution</label>
      <select id="dist-selector" {locked}>{''.join(dist_options)}</select>
      <label>Elements: <span id="size-val">{state.size}</span></label>
      <input type="range" id="size-input" min="{MIN_SIZE}" max="{MAX_SIZE}" value="{state.size}" {locked}>
      <label>
        <input type="checkbox" id="audio-toggle" {'checked' if audio_enabled else ''}>
        Sound on comparisons
      </label>
    </div>
    """


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(state: DriverState) -> str:
    if state.is_paused:
        start_label = "▶ Resume"
    else:
        start_label = "▶ Start"
    start_disabled = "disabled" if state.run_state is RunState.RUNNING else ""
    pause_disabled = "" if state.run_state is RunState.RUNNING else "disabled"

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-start" class="btn-primary" {start_disabled}>{start_label}</button>
        <button id="btn-pause" {pause_disabled}>⏸ Pause</button>
        <button id="btn-reset" class="btn-secondary">⟲ Reset</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Live Stats
# ---------------------------------------------------------------------------
def stats_panel(state: DriverState) -> str:
    return f"""
    <div class="panel stats-panel">
      <div class="stat"><span class="label">Comparisons</span>
        <span id="stat-comparisons">{state.comparisons}</span></div>
      <div class="stat"><span class="label">Steps</span>
        <span id="stat-events">{state.events}</span></div>
      <div class="stat"><span class="label">Time</span>
        <span id="stat-elapsed">{state.elapsed_seconds:.2f}s</span></div>
      <div class="stat"><span class="label">State</span>
        <span id="stat-state">{state.run_state.value}</span></div>
    </div>
    """


# ---------------------------------------------------------------------------
# Summary (Recorder metrics)
# ---------------------------------------------------------------------------
def summary_panel(metrics: Optional[RunMetrics] = None) -> str:
    if metrics is None:
        return """
        <div class="panel summary-panel">
          <h3>📊 Summary</h3>
          <p class="placeholder">Request a summary to see the full event counts.</p>
        </div>
        """

    return f"""
    <div class="panel summary-panel">
      <h3>📊 {escape(metrics.algo_label)} on {metrics.size} elements</h3>
      <table class="metrics-table">
        <tr><td>Comparisons</td><td>{metrics.comparisons}</td></tr>
        <tr><td>Swaps</td><td>{metrics.swaps}</td></tr>
        <tr><td>Updates</td><td>{metrics.updates}</td></tr>
        <tr><td>Frames</td><td>{metrics.total_events}</td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(info: Optional[AlgoInfo]) -> str:
    if info is None or not info.pseudocode:
        return """<div class="code-block placeholder">Select an algorithm to view pseudocode</div>"""

    lines_html = [
        f'<div class="code-line" data-line="{i}">{escape(line)}</div>'
        for i, line in enumerate(info.pseudocode)
    ]
    banner = '<div class="code-note">Placeholder: animates Bubble Sort.</div>' if info.placeholder else ""
    return f"""
    <div class="code-block">
      {banner}
      {''.join(lines_html)}
    </div>
    """

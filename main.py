"""
main.py — Sorting Algorithm Visualizer Flask App
==================================================
The web server that powers the visualizer.

Routes:
  GET  /                 – main UI
  GET  /api/algorithms   – registry listing
  GET  /api/state        – current playback state
  POST /api/config       – change size / algorithm / distribution
  POST /api/start        – start, or resume after pause
  POST /api/pause        – pause
  POST /api/reset        – back to idle with a fresh array
  POST /api/tick         – advance whatever steps are due (polled by the page)
  GET  /api/summary      – full event counts for the current array + algorithm
  GET  /api/compare      – Comparison Mode: two algorithms over the current array

State management:
  A PlaybackDriver holds a live, suspended sort stream, which cannot go
  into the cookie session.  Drivers therefore live in an in-process dict
  keyed by a random id stored in the Flask session (in-memory only; one
  process; the least recently used entries beyond MAX_SESSIONS are
  evicted).  Each user's entry holds:
    • driver         – the PlaybackDriver
    • tones          – comparison tones not yet sent to the browser
    • audio_enabled
    • lock           – held around every driver call; the dev server is
                       threaded and ticks race with button clicks
"""

from flask import Flask, render_template_string, request, jsonify, session
import logging
import os
import secrets
import sys
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import List

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import get_algorithm, list_algorithms
from config import MAX_SESSIONS, SECRET_KEY_ENV
from engine import PlaybackDriver, Recorder, compare, tone_frequency
from ui import (
    config_panel,
    playback_controls,
    pseudocode_viewer,
    render_bars,
    stats_panel,
    summary_panel,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = os.environ.get(SECRET_KEY_ENV) or secrets.token_hex(32)


# ---------------------------------------------------------------------------
# Per-user playback state
# ---------------------------------------------------------------------------
@dataclass
class UserSession:
    driver:        PlaybackDriver
    tones:         List[float] = field(default_factory=list)
    audio_enabled: bool        = True
    lock:          threading.Lock = field(default_factory=threading.Lock, repr=False)

    def queue_tone(self, value: int, max_value: int) -> None:
        if self.audio_enabled:
            self.tones.append(round(tone_frequency(value, max_value), 1))

    def drain_tones(self) -> List[float]:
        tones, self.tones = self.tones, []
        return tones


_SESSIONS: "OrderedDict[str, UserSession]" = OrderedDict()
_SESSIONS_LOCK = threading.Lock()


def get_user() -> UserSession:
    """Look up (or create) this browser's UserSession."""
    sid = session.get("sid")
    with _SESSIONS_LOCK:
        user = _SESSIONS.get(sid) if sid else None
        if user is not None:
            _SESSIONS.move_to_end(sid)
            return user

        sid = secrets.token_hex(16)
        session["sid"] = sid
        user = UserSession(driver=PlaybackDriver())
        user.driver.on_comparison = user.queue_tone
        _SESSIONS[sid] = user
        logger.info("New playback session %s", sid[:8])

        while len(_SESSIONS) > MAX_SESSIONS:
            old_sid, _ = _SESSIONS.popitem(last=False)
            logger.info("Evicted least recently used playback session %s", old_sid[:8])
        return user


def state_payload(user: UserSession) -> dict:
    """Everything the page needs to redraw after any command."""
    state = user.driver.state()
    payload = state.to_dict()
    payload["svg"]      = render_bars(state.snapshot, state.highlighted, state.is_complete)
    payload["playback"] = playback_controls(state)
    payload["stats"]    = stats_panel(state)
    payload["tones"]    = user.drain_tones()
    return payload


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    user = get_user()
    with user.lock:
        state = user.driver.state()
        audio = user.audio_enabled

    html = render_template_string(INDEX_TEMPLATE,
        svg=render_bars(state.snapshot, state.highlighted, state.is_complete),
        config=config_panel(list_algorithms(), state, audio),
        playback=playback_controls(state),
        stats=stats_panel(state),
        summary=summary_panel(),
        pseudocode=pseudocode_viewer(get_algorithm(state.algorithm)),
    )
    return html


# ---------------------------------------------------------------------------
# API: Read-only
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


@app.route("/api/state")
def api_state():
    user = get_user()
    with user.lock:
        return jsonify(state_payload(user))


@app.route("/api/summary")
def api_summary():
    user = get_user()
    with user.lock:
        state = user.driver.state()

    rec = Recorder()
    rec.start(state.algorithm, state.snapshot)
    metrics = rec.run_to_completion()
    return jsonify({
        "metrics": metrics.to_dict(),
        "html":    summary_panel(metrics),
    })


@app.route("/api/compare")
def api_compare():
    """Run `left` (default: the selected algorithm) and `right` over the array on screen."""
    user = get_user()
    with user.lock:
        state = user.driver.state()

    left  = request.args.get("left") or state.algorithm.key
    right = request.args.get("right")
    if not right:
        return jsonify({"error": "Pick an algorithm to compare against"}), 400

    recorders = []
    for algorithm in (left, right):
        rec = Recorder()
        try:
            rec.start(algorithm, state.snapshot)
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        rec.run_to_completion()
        recorders.append(rec)

    return jsonify(compare(*recorders).to_dict())


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config", methods=["POST"])
def api_config():
    user = get_user()
    data = request.json or {}

    with user.lock:
        if "audio" in data:
            user.audio_enabled = bool(data["audio"])
            if set(data) == {"audio"}:
                return jsonify(state_payload(user))
        if user.driver.is_sorting:
            return jsonify({"error": "Reset before changing the configuration"}), 409

        try:
            new_config = user.driver.config.merge(data)
        except ValueError as e:
            return jsonify({"error": str(e)}), 400

        user.driver.configure(new_config)
        payload = state_payload(user)

    payload["pseudocode"] = pseudocode_viewer(get_algorithm(new_config.algorithm))
    payload["config"]     = new_config.to_dict()
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Playback Commands
# ---------------------------------------------------------------------------
@app.route("/api/start", methods=["POST"])
def api_start():
    user = get_user()
    with user.lock:
        user.driver.start()
        return jsonify(state_payload(user))


@app.route("/api/pause", methods=["POST"])
def api_pause():
    user = get_user()
    with user.lock:
        user.driver.pause()
        return jsonify(state_payload(user))


@app.route("/api/reset", methods=["POST"])
def api_reset():
    user = get_user()
    with user.lock:
        user.driver.reset()
        user.drain_tones()
        return jsonify(state_payload(user))


@app.route("/api/tick", methods=["POST"])
def api_tick():
    user = get_user()
    with user.lock:
        events  = user.driver.tick()
        payload = state_payload(user)
    payload["steps"] = len(events)
    return jsonify(payload)


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: #010409; color: #e6edf3;
      display: flex; height: 100vh; overflow: hidden;
    }
    #sidebar { width: 340px; padding: 24px 16px; overflow-y: auto; border-right: 1px solid #30363d; }
    #main { flex: 1; display: flex; flex-direction: column; padding: 16px; gap: 12px; }
    #canvas { flex: 1; }
    .panel { background: #161b22; border: 1px solid #30363d; border-radius: 8px; padding: 12px; margin-bottom: 12px; }
    .panel h3 { font-size: 14px; margin-bottom: 8px; }
    .panel label { display: block; font-size: 12px; color: #7d8590; margin: 8px 0 4px; }
    select, input[type=range] { width: 100%; }
    .button-row { display: flex; gap: 8px; }
    button { flex: 1; padding: 8px; border-radius: 6px; border: 1px solid #30363d; background: #1c2128; color: #e6edf3; cursor: pointer; }
    button:disabled { opacity: 0.4; cursor: default; }
    .btn-primary { background: #0ea5e9; border-color: #0ea5e9; }
    .stats-panel { display: flex; gap: 24px; }
    .stat .label { color: #7d8590; margin-right: 6px; }
    .code-block { font-family: monospace; font-size: 12px; white-space: pre; }
    .code-note { color: #f59e0b; margin-bottom: 6px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="config">{{ config|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div class="panel"><h3>📜 Pseudocode</h3><div id="pseudocode">{{ pseudocode|safe }}</div></div>
    <div id="summary">{{ summary|safe }}</div>
    <button id="btn-summary" class="btn-secondary">Summarise this run</button>
  </div>
  <div id="main">
    <div id="stats">{{ stats|safe }}</div>
    <div id="canvas">{{ svg|safe }}</div>
  </div>

  <script>
    let audioCtx = null;
    let polling = false;

    async function post(url, body) {
      const r = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(body || {}),
      });
      return r.json();
    }

    function playTone(freq) {
      if (!audioCtx) audioCtx = new (window.AudioContext || window.webkitAudioContext)();
      const osc = audioCtx.createOscillator();
      const gain = audioCtx.createGain();
      osc.connect(gain); gain.connect(audioCtx.destination);
      osc.type = 'sine';
      osc.frequency.value = freq;
      gain.gain.setValueAtTime(0.1, audioCtx.currentTime);
      gain.gain.exponentialRampToValueAtTime(0.001, audioCtx.currentTime + 0.05);
      osc.start();
      osc.stop(audioCtx.currentTime + 0.05);
    }

    function apply(data) {
      if (data.error) { console.warn(data.error); return; }
      document.getElementById('canvas').innerHTML = data.svg;
      document.getElementById('stats').innerHTML = data.stats;
      document.getElementById('playback').innerHTML = data.playback;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      (data.tones || []).slice(-1).forEach(playTone);
      ['algo-selector', 'dist-selector', 'size-input'].forEach(id => {
        document.getElementById(id).disabled = data.is_sorting;
      });
      if (data.run_state === 'running' && !polling) {
        polling = true;
        requestAnimationFrame(poll);
      }
    }

    async function poll() {
      const data = await post('/api/tick');
      polling = false;
      apply(data);
    }

    document.addEventListener('click', async (e) => {
      if (e.target.id === 'btn-start') apply(await post('/api/start'));
      if (e.target.id === 'btn-pause') apply(await post('/api/pause'));
      if (e.target.id === 'btn-reset') apply(await post('/api/reset'));
      if (e.target.id === 'btn-summary') {
        const r = await fetch('/api/summary');
        document.getElementById('summary').innerHTML = (await r.json()).html;
      }
    });

    document.getElementById('algo-selector').addEventListener('change', async (e) => {
      apply(await post('/api/config', {algorithm: e.target.value}));
    });
    document.getElementById('dist-selector').addEventListener('change', async (e) => {
      apply(await post('/api/config', {distribution: e.target.value}));
    });
    document.getElementById('size-input').addEventListener('input', (e) => {
      document.getElementById('size-val').textContent = e.target.value;
    });
    document.getElementById('size-input').addEventListener('change', async (e) => {
      const data = await post('/api/config', {size: e.target.value});
      if (data.size) {
        e.target.value = data.size;
        document.getElementById('size-val').textContent = data.size;
      }
      apply(data);
    });
    document.getElementById('audio-toggle').addEventListener('change', async (e) => {
      await post('/api/config', {audio: e.target.checked});
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    print("=" * 60)
    print("  Sorting Algorithm Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)

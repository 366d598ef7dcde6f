"""
main.py — Algorithm Stepper Flask App
======================================
The web server that powers the visualizer.

Routes:
  GET  /               – main UI
  POST /api/select     – change algorithm (clears the log, no run)
  POST /api/start      – start a run of the selected algorithm
  POST /api/stop       – stop whatever is running
  POST /api/tick       – advance the active run by one step
  POST /api/speed      – move the speed slider
  GET  /api/state      – current session state
  POST /api/compare    – headless side-by-side of two algorithms

Pacing:
  The server never sleeps.  Every /api/tick answer carries `delay_ms`,
  and the page waits that long (setTimeout) before asking for the next
  tick.  The browser timer is therefore the suspension primitive and
  the run token is the only thing standing between an old run and the
  canvas.

State management:
  Each browser session gets one VisualizerSession, kept in memory and
  keyed by a random id stored in the Flask session cookie.  Calls on a
  session are serialised with its lock.  The table is pruned on every
  lookup: sessions idle for SESSION_IDLE_SECONDS are dropped, and past
  MAX_SESSIONS the least recently used one goes.

Configuration (app.config, overridable with VISUALIZER_* env vars):
  DEFAULT_SPEED        – initial slider value (1..100)
  CANCEL_DURING_PATH   – whether Stop also interrupts the final-path animation
  MAX_SESSIONS         – upper bound on live sessions kept in memory
  SESSION_IDLE_SECONDS – idle time after which a session is forgotten
"""

from flask import Flask, render_template_string, request, jsonify, session
import secrets
import sys
import os
import threading
import time
import uuid
from collections import OrderedDict
from typing import Dict

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import list_algorithms, require_algorithm
from engine import VisualizerSession, Recorder, StepStatus, compare, delay_ms
from engine.pacing import DEFAULT_SPEED
from ui import (
    render_step,
    algorithm_selector,
    description_panel,
    run_controls,
    speed_control,
    log_panel,
    comparison_panel,
)


def create_app(config: Dict = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(
        SECRET_KEY=secrets.token_hex(32),
        DEFAULT_SPEED=DEFAULT_SPEED,
        CANCEL_DURING_PATH=True,
        MAX_SESSIONS=256,
        SESSION_IDLE_SECONDS=30 * 60,
    )
    app.config.from_prefixed_env("VISUALIZER")
    if config:
        app.config.update(config)

    # sid -> (VisualizerSession, last access), least recently used first
    sessions = OrderedDict()
    sessions_lock = threading.Lock()
    app.extensions["visualizer_sessions"] = sessions

    # -----------------------------------------------------------------------
    # Session State Helpers
    # -----------------------------------------------------------------------
    def get_session() -> VisualizerSession:
        """Look up (or create) this browser's VisualizerSession."""
        sid = session.get("sid")
        now = time.monotonic()
        with sessions_lock:
            if sid in sessions:
                vs, _ = sessions.pop(sid)
            else:
                sid = uuid.uuid4().hex
                session["sid"] = sid
                vs = VisualizerSession(
                    speed=app.config["DEFAULT_SPEED"],
                    cancel_during_path=app.config["CANCEL_DURING_PATH"],
                )
                app.logger.debug("new visualizer session %s", sid)
            sessions[sid] = (vs, now)
            prune_sessions(now)
            return vs

    def prune_sessions(now: float) -> None:
        """Drop idle sessions, then the least recently used ones over the cap."""
        idle_limit = app.config["SESSION_IDLE_SECONDS"]
        while sessions:
            oldest, (_, seen) = next(iter(sessions.items()))
            if now - seen <= idle_limit:
                break
            del sessions[oldest]
            app.logger.debug("expired visualizer session %s", oldest)
        while len(sessions) > app.config["MAX_SESSIONS"]:
            oldest, _ = sessions.popitem(last=False)
            app.logger.debug("evicted visualizer session %s", oldest)

    def payload() -> dict:
        return request.get_json(silent=True) or {}

    def state_json(vs: VisualizerSession, **extra) -> dict:
        data = vs.state()
        data["log_html"] = log_panel(vs.log.lines)
        data["delay_per_step"] = delay_ms(vs.speed)
        data.update(extra)
        return data

    # -----------------------------------------------------------------------
    # Main UI Route
    # -----------------------------------------------------------------------
    @app.route("/")
    def index():
        vs = get_session()
        with vs.lock:
            return render_template_string(
                INDEX_TEMPLATE,
                svg=render_step(vs.frame),
                algo_selector=algorithm_selector(list_algorithms(), vs.selected),
                description=description_panel(vs.description),
                controls=run_controls(vs.start_enabled),
                speed=speed_control(vs.speed),
                log=log_panel(vs.log.lines),
                comparison=comparison_panel(),
            )

    # -----------------------------------------------------------------------
    # API: Selection & Config
    # -----------------------------------------------------------------------
    @app.route("/api/select", methods=["POST"])
    def api_select():
        vs = get_session()
        key = payload().get("algorithm", "")
        with vs.lock:
            try:
                description = vs.select(key)
            except ValueError as e:
                return jsonify({"error": str(e)}), 400
            return jsonify(state_json(vs, description=description))

    @app.route("/api/speed", methods=["POST"])
    def api_speed():
        vs = get_session()
        try:
            speed = float(payload().get("speed", DEFAULT_SPEED))
        except (TypeError, ValueError):
            return jsonify({"error": "speed must be a number"}), 400
        with vs.lock:
            vs.set_speed(speed)
            return jsonify({"speed": vs.speed, "delay_per_step": delay_ms(vs.speed)})

    @app.route("/api/state", methods=["GET"])
    def api_state():
        vs = get_session()
        with vs.lock:
            return jsonify(state_json(vs))

    # -----------------------------------------------------------------------
    # API: Run Control
    # -----------------------------------------------------------------------
    @app.route("/api/start", methods=["POST"])
    def api_start():
        vs = get_session()
        data = payload()
        with vs.lock:
            try:
                if "speed" in data:
                    vs.set_speed(float(data["speed"]))
                started = vs.start(data.get("algorithm") or None)
            except (TypeError, ValueError) as e:
                return jsonify({"error": str(e)}), 400
            if started:
                app.logger.info("run %d started: %s", vs.run.token, vs.selected)
            return jsonify(state_json(vs, started=started, svg=render_step(vs.frame)))

    @app.route("/api/stop", methods=["POST"])
    def api_stop():
        vs = get_session()
        with vs.lock:
            vs.stop()
            app.logger.info("stop requested (token now %d)", vs.tokens.current)
            return jsonify(state_json(vs))

    @app.route("/api/tick", methods=["POST"])
    def api_tick():
        vs = get_session()
        with vs.lock:
            tick = vs.tick()
            extra = {"status": tick.status.value, "delay_ms": tick.delay_ms}
            if tick.step is not None:
                extra["svg"] = render_step(tick.step)
            if tick.status is StepStatus.DONE and vs.run is not None:
                extra["outcome"] = "stopped" if vs.run.stopped else "finished"
            return jsonify(state_json(vs, **extra))

    # -----------------------------------------------------------------------
    # API: Comparison
    # -----------------------------------------------------------------------
    @app.route("/api/compare", methods=["POST"])
    def api_compare():
        data = payload()
        left_key = data.get("left", "dijkstra")
        right_key = data.get("right", "astar")
        seed = data.get("seed")
        try:
            left_info, right_info = require_algorithm(left_key), require_algorithm(right_key)
            if left_info.kind != right_info.kind:
                raise ValueError("Can only compare algorithms that work on the same kind of input")
            if seed is not None:
                seed = int(seed)
        except (TypeError, ValueError) as e:
            return jsonify({"error": str(e)}), 400

        if seed is None:
            seed = secrets.randbelow(2 ** 31)
        left, right = Recorder(), Recorder()
        left.start(left_key, seed=seed)
        right.start(right_key, seed=seed)
        left.run_to_completion()
        right.run_to_completion()
        result = compare(left, right)

        return jsonify({
            "seed":  seed,
            "left":  result.left.__dict__,
            "right": result.right.__dict__,
            "winner_cells": result.winner_cells,
            "winner_path":  result.winner_path,
            "html": comparison_panel(result),
        })

    return app


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Algorithm Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --crimson: #dc143c;
      --black: #000000;
      --white: #ffffff;
      --grey: #6b7280;
      --border: #e5e7eb;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
      background: var(--white);
      color: var(--black);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 320px;
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 20px 16px;
    }

    #main {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      padding: 20px;
    }

    #canvas-svg svg { max-width: 100%; height: auto; border: 1px solid var(--border); }

    .panel { margin-bottom: 16px; }
    .panel h3 {
      font-size: 13px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      margin-bottom: 8px;
    }

    .description { font-size: 13px; color: var(--grey); margin-bottom: 16px; line-height: 1.5; }

    .button-row { display: flex; gap: 8px; }

    button {
      flex: 1;
      padding: 10px 16px;
      border: 1px solid var(--black);
      border-radius: 6px;
      background: var(--white);
      font-weight: 600;
      cursor: pointer;
    }
    button.btn-primary { background: var(--crimson); color: var(--white); border-color: var(--crimson); }
    button:disabled { opacity: 0.4; cursor: not-allowed; }

    select, input[type="range"] { width: 100%; margin: 6px 0; padding: 6px; }
    label { font-size: 12px; color: var(--grey); text-transform: uppercase; }
    .hint { text-transform: none; }

    #log {
      list-style: none;
      font-family: monospace;
      font-size: 12px;
      max-height: 240px;
      overflow-y: auto;
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 8px;
    }
    #log li { padding: 2px 0; }

    table { width: 100%; font-size: 12px; border-collapse: collapse; }
    table td, table th { padding: 4px; border-bottom: 1px solid var(--border); text-align: left; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="algo-selector">{{ algo_selector|safe }}</div>
    <div id="algo-desc">{{ description|safe }}</div>
    <div id="controls">{{ controls|safe }}</div>
    <div id="speed-control">{{ speed|safe }}</div>
    <div class="panel">
      <h3>Log</h3>
      <div id="log-container">{{ log|safe }}</div>
    </div>
    <div id="comparison">{{ comparison|safe }}</div>
    <div class="button-row">
      <button id="compareBtn" class="btn-secondary">Compare Dijkstra vs A*</button>
    </div>
  </div>

  <div id="main">
    <div id="canvas-svg">{{ svg|safe }}</div>
  </div>

  <script>
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    const SPEED_THROTTLE_MS = 50;

    function sleep(ms) { return new Promise(r => setTimeout(r, ms)); }

    function apply(data) {
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.log_html !== undefined) {
        const box = document.getElementById('log-container');
        box.innerHTML = data.log_html;
        const ul = document.getElementById('log');
        if (ul) ul.scrollTop = ul.scrollHeight;
      }
      if (data.start_enabled !== undefined) {
        document.getElementById('startBtn').disabled = !data.start_enabled;
      }
      if (data.description !== undefined) {
        document.getElementById('algoDesc').textContent = data.description;
      }
    }

    // one tick loop per page; it drives whichever run is current
    let ticking = false;
    async function tickLoop() {
      if (ticking) return;
      ticking = true;
      try {
        while (true) {
          const data = await post('/api/tick');
          apply(data);
          if (data.status === 'done') break;
          if (data.delay_ms) await sleep(data.delay_ms);
        }
      } finally {
        ticking = false;
      }
    }

    const algoSel  = document.getElementById('algorithm');
    const speedInp = document.getElementById('speed');
    const speedVal = document.getElementById('speedVal');
    const speedHint = document.getElementById('speedHint');

    algoSel.addEventListener('change', async () => {
      apply(await post('/api/select', {algorithm: algoSel.value}));
    });

    // the running loop reads speed before every wait, so send it while dragging
    let speedTimer = null;
    async function sendSpeed() {
      speedTimer = null;
      const data = await post('/api/speed', {speed: +speedInp.value});
      if (data.delay_per_step !== undefined) {
        speedHint.textContent = '(' + data.delay_per_step + ' ms / step)';
      }
    }

    speedInp.addEventListener('input', () => {
      speedVal.textContent = speedInp.value;
      if (speedTimer === null) speedTimer = setTimeout(sendSpeed, SPEED_THROTTLE_MS);
    });

    document.getElementById('startBtn').addEventListener('click', async () => {
      document.getElementById('startBtn').disabled = true;
      const data = await post('/api/start', {algorithm: algoSel.value, speed: +speedInp.value});
      apply(data);
      if (data.started) tickLoop();
    });

    document.getElementById('stopBtn').addEventListener('click', async () => {
      apply(await post('/api/stop'));
    });

    document.getElementById('compareBtn').addEventListener('click', async () => {
      const data = await post('/api/compare', {left: 'dijkstra', right: 'astar'});
      if (data.html) document.getElementById('comparison').innerHTML = data.html;
    });
  </script>
</body>
</html>
"""


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    print("=" * 60)
    print("  Algorithm Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, threaded=True)

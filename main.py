"""
main.py — Algorithm Visualizer Flask App
=========================================
JSON API over the visualizer registry and the playback engine.

Routes:
  GET  /                               – service index
  GET  /api/visualizers                – catalog (optional ?category=)
  GET  /api/visualizers/categories     – category names
  GET  /api/visualizers/<id>           – pseudocode, complexity, inputs, actions, code
  POST /api/visualizers/<id>/select    – activate a visualizer for this session
  POST /api/action                     – run an action, load its steps
  POST /api/step/next                  – advance one step
  POST /api/step/prev                  – rewind one step
  POST /api/step/goto                  – jump to step N
  POST /api/step/reset                 – back to step 0
  POST /api/step/end                   – jump to the last step
  POST /api/step/play                  – start auto-advance
  POST /api/step/pause                 – stop auto-advance
  POST /api/step/tick                  – frame callback from the client timer
  POST /api/config/speed               – ms or preset name
  GET  /api/state                      – current frame
  POST /api/compare                    – same input through two visualizers

State management:
  Each browser session gets a Workspace (active visualizer + StepEngine)
  kept in memory on the app; the Flask session only stores its id.
  At most MAX_WORKSPACES (default Config.max_workspaces) are kept; the
  least recently used one is disposed when a new selection goes over.
"""

import logging
import secrets
from collections import OrderedDict
from dataclasses import asdict
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, session

from algorithms.step import step_to_dict, to_jsonable
from config import Config
from engine import Recorder, StepEngine, compare, SPEED_PRESETS
from visualizers import Action, Visualizer, VisualizerRegistry, register_all, registry as default_registry
from visualizers.base import param_numbers

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Per-session workspace
# ---------------------------------------------------------------------------
class Workspace:
    """The active visualizer (which owns the current structure) and its engine."""

    def __init__(self, visualizer_id: str, visualizer: Visualizer):
        self.visualizer_id = visualizer_id
        self.visualizer    = visualizer
        self.engine        = StepEngine(speed=visualizer.config.default_speed or Config.default_speed_ms)

    @property
    def current(self) -> Any:
        return self.visualizer.current

    def frame(self) -> Dict[str, Any]:
        step = self.engine.get_current_step()
        snapshot = step.snapshot if step is not None else self.current
        return {
            "visualizer_id":  self.visualizer_id,
            "current_step":   self.engine.current_index,
            "total_steps":    self.engine.total_steps,
            "is_playing":     self.engine.is_playing,
            "is_at_end":      self.engine.is_at_end,
            "speed":          self.engine.speed,
            "step":           step_to_dict(step) if step is not None else None,
            "svg":            self.visualizer.render_svg(snapshot),
        }

    def dispose(self) -> None:
        self.engine.destroy()
        self.visualizer.dispose()


def _error(message: str, status: int = 400):
    return jsonify({"error": message}), status


def _json_body() -> Optional[Dict[str, Any]]:
    """Request JSON as a dict; {} for an empty body, None when malformed."""
    data = request.get_json(silent=True)
    if data is None:
        return None if request.get_data() else {}
    return data if isinstance(data, dict) else None


def _visualizer_meta(viz: Visualizer) -> Dict[str, Any]:
    return {
        "config":          to_jsonable(viz.config),
        "default_action":  viz.DEFAULT_ACTION,
        "pseudocode":      viz.get_pseudocode(),
        "complexity":      to_jsonable(viz.get_complexity()),
        "inputs":          to_jsonable(viz.get_inputs()),
        "actions":         to_jsonable(viz.get_actions()),
        "code":            to_jsonable(viz.get_code()),
    }


def _coerce_data(viz: Visualizer, data: Any):
    """
    Only arrays (sorting) and serialised graphs may be supplied inline.
    Returns (data, error_message).
    """
    if data is None:
        return None, None
    category = viz.config.category
    if category == "sorting":
        values = param_numbers({"values": data}, "values")
        if values is None:
            return None, "data must be a list of numbers"
        return values, None
    if category == "graphs":
        if not isinstance(data, dict):
            return None, "data must be an object describing a graph or a grid"
        return data, None
    return None, f"inline data is not supported for {viz.config.id}"


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[Dict[str, Any]] = None,
               registry: Optional[VisualizerRegistry] = None) -> Flask:
    Config.load_from_env()
    Config.configure_logging()

    app = Flask(__name__)
    app.secret_key = Config.secret_key
    if config:
        app.config.update(config)

    catalog = register_all(registry if registry is not None else default_registry)
    workspaces: Dict[str, Workspace] = OrderedDict()
    limit = max(1, int(app.config.get("MAX_WORKSPACES", Config.max_workspaces)))
    app.extensions["algoviz"] = {"registry": catalog, "workspaces": workspaces}

    def current_workspace() -> Optional[Workspace]:
        wid = session.get("workspace_id")
        ws = workspaces.get(wid) if wid else None
        if ws is not None:
            workspaces.move_to_end(wid)
        return ws

    def store_workspace(ws: Workspace) -> str:
        wid = secrets.token_hex(16)
        workspaces[wid] = ws
        while len(workspaces) > limit:
            old_id, old = workspaces.popitem(last=False)
            old.dispose()
            logger.info("Evicted least recently used workspace %s (%s)", old_id[:8], old.visualizer_id)
        return wid

    def no_workspace():
        return _error("No active visualizer. POST /api/visualizers/<id>/select first", 400)

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------
    @app.route("/")
    def index():
        return jsonify({
            "name":         "Algorithm Visualizer",
            "visualizers":  catalog.count,
            "categories":   catalog.get_categories(),
            "speed_presets": SPEED_PRESETS,
        })

    @app.route("/api/visualizers")
    def api_visualizers():
        category = request.args.get("category")
        configs = catalog.get_by_category(category) if category else catalog.get_all()
        return jsonify({"visualizers": [to_jsonable(c) for c in configs]})

    @app.route("/api/visualizers/categories")
    def api_categories():
        return jsonify({"categories": catalog.get_categories()})

    @app.route("/api/visualizers/<visualizer_id>")
    def api_visualizer(visualizer_id):
        viz = catalog.get(visualizer_id)
        if viz is None:
            return _error(f"Unknown visualizer: {visualizer_id}", 404)
        meta = _visualizer_meta(viz)
        viz.dispose()
        return jsonify(meta)

    @app.route("/api/visualizers/<visualizer_id>/select", methods=["POST"])
    def api_select(visualizer_id):
        viz = catalog.get(visualizer_id)
        if viz is None:
            return _error(f"Unknown visualizer: {visualizer_id}", 404)

        previous = current_workspace()
        if previous is not None:
            previous.dispose()
            workspaces.pop(session["workspace_id"], None)

        ws = Workspace(visualizer_id, viz)
        session["workspace_id"] = store_workspace(ws)
        logger.info("Session selected visualizer %s", visualizer_id)

        return jsonify({
            "visualizer":     _visualizer_meta(viz),
            "initial_state":  to_jsonable(viz.get_initial_state()),
            "svg":            viz.render_svg(viz.current),
            "frame":          ws.frame(),
        })

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    @app.route("/api/action", methods=["POST"])
    def api_action():
        ws = current_workspace()
        if ws is None:
            return no_workspace()
        body = _json_body()
        if body is None:
            return _error("Malformed JSON body")

        data, problem = _coerce_data(ws.visualizer, body.get("data"))
        if problem:
            return _error(problem)
        params = body.get("params") or {}
        if not isinstance(params, dict):
            return _error("params must be an object")

        action = Action(type=str(body.get("type") or ""), data=data, params=params)
        ws.engine.pause()
        steps = ws.visualizer.get_steps(action)
        ws.engine.load_steps(steps)
        logger.info("Action %r on %s produced %d steps", action.type, ws.visualizer_id, len(steps))

        frame = ws.frame()
        frame["current_structure"] = to_jsonable(ws.current)
        return jsonify(frame)

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------
    @app.route("/api/step/<command>", methods=["POST"])
    def api_step(command):
        ws = current_workspace()
        if ws is None:
            return no_workspace()
        body = _json_body()
        if body is None:
            return _error("Malformed JSON body")

        engine = ws.engine
        advanced = None
        if command == "next":
            engine.step_forward()
        elif command == "prev":
            engine.step_back()
        elif command == "goto":
            try:
                engine.go_to_step(int(body.get("index")))
            except (TypeError, ValueError):
                return _error("index must be an integer")
        elif command == "reset":
            engine.reset()
        elif command == "end":
            engine.go_to_end()
        elif command == "play":
            engine.play()
        elif command == "pause":
            engine.pause()
        elif command == "tick":
            now = body.get("now")
            try:
                advanced = engine.tick(float(now) if now is not None else None)
            except (TypeError, ValueError):
                return _error("now must be a number of milliseconds")
        else:
            return _error(f"Unknown step command: {command}", 404)

        frame = ws.frame()
        if advanced is not None:
            frame["advanced"] = advanced
        return jsonify(frame)

    @app.route("/api/config/speed", methods=["POST"])
    def api_config_speed():
        ws = current_workspace()
        if ws is None:
            return no_workspace()
        body = _json_body()
        if body is None:
            return _error("Malformed JSON body")

        if "preset" in body:
            try:
                ws.engine.set_speed_preset(str(body["preset"]))
            except ValueError as exc:
                return _error(str(exc))
        else:
            try:
                ws.engine.set_speed(float(body.get("speed")))
            except (TypeError, ValueError):
                return _error("speed must be a number of milliseconds")
        return jsonify({"speed": ws.engine.speed})

    @app.route("/api/state")
    def api_state():
        ws = current_workspace()
        if ws is None:
            return no_workspace()
        frame = ws.frame()
        frame["current_structure"] = to_jsonable(ws.current)
        return jsonify(frame)

    # ------------------------------------------------------------------
    # Comparison Mode
    # ------------------------------------------------------------------
    @app.route("/api/compare", methods=["POST"])
    def api_compare():
        body = _json_body()
        if body is None:
            return _error("Malformed JSON body")
        left_id, right_id = body.get("left"), body.get("right")
        if not left_id or not right_id:
            return _error("Both left and right visualizer ids are required")
        for vid in (left_id, right_id):
            if not catalog.has(vid):
                return _error(f"Unknown visualizer: {vid}", 404)

        left_viz, right_viz = catalog.get(left_id), catalog.get(right_id)
        raw = body.get("data")
        inputs = []
        for viz in (left_viz, right_viz):
            data, problem = _coerce_data(viz, raw)
            if problem:
                return _error(problem)
            inputs.append(data)
        if raw is None and left_viz.config.category == right_viz.config.category \
                and left_viz.config.category in ("sorting", "graphs") \
                and type(left_viz.current) is type(right_viz.current):
            # both sides must see the same generated input
            shared = left_viz.get_initial_state()
            inputs = [shared, shared]
        left_viz.dispose()
        right_viz.dispose()

        recorders = []
        for vid, data in zip((left_id, right_id), inputs):
            rec = Recorder()
            rec.start(vid, Action(type=str(body.get("action") or ""), data=data,
                                  params=body.get("params") or {}), catalog)
            rec.run_to_completion()
            recorders.append(rec)

        result = compare(recorders[0], recorders[1])
        logger.info("Compared %s vs %s", left_id, right_id)
        return jsonify(asdict(result))

    return app


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app = create_app()
    logger.info("Starting Algorithm Visualizer on http://%s:%d", Config.host, Config.port)
    app.run(debug=Config.debug, host=Config.host, port=Config.port)

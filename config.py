# config.py

import json
import logging
import os


class Config:
    """Process-wide settings, optionally overridden from a JSON file.

    Attributes
    ----------
    default_speed_ms:
        Delay between auto-advanced steps for a freshly created engine.
    array_size / array_min_value / array_max_value:
        Shape of the random demo arrays used by the sorting visualizers.
    hash_capacity:
        Bucket count of a new, empty hash table.
    stack_capacity / queue_capacity:
        Fixed capacity of the stack and queue demos.
    grid_rows / grid_cols / grid_wall_density:
        Shape of the A* demo grid and the share of walls in a random one.
    canvas_width / canvas_height:
        Size of the SVG documents produced by the renderer.
    log_level / log_format:
        Passed to :func:`logging.basicConfig` by :meth:`configure_logging`.
    host / port / debug:
        Flask development server settings used by ``main.py``.
    max_workspaces:
        Session workspaces kept in memory; the least recently used is
        dropped beyond this.
    """

    base_dir = os.path.abspath(os.path.dirname(__file__))
    config_file = None

    #: Environment variable naming an optional JSON override file
    ENV_VAR = "ALGOVIZ_CONFIG"

    # Playback
    default_speed_ms = 500

    # Demo structures
    array_size = 20
    array_min_value = 5
    array_max_value = 100
    hash_capacity = 8
    stack_capacity = 8
    queue_capacity = 8
    graph_nodes = 6
    graph_edge_probability = 0.4
    grid_rows = 8
    grid_cols = 10
    grid_wall_density = 0.25

    # Rendering
    canvas_width = 800
    canvas_height = 450

    # Logging
    log_level = "INFO"
    log_format = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Server
    host = "127.0.0.1"
    port = 5000
    debug = False
    secret_key = "algoviz-dev"
    max_workspaces = 64

    @classmethod
    def load_from_file(cls, path: str) -> None:
        """Load configuration values from a JSON file.

        Only keys that already exist as attributes on ``Config`` are
        assigned. Nested dictionaries are merged when the existing attribute
        is also a ``dict``.
        """
        if not os.path.exists(path):
            raise FileNotFoundError(path)
        with open(path) as f:
            data = json.load(f)
        cls.config_file = os.path.abspath(path)

        for key, value in data.items():
            if not hasattr(cls, key) or key.startswith("_"):
                continue
            current = getattr(cls, key)
            if isinstance(current, dict) and isinstance(value, dict):
                current.update(value)
            else:
                setattr(cls, key, value)

    @classmethod
    def load_from_env(cls) -> bool:
        """Apply the file named by ``ALGOVIZ_CONFIG``.  Returns True if one was loaded."""
        path = os.environ.get(cls.ENV_VAR)
        if not path:
            return False
        cls.load_from_file(path)
        return True

    @classmethod
    def configure_logging(cls) -> None:
        logging.basicConfig(level=cls.log_level, format=cls.log_format)

    @classmethod
    def as_dict(cls) -> dict:
        return {
            key: getattr(cls, key)
            for key in dir(cls)
            if not key.startswith("_")
            and key.islower()
            and not callable(getattr(cls, key))
        }

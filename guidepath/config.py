# guidepath/config.py
from __future__ import annotations
import json, os
from typing import Optional

# Window and preview scale
WINDOW_WIDTH    = 800
WINDOW_HEIGHT   = 600
PIXELS_PER_UNIT = 100.0

# Colors (RGB)
BG_COLOR         = (30, 30, 30)
CURVE_COLOR      = (50, 255, 50)
GUIDE_COLOR      = (255, 215, 0)
GUIDE_LINE_COLOR = (255, 255, 255)
FOLLOWER_COLOR   = (252, 3, 248)
ARROW_COLOR      = (255, 255, 255)
TEXT_COLOR       = (255, 255, 255)
SELECTED_COLOR   = (255, 100, 100)

# Curve limits
MIN_RESOLUTION     = 2
MAX_RESOLUTION     = 50
DEFAULT_RESOLUTION = 15
FACING_EPSILON     = 0.01

CONFIG_FILENAME = "config.json"

DEFAULT_CONFIG = {
    "path": {
        "resolution":     {"value": DEFAULT_RESOLUTION},
        "facing_epsilon": {"value": FACING_EPSILON},
    },
    "follower": {
        "speed":     {"value": 2.0},
        "loop":      {"value": 0},
        "ping_pong": {"value": 0},
        "align":     {"value": 1},
    },
    "ui": {
        "pixels_per_unit":  {"value": PIXELS_PER_UNIT},
        "show_guides":      {"value": 1},
        "show_guide_lines": {"value": 1},
    },
}

def _flatten(section: dict) -> dict:
    """Extract 'value' from nested dict structure."""
    flat = {}
    for k, v in section.items():
        flat[k] = v.get("value", v) if isinstance(v, dict) and "value" in v else v
    return flat

def _load_json(path: str) -> Optional[dict]:
    """Load JSON file, return None on failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        return None

def _save_json(path: str, data: dict) -> None:
    """Save JSON file, creating the parent directory."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)

def _config_candidates() -> list:
    """Root config first, then the package copy."""
    here = os.path.dirname(__file__)
    return [
        os.path.normpath(os.path.join(here, os.pardir, CONFIG_FILENAME)),
        os.path.normpath(os.path.join(here, CONFIG_FILENAME)),
    ]

def _with_defaults(data: dict) -> dict:
    """Fill sections missing from a loaded config with the defaults."""
    merged = json.loads(json.dumps(DEFAULT_CONFIG))
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values
    return merged

def load_config(filename: Optional[str] = None) -> dict:
    """
    Load config from `filename`, or from the root/package directory.
    Writes the defaults when no config exists yet.
    """
    candidates = [filename] if filename else _config_candidates()
    for path in candidates:
        data = _load_json(path)
        if isinstance(data, dict):
            return _with_defaults(data)
    data = json.loads(json.dumps(DEFAULT_CONFIG))
    try:
        _save_json(candidates[0], data)
    except OSError as e:
        print(f"Could not write default config: {e}")
    return data

def save_config(cfg_dict: dict, filename: Optional[str] = None) -> bool:
    """Save a flat-or-wrapped config dictionary. Returns True on success."""
    try:
        def wrap(v): return {"value": v}
        paths = path_flat(cfg_dict)
        follower = follower_flat(cfg_dict)
        ui = ui_flat(cfg_dict)
        raw = {
            "path": {
                "resolution":     wrap(clamp_resolution(paths.get("resolution", DEFAULT_RESOLUTION))),
                "facing_epsilon": wrap(float(paths.get("facing_epsilon", FACING_EPSILON))),
            },
            "follower": {
                "speed":     wrap(float(follower.get("speed", 2.0))),
                "loop":      wrap(int(follower.get("loop", 0))),
                "ping_pong": wrap(int(follower.get("ping_pong", 0))),
                "align":     wrap(int(follower.get("align", 1))),
            },
            "ui": {k: wrap(v) for k, v in ui.items()},
        }
        target = filename or _config_candidates()[0]
        _save_json(target, raw)
        print(f"Config saved to {target}")
        return True
    except (OSError, TypeError, ValueError) as e:
        print(f"Failed to save config: {e}")
        return False

def clamp_resolution(value) -> int:
    """Clamp a resolution into [MIN_RESOLUTION, MAX_RESOLUTION]."""
    try:
        r = int(value)
    except (TypeError, ValueError):
        return DEFAULT_RESOLUTION
    return max(MIN_RESOLUTION, min(MAX_RESOLUTION, r))

def path_flat(cfg: dict) -> dict:
    """Flatten path section."""
    return _flatten(cfg.get("path", {}))

def follower_flat(cfg: dict) -> dict:
    """Flatten follower section."""
    return _flatten(cfg.get("follower", {}))

def ui_flat(cfg: dict) -> dict:
    """Flatten ui section."""
    return _flatten(cfg.get("ui", {}))

# guidepath/storage.py
from __future__ import annotations
import json, os
from typing import Optional

from .config import DEFAULT_RESOLUTION, FACING_EPSILON
from .path import GuidePath

def path_to_dict(path: GuidePath) -> dict:
    """Serializable form: resolution plus ordered guide positions."""
    return {
        "name": path.name,
        "resolution": path.resolution,
        "facing_epsilon": path.facing_epsilon,
        "guides": [list(p) for p in path.positions],
    }

def path_from_dict(data: dict) -> GuidePath:
    """Rebuild a path; raises KeyError/ValueError/TypeError on malformed data."""
    return GuidePath(
        data["guides"],
        resolution=int(data.get("resolution", DEFAULT_RESOLUTION)),
        facing_epsilon=float(data.get("facing_epsilon", FACING_EPSILON)),
        name=str(data.get("name", "Path")),
    )

def save_path(filename: str, path: GuidePath) -> Optional[str]:
    """Save path to JSON file. Returns the written filename."""
    if not filename:
        return None
    parent = os.path.dirname(filename)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(path_to_dict(path), f, indent=4)
    print(f"Saved path to: {filename}")
    return filename

def load_path(filename: str) -> Optional[GuidePath]:
    """Load path from JSON file, None if missing or malformed."""
    if not filename:
        return None
    try:
        with open(filename, "r", encoding="utf-8") as f:
            data = json.load(f)
        return path_from_dict(data)
    except (OSError, KeyError, TypeError, ValueError) as e:
        print(f"Failed to load path {filename}: {e}")
        return None

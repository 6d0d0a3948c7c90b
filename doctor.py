"""Run local environment checks for the guide path preview."""

import os
import platform
import sys
from pathlib import Path


def _ok(flag: bool) -> str:
    return "PASS" if flag else "FAIL"


def _warn(flag: bool) -> str:
    return "PASS" if flag else "WARN"


def _can_write(path: Path) -> bool:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        probe = path.parent / ".guidepath_write_test"
        probe.write_text("ok", encoding="utf-8")
        probe.unlink()
        return True
    except OSError:
        return False


def main() -> int:
    root = Path(__file__).resolve().parent
    print("Guide Path Doctor")
    print(f"- OS: {platform.system()} {platform.release()}")
    print(f"- Python: {platform.python_version()} ({sys.executable})")

    py_ok = sys.version_info >= (3, 8)
    print(f"[{_ok(py_ok)}] Python >= 3.8")
    if not py_ok:
        return 1

    try:
        import tkinter  # noqa: F401
        tk_ok = True
    except ImportError:
        tk_ok = False
    print(f"[{_warn(tk_ok)}] tkinter available (save/load dialogs)")

    try:
        import pygame  # noqa: F401
        pg_ok = True
    except ImportError:
        pg_ok = False
    print(f"[{_ok(pg_ok)}] pygame available")

    headless = not os.environ.get("DISPLAY") and sys.platform.startswith("linux")
    print(f"[{_warn(not headless)}] display available for the preview window")

    required = [
        root / "main.py",
        root / "guidepath" / "curve.py",
        root / "guidepath" / "sampler.py",
        root / "guidepath" / "path.py",
    ]
    files_ok = all(p.exists() for p in required)
    print(f"[{_ok(files_ok)}] core files present")
    if not files_ok:
        for p in required:
            if not p.exists():
                print(f"       Missing: {p}")

    try:
        from guidepath.config import _config_candidates

        cfg_candidates = [Path(p) for p in _config_candidates()]
    except ImportError:
        cfg_candidates = [root / "config.json"]
    writable = any(_can_write(p) for p in cfg_candidates)
    print(f"[{_ok(writable)}] writable config path available")

    all_ok = py_ok and pg_ok and files_ok and writable
    if all_ok:
        print("All checks passed.")
        return 0
    print("One or more checks failed.")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

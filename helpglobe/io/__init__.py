"""HelpGlobe I/O package.

File read/write operations only — no business logic in this layer.
"""

from helpglobe.io.persistence import load_json, save_json, snapshot_path

__all__ = [
    "save_json",
    "load_json",
    "snapshot_path",
]

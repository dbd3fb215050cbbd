"""Atomic JSON writes for the settings file."""

from __future__ import annotations

import json
import os
import tempfile


def save_json(path: str, data: dict) -> None:
    """Write *data* next to *path* in a temp file, then rename over it.

    A failed write leaves the previous file untouched and removes the temp file.
    """
    dir_path = os.path.dirname(os.path.abspath(path))
    os.makedirs(dir_path, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=dir_path, prefix=".cifra-", suffix=".json.tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise
